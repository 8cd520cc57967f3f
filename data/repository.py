# data/repository.py
import json
import logging
from pathlib import Path

logger = logging.getLogger("checkout.repository")

DEFAULT_SETTINGS = {
    "shipping_rate_per_kg": 10.0,
    "max_attempts": 3,
    "log_dir": "data/logs",
}


class DataRepository:
    def __init__(self, storage_dir: str | Path | None = None):
        # base folder where the catalog and settings JSON live
        if storage_dir is None:
            storage_dir = Path(__file__).resolve().parent / "storage"
        self.storage_dir = Path(storage_dir)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. Missing, empty or corrupted files give None
        # and the caller falls back to its own default.
        path = self._file_path(filename)
        if not path.exists():
            logger.warning(f"{path} not found, using defaults")
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            return None
        if text == "":
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"{path} is not valid JSON ({e}), using defaults")
            return None

    def get_products(self) -> list[dict]:
        # Replacement catalog, in menu order.
        data = self._read_json("products.json")
        if isinstance(data, list):
            return data
        return []

    def get_session(self) -> dict:
        # Returns {"customer": {"name", "balance"}, "cart": [{"product": {...}, "qty"}, ...]}.
        data = self._read_json("session.json")
        if not isinstance(data, dict):
            data = {}

        customer = data.get("customer")
        if not isinstance(customer, dict):
            customer = {}
        cart = data.get("cart")
        if not isinstance(cart, list):
            cart = []

        return {
            "customer": {
                "name": customer.get("name", "Guest"),
                "balance": customer.get("balance", 0.0),
            },
            "cart": cart,
        }

    def get_settings(self) -> dict:
        data = self._read_json("settings.json")
        if not isinstance(data, dict):
            data = {}
        return {key: data.get(key, default) for key, default in DEFAULT_SETTINGS.items()}
