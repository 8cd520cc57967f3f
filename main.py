# main.py
# Console checkout: loads the demo session and replacement catalog,
# fills the cart and runs checkout until it settles or aborts.
import argparse
import sys

from data.repository import DataRepository
from models.cart import Cart
from models.customer import Customer
from models.product import Product
from services.checkout_service import CheckoutService
from services.expiry_service import ExpiryResolver
from services.shipping_service import ShippingService
from utils.clock import now
from utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the console checkout demo.")
    parser.add_argument("--storage", help="folder holding products/session/settings JSON")
    parser.add_argument("--log-dir", help="folder for rotating log files")
    return parser


def run_session(repo: DataRepository, settings: dict, input_fn=input, output=print, clock=now):
    # Products are built once here and shared by reference with cart and resolver.
    catalog = [Product.from_dict(p) for p in repo.get_products()]
    session = repo.get_session()

    customer = Customer(
        name=session["customer"]["name"],
        balance=float(session["customer"]["balance"]),
    )
    cart = Cart()
    for line in session["cart"]:
        cart.add(Product.from_dict(line["product"]), int(line["qty"]))

    resolver = ExpiryResolver(
        catalog,
        input_fn=input_fn,
        output=output,
        max_attempts=int(settings["max_attempts"]),
    )
    service = CheckoutService(
        ShippingService(float(settings["shipping_rate_per_kg"])),
        resolver=resolver,
        output=output,
        clock=clock,
    )
    return service.run(customer, cart)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    repo = DataRepository(args.storage)
    settings = repo.get_settings()
    logger = setup_logger(args.log_dir or settings["log_dir"])

    try:
        result = run_session(repo, settings)
        logger.info(f"Session finished: {result.status.value}")
    except KeyError as e:
        # a product or cart line in the JSON is missing a field
        logger.info(f"Session failed: missing field {e}")
        print(f"Error: missing field {e} in session data", file=sys.stderr)
    except ValueError as e:
        # malformed expiry dates (InvalidDateFormat) end the run here
        logger.info(f"Session failed: {e}")
        print(f"Error: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
