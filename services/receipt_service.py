# services/receipt_service.py
# receipt_service.py turns a settled Receipt into the console text shown
# to the customer: the shipment notice (only when something ships) followed
# by the checkout receipt and the remaining balance.
from models.order import Receipt, ShippingManifest


class ReceiptService:
    def shipment_notice(self, manifest: ShippingManifest) -> list[str]:
        if not manifest:
            return []
        lines = ["", "** Shipment notice **"]
        for name, weight in manifest.weights.items():
            lines.append(f"1x {name} {weight * 1000:.0f}g")
        lines.append(f"Total package weight {manifest.total_weight:.1f}kg")
        return lines

    def checkout_receipt(self, receipt: Receipt) -> list[str]:
        lines = ["", "** Checkout receipt **"]
        for line in receipt.lines:
            lines.append(f"{line.qty}x {line.name} {line.line_total:.0f}")
        lines.append("----------------------")
        lines.append(f"Subtotal {receipt.subtotal:.0f}")
        lines.append(f"Shipping {receipt.shipping:.0f}")
        lines.append(f"Amount {receipt.total:.0f}")
        return lines

    def render(self, receipt: Receipt) -> list[str]:
        lines = self.shipment_notice(receipt.manifest)
        lines.extend(self.checkout_receipt(receipt))
        lines.append(f"Customer balance after payment: {receipt.balance_after:.0f}")
        return lines
