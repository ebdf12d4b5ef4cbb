"""Plain-text receipt rendering for the receipt printer."""

from __future__ import annotations

from dataclasses import dataclass

from autopos.application.dto import TransactionDTO

WIDTH = 40


@dataclass(frozen=True)
class StoreInfo:
    name: str = "AutoParts POS"
    tagline: str = "Auto Spare Parts Cashier System"
    address: str = "Jl. Raya Otomotif No. 123"
    phone: str = "(021) 1234-5678"


FOOTER = (
    "Thank you for your visit!",
    "Goods sold cannot be returned",
    "unless otherwise agreed",
    "",
    "*** VALID PROOF OF PAYMENT ***",
)


def _row(left: str, right: str) -> str:
    gap = max(1, WIDTH - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"


def render_receipt(
    transaction: TransactionDTO,
    store: StoreInfo | None = None,
    cashier: str | None = None,
) -> str:
    store = store or StoreInfo()
    rule = "-" * WIDTH
    lines = [
        store.name.center(WIDTH),
        store.tagline.center(WIDTH),
        store.address.center(WIDTH),
        f"Tel: {store.phone}".center(WIDTH),
        rule,
        _row("Transaction No.:", f"#{transaction.id}"),
        _row("Date:", transaction.created_at),
        _row("Cashier:", cashier or transaction.cashier_name),
    ]
    if transaction.customer_phone:
        lines.append(_row("Customer:", transaction.customer_phone))
    lines.append(rule)

    for item in transaction.items:
        lines.append(item.product_name[:WIDTH])
        lines.append(_row(f"  {item.quantity} x {item.unit_price}", item.subtotal))

    lines.append(rule)
    lines.append(_row("Subtotal:", transaction.subtotal))
    lines.append(_row("Tax (PPN 11%):", transaction.tax))
    if transaction.has_discount:
        lines.append(_row("Discount:", f"-{transaction.discount}"))
    lines.append(_row("TOTAL:", transaction.total))
    lines.append(rule)
    lines.append(
        _row(f"Payment ({transaction.payment_method.upper()}):", transaction.tendered)
    )
    if transaction.has_change:
        lines.append(_row("Change:", transaction.change))
    lines.append(rule)
    lines.extend(text.center(WIDTH).rstrip() for text in FOOTER)
    return "\n".join(line.rstrip() for line in lines) + "\n"
