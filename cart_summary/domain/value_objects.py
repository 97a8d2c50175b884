"""
Value Objects for cart line items and tax lookups.

Value objects are immutable, self-validating, and enforce business rules:
- LineItem: one cart line (quantity x unit price)
- TaxRequest: what gets sent to the tax-rate service
- TaxResult: the tax amount handed back to callers

Money is always held as Decimal. Floats are converted through str() so
that 0.1 becomes Decimal("0.1") rather than its binary approximation.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

Number = Union[int, float, Decimal, str]

ZERO = Decimal("0")


def to_decimal(value: Optional[Number], field_name: str) -> Decimal:
    """
    Convert a numeric value to a finite, non-negative Decimal.

    None is treated as zero.

    Raises:
        ValueError: If the value is not numeric, not finite, or negative
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got {value!r}")

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}")

    if not result.is_finite():
        raise ValueError(f"{field_name} must be finite, got {value!r}")
    if result < 0:
        raise ValueError(f"{field_name} cannot be negative, got {value!r}")
    return result


def _to_quantity(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"quantity must be an integer, got {value!r}")
    if isinstance(value, int):
        quantity = value
    else:
        as_decimal = to_decimal(value, "quantity")
        if as_decimal != as_decimal.to_integral_value():
            raise ValueError(f"quantity must be a whole number, got {value!r}")
        quantity = int(as_decimal)

    if quantity < 0:
        raise ValueError(f"quantity cannot be negative, got {value!r}")
    return quantity


@dataclass(frozen=True)
class LineItem:
    """
    One line of a shopping cart.

    Attributes:
        item_id: Opaque identifier (uniqueness is NOT enforced)
        quantity: Non-negative whole number of units
        price: Non-negative unit price

    A missing quantity or price counts as zero instead of failing, so a
    line with no price simply contributes nothing to the subtotal.
    """

    item_id: Optional[Any] = None
    quantity: int = 0
    price: Decimal = ZERO

    def __post_init__(self):
        object.__setattr__(self, "quantity", _to_quantity(self.quantity))
        object.__setattr__(self, "price", to_decimal(self.price, "price"))

    @property
    def line_total(self) -> Decimal:
        """quantity x price"""
        return self.price * self.quantity

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        """
        Build a LineItem from the JSON cart shape.

        Example:
            LineItem.from_dict({"id": 1, "quantity": 4, "price": 50})
        """
        return cls(
            item_id=data.get("id"),
            quantity=data.get("quantity"),
            price=data.get("price"),
        )

    def __repr__(self) -> str:
        return f"LineItem(id={self.item_id!r}, quantity={self.quantity}, price={self.price})"


@dataclass(frozen=True)
class TaxRequest:
    """
    Transient request sent to the tax-rate service.

    Only built for taxable jurisdictions; never persisted.
    """

    subtotal: Decimal
    jurisdiction: str

    def __post_init__(self):
        object.__setattr__(self, "subtotal", to_decimal(self.subtotal, "subtotal"))
        if not self.jurisdiction or not self.jurisdiction.strip():
            raise ValueError("jurisdiction cannot be empty")

    def to_payload(self) -> dict:
        """
        JSON body for the tax-rate service.

        The jurisdiction is not sent: the service is already scoped to a
        single taxable jurisdiction.
        """
        if self.subtotal == self.subtotal.to_integral_value():
            return {"subtotal": int(self.subtotal)}
        return {"subtotal": float(self.subtotal)}


@dataclass(frozen=True)
class TaxResult:
    """Tax amount returned to callers. Always present, never negative."""

    amount: Decimal = ZERO

    def __post_init__(self):
        object.__setattr__(self, "amount", to_decimal(self.amount, "amount"))

    @classmethod
    def zero(cls) -> "TaxResult":
        """Result for jurisdictions that are not taxed."""
        return cls(ZERO)

    def __str__(self) -> str:
        return str(self.amount)
