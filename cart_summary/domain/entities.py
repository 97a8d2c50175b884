"""
Domain Entities - Cart and the summary computed from it.

The Cart is fixed at construction: there are no add/remove operations.
Its only business rule is the subtotal:

    subtotal = sum(quantity * price for every line item)

An empty cart has a subtotal of 0. Line order does not matter, and two
lines with the same item_id are both counted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping, Tuple

from .value_objects import ZERO, LineItem


@dataclass(frozen=True)
class Cart:
    """
    Shopping cart aggregate.

    Invariants:
    1. Items are LineItem value objects, held in the order given
    2. Duplicates by item_id are kept, not merged
    3. get_subtotal() never raises
    """

    items: Tuple[LineItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, LineItem):
                raise TypeError(f"Cart items must be LineItem, got {type(item).__name__}")
        object.__setattr__(self, "items", items)

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> "Cart":
        """
        Build a cart from {"id", "quantity", "price"} mappings.

        Raises:
            InvalidLineItemError: If an entry cannot become a LineItem
        """
        items = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise InvalidLineItemError(position, f"expected an object, got {type(entry).__name__}")
            try:
                items.append(LineItem.from_dict(entry))
            except ValueError as e:
                raise InvalidLineItemError(position, str(e)) from e
        return cls(tuple(items))

    def get_subtotal(self) -> Decimal:
        """Sum of quantity x price across all line items."""
        return sum((item.line_total for item in self.items), ZERO)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Cart(items={len(self.items)}, subtotal={self.get_subtotal()})"


@dataclass(frozen=True)
class CartSummary:
    """Subtotal, tax and grand total for a cart in one jurisdiction."""

    subtotal: Decimal
    tax: Decimal
    jurisdiction: str

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax

    def to_dict(self) -> dict:
        """JSON-friendly view (amounts as strings to keep them exact)."""
        return {
            "jurisdiction": self.jurisdiction,
            "subtotal": str(self.subtotal),
            "tax": str(self.tax),
            "total": str(self.total),
        }


# Domain exceptions

class DomainError(Exception):
    """Base exception for domain layer errors"""
    pass


class InvalidLineItemError(DomainError):
    """Raised when a cart entry violates line item rules"""

    def __init__(self, position: int, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid line item at position {position}: {reason}")
