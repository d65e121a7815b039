"""Base classes for the domain layer.

The settlement core is built entirely from immutable value objects:
line items, vendor groups and settlements are compared by value so that
two computations over the same cart are interchangeable.
"""

from abc import ABC
from dataclasses import dataclass


# ============================================================================
# Value Object Base
# ============================================================================


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. They have no lifecycle and are interchangeable
    when their values are equal.

    Example:
        @dataclass(frozen=True)
        class Money(ValueObject):
            amount_fils: int
            currency: str
    """

    pass
