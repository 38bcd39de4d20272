"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pos.domain.exceptions import InvalidAmount

CENT = Decimal("0.01")


def _to_decimal(value: str | int | Decimal, what: str) -> Decimal:
    """Coerce user input to a finite Decimal, rejecting floats outright."""
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidAmount(f"{what} must be given as a decimal string or integer, got {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmount(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise InvalidAmount(f"Invalid {what}: {value!r}")
    return result


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative monetary amount held as integer cents.

    Money is always at scale 2.  Calculations that need more precision
    (the pricing chain) work on ``amount`` as a Decimal and come back
    through ``Money.from_decimal`` which rounds half-up exactly once.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidAmount(
                f"Money must be built from integer cents, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise InvalidAmount(f"Money amount cannot be negative, got {self.cents} cents")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        result = self.cents - other.cents
        if result < 0:
            raise InvalidAmount("Money subtraction would result in a negative amount")
        return Money(result)

    def multiply(self, factor: int | Decimal) -> Money:
        """Scale by a non-negative factor, rounding half-up to the cent."""
        if factor < 0:
            raise InvalidAmount(f"Cannot multiply Money by a negative factor ({factor})")
        return Money.from_decimal(self.amount * Decimal(factor))

    def percent(self, pct: Percent) -> Money:
        """Return ``pct`` percent of this amount, rounded half-up."""
        return Money.from_decimal(self.amount * pct.fraction)

    # --- Views ----------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        return Decimal(self.cents).scaleb(-2)

    @property
    def is_zero(self) -> bool:
        return self.cents == 0

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def from_cents(cents: int) -> Money:
        return Money(cents)

    @staticmethod
    def from_decimal(value: Decimal) -> Money:
        """Round an exact Decimal half-up to cents."""
        if value < 0:
            raise InvalidAmount(f"Money amount cannot be negative, got {value}")
        return Money(int(value.quantize(CENT, rounding=ROUND_HALF_UP).scaleb(2)))

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Parse a decimal string (``"12.50"``) or whole currency units.

        Input finer than a cent is rejected rather than rounded; only
        computed amounts go through ``from_decimal``.
        """
        value = _to_decimal(amount, "money amount")
        if value != value.quantize(CENT):
            raise InvalidAmount(f"Money amount has more than 2 decimal places: {amount!r}")
        return Money.from_decimal(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAmount(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidAmount("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Percent:
    """A percentage between 0 and 100 inclusive."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise InvalidAmount(
                f"Percent must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < 0 or self.value > 100:
            raise InvalidAmount(f"Percent must be between 0 and 100, got {self.value}")

    @property
    def fraction(self) -> Decimal:
        return self.value / 100

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    @staticmethod
    def zero() -> Percent:
        return Percent(Decimal("0"))

    @staticmethod
    def of(value: str | int | Decimal) -> Percent:
        return Percent(_to_decimal(value, "percentage"))


@dataclass(frozen=True)
class TaxRate:
    """Flat tax rate expressed as a fraction (``0.10`` is 10%)."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise InvalidAmount(
                f"Tax rate must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < 0 or self.value > 1:
            raise InvalidAmount(f"Tax rate must be a fraction between 0 and 1, got {self.value}")

    def __str__(self) -> str:
        return f"{(self.value * 100).normalize():f}%"

    @staticmethod
    def of(value: str | int | Decimal) -> TaxRate:
        return TaxRate(_to_decimal(value, "tax rate"))
