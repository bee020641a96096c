"""NutrientMap value object.

Fixed-key mapping of the seven tracked nutrients. Values are kept as exact
decimals so sums do not depend on item order. Totals are rounded to one
decimal place; food item and diary entry amounts are stored as given so a
later sum of them matches the total computed from them.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Tuple

ZERO = Decimal("0")
ONE_DECIMAL = Decimal("0.1")

# Magnitudes a double cannot hold count as non-finite, as parseFloat would
MAX_AMOUNT = Decimal(sys.float_info.max)

# Precision floor for one-decimal quantize (the decimal module default)
MIN_PRECISION = 28

# Serialization order of the seven tracked nutrients
NUTRIENT_FIELDS: Tuple[str, ...] = (
    "calories",
    "protein",
    "carbohydrates",
    "fat",
    "fiber",
    "sugar",
    "sodium",
)

# Leading numeric prefix, same leniency as a browser's parseFloat ("12g" -> 12)
_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_amount(value: Any) -> Decimal:
    """Parse a nutrient amount leniently.

    Missing, non-numeric, unparsable or non-finite values become 0, and so
    do magnitudes beyond double range.

    Examples:
        >>> parse_amount("100.0")
        Decimal('100.0')
        >>> parse_amount("n/a")
        Decimal('0')
        >>> parse_amount(None)
        Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return finite_or_zero(value)
    if isinstance(value, int):
        return finite_or_zero(Decimal(value))

    match = _NUMBER_PREFIX.match(str(value).strip())
    if not match:
        return ZERO
    try:
        amount = Decimal(match.group(0))
    except InvalidOperation:
        return ZERO
    return finite_or_zero(amount)


def finite_or_zero(amount: Decimal) -> Decimal:
    """Return ``amount`` unless it is NaN, infinite or beyond double range."""
    if not amount.is_finite() or abs(amount) > MAX_AMOUNT:
        return ZERO
    return amount


def round_one(value: Decimal) -> Decimal:
    """Round half away from zero to one decimal place ("-0.0" folds to "0.0").

    Large values keep every integer digit:

        >>> round_one(Decimal("1e30"))
        Decimal('1000000000000000000000000000000.0')
    """
    context = Context(prec=max(MIN_PRECISION, value.adjusted() + 3))
    rounded = value.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP, context=context)
    if rounded == ZERO:
        return ZERO.quantize(ONE_DECIMAL)
    return rounded


def format_one(value: Decimal) -> str:
    """Serialize with exactly one fractional digit."""
    return str(round_one(value))


@dataclass(frozen=True)
class NutrientMap:
    """Value object for the seven tracked nutrient totals.

    Examples:
        >>> m = NutrientMap.from_raw({"calories": "100.0", "protein": 3})
        >>> m.to_dict()["calories"]
        '100.0'
        >>> NutrientMap.zero().to_dict()["sodium"]
        '0.0'
    """

    calories: Decimal = ZERO
    protein: Decimal = ZERO
    carbohydrates: Decimal = ZERO
    fat: Decimal = ZERO
    fiber: Decimal = ZERO
    sugar: Decimal = ZERO
    sodium: Decimal = ZERO

    @classmethod
    def zero(cls) -> "NutrientMap":
        return cls()

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> "NutrientMap":
        """Build from a loosely-typed mapping; unknown keys are ignored."""
        if not raw:
            return cls()
        return cls(**{key: parse_amount(raw.get(key)) for key in NUTRIENT_FIELDS})

    def __add__(self, other: "NutrientMap") -> "NutrientMap":
        if not isinstance(other, NutrientMap):
            return NotImplemented
        return NutrientMap(
            **{
                f.name: getattr(self, f.name) + getattr(other, f.name)
                for f in fields(self)
            }
        )

    def rounded(self) -> "NutrientMap":
        return NutrientMap(**{f.name: round_one(getattr(self, f.name)) for f in fields(self)})

    def to_dict(self) -> Dict[str, str]:
        return {key: format_one(getattr(self, key)) for key in NUTRIENT_FIELDS}

    def to_exact_dict(self) -> Dict[str, str]:
        """Serialize without rounding; used for values that get summed later.

        Example:
            >>> NutrientMap.from_raw({"calories": "0.04"}).to_exact_dict()["calories"]
            '0.04'
        """
        return {key: format(getattr(self, key), "f") for key in NUTRIENT_FIELDS}
