"""Compact amount formatting for summary log lines (``IDR 25.0M``, ``-15.0k``)."""
from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple, Union

Number = Union[int, float, Decimal]


class Scale(NamedTuple):
    factor: Decimal
    word: str
    suffix: str


SCALES = (
    Scale(Decimal(10) ** 12, "trillion", "T"),
    Scale(Decimal(10) ** 9, "billion", "B"),
    Scale(Decimal(10) ** 6, "million", "M"),
    Scale(Decimal(10) ** 3, "thousand", "k"),
)

# Below this magnitude amounts are printed in full.
PLAIN_LIMIT = Decimal(10) ** 4


def _scale_for(magnitude: Decimal) -> Scale | None:
    if magnitude < PLAIN_LIMIT:
        return None
    return next((scale for scale in SCALES if magnitude >= scale.factor), None)


def humanize_number(value: Number, short: bool = False, decimals: int = 1) -> str:
    """Render ``value`` with a thousand/million/... unit once it reaches 10,000.

    Smaller whole values print without a fraction; smaller fractional values
    are rounded to ``decimals`` places.
    """
    amount = Decimal(str(value))
    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)

    scale = _scale_for(magnitude)
    if scale is None:
        if magnitude == magnitude.to_integral():
            return f"{sign}{magnitude.to_integral():f}"
        return f"{sign}{magnitude:.{decimals}f}"

    scaled = f"{magnitude / scale.factor:.{decimals}f}"
    unit = scale.suffix if short else f" {scale.word}"
    return f"{sign}{scaled}{unit}"


def humanize_currency(
    value: Number, currency: str = "IDR", short: bool = True, decimals: int = 1
) -> str:
    return f"{currency} {humanize_number(value, short=short, decimals=decimals)}"
