import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# Plain decimal text: sign, digits, optional fraction, optional exponent.
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_coordinate(text: str) -> Optional[float]:
    """Finite float from non-empty decimal text, else None."""
    if not text or not _DECIMAL_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def format_coordinate(value: float) -> str:
    # point URLs take plain decimals; repr goes to exponent form for tiny/huge values
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


# Latitude and Longitude are separate wrappers so one can't be passed where
# the other is expected. No bounds check: NWS answers 404 for points it
# doesn't cover.
@dataclass(frozen=True)
class Latitude:
    value: float

    @classmethod
    def parse(cls, text: str) -> Optional["Latitude"]:
        value = parse_coordinate(text)
        return None if value is None else cls(value)

    def __str__(self) -> str:
        return format_coordinate(self.value)


@dataclass(frozen=True)
class Longitude:
    value: float

    @classmethod
    def parse(cls, text: str) -> Optional["Longitude"]:
        value = parse_coordinate(text)
        return None if value is None else cls(value)

    def __str__(self) -> str:
        return format_coordinate(self.value)
