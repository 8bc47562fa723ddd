"""Pure tally and parsing formulas - no store access, easily testable."""
import math
import re
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from app.errors import InvalidWeight
from app.models.governance import Vote

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def coerce_weight(value: object, proposal_id: str | None = None) -> float:
    """Parse a stored vote weight into a finite, non-negative float.

    Accepts numbers and numeric strings. Anything else (booleans, blanks,
    NaN, infinities, negatives, values too large for a float) raises
    InvalidWeight.
    """
    if isinstance(value, bool):
        raise InvalidWeight(value, proposal_id)

    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            raise InvalidWeight(value, proposal_id) from None
    elif isinstance(value, str):
        text = value.strip()
        # float() also takes digit separators ("1_000"), which are not numeric text
        if "_" in text:
            raise InvalidWeight(value, proposal_id)
        try:
            number = float(text)
        except ValueError:
            raise InvalidWeight(value, proposal_id) from None
    else:
        raise InvalidWeight(value, proposal_id)

    if not math.isfinite(number) or number < 0:
        raise InvalidWeight(value, proposal_id)
    return number


def tally(votes: Iterable[Vote]) -> tuple[dict[str, float], float, int]:
    """Weighted tally. Returns (weight per choice, total weight, ballot count)."""
    counts: dict[str, float] = defaultdict(float)
    n = 0

    for vote in votes:
        counts[vote.choice] += vote.weight
        n += 1

    # total is derived from the per-choice sums so both always agree
    return dict(counts), sum(counts.values()), n


def parse_limit(value: object, default: int) -> int:
    """Leading-integer parse of a row limit; ``default`` when absent or unparseable."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default

    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else default
