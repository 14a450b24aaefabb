"""
forensix.utils: Shared types and numeric helpers for the scoring engine.

Provides:

* **FileDescriptor**: the identity of an uploaded file (name, size, type).
* **Risk thresholds**: ``HIGH_RISK_THRESHOLD`` / ``MEDIUM_RISK_THRESHOLD``
  and ``classify_risk``.
* **Rounding**: ``to_fixed`` and ``round_half_up`` reproduce
  ``Number.prototype.toFixed`` (half-up on the exact binary value), so
  persisted scores match the browser build digit for digit.
* **Formatting**: ``percent_text`` and ``js_number`` for explanation texts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

HIGH_RISK_THRESHOLD = 0.6
MEDIUM_RISK_THRESHOLD = 0.35


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FileDescriptor:
    """Identity attributes of a file submitted for analysis.

    Attributes
    ----------
    name : str
        Base file name as reported by the upload layer (may be empty).
    size_bytes : int
        File size in bytes, non-negative.
    mime_type : str
        Declared MIME type; empty when the type is unknown.
    """

    name: str
    size_bytes: int
    mime_type: str

    def __post_init__(self) -> None:
        if self.size_bytes < 0:
            raise ValueError(f"size_bytes must be non-negative, got {self.size_bytes}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "size_bytes": self.size_bytes,
            "mime_type": self.mime_type,
        }


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

def classify_risk(score: float) -> str:
    """Map a module score to ``"high"`` / ``"medium"`` / ``"low"`` (strict ``>``)."""
    if score > HIGH_RISK_THRESHOLD:
        return "high"
    if score > MEDIUM_RISK_THRESHOLD:
        return "medium"
    return "low"


# ---------------------------------------------------------------------------
# Rounding / formatting
# ---------------------------------------------------------------------------

def to_fixed(value: float, places: int) -> str:
    """Format ``value`` with ``places`` decimals, rounding half away from zero.

    ``Decimal(value)`` is the exact binary value of the float, so ties are
    only real ties, the same rule ``toFixed`` applies.
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float, places: int) -> float:
    return float(to_fixed(value, places))


def percent_text(fraction: float) -> str:
    """Whole-number percentage text, e.g. ``0.856 -> "86"``."""
    return to_fixed(fraction * 100, 0)


def js_number(value: float) -> str:
    """Render a float the way a JavaScript template literal would (``65`` not ``65.0``)."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))
