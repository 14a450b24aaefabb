"""
Seed derivation and deterministic sampling.

Every score in a report is drawn from a single 32-bit seed computed from the
file's identity string ``"{name}-{size}-{type}"``. The fold is the classic
``h = h * 31 + c`` string hash with signed 32-bit wraparound, applied to the
UTF-16 code units of the string (the browser build's string model), so a
character outside the BMP contributes both surrogate halves.

``seeded_random`` turns ``(seed, index)`` into a float in ``[0, 1)`` via the
``fract(sin(x) * 43758.5453)`` hash. Each caller owns a fixed set of indexes:

    1           metadata score
    2, 3        linguistic score, paragraph count
    4 .. 8      signature score, bounding box x / y / width / height
    9           handwriting score
    10 .. 16    linguistic per-paragraph draws
    20 .. 27    handwriting anomaly x
    30 .. 37    handwriting anomaly y
"""

from __future__ import annotations

import math
import struct

from .utils import FileDescriptor

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

SIN_INDEX_STRIDE = 127.1
SIN_SCALE = 43758.5453


def _utf16_units(text: str) -> tuple:
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def fold_hash(text: str) -> int:
    """Signed 32-bit ``h * 31 + c`` hash of ``text`` (Java ``String.hashCode``)."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _UINT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


def identity_string(name: str, size_bytes: int, mime_type: str) -> str:
    return f"{name}-{size_bytes}-{mime_type}"


def derive_seed(name: str, size_bytes: int, mime_type: str) -> int:
    """Seed for a file: ``abs(fold_hash("{name}-{size}-{type}"))``.

    The result lies in ``[0, 2**31]``; ``2**31`` is reachable when the fold
    lands exactly on the most negative 32-bit integer.
    """
    return abs(fold_hash(identity_string(name, size_bytes, mime_type)))


def seed_for(descriptor: FileDescriptor) -> int:
    return derive_seed(descriptor.name, descriptor.size_bytes, descriptor.mime_type)


def seeded_random(seed: int, index: int) -> float:
    """Reproducible value in ``[0, 1)`` for a ``(seed, index)`` pair."""
    value = math.sin(seed + index * SIN_INDEX_STRIDE) * SIN_SCALE
    return value - math.floor(value)
