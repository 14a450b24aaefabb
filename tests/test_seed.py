"""Tests for seed derivation and the deterministic sampler."""

import math

import pytest

from forensix.seed import derive_seed, fold_hash, identity_string, seed_for, seeded_random
from forensix.utils import FileDescriptor


def _reference_fold(text: str) -> int:
    """Closed form: sum(c_i * 31**(n-1-i)) reduced to a signed 32-bit int."""
    units = text.encode("utf-16-le", "surrogatepass")
    codes = [int.from_bytes(units[i:i + 2], "little") for i in range(0, len(units), 2)]
    n = len(codes)
    total = sum(c * 31 ** (n - 1 - i) for i, c in enumerate(codes)) % (1 << 32)
    return total - (1 << 32) if total >= (1 << 31) else total


@pytest.mark.parametrize("text, expected", [
    ("", 0),
    ("hello", 99162322),
    ("Aa", 2112),
    ("BB", 2112),
    ("Hello World", -862545276),
    ("polygenelubricants", -2147483648),
])
def test_fold_hash_known_values(text, expected):
    assert fold_hash(text) == expected


def test_fold_hash_wraps_like_int32():
    text = "report.pdf-102400-application/pdf" * 3
    assert fold_hash(text) == _reference_fold(text)
    assert -(1 << 31) <= fold_hash(text) < (1 << 31)


def test_fold_hash_uses_utf16_code_units():
    # U+1F4C4 is one code point but two UTF-16 units (D83D DCC4).
    assert fold_hash("\U0001F4C4") == 0xD83D * 31 + 0xDCC4
    assert fold_hash("é") == 0xE9


def test_identity_string_format():
    assert identity_string("a.pdf", 10, "application/pdf") == "a.pdf-10-application/pdf"
    assert identity_string("", 0, "") == "-0-"


def test_golden_seed_report_pdf():
    assert derive_seed("report.pdf", 102400, "application/pdf") == 1675937916


def test_golden_seed_empty_descriptor():
    assert derive_seed("", 0, "") == 44778


def test_seed_is_abs_of_min_int():
    # "polygenelubricants" folds to -2**31; abs() must not wrap back.
    assert abs(fold_hash("polygenelubricants")) == 2147483648


def test_seed_for_matches_derive_seed():
    d = FileDescriptor("contract.docx", 204800, "application/pdf")
    assert seed_for(d) == derive_seed("contract.docx", 204800, "application/pdf")


def test_seed_is_reproducible():
    assert derive_seed("scan.png", 5, "image/png") == derive_seed("scan.png", 5, "image/png")


def test_seeded_random_zero_point():
    assert seeded_random(0, 0) == 0.0


def test_seeded_random_matches_formula():
    seed = 1675937916
    value = math.sin(seed + 1 * 127.1) * 43758.5453
    assert seeded_random(seed, 1) == value - math.floor(value)


@pytest.mark.parametrize("seed", [0, 1, 44778, 1675937916, 2147483648])
def test_seeded_random_range(seed):
    for index in range(40):
        v = seeded_random(seed, index)
        assert 0.0 <= v < 1.0


def test_seeded_random_is_repeatable_per_pair():
    assert seeded_random(1783643367, 7) == seeded_random(1783643367, 7)
    assert seeded_random(1783643367, 7) != seeded_random(1783643367, 8)
