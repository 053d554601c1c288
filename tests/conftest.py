"""Test configuration helpers and shared share fixtures."""
from __future__ import annotations

import copy
import sys
from fractions import Fraction
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


SAMPLE_DATA = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

LARGE_DATA = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d635"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}

# Decimal values of LARGE_DATA, index -> value.
LARGE_DECODED = {
    1: 995085094601491,
    2: 320923294898495900,
    3: 196563650089608567,
    4: 1016509518118225951,
    5: 3711974121218449851,
    6: 10788619898233492461,
    7: 26709394976508342463,
    8: 58725075613853308713,
    9: 117852986202006511971,
    10: 220003896831595324801,
}


def exact_constant(points) -> Fraction:
    """P(0) over the rationals, for checking the modular result."""
    total = Fraction(0)
    for i, (xi, yi) in enumerate(points):
        term = Fraction(yi)
        for j, (xj, _) in enumerate(points):
            if i != j:
                term *= Fraction(-xj, xi - xj)
        total += term
    return total


def reduce_mod(value: Fraction, prime: int) -> int:
    return value.numerator * pow(value.denominator, -1, prime) % prime


@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def large_data():
    return copy.deepcopy(LARGE_DATA)
