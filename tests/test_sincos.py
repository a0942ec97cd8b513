# tests/test_sincos.py

import logging
import math

import numpy as np
import pytest

from fastmath.core.constants import HALF_PI, PI2, SIN_COUNT, SIN_MASK
from fastmath.core.errors import TableConfigError
from fastmath.tables.sincos import SinCosTable

# One bucket of the default table, plus float32 storage rounding.
BUCKET = PI2 / SIN_COUNT + 1e-6


@pytest.fixture(scope="module")
def table():
    return SinCosTable()


def test_default_sizing(table):
    assert table.count == SIN_COUNT == 16384
    assert table.mask == SIN_MASK == 16383
    assert table.table.dtype == np.float32
    assert table.table.shape == (SIN_COUNT,)
    assert table.nbytes == SIN_COUNT * 4


def test_axis_values_are_exact(table):
    assert table.sin_deg(0) == 0.0
    assert table.sin_deg(90) == 1.0
    assert table.sin_deg(180) == 0.0
    assert table.sin_deg(270) == -1.0

    assert table.cos_deg(0) == 1.0
    assert table.cos_deg(90) == 0.0
    assert table.cos_deg(180) == -1.0
    assert table.cos_deg(270) == 0.0

    assert table.sin(0.0) == 0.0


def test_midpoint_sampling(table):
    """Non-axis entries hold sin at the centre of their bucket."""
    for i in (1, 7, 1000, 5000, 12345, SIN_COUNT - 1):
        expected = np.float32(math.sin((i + 0.5) / SIN_COUNT * PI2))
        assert table.table[i] == pytest.approx(expected, abs=1e-7)


def test_cos_is_sin_shifted_a_quarter_turn(table):
    for x in np.linspace(-20.0, 20.0, 401):
        x = float(x)
        assert table.cos(x) == table.sin(x + HALF_PI)
    for d in range(-720, 721, 7):
        assert table.cos_deg(d) == table.sin_deg(d + 90.0)


def test_periodicity(table):
    for x in (0.3, 1.0, 2.5, -0.7, 4.0):
        for k in (-3, -1, 1, 2, 100):
            assert table.sin(x + k * PI2) == pytest.approx(table.sin(x), abs=BUCKET)
    for d in (12.5, 45.0, 123.0, 300.0):
        assert table.sin_deg(d + 360.0) == table.sin_deg(d)
        assert table.sin_deg(d - 720.0) == table.sin_deg(d)


def test_accuracy_against_math(table):
    for x in np.linspace(-10.0, 10.0, 2001):
        x = float(x)
        assert abs(table.sin(x) - math.sin(x)) <= BUCKET
        assert abs(table.cos(x) - math.cos(x)) <= BUCKET
    for d in np.linspace(-400.0, 400.0, 1601):
        d = float(d)
        assert abs(table.sin_deg(d) - math.sin(math.radians(d))) <= BUCKET


def test_negative_angles_wrap(table):
    assert table.index_of(-1e-9) == SIN_MASK
    assert table.index_of_deg(-90.0) == table.index_of_deg(270.0)
    assert table.sin_deg(-90.0) == -1.0
    assert table.sin(-1.0) == pytest.approx(-math.sin(1.0), abs=BUCKET)


def test_array_matches_scalar(table):
    xs = np.linspace(-7.0, 7.0, 257)
    s = table.sin_array(xs)
    c = table.cos_array(xs)
    assert s.dtype == np.float32
    for k, x in enumerate(xs):
        assert s[k] == np.float32(table.sin(float(x)))
        assert c[k] == np.float32(table.cos(float(x)))

    ds = np.arange(-360.0, 361.0, 15.0)
    sd = table.sin_deg_array(ds)
    cd = table.cos_deg_array(ds)
    for k, d in enumerate(ds):
        assert sd[k] == np.float32(table.sin_deg(float(d)))
        assert cd[k] == np.float32(table.cos_deg(float(d)))


def test_array_tolerates_non_finite(table):
    out = table.sin_array(np.array([np.nan, np.inf, -np.inf, 0.0]))
    assert out.shape == (4,)
    assert out[3] == 0.0


def test_table_is_read_only(table):
    with pytest.raises(ValueError):
        table.table[0] = 0.5


def test_small_table_is_all_axis_values():
    t = SinCosTable(2)
    assert list(t.table) == [0.0, 1.0, 0.0, -1.0]


def test_coarser_table_is_less_accurate():
    coarse = SinCosTable(8)
    xs = np.linspace(0.0, PI2, 5000, endpoint=False)
    err = np.abs(coarse.sin_array(xs) - np.sin(xs))
    assert err.max() > PI2 / SIN_COUNT
    assert err.max() <= PI2 / coarse.count + 1e-6


@pytest.mark.parametrize("bits", [0, 1, 25, -3])
def test_rejects_bad_bits(bits):
    with pytest.raises(TableConfigError):
        SinCosTable(bits)
    with pytest.raises(ValueError):
        SinCosTable(bits)


def test_equality_ignores_table_array():
    assert SinCosTable(6) == SinCosTable(6)
    assert SinCosTable(6) != SinCosTable(7)


def test_build_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="fastmath.tables.sincos"):
        SinCosTable(9)
    assert "built sin table: bits=9 entries=512" in caplog.text
