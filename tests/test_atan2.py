# tests/test_atan2.py

import logging
import math

import numpy as np
import pytest

from fastmath.core.constants import ATAN2_COUNT, ATAN2_DIM, PI
from fastmath.core.errors import TableConfigError
from fastmath.tables.atan2 import Atan2Table, atan2_dims

# About one grid step of the default 128 x 128 table.
STEP = 1.0 / (ATAN2_DIM - 1) + 1e-6


def wrapped(d):
    return (d + math.pi) % (2.0 * math.pi) - math.pi


@pytest.fixture(scope="module")
def table():
    return Atan2Table()


def test_default_sizing(table):
    assert ATAN2_DIM == 128
    assert ATAN2_COUNT == 128 * 128
    assert table.dim == ATAN2_DIM
    assert table.count == ATAN2_COUNT
    assert table.table.shape == (ATAN2_COUNT,)
    assert table.table.dtype == np.float32
    assert atan2_dims(5) == (1024, 32)


def test_cell_layout(table):
    """Cell (i, j) lives at j * DIM + i and holds atan2(j / DIM, i / DIM)."""
    for i, j in [(0, 0), (1, 0), (0, 1), (5, 17), (127, 3), (64, 127), (127, 127)]:
        expected = np.float32(math.atan2(j / ATAN2_DIM, i / ATAN2_DIM))
        assert table.table[j * ATAN2_DIM + i] == pytest.approx(expected, abs=1e-7)


def test_axis_directions(table):
    for r in (1e-6, 0.5, 1.0, 3.0, 1e6):
        assert table.atan2(0.0, r) == 0.0
        assert table.atan2(r, 0.0) == pytest.approx(math.pi / 2, abs=STEP)
        assert table.atan2(0.0, -r) == pytest.approx(math.pi, abs=STEP)
        assert table.atan2(-r, 0.0) == pytest.approx(-math.pi / 2, abs=STEP)


def test_negative_x_axis_is_pi(table):
    assert table.atan2(0.0, -2.0) == PI


def test_zero_vector_is_finite(table):
    r = table.atan2(0.0, 0.0)
    assert math.isfinite(r)
    assert r == 0.0
    assert table.atan2(-0.0, -0.0) == 0.0


def test_subnormal_vector_uses_exact_fallback(table):
    assert table.atan2(1e-40, 1e-40) == pytest.approx(math.pi / 4, abs=1e-6)
    assert table.atan2(1e-40, -1e-40) == pytest.approx(3 * math.pi / 4, abs=1e-6)
    assert table.atan2(-1e-40, -1e-40) == pytest.approx(-3 * math.pi / 4, abs=1e-6)
    assert table.atan2(-1e-40, 1e-40) == pytest.approx(-math.pi / 4, abs=1e-6)


@pytest.mark.parametrize(
    "y, x",
    [
        (1.0, math.inf),
        (1.0, -math.inf),
        (-math.inf, 2.0),
        (math.inf, math.inf),
        (-math.inf, -math.inf),
    ],
)
def test_infinite_coordinates_use_exact_fallback(table, y, x):
    assert table.atan2(y, x) == pytest.approx(math.atan2(y, x), abs=1e-6)
    assert float(table.atan2_array(y, x)) == pytest.approx(math.atan2(y, x), abs=1e-6)


def test_nan_coordinate_is_nan_not_an_error(table):
    assert math.isnan(table.atan2(math.nan, 1.0))
    assert math.isnan(table.atan2(1.0, math.nan))
    assert np.isnan(table.atan2_array([math.nan, 1.0], [1.0, math.nan])).all()


def test_all_quadrants_all_scales(table):
    for deg in range(0, 360, 3):
        theta = math.radians(deg + 0.37)
        for r in (1e-3, 1.0, 250.0, 1e7):
            y, x = r * math.sin(theta), r * math.cos(theta)
            got = table.atan2(y, x)
            assert -PI <= got <= PI
            assert abs(wrapped(got - math.atan2(y, x))) <= STEP


def test_scale_invariance(table):
    for y, x in [(1.0, 2.0), (-3.0, 0.5), (-0.25, -0.75), (7.0, -1.0)]:
        base = table.atan2(y, x)
        assert table.atan2(y * 1000.0, x * 1000.0) == pytest.approx(base, abs=2 * STEP)


def test_array_matches_scalar(table):
    rng = np.random.default_rng(7)
    ys = rng.uniform(-10, 10, 500)
    xs = rng.uniform(-10, 10, 500)
    ys[:4] = [0.0, 0.0, 1e-40, 3.0]
    xs[:4] = [0.0, -1.0, -1e-40, 0.0]

    out = table.atan2_array(ys, xs)
    assert out.dtype == np.float32
    assert out.shape == (500,)
    for k in range(500):
        assert out[k] == pytest.approx(table.atan2(float(ys[k]), float(xs[k])), abs=1e-6)


def test_array_broadcasts(table):
    out = table.atan2_array(np.array([1.0, -1.0]), 0.0)
    assert out.shape == (2,)
    assert out[0] == pytest.approx(math.pi / 2, abs=STEP)
    assert out[1] == pytest.approx(-math.pi / 2, abs=STEP)


def test_table_is_read_only(table):
    with pytest.raises(ValueError):
        table.table[0] = 1.0


def test_finer_table_is_more_accurate():
    coarse, fine = Atan2Table(4), Atan2Table(9)
    theta = np.linspace(-3.0, 3.0, 4001)
    y, x = np.sin(theta), np.cos(theta)
    err_coarse = np.abs(coarse.atan2_array(y, x) - theta).max()
    err_fine = np.abs(fine.atan2_array(y, x) - theta).max()
    assert err_fine < err_coarse
    assert err_fine <= 1.0 / (fine.dim - 1) + 1e-6


@pytest.mark.parametrize("bits", [0, 13, -1])
def test_rejects_bad_bits(bits):
    with pytest.raises(TableConfigError):
        Atan2Table(bits)


def test_build_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="fastmath.tables.atan2"):
        Atan2Table(3)
    assert "built atan2 table: bits=3 dim=8 entries=64" in caplog.text
