import numpy as np
import pytest

from gde import Field1D, Grid1D, InvalidInputError


def test_grid1d_basic():
    g = Grid1D.from_positions(np.linspace(0.0, 2.0, 11))
    assert g.nz == 11
    assert np.isclose(g.dz, 0.2)
    assert np.isclose(g.length, 2.0)

    # dz * (nz-1) 应该等于 length
    assert np.isclose(g.dz * (g.nz - 1), g.length)


def test_grid1d_is_read_only():
    z = np.array([0.0, 1.0, 2.0])
    g = Grid1D.from_positions(z)

    # 外面的数组改了也不影响网格
    z[0] = 100.0
    assert g.z[0] == 0.0
    with pytest.raises(ValueError):
        g.z[0] = 5.0


def test_grid1d_needs_three_points():
    with pytest.raises(InvalidInputError):
        Grid1D.from_positions([0.0, 1.0])


@pytest.mark.parametrize("z", [[0.0, 0.0, 1.0], [2.0, 1.0, 0.0]])
def test_grid1d_rejects_non_positive_spacing(z):
    with pytest.raises(InvalidInputError):
        Grid1D.from_positions(z)


def test_grid1d_rejects_non_uniform_spacing():
    with pytest.raises(InvalidInputError, match="uniform"):
        Grid1D.from_positions([0.0, 1.0, 2.0, 3.5])


def test_grid1d_tolerates_rounded_positions():
    # 文件里的坐标通常只有几位有效数字
    z = np.round(np.arange(50) * 1e-10 / 3.0, 17)
    g = Grid1D.from_positions(z)
    assert g.nz == 50


def test_grid1d_equality():
    a = Grid1D.from_positions([0.0, 1.0, 2.0])
    b = Grid1D.from_positions(np.array([0.0, 1.0, 2.0]))
    c = Grid1D.from_positions([0.0, 2.0, 4.0])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_field1d_is_replaced_not_mutated():
    g = Grid1D.from_positions([0.0, 1.0, 2.0, 3.0])
    u = Field1D("x", g, [1.0, 2.0, 3.0, 4.0])

    v = u.with_values(np.zeros(4))
    assert np.allclose(u.values, [1.0, 2.0, 3.0, 4.0])
    assert np.allclose(v.values, 0.0)
    assert v.name == "x"
    assert v.grid is g

    with pytest.raises(ValueError):
        u.values[0] = 10.0


def test_field1d_default_is_zero():
    g = Grid1D.from_positions([0.0, 1.0, 2.0])
    assert np.allclose(Field1D("x", g).values, 0.0)


def test_field1d_length_must_match_grid():
    g = Grid1D.from_positions([0.0, 1.0, 2.0])
    with pytest.raises(InvalidInputError):
        Field1D("x", g, [1.0, 2.0])


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_field1d_rejects_non_finite_values(bad):
    g = Grid1D.from_positions([0.0, 1.0, 2.0])
    with pytest.raises(InvalidInputError, match=r"x\[1\]"):
        Field1D("x", g, [0.0, bad, 1.0])
