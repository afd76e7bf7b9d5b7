import numpy as np
import pytest

from gde import Grid1D
from gde.backend import NumpyStencilKernel, PythonStencilKernel

KERNELS = [NumpyStencilKernel, PythonStencilKernel]


def _explicit_diffusion_step(z, x, D, dt):
    """逐点手算一步 FTCS + closed-system 边界，用来做对照。"""
    dz = z[1] - z[0]
    n = len(x)
    new = [0.0] * n
    for i in range(1, n - 1):
        new[i] = x[i] + dt * (
            (D[i + 1] - D[i - 1]) * (x[i + 1] - x[i - 1]) / (2 * dz) ** 2
            + D[i] * (x[i + 1] - 2 * x[i] + x[i - 1]) / dz ** 2
        )
    new[0] = new[1]
    new[-1] = new[-2]
    return np.array(new)


@pytest.mark.parametrize("kernel", KERNELS)
def test_single_peak_scenario(kernel):
    # z = [0..4], 中间一个 10 的尖峰，D*dt/dz^2 = 0.1
    g = Grid1D.from_positions([0.0, 1.0, 2.0, 3.0, 4.0])
    x = np.array([0.0, 0.0, 10.0, 0.0, 0.0])
    D = np.full(5, 1e-20)

    step = kernel().make_step_fn()
    x_new = step(g, x, D, 1e19)

    assert np.allclose(x_new, [1.0, 1.0, 8.0, 1.0, 1.0])
    # 中心下降，两侧对称上升
    assert x_new[2] < 10.0
    assert x_new[1] == x_new[3]


@pytest.mark.parametrize("kernel", KERNELS)
def test_step_matches_hand_computed_scheme_with_variable_coefficient(kernel):
    rng = np.random.default_rng(1234)
    g = Grid1D.from_positions(np.linspace(0.0, 1e-8, 41))
    x = rng.random(g.nz)
    D = 1e-20 * (1.0 + rng.random(g.nz))
    dt = 0.2 * g.dz ** 2 / D.max()

    x_new = kernel().make_step_fn()(g, x, D, dt)
    expected = _explicit_diffusion_step(g.z, x, D, dt)

    assert np.allclose(x_new, expected, rtol=1e-12, atol=1e-14)


def test_backends_agree():
    rng = np.random.default_rng(7)
    g = Grid1D.from_positions(np.arange(30) * 2.0)
    x = rng.random(g.nz)
    D = rng.random(g.nz)

    a = NumpyStencilKernel().make_step_fn()(g, x, D, 0.5)
    b = PythonStencilKernel().make_step_fn()(g, x, D, 0.5)
    assert np.allclose(a, b, rtol=1e-14, atol=0.0)


@pytest.mark.parametrize("kernel", KERNELS)
def test_step_does_not_mutate_input(kernel):
    g = Grid1D.from_positions(np.arange(6.0))
    x = np.array([0.0, 1.0, 5.0, 2.0, 0.0, 0.0])
    before = x.copy()

    x_new = kernel().make_step_fn()(g, x, np.full(6, 0.1), 1.0)

    assert np.array_equal(x, before)
    assert x_new is not x


@pytest.mark.parametrize("kernel", KERNELS)
def test_boundaries_mirror_interior(kernel):
    rng = np.random.default_rng(3)
    g = Grid1D.from_positions(np.arange(12.0))
    x = rng.random(g.nz)
    D = 0.1 + 0.3 * rng.random(g.nz)

    x_new = kernel().make_step_fn()(g, x, D, 0.5)

    assert x_new[0] == x_new[1]
    assert x_new[-1] == x_new[-2]


@pytest.mark.parametrize("kernel", KERNELS)
def test_uniform_profile_is_unchanged(kernel):
    g = Grid1D.from_positions(np.arange(10.0))
    x = np.full(g.nz, 3.25)

    x_new = kernel().make_step_fn()(g, x, np.full(g.nz, 0.4), 1.0)

    assert np.allclose(x_new, x, rtol=0.0, atol=1e-15)


@pytest.mark.parametrize("kernel", KERNELS)
def test_interior_sum_conserved_for_uniform_coefficient(kernel):
    g = Grid1D.from_positions(np.arange(20.0))
    x = np.zeros(g.nz)
    x[5:9] = [1.0, 4.0, 2.0, 3.0]
    # 旧 profile 的边界已经是镜像的（和每一步之后的状态一致）
    x[0], x[-1] = x[1], x[-2]

    x_new = kernel().make_step_fn()(g, x, np.full(g.nz, 0.3), 1.0)

    assert np.isclose(x_new[1:-1].sum(), x[1:-1].sum(), rtol=1e-12)
