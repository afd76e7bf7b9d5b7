'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 14:05:51
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-05 09:27:36
FilePath: /gde/src/gde/coefficient.py
Description: 扩散系数模型 D(z, t, x)

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/coefficient.py
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Protocol, TypeAlias, Union

import numpy as np

from .errors import ConfigurationError, InputFileError, InvalidInputError
from .grid import Grid1D
from .table_io import read_table_xy

if TYPE_CHECKING:
    from .config import RunConfig

logger = logging.getLogger(__name__)

# f(D_i_prev, x_i, z_i, t) -> D_i，逐点调用
UpdateFn: TypeAlias = Callable[[float, float, float, float], float]

DEFAULT_CONCENTRATION_FACTOR = 1e-20  # [m^2/s]
DEFAULT_DEPTH_PEAK = 10 * 1e-20       # [m^2/s]
DEFAULT_DEPTH_CENTRE = 1800 * 1e-10   # [m]
DEFAULT_DEPTH_WIDTH = 600 * 1e-10     # [m]
DEFAULT_UPDATE_FUNCTION = "gde.coefficient:hold_coefficient"


class CoefficientMode(Enum):
    CONSTANT = "constant"
    FILE = "file"
    CONCENTRATION_DEPENDENT = "concentration-dependent"
    DEPTH_DEPENDENT = "depth-dependent"
    TIME = "time"

    @classmethod
    def parse(cls, value: Union[str, "CoefficientMode"]) -> "CoefficientMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                f"Diffusion mode: {value} not recognised (expected one of: {valid})"
            ) from None


class DiffusionCoefficientModel(Protocol):
    """
    所有扩散系数模型的统一接口。
    evaluate 返回和网格等长的 D profile [m^2/s]。
    """
    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        ...


def _as_profile(values: np.ndarray, grid: Grid1D, source: str) -> np.ndarray:
    D = np.broadcast_to(np.asarray(values, dtype=float), (grid.nz,)).copy()
    if not np.all(np.isfinite(D)):
        raise InvalidInputError(f"{source}: diffusion coefficient must be finite")
    if np.any(D < 0.0):
        i = int(np.argmin(D))
        raise InvalidInputError(
            f"{source}: diffusion coefficient must be non-negative, got D[{i}] = {D[i]:g}"
        )
    # 模型可能把同一个数组跨步复用，不能让调用方改掉
    D.setflags(write=False)
    return D


def read_coefficient_table(path: Union[str, Path], grid: Grid1D) -> np.ndarray:
    """读 (z, D) 表，点数必须和网格一致."""
    z, D = read_table_xy(path)
    if z.shape[0] != grid.nz:
        raise InputFileError(
            f"coefficient table {str(path)!r} has {z.shape[0]} points, grid has {grid.nz}"
        )
    if not np.allclose(z, grid.z, rtol=1e-6, atol=0.0):
        logger.warning("positions in %s differ from the concentration grid; using grid positions", path)
    return _as_profile(D, grid, str(path))


# ======================= 五种模型 =======================

@dataclass
class ConstantCoefficient:
    """D_i = D0，整个 run 只算一次."""
    d0: float
    _cached: Optional[np.ndarray] = field(default=None, init=False, repr=False)

    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        if self._cached is None or self._cached.shape[0] != grid.nz:
            self._cached = _as_profile(np.full(grid.nz, self.d0), grid, "constant")
        return self._cached


@dataclass
class FileCoefficient:
    """D_i 取自外部表格，读一次."""
    values: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=float)
        values.setflags(write=False)
        self.values = values

    @classmethod
    def from_table(cls, path: Union[str, Path], grid: Grid1D) -> "FileCoefficient":
        return cls(values=read_coefficient_table(path, grid))

    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        if self.values.shape != (grid.nz,):
            raise InvalidInputError(
                f"coefficient profile has {self.values.shape[0]} points, grid has {grid.nz}"
            )
        return self.values


@dataclass(frozen=True)
class ConcentrationDependentCoefficient:
    """D_i = k * x_i^2，每一步都跟着浓度重算."""
    k: float = DEFAULT_CONCENTRATION_FACTOR

    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        x = np.asarray(concentration, dtype=float)
        return _as_profile(self.k * x * x, grid, "concentration-dependent")


@dataclass(frozen=True)
class DepthDependentCoefficient:
    """
    以 z0 为中心、宽度 sigma 的高斯分布：
        D_i = D0 * exp(-((z_i - z0) / sigma)^2 / 2)
    和时间、浓度都无关，但为了和其它模型一致每步都会调用。
    """
    d0: float = DEFAULT_DEPTH_PEAK
    z0: float = DEFAULT_DEPTH_CENTRE
    sigma: float = DEFAULT_DEPTH_WIDTH

    def __post_init__(self) -> None:
        if self.sigma <= 0.0:
            raise ConfigurationError(f"depth-dependent width must be positive, got {self.sigma:g}")

    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        u = (grid.z - self.z0) / self.sigma
        return _as_profile(self.d0 * np.exp(-u * u / 2.0), grid, "depth-dependent")


def hold_coefficient(D: float, x: float, z: float, t: float) -> float:
    """默认的 update function：D 保持上一步的值."""
    return D


@dataclass
class TimeDependentCoefficient:
    """
    t=0 时从表格读入 D，之后每一步对每个点调用 D_i = f(D_i_prev, x_i, z_i, t)。
    有状态：上一次的结果就是下一次的 D_prev。
    """
    initial: np.ndarray = field(repr=False)
    update: UpdateFn = hold_coefficient
    _current: Optional[np.ndarray] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        initial = np.array(self.initial, dtype=float)
        initial.setflags(write=False)
        self.initial = initial

    @classmethod
    def from_table(
        cls, path: Union[str, Path], grid: Grid1D, update: UpdateFn = hold_coefficient
    ) -> "TimeDependentCoefficient":
        return cls(initial=read_coefficient_table(path, grid), update=update)

    @property
    def current(self) -> np.ndarray:
        return self.initial if self._current is None else self._current

    def evaluate(self, grid: Grid1D, concentration: np.ndarray, t: float) -> np.ndarray:
        x = np.asarray(concentration, dtype=float)
        D_prev = self.current
        if x.shape != D_prev.shape or D_prev.shape != grid.z.shape:
            raise InvalidInputError(
                f"time-dependent: D has {D_prev.shape[0]} points, x has {x.shape[0]}, grid has {grid.nz}"
            )

        name = getattr(self.update, "__name__", repr(self.update))
        try:
            D_new = np.array(
                [self.update(float(d), float(xi), float(zi), t) for d, xi, zi in zip(D_prev, x, grid.z)],
                dtype=float,
            )
        except Exception as exc:
            raise ConfigurationError(f"update function {name} failed at t = {t:g}: {exc}") from exc

        self._current = _as_profile(D_new, grid, "time-dependent")
        return self._current

    def reset(self) -> None:
        self._current = None


def load_update_function(ref: str) -> UpdateFn:
    """'package.module:attribute' -> callable."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"update function must look like 'module:attribute', got {ref!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import module {module_name!r}: {exc}") from exc
    fn = getattr(module, attr, None)
    if not callable(fn):
        raise ConfigurationError(f"{ref!r} is not a callable")
    return fn


def build_model(config: "RunConfig", grid: Grid1D) -> DiffusionCoefficientModel:
    """按 config.mode 选出并初始化对应的模型（只做一次）。"""
    mode = CoefficientMode.parse(config.mode)

    if mode is CoefficientMode.CONSTANT:
        model: DiffusionCoefficientModel = ConstantCoefficient(d0=config.d0)
    elif mode is CoefficientMode.FILE:
        model = FileCoefficient.from_table(config.coefficient_file, grid)
    elif mode is CoefficientMode.CONCENTRATION_DEPENDENT:
        model = ConcentrationDependentCoefficient(k=config.concentration_factor)
    elif mode is CoefficientMode.DEPTH_DEPENDENT:
        model = DepthDependentCoefficient(
            d0=config.depth_peak, z0=config.depth_centre, sigma=config.depth_width
        )
    elif mode is CoefficientMode.TIME:
        update = load_update_function(config.update_function)
        model = TimeDependentCoefficient.from_table(config.coefficient_file, grid, update)
    else:  # pragma: no cover
        raise ConfigurationError(f"Unsupported mode: {mode}")

    logger.info("diffusion mode %s -> %r", mode.value, model)
    return model
