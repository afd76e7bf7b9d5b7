'''
Author: leviathan 670916484@qq.com
Date: 2025-11-16 16:36:09
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-05 10:02:58
FilePath: /gde/src/gde/timestepping.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/timestepping.py
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .backend.base import BackendKernel, BackendKind, StepFn
from .backend.numpy_backend import NumpyStencilKernel
from .backend.python_backend import PythonStencilKernel
from .coefficient import DiffusionCoefficientModel
from .errors import ConfigurationError, StabilityViolationError
from .field import Field1D
from .stability import check_stability

logger = logging.getLogger(__name__)


class LoopState(Enum):
    INITIALIZING = "initializing"
    STEPPING = "stepping"
    TERMINATED = "terminated"


@dataclass
class TimeStepper:
    model: DiffusionCoefficientModel
    dt: float
    t_final: float
    backend: BackendKind = BackendKind.NUMPY

    state: LoopState = LoopState.INITIALIZING
    time: float = 0.0
    steps_taken: int = 0

    _step_fn: Optional[StepFn] = None

    def build(self) -> "TimeStepper":
        if not (self.dt > 0.0 and math.isfinite(self.dt)):
            raise ConfigurationError(f"time step must be positive and finite, got dt = {self.dt!r}")
        if not math.isfinite(self.t_final):
            raise ConfigurationError(f"end time must be finite, got {self.t_final!r}")

        kernel: BackendKernel
        if self.backend is BackendKind.NUMPY:
            kernel = NumpyStencilKernel()
        elif self.backend is BackendKind.PYTHON:
            kernel = PythonStencilKernel()
        else:
            raise ConfigurationError(f"Unsupported backend: {self.backend}")
        self._step_fn = kernel.make_step_fn()

        # 有状态的模型（time-dependent）回到 t=0 的表格
        reset = getattr(self.model, "reset", None)
        if callable(reset):
            reset()

        self.state = LoopState.INITIALIZING
        self.time = 0.0
        self.steps_taken = 0
        return self

    def step(self, x: Field1D, t: float) -> Field1D:
        """
        单步：D = model(t) -> 稳定性检查 -> FTCS。
        返回新的 Field1D，x 本身不动。
        """
        if self._step_fn is None:
            self.build()
        grid = x.grid
        D = self.model.evaluate(grid, x.values, t)
        check_stability(self.dt, grid.dz, float(D.max()))
        x_new = self._step_fn(grid, x.values, D, self.dt)  # type: ignore[misc]
        return x.with_values(x_new)

    def run(self, x: Field1D) -> Field1D:
        """
        从 t=0 积分到 t_final。
        时钟先加 dt 再判断 t <= t_final，所以一共 floor(t_final/dt) 步，
        最后不足一个 dt 的那一段不算。t 是累加出来的，不是 n*dt。
        """
        if self._step_fn is None:
            self.build()

        self.state = LoopState.STEPPING
        self.time = 0.0
        self.steps_taken = 0
        t = self.dt
        try:
            while t <= self.t_final:
                x = self.step(x, t)
                self.time = t
                self.steps_taken += 1
                logger.debug("step %d: t = %g, total = %g", self.steps_taken, t, x.total())
                t += self.dt
        except StabilityViolationError:
            logger.debug("stability violated at t = %g after %d steps", t, self.steps_taken)
            raise
        finally:
            self.state = LoopState.TERMINATED

        logger.info("integrated %d steps (dt = %g s, t = %g s)", self.steps_taken, self.dt, self.time)
        return x
