'''
Author: leviathan 670916484@qq.com
Date: 2025-11-16 16:36:29
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-03 19:48:02
FilePath: /gde/src/gde/backend/base.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/backend/base.py
from enum import Enum
from typing import Callable, Protocol, TypeAlias

import numpy as np

from ..grid import Grid1D

# (grid, x_old, D, dt) -> x_new
StepFn: TypeAlias = Callable[[Grid1D, np.ndarray, np.ndarray, float], np.ndarray]


class BackendKind(Enum):
    NUMPY = "numpy"
    PYTHON = "python"


class BackendKernel(Protocol):
    """
    后端产出的 kernel 统一接口。
    step 不做稳定性检查，调用方（TimeStepper）负责先 check。
    """
    def make_step_fn(self) -> StepFn:
        ...


def apply_closed_boundaries(x_new: np.ndarray) -> np.ndarray:
    """closed-system（零通量）边界：两端直接复制相邻内点."""
    x_new[0] = x_new[1]
    x_new[-1] = x_new[-2]
    return x_new
