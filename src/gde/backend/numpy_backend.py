'''
Author: leviathan 670916484@qq.com
Date: 2025-12-03 19:55:10
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-03 20:21:37
FilePath: /gde/src/gde/backend/numpy_backend.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/backend/numpy_backend.py
from dataclasses import dataclass

import numpy as np

from ..grid import Grid1D
from .base import StepFn, apply_closed_boundaries


@dataclass
class NumpyStencilKernel:
    """
    显式 FTCS，一次性切片算完所有内点：
        x_new[i] = x[i] + dt * ( (D[i+1]-D[i-1]) (x[i+1]-x[i-1]) / (2dz)^2
                               + D[i] (x[i+1] - 2x[i] + x[i-1]) / dz^2 )
    """

    def make_step_fn(self) -> StepFn:
        def step(grid: Grid1D, x_old: np.ndarray, D: np.ndarray, dt: float) -> np.ndarray:
            dz = grid.dz
            x_new = np.empty_like(x_old, dtype=float)

            left, centre, right = x_old[:-2], x_old[1:-1], x_old[2:]
            gradient_term = (D[2:] - D[:-2]) * (right - left) / (2.0 * dz) ** 2
            laplacian_term = D[1:-1] * (right - 2.0 * centre + left) / dz ** 2
            x_new[1:-1] = dt * (gradient_term + laplacian_term) + centre

            return apply_closed_boundaries(x_new)

        return step
