'''
Author: leviathan 670916484@qq.com
Date: 2025-11-16 16:36:36
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-03 19:52:44
FilePath: /gde/src/gde/backend/python_backend.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/backend/python_backend.py
from dataclasses import dataclass

import numpy as np

from ..grid import Grid1D
from .base import StepFn, apply_closed_boundaries


@dataclass
class PythonStencilKernel:
    """逐点循环的参考实现，慢，但和公式一行对一行."""

    def make_step_fn(self) -> StepFn:
        def step(grid: Grid1D, x_old: np.ndarray, D: np.ndarray, dt: float) -> np.ndarray:
            dz = grid.dz
            n = x_old.shape[0]
            x_new = np.empty(n, dtype=float)

            for i in range(1, n - 1):
                # 第一项来自 D 的空间变化 (dD/dz * dx/dz)，第二项是普通的拉普拉斯项
                gradient_term = (D[i + 1] - D[i - 1]) * (x_old[i + 1] - x_old[i - 1]) / (2.0 * dz) ** 2
                laplacian_term = D[i] * (x_old[i + 1] - 2.0 * x_old[i] + x_old[i - 1]) / dz ** 2
                x_new[i] = dt * (gradient_term + laplacian_term) + x_old[i]

            return apply_closed_boundaries(x_new)

        return step
