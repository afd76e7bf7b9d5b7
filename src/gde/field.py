'''
Author: leviathan 670916484@qq.com
Date: 2025-11-14 17:06:07
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-04 20:52:30
FilePath: /gde/src/gde/field.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
from typing import Optional
import numpy as np

from .errors import InvalidInputError
from .grid import Grid1D


class Field1D:
    """
    在 Grid1D 上的标量场（浓度 / 扩散系数 profile）。
    和网格点一一对应；每一步都换一个新的 Field1D，不做原地修改，
    这样 stencil 读到的永远是上一步的旧值。
    """

    def __init__(self, name: str, grid: Grid1D, values: Optional[np.ndarray] = None) -> None:
        self.name = name
        self.grid = grid
        if values is None:
            data = np.zeros(grid.nz, dtype=float)
        else:
            data = np.array(values, dtype=float)
        if data.shape != (grid.nz,):
            raise InvalidInputError(
                f"field {name!r} has shape {data.shape}, grid expects ({grid.nz},)"
            )
        if not np.all(np.isfinite(data)):
            i = int(np.argmin(np.isfinite(data)))
            raise InvalidInputError(f"field {name!r} must be finite, got {name}[{i}] = {data[i]}")
        data.setflags(write=False)
        self._data = data

    @property
    def values(self) -> np.ndarray:
        return self._data

    def with_values(self, arr: np.ndarray) -> "Field1D":
        """返回同一网格上的新场，旧场不变."""
        return Field1D(self.name, self.grid, arr)

    def total(self) -> float:
        return float(self._data.sum())

    def __repr__(self) -> str:  # 调试方便一点
        return f"Field1D(name={self.name!r}, nz={self.grid.nz})"
