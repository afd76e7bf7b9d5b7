'''
Author: leviathan 670916484@qq.com
Date: 2025-11-14 17:05:57
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-04 20:41:12
FilePath: /gde/src/gde/grid.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .errors import InvalidInputError

# 相邻间距允许的相对误差（输入文件里的坐标通常是截断过的十进制）
UNIFORMITY_RTOL = 1e-3


@dataclass(frozen=True)
class Grid1D:
    """
    一维均匀网格，坐标由外部输入给出（不是自己 linspace 出来的）。
    z: 网格点坐标 [m]（含两端点），构造后只读
    """
    z: np.ndarray

    def __post_init__(self) -> None:
        z = np.array(self.z, dtype=float)
        if z.ndim != 1:
            raise InvalidInputError(f"Grid1D positions must be 1-D, got shape {z.shape}")
        if z.shape[0] < 3:
            raise InvalidInputError(
                f"Grid1D requires nz >= 3 for FDM stencils, got {z.shape[0]} points"
            )
        if not np.all(np.isfinite(z)):
            raise InvalidInputError("Grid1D positions must be finite")

        dz = z[1] - z[0]
        if dz <= 0.0:
            raise InvalidInputError(f"Grid1D spacing must be positive, got dz = {dz:g}")

        steps = np.diff(z)
        if not np.allclose(steps, dz, rtol=UNIFORMITY_RTOL, atol=0.0):
            worst = int(np.argmax(np.abs(steps - dz)))
            raise InvalidInputError(
                f"Grid1D spacing must be uniform: interval {worst} is {steps[worst]:g}, "
                f"expected {dz:g}"
            )

        z.setflags(write=False)
        # frozen dataclass 里只能这样替换字段
        object.__setattr__(self, "z", z)

    @classmethod
    def from_positions(cls, positions: Union[Sequence[float], np.ndarray]) -> "Grid1D":
        return cls(z=np.asarray(positions, dtype=float))

    @property
    def nz(self) -> int:
        return int(self.z.shape[0])

    @property
    def dz(self) -> float:
        """网格间距，和参考实现一致只取前两个点的差."""
        return float(self.z[1] - self.z[0])

    @property
    def length(self) -> float:
        return float(self.z[-1] - self.z[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid1D):
            return NotImplemented
        return self.z.shape == other.z.shape and bool(np.array_equal(self.z, other.z))

    def __hash__(self) -> int:
        return hash(self.z.tobytes())

    def __repr__(self) -> str:
        return f"Grid1D(nz={self.nz}, dz={self.dz:g})"
