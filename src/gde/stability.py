'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 10:40:18
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-03 22:15:09
FilePath: /gde/src/gde/stability.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/stability.py
import math

from .errors import StabilityViolationError


def max_stable_dt(dz: float, d_max: float) -> float:
    """显式 FTCS 的最大时间步 dz^2 / (2 * D_max)；没有扩散时不受限."""
    if d_max <= 0.0:
        return math.inf
    return dz * dz / (2.0 * d_max)


def check_stability(dt: float, dz: float, d_max: float) -> None:
    """每一步之前调用；超出上限直接抛 StabilityViolationError（不重试）。"""
    dt_max = max_stable_dt(dz, d_max)
    if dt > dt_max:
        raise StabilityViolationError(dt, dt_max)
