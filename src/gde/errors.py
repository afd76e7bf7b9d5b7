'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 10:12:40
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-04 21:03:17
FilePath: /gde/src/gde/errors.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/errors.py


class GdeError(Exception):
    """所有 gde 错误的基类。CLI 只捕获这一类，转成非零退出码。"""


class InvalidInputError(GdeError, ValueError):
    """网格太小 / 间距不均匀、profile 长度与网格不一致、系数非法等。"""


class InputFileError(GdeError):
    """输入表格缺失、读不了、格式不对，或者点数和网格对不上。"""


class ConfigurationError(GdeError, ValueError):
    """未知的 mode / backend、dt <= 0、加载不到 update function。"""


class StabilityViolationError(GdeError):
    """
    显式格式的稳定性条件被破坏：dt > dz^2 / (2 * D_max)。
    致命错误，不重试。
    """

    def __init__(self, dt: float, dt_max: float) -> None:
        self.dt = dt
        self.dt_max = dt_max
        super().__init__(
            f"User-specified time step (dt = {dt:g} s) exceeds stability criterion "
            f"(dt < {dt_max:g} s). You can fix this by choosing a lower value using "
            "the --dt option, or by increasing the spatial-step size in your input data files."
        )


class OutputFileError(GdeError):
    """结果表格写不出去（目录不存在、没有权限等）。"""
