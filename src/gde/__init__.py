'''
Author: leviathan 670916484@qq.com
Date: 2025-11-14 17:06:27
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-05 10:20:39
FilePath: /gde/src/gde/__init__.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# src/gde/__init__.py

from .grid import Grid1D
from .field import Field1D
from .errors import (
    GdeError,
    InvalidInputError,
    InputFileError,
    OutputFileError,
    ConfigurationError,
    StabilityViolationError,
)

# 扩散系数模型
from .coefficient import (
    CoefficientMode,
    DiffusionCoefficientModel,
    ConstantCoefficient,
    FileCoefficient,
    ConcentrationDependentCoefficient,
    DepthDependentCoefficient,
    TimeDependentCoefficient,
    hold_coefficient,
    build_model,
)

# 稳定性 + 时间推进
from .stability import check_stability, max_stable_dt
from .backend.base import BackendKind
from .timestepping import LoopState, TimeStepper

# 配置 / IO
from .config import RunConfig
from .table_io import read_table_xy, write_table_xy


__all__ = [
    # 网格 / 场
    "Grid1D",
    "Field1D",

    # 错误
    "GdeError",
    "InvalidInputError",
    "InputFileError",
    "OutputFileError",
    "ConfigurationError",
    "StabilityViolationError",

    # 系数模型
    "CoefficientMode",
    "DiffusionCoefficientModel",
    "ConstantCoefficient",
    "FileCoefficient",
    "ConcentrationDependentCoefficient",
    "DepthDependentCoefficient",
    "TimeDependentCoefficient",
    "hold_coefficient",
    "build_model",

    # 时间推进
    "check_stability",
    "max_stable_dt",
    "BackendKind",
    "LoopState",
    "TimeStepper",

    # 配置 / IO
    "RunConfig",
    "read_table_xy",
    "write_table_xy",
]
