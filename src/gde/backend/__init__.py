'''
Author: leviathan 670916484@qq.com
Date: 2025-11-16 16:36:24
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-03 20:25:13
FilePath: /gde/src/gde/backend/__init__.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# src/gde/backend/__init__.py

from .base import BackendKind, BackendKernel, StepFn, apply_closed_boundaries
from .python_backend import PythonStencilKernel
from .numpy_backend import NumpyStencilKernel

__all__ = [
    "BackendKind",
    "BackendKernel",
    "StepFn",
    "apply_closed_boundaries",
    "PythonStencilKernel",
    "NumpyStencilKernel",
]
