'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 16:18:27
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-05 09:40:51
FilePath: /gde/src/gde/config.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/config.py
import argparse
from dataclasses import dataclass
from pathlib import Path

from .backend.base import BackendKind
from .coefficient import (
    DEFAULT_CONCENTRATION_FACTOR,
    DEFAULT_DEPTH_CENTRE,
    DEFAULT_DEPTH_PEAK,
    DEFAULT_DEPTH_WIDTH,
    DEFAULT_UPDATE_FUNCTION,
    CoefficientMode,
)
from .errors import ConfigurationError

# --coeff 的单位是 Angstrom^2/s，乘上它换成 m^2/s
COEFF_SCALE = 1e-20


@dataclass
class RunConfig:
    dt: float = 0.01          # [s]
    coeff: float = 1.0        # [Angstrom^2/s]
    time: float = 1.0         # [s]
    mode: str = CoefficientMode.CONSTANT.value

    input_file: Path = Path("x.r")
    coefficient_file: Path = Path("D.r")
    output_file: Path = Path("X.r")

    concentration_factor: float = DEFAULT_CONCENTRATION_FACTOR
    depth_peak: float = DEFAULT_DEPTH_PEAK
    depth_centre: float = DEFAULT_DEPTH_CENTRE
    depth_width: float = DEFAULT_DEPTH_WIDTH
    update_function: str = DEFAULT_UPDATE_FUNCTION

    backend: BackendKind = BackendKind.NUMPY

    @property
    def d0(self) -> float:
        """常数扩散系数 [m^2/s]."""
        return self.coeff * COEFF_SCALE

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "RunConfig":
        try:
            backend = BackendKind(ns.backend)
        except ValueError:
            valid = ", ".join(b.value for b in BackendKind)
            raise ConfigurationError(
                f"backend {ns.backend!r} not recognised (expected one of: {valid})"
            ) from None

        return cls(
            dt=ns.dt,
            coeff=ns.coeff,
            time=ns.time,
            mode=ns.mode,
            input_file=Path(ns.input),
            coefficient_file=Path(ns.coefficient_file),
            output_file=Path(ns.output),
            concentration_factor=ns.concentration_factor,
            depth_peak=ns.depth_peak,
            depth_centre=ns.depth_centre,
            depth_width=ns.depth_width,
            update_function=ns.update_function,
            backend=backend,
        )
