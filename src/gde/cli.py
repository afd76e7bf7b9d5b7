'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 16:45:03
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-05 10:18:26
FilePath: /gde/src/gde/cli.py
Description: Solve the generalised diffusion equation

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/cli.py
import argparse
import logging
from typing import List, Optional

from .backend.base import BackendKind
from .coefficient import CoefficientMode, build_model
from .config import RunConfig
from .errors import GdeError
from .field import Field1D
from .grid import Grid1D
from .table_io import read_table_xy, write_table_xy
from .timestepping import TimeStepper

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        prog="gde",
        description="Solve the generalised diffusion equation dx/dt = d/dz (D dx/dz)",
    )
    parser.add_argument("-d", "--dt", type=float, default=defaults.dt, help="Time-step [s]")
    parser.add_argument(
        "-D", "--coeff", type=float, default=defaults.coeff,
        help="Diffusion coefficient [Angstrom^2/s]",
    )
    parser.add_argument("-t", "--time", type=float, default=defaults.time, help="End time for simulation [s]")
    parser.add_argument(
        "-a", "--mode", default=defaults.mode,
        help="Form of diffusion coefficient: " + ", ".join(m.value for m in CoefficientMode),
    )
    parser.add_argument("--input", default=str(defaults.input_file), help="Initial concentration profile (z, x)")
    parser.add_argument(
        "--coefficient-file", default=str(defaults.coefficient_file),
        help="Diffusion coefficient profile (z, D) for 'file' and 'time' modes",
    )
    parser.add_argument("--output", default=str(defaults.output_file), help="Final concentration profile (z, x)")
    parser.add_argument(
        "--concentration-factor", type=float, default=defaults.concentration_factor,
        help="k in D = k x^2 for 'concentration-dependent' mode [m^2/s]",
    )
    parser.add_argument(
        "--depth-peak", type=float, default=defaults.depth_peak,
        help="Peak of the Gaussian D(z) for 'depth-dependent' mode [m^2/s]",
    )
    parser.add_argument(
        "--depth-centre", type=float, default=defaults.depth_centre,
        help="Centre of the Gaussian D(z) [m]",
    )
    parser.add_argument(
        "--depth-width", type=float, default=defaults.depth_width,
        help="Standard deviation of the Gaussian D(z) [m]",
    )
    parser.add_argument(
        "--update-function", default=defaults.update_function,
        help="'module:attribute' of f(D, x, z, t) used by 'time' mode",
    )
    parser.add_argument(
        "--backend", default=defaults.backend.value,
        help="Stencil backend: " + ", ".join(b.value for b in BackendKind),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every time step")
    return parser


def run(config: RunConfig) -> Field1D:
    """读初值 -> 选模型 -> 积分 -> 写结果。出错时什么都不写。"""
    CoefficientMode.parse(config.mode)

    z, x0 = read_table_xy(config.input_file)
    grid = Grid1D.from_positions(z)
    x = Field1D("x", grid, x0)

    model = build_model(config, grid)
    stepper = TimeStepper(model, dt=config.dt, t_final=config.time, backend=config.backend).build()
    result = stepper.run(x)

    write_table_xy(config.output_file, grid.z, result.values)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(RunConfig.from_namespace(args))
    except GdeError as exc:
        logger.error("%s", exc)
        return 1
    return 0
