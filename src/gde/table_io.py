'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 11:30:05
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-04 21:10:44
FilePath: /gde/src/gde/table_io.py
Description: 两列数据表 (position, value) 的读写

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
# gde/table_io.py
import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np

from .errors import InputFileError, InvalidInputError, OutputFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_table_xy(path: PathLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    读一个空白分隔的两列表格，返回 (x, y) 两个一维数组。
    文件不存在 / 读不了 / 不是两列数字，一律 InputFileError。
    """
    path = Path(path)
    try:
        table = np.loadtxt(path, dtype=float, ndmin=2)
    except OSError as exc:
        raise InputFileError(f"cannot read table {str(path)!r}: {exc}") from exc
    except ValueError as exc:
        raise InputFileError(f"malformed table {str(path)!r}: {exc}") from exc

    if table.shape[0] == 0:
        raise InputFileError(f"table {str(path)!r} is empty")
    if table.shape[1] != 2:
        raise InputFileError(
            f"table {str(path)!r} must have exactly 2 columns, found {table.shape[1]}"
        )

    logger.info("read %d rows from %s", table.shape[0], path)
    return table[:, 0].copy(), table[:, 1].copy()


def write_table_xy(path: PathLike, x: np.ndarray, y: np.ndarray) -> None:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise InvalidInputError(f"column length mismatch: {x.shape} != {y.shape}")

    path = Path(path)
    try:
        np.savetxt(path, np.column_stack((x, y)), fmt="%.17e", delimiter="\t")
    except OSError as exc:
        raise OutputFileError(f"cannot write table {str(path)!r}: {exc}") from exc
    logger.info("wrote %d rows to %s", x.shape[0], path)
