"""Shared type aliases for matrix conversion modules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import numpy as np
import numpy.typing as npt

type Row = list[float]
type RowStream = Iterator[Row]
type RowSource = Iterable[Row]
type Matrix = npt.NDArray[np.float64]
type PathLike = str | Path
