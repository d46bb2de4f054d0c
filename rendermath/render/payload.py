# rendermath/render/payload.py
"""
CPU-side staging of kernel values for GPU upload.

Payloads contain only float32 data, no GL objects, so they can be built
on any thread and handed to whoever owns the GL context.
"""

from __future__ import annotations
from typing import Iterable, Sequence, Union

import numpy as np

from ..core.color import Srgba
from ..core.math3d import Quaternion, _PointOps, _SquareMatrix, _VectorOps

Stageable = Union[_SquareMatrix, _VectorOps, _PointOps, Quaternion, Srgba, Sequence[float]]

FLOAT32_SIZE = 4


def _flat(value: Stageable) -> Sequence[float]:
    if isinstance(value, _SquareMatrix):
        return value.data()
    if isinstance(value, (_VectorOps, _PointOps, Quaternion, Srgba)):
        return value.to_tuple()
    return value


def as_float32(value: Stageable) -> np.ndarray:
    """Flat contiguous float32 array; matrices come out column-major."""
    return np.ascontiguousarray(np.asarray(_flat(value), dtype=np.float32).ravel())


def stack_float32(values: Iterable[Stageable]) -> np.ndarray:
    """One row per value, e.g. per-instance matrices. All values must be the same size."""
    rows = [as_float32(v) for v in values]
    if not rows:
        return np.zeros((0, 0), dtype=np.float32)
    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise ValueError(f"cannot stack values of different sizes: {sorted(widths)}")
    return np.vstack(rows)


def to_bytes(value: Stageable) -> bytes:
    return as_float32(value).tobytes()


def estimate_byte_size(component_count: int, element_size: int, count: int) -> int:
    """component_count * element_size * count, e.g. (3, 4, n) for n float3 vertices."""
    for name, v in (('component_count', component_count),
                    ('element_size', element_size),
                    ('count', count)):
        if not isinstance(v, (int, np.integer)) or v < 0:
            raise ValueError(f"{name} must be a non-negative integer, got {v!r}")
    return int(component_count) * int(element_size) * int(count)
