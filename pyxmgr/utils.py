from __future__ import annotations

from typing import Any

import numpy as np

from .errors import UnsupportedInputType

# bool, signed int, unsigned int, float
_NUMERIC_KINDS = "biuf"


def as_column(data: Any) -> np.ndarray:
    """Coerce one dataset argument to a read-only, flattened numeric array.

    Accepts lists, tuples, numpy arrays of any dimensionality (flattened in C
    order) and anything else ``np.asarray`` turns into a numeric array.

    Raises:
        UnsupportedInputType: for scalars, strings, ragged nested sequences
            and non-numeric arrays.
    """
    if isinstance(data, (str, bytes)):
        raise UnsupportedInputType(
            f"Can't plot {type(data).__name__}: expected a numeric sequence or array"
        )
    try:
        arr = np.asarray(data)
    except (TypeError, ValueError) as e:
        raise UnsupportedInputType(
            f"Can't plot {type(data).__name__}: not a regular numeric sequence ({e})"
        ) from e

    if arr.ndim == 0:
        raise UnsupportedInputType(
            f"Can't plot {type(data).__name__}: expected a sequence, got a scalar"
        )
    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise UnsupportedInputType(
            f"Can't plot array of dtype {arr.dtype}: values must be numeric"
        )

    column = arr.reshape(-1).view()
    column.flags.writeable = False
    return column


def format_number(value: Any) -> str:
    """Render a number the way XMGR expects it: plain decimal ``str``."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        value = int(value)
    return str(value)
