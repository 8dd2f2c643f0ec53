from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union

Number = Union[int, float]
DatasetRow = Tuple[Number, ...]


class OptionKey(Enum):
    """Drawing attributes understood by :class:`pyxmgr.XMGR`.

    Declaration order is the order attribute commands are sent in.
    """

    LINESTYLE = "LINESTYLE"
    LINECOLOUR = "LINECOLOUR"
    LINEWIDTH = "LINEWIDTH"
    SYMBOL = "SYMBOL"
    FILL = "FILL"
    SYMSIZE = "SYMSIZE"
    SYMCOLOUR = "SYMCOLOUR"
    SYMFILL = "SYMFILL"
    AUTOSCALE = "AUTOSCALE"
    SETTYPE = "SETTYPE"

    def __str__(self) -> str:
        return self.value


class WireMode(Enum):
    """How point data travels to XMGR.

    ADDRESSABLE: named pipe; every point is a ``POINT`` command (XY only).
    STREAMING: anonymous pipe; raw rows of any width closed by ``&``.
    """

    ADDRESSABLE = "addressable"
    STREAMING = "streaming"


class MergeMode(Enum):
    """FULL overlays overrides on the defaults; RESTRICTED keeps only overrides."""

    FULL = "full"
    RESTRICTED = "restricted"


class DataLine(str):
    """A point-data line (or the ``&`` set terminator), as opposed to a command.

    Anonymous pipes need commands prefixed with ``@`` but data sent bare, so
    transports check for this type.
    """

    __slots__ = ()


RECORD_SEPARATOR = DataLine("&")


@dataclass
class AddressingContext:
    """Current set and graph of one XMGR client."""

    set: int = 0
    graph: int = 0


SYNONYMS: Mapping[str, OptionKey] = MappingProxyType(
    {
        "LINECOLOR": OptionKey.LINECOLOUR,
        "SYMCOLOR": OptionKey.SYMCOLOUR,
    }
)

COLOURS: Mapping[str, int] = MappingProxyType(
    {
        "white": 0,
        "black": 1,
        "red": 2,
        "green": 3,
        "blue": 4,
        "yellow": 5,
        "brown": 6,
        "gray": 7,
        "violet": 8,
        "cyan": 9,
        "magenta": 10,
        "orange": 11,
        "indigo": 12,
        "maroon": 13,
        "turqse": 14,
        "green4": 15,
    }
)

LINESTYLES: Mapping[str, int] = MappingProxyType(
    {
        "none": 0,
        "solid": 1,
        "dotted": 2,
        "dashed": 3,
        "ldash": 4,
        "dotdash": 5,
    }
)

SYMBOLS: Mapping[str, int] = MappingProxyType(
    {
        "none": 0,
        "dot": 1,
        "circle": 2,
        "square": 3,
        "diamond": 4,
        "triangleup": 5,
        "triangleleft": 6,
        "triangledown": 7,
        "triangleright": 8,
        "plus": 9,
        "x": 10,
        "star": 11,
    }
)

FILL_MODES: Mapping[str, int] = MappingProxyType(
    {
        "none": 0,
        "filled": 1,
        "opaque": 2,
    }
)

# Symbolic name -> integer code, per option. Options missing here are either
# passed through (LINEWIDTH, SYMSIZE) or handled specially (AUTOSCALE, SETTYPE).
TRANSLATION: Mapping[OptionKey, Mapping[str, int]] = MappingProxyType(
    {
        OptionKey.LINESTYLE: LINESTYLES,
        OptionKey.LINECOLOUR: COLOURS,
        OptionKey.SYMCOLOUR: COLOURS,
        OptionKey.SYMBOL: SYMBOLS,
        OptionKey.FILL: FILL_MODES,
        OptionKey.SYMFILL: FILL_MODES,
    }
)

# Integer codes accepted as-is. XMGR has 47 symbol codes, only some are named.
VALID_CODES: Mapping[OptionKey, range] = MappingProxyType(
    {
        OptionKey.LINESTYLE: range(len(LINESTYLES)),
        OptionKey.LINECOLOUR: range(len(COLOURS)),
        OptionKey.SYMCOLOUR: range(len(COLOURS)),
        OptionKey.SYMBOL: range(47),
        OptionKey.FILL: range(len(FILL_MODES)),
        OptionKey.SYMFILL: range(len(FILL_MODES)),
    }
)

SET_TYPES: Tuple[str, ...] = (
    "xy",
    "xydx",
    "xydy",
    "xydxdx",
    "xydydy",
    "xydxdy",
    "xyz",
    "xyrt",
)

GRAPH_TYPES: Tuple[str, ...] = (
    "XY",
    "BAR",
    "HBAR",
    "STACKEDBAR",
    "STACKEDHBAR",
    "LOGX",
    "LOGY",
    "LOGXY",
    "POLAR",
    "SMITH",
)

# Already in canonical (translated) form.
DEFAULTS: Mapping[OptionKey, Any] = MappingProxyType(
    {
        OptionKey.LINESTYLE: 1,  # solid
        OptionKey.LINECOLOUR: 1,  # black
        OptionKey.LINEWIDTH: 1,
        OptionKey.SYMBOL: 2,  # circle
        OptionKey.FILL: 0,
        OptionKey.SYMSIZE: 1,
        OptionKey.SYMCOLOUR: 2,  # red
        OptionKey.SYMFILL: 1,  # filled
        OptionKey.AUTOSCALE: True,
        OptionKey.SETTYPE: "xy",
    }
)
