"""Serialization of plots and options into XMGR command lines.

Everything here is pure: functions take the addressing context and wire mode
explicitly and return the lines to send, in order. Delivery is the job of a
transport (see :mod:`pyxmgr.transport`).
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from .errors import UnknownValue, UnsupportedInputType
from .models import (
    GRAPH_TYPES,
    RECORD_SEPARATOR,
    AddressingContext,
    DataLine,
    DatasetRow,
    OptionKey,
    WireMode,
)
from .utils import as_column, format_number

# Attribute command per option, minus the leading "s<set> ".
ATTRIBUTE_COMMANDS: Mapping[OptionKey, str] = {
    OptionKey.LINESTYLE: "LINESTYLE",
    OptionKey.LINECOLOUR: "COLOR",
    OptionKey.LINEWIDTH: "LINEWIDTH",
    OptionKey.SYMBOL: "SYMBOL",
    OptionKey.FILL: "FILL",
    OptionKey.SYMSIZE: "SYMBOL SIZE",
    OptionKey.SYMCOLOUR: "SYMBOL COLOR",
    OptionKey.SYMFILL: "SYMBOL FILL",
}


# ---------- single commands ----------
def select_graph_command(graph: int) -> str:
    return f"WITH g{graph}"


def kill_set_command(set_index: int) -> str:
    return f"KILL s{set_index}"


def target_command(set_index: int) -> str:
    return f"TARGET s{set_index}"


def set_type_command(set_type: str) -> str:
    return f"TYPE {set_type}"


def autoscale_command() -> str:
    return "autoscale"


def autoscale_on_command(set_index: int) -> str:
    return f"autoscale on s{set_index}"


def redraw_command() -> str:
    return "redraw"


def exit_command() -> str:
    return "exit"


def title_command(text: str) -> str:
    return f'TITLE "{text}"'


def world_command(xmin: float, xmax: float, ymin: float, ymax: float) -> str:
    """World coordinates of the current graph (note XMGR's x/y/x/y order)."""
    return "WORLD " + ", ".join(format_number(v) for v in (xmin, ymin, xmax, ymax))


def viewport_command(xmin: float, xmax: float, ymin: float, ymax: float) -> str:
    """Where the current graph sits on the page, in viewport coordinates."""
    return "VIEW " + ", ".join(format_number(v) for v in (xmin, ymin, xmax, ymax))


def graph_type_command(graph: int, graph_type: str) -> str:
    """Graph type command; ``graph_type`` is case-insensitive.

    Raises:
        UnknownValue: ``graph_type`` is not one of :data:`GRAPH_TYPES`.
    """
    name = str(graph_type).strip().upper()
    if name not in GRAPH_TYPES:
        raise UnknownValue(
            f"Unknown graph type {graph_type!r}; expected one of {', '.join(GRAPH_TYPES)}"
        )
    return f"g{graph} TYPE {name}"


# ---------- options ----------
def emit_option_commands(
    merged: Mapping[OptionKey, Any], ctx: AddressingContext
) -> List[str]:
    """Attribute commands for the options in ``merged``, for the current set.

    AUTOSCALE adds a trailing ``autoscale`` when true; SETTYPE is ignored here
    (it only matters when a set is created, see :func:`emit_plot_sequence`).
    The graph must already be selected.
    """
    lines: List[str] = []
    for key in OptionKey:
        if key in merged and key in ATTRIBUTE_COMMANDS:
            value = format_number(merged[key])
            lines.append(f"s{ctx.set} {ATTRIBUTE_COMMANDS[key]} {value}")
    if merged.get(OptionKey.AUTOSCALE):
        lines.append(autoscale_command())
    return lines


# ---------- data ----------
def format_data_row(
    row: Sequence[Any], ctx: AddressingContext, wire_mode: WireMode
) -> DataLine:
    """One point of data as a wire line.

    Addressable mode sends ``s<set> POINT x,y``: only the first two
    components are used (missing ones are 0). Streaming mode sends every
    component separated by single spaces.
    """
    if wire_mode is WireMode.ADDRESSABLE:
        x, y = (list(row[:2]) + [0, 0])[:2]
        return DataLine(f"s{ctx.set} POINT {format_number(x)},{format_number(y)}")
    return DataLine(" ".join(format_number(v) for v in row))


def rows_from_columns(*columns: Any) -> List[DatasetRow]:
    """Zip dataset columns into rows.

    A single column is plotted against its index (0, 1, 2, ...). The longest
    column sets the number of rows; shorter columns are padded with 0.

    Raises:
        UnsupportedInputType: no columns, or a column that isn't numeric data.
    """
    if not columns:
        raise UnsupportedInputType("Nothing to plot: no dataset given")

    arrays = [as_column(c) for c in columns]
    npts = max(len(a) for a in arrays)

    rows: List[DatasetRow] = []
    for i in range(npts):
        values = [a[i] if i < len(a) else 0 for a in arrays]
        if len(arrays) == 1:
            values.insert(0, i)
        rows.append(tuple(values))
    return rows


def emit_plot_sequence(
    rows: Sequence[Sequence[Any]],
    merged: Mapping[OptionKey, Any],
    ctx: AddressingContext,
    wire_mode: WireMode,
) -> List[str]:
    """Every line needed to (re)plot the current set.

    Order: select graph, kill the set, target it, set its type, the data
    (closed with ``&`` when streaming), its attributes, redraw.
    """
    set_type = merged.get(OptionKey.SETTYPE, "xy")
    lines: List[str] = [
        select_graph_command(ctx.graph),
        kill_set_command(ctx.set),
        target_command(ctx.set),
        set_type_command(set_type),
    ]
    lines.extend(format_data_row(row, ctx, wire_mode) for row in rows)
    if wire_mode is WireMode.STREAMING:
        lines.append(RECORD_SEPARATOR)
    lines.extend(emit_option_commands(merged, ctx))
    lines.append(redraw_command())
    return lines


def emit_configure_sequence(
    merged: Mapping[OptionKey, Any], ctx: AddressingContext
) -> List[str]:
    """Lines that restyle the current set without touching its data."""
    return [
        select_graph_command(ctx.graph),
        *emit_option_commands(merged, ctx),
        redraw_command(),
    ]


def prefix_command(line: str, prefix: Optional[str]) -> str:
    """Prefix a command (never a :class:`DataLine`) for pipe protocols that need it."""
    if prefix and not isinstance(line, DataLine):
        return prefix + line
    return line
