"""Tests for command serialization.

Covers attribute commands, data row formatting for both wire modes, column
zipping with padding, and the full plot sequence.
"""

import numpy as np
import pytest

from pyxmgr.commands import (
    emit_configure_sequence,
    emit_option_commands,
    emit_plot_sequence,
    format_data_row,
    graph_type_command,
    prefix_command,
    rows_from_columns,
    title_command,
    viewport_command,
    world_command,
)
from pyxmgr.errors import UnknownValue, UnsupportedInputType
from pyxmgr.models import (
    RECORD_SEPARATOR,
    AddressingContext,
    DataLine,
    MergeMode,
    OptionKey,
    WireMode,
)
from pyxmgr.options import merge

DEFAULT_ATTRIBUTE_LINES = [
    "s0 LINESTYLE 1",
    "s0 COLOR 1",
    "s0 LINEWIDTH 1",
    "s0 SYMBOL 2",
    "s0 FILL 0",
    "s0 SYMBOL SIZE 1",
    "s0 SYMBOL COLOR 2",
    "s0 SYMBOL FILL 1",
    "autoscale",
]


class TestEmitOptionCommands:
    """Tests for emit_option_commands()."""

    def test_single_option(self):
        ctx = AddressingContext(set=0)
        assert emit_option_commands({OptionKey.LINESTYLE: 3}, ctx) == ["s0 LINESTYLE 3"]

    def test_uses_current_set(self):
        ctx = AddressingContext(set=4, graph=2)
        lines = emit_option_commands({OptionKey.SYMCOLOUR: 3, OptionKey.SYMSIZE: 0.5}, ctx)
        assert lines == ["s4 SYMBOL SIZE 0.5", "s4 SYMBOL COLOR 3"]

    def test_defaults(self):
        assert emit_option_commands(merge(), AddressingContext()) == DEFAULT_ATTRIBUTE_LINES

    def test_autoscale_false_emits_nothing(self):
        assert emit_option_commands({OptionKey.AUTOSCALE: False}, AddressingContext()) == []

    def test_autoscale_true_emits_command_last(self):
        merged = {OptionKey.AUTOSCALE: True, OptionKey.FILL: 1}
        assert emit_option_commands(merged, AddressingContext()) == ["s0 FILL 1", "autoscale"]

    def test_settype_not_emitted(self):
        assert emit_option_commands({OptionKey.SETTYPE: "xydy"}, AddressingContext()) == []

    def test_order_independent_of_input_order(self):
        ctx = AddressingContext()
        forward = {OptionKey.LINESTYLE: 2, OptionKey.SYMFILL: 0}
        backward = {OptionKey.SYMFILL: 0, OptionKey.LINESTYLE: 2}
        assert emit_option_commands(forward, ctx) == emit_option_commands(backward, ctx)


class TestFormatDataRow:
    """Tests for format_data_row()."""

    def test_addressable_point(self):
        ctx = AddressingContext(set=0)
        assert format_data_row([1, 4], ctx, WireMode.ADDRESSABLE) == "s0 POINT 1,4"

    def test_addressable_drops_extra_components(self):
        ctx = AddressingContext(set=0)
        assert format_data_row([1, 4, 9], ctx, WireMode.ADDRESSABLE) == "s0 POINT 1,4"

    def test_addressable_pads_short_row(self):
        ctx = AddressingContext(set=2)
        assert format_data_row([7], ctx, WireMode.ADDRESSABLE) == "s2 POINT 7,0"

    def test_streaming_joins_all_components(self):
        ctx = AddressingContext(set=0)
        assert format_data_row([1, 4, 9], ctx, WireMode.STREAMING) == "1 4 9"

    def test_result_is_data_line(self):
        line = format_data_row([1, 2], AddressingContext(), WireMode.STREAMING)
        assert isinstance(line, DataLine)

    def test_numpy_scalars_render_plainly(self):
        row = (np.int64(3), np.float64(2.5), np.bool_(True))
        assert format_data_row(row, AddressingContext(), WireMode.STREAMING) == "3 2.5 1"


class TestRowsFromColumns:
    """Tests for rows_from_columns()."""

    def test_single_column_gets_index(self):
        rows = rows_from_columns([1, 4, 2])
        assert rows == [(0, 1), (1, 4), (2, 2)]

    def test_two_columns(self):
        assert rows_from_columns([0, 1], [5, 6]) == [(0, 5), (1, 6)]

    def test_ragged_columns_pad_with_zero(self):
        rows = rows_from_columns([1, 2], [3, 4, 5])
        assert len(rows) == 3
        assert rows[2] == (0, 5)

    def test_ragged_numpy_columns_pad_with_zero(self):
        rows = rows_from_columns(np.array([1.5, 2.5, 3.5]), np.array([3.0]))
        assert rows == [(1.5, 3.0), (2.5, 0), (3.5, 0)]

    def test_multidimensional_array_is_flattened(self):
        rows = rows_from_columns(np.array([[1, 2], [3, 4]]))
        assert rows == [(0, 1), (1, 2), (2, 3), (3, 4)]

    def test_empty_column(self):
        assert rows_from_columns([]) == []

    def test_no_columns(self):
        with pytest.raises(UnsupportedInputType):
            rows_from_columns()

    @pytest.mark.parametrize("bad", [5, "12345", [1, "a"], [[1, 2], [3]], {"a": 1}])
    def test_unsupported_input(self, bad):
        with pytest.raises(UnsupportedInputType):
            rows_from_columns(bad)

    def test_bad_second_column(self):
        with pytest.raises(UnsupportedInputType):
            rows_from_columns([1, 2], None)


class TestEmitPlotSequence:
    """Tests for emit_plot_sequence()."""

    def test_addressable_defaults(self):
        """Plotting one column with default options on set 0 of graph 0."""
        rows = rows_from_columns([1, 4, 2, 6, 5])
        lines = emit_plot_sequence(rows, merge(), AddressingContext(), WireMode.ADDRESSABLE)
        assert lines == [
            "WITH g0",
            "KILL s0",
            "TARGET s0",
            "TYPE xy",
            "s0 POINT 0,1",
            "s0 POINT 1,4",
            "s0 POINT 2,2",
            "s0 POINT 3,6",
            "s0 POINT 4,5",
            *DEFAULT_ATTRIBUTE_LINES,
            "redraw",
        ]

    def test_streaming_closes_set_once(self):
        rows = rows_from_columns([1, 2], [3, 4], [5, 6])
        merged = merge({"SETTYPE": "xydy", "AUTOSCALE": 0})
        ctx = AddressingContext(set=1, graph=2)
        lines = emit_plot_sequence(rows, merged, ctx, WireMode.STREAMING)
        assert lines[:6] == ["WITH g2", "KILL s1", "TARGET s1", "TYPE xydy", "1 3 5", "2 4 6"]
        assert lines[6] == "&"
        assert isinstance(lines[6], DataLine)
        assert lines.count(RECORD_SEPARATOR) == 1
        assert "autoscale" not in lines
        assert lines[-1] == "redraw"

    def test_empty_dataset_still_closed_when_streaming(self):
        lines = emit_plot_sequence([], merge(), AddressingContext(), WireMode.STREAMING)
        assert lines[4] == "&"

    def test_restricted_options(self):
        merged = merge({"LINESTYLE": "dotted"}, MergeMode.RESTRICTED)
        lines = emit_plot_sequence([(0, 1)], merged, AddressingContext(), WireMode.ADDRESSABLE)
        assert lines == [
            "WITH g0",
            "KILL s0",
            "TARGET s0",
            "TYPE xy",
            "s0 POINT 0,1",
            "s0 LINESTYLE 2",
            "redraw",
        ]


class TestSingleCommands:
    """Tests for the one-line command builders."""

    def test_configure_sequence(self):
        merged = merge({"symcol": "green"}, MergeMode.RESTRICTED)
        lines = emit_configure_sequence(merged, AddressingContext(set=1, graph=0))
        assert lines == ["WITH g0", "s1 SYMBOL COLOR 3", "redraw"]

    def test_world_and_viewport_order(self):
        assert world_command(0, 10, -1, 1) == "WORLD 0, -1, 10, 1"
        assert viewport_command(0.15, 0.85, 0.1, 0.9) == "VIEW 0.15, 0.1, 0.85, 0.9"

    def test_graph_type(self):
        assert graph_type_command(1, "logxy") == "g1 TYPE LOGXY"
        with pytest.raises(UnknownValue):
            graph_type_command(0, "PIE")

    def test_title(self):
        assert title_command("Perl->XMGR") == 'TITLE "Perl->XMGR"'

    def test_prefix_skips_data_lines(self):
        assert prefix_command("redraw", "@") == "@redraw"
        assert prefix_command(DataLine("1 2"), "@") == "1 2"
        assert prefix_command("redraw", None) == "redraw"
