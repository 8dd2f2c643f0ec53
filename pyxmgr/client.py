from __future__ import annotations

import logging
import numbers
from typing import Any, Optional

from . import config
from .commands import (
    autoscale_command,
    autoscale_on_command,
    emit_configure_sequence,
    emit_plot_sequence,
    graph_type_command,
    kill_set_command,
    redraw_command,
    rows_from_columns,
    select_graph_command,
    title_command,
    viewport_command,
    world_command,
)
from .errors import TransportError
from .models import AddressingContext, MergeMode
from .options import merge
from .transport import Transport, launch

logger = logging.getLogger(__name__)


def _check_index(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {value!r}")
    return int(value)


class XMGR:
    """
    Drive an XMGR process: plot datasets and style them.

    Data goes to the current set of the current graph (both 0 to start
    with; change them with :meth:`set` and :meth:`graph`). Drawing options
    are keyword arguments, case-insensitive and minimum match::

        with XMGR() as xm:
            xm.plot([1, 4, 2, 6, 5], SYMBOL="plus", LINECOL="red")
            xm.configure(symcol="green")

    Without a ``transport`` a new XMGR process is launched, on a named pipe
    or an anonymous one as :data:`pyxmgr.config.NAMED_PIPE` says. The same
    setting picks the wire format in :meth:`plot`, so change it before
    creating the client.
    With ``debug=True`` every line sent is echoed to stdout.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        debug: bool = False,
        title: Optional[str] = config.DEFAULT_TITLE,
    ):
        self.debug = bool(debug)
        self._ctx = AddressingContext()
        owned = transport is None
        self.transport: Transport = launch() if owned else transport
        self.attached = True

        if title is not None:
            try:
                self.title(title)
            except TransportError:
                # Only a transport launched here is ours to shut down.
                if owned:
                    self.transport.close()
                self.attached = False
                raise

    def __enter__(self) -> "XMGR":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------- addressing ----------
    def set(self, index: Optional[int] = None) -> int:
        """Return the current set, first selecting ``index`` if given."""
        if index is not None:
            self._ctx.set = _check_index(index, "Set")
        return self._ctx.set

    def graph(self, index: Optional[int] = None) -> int:
        """Return the current graph, first selecting ``index`` if given."""
        if index is not None:
            self._ctx.graph = _check_index(index, "Graph")
        return self._ctx.graph

    @property
    def context(self) -> AddressingContext:
        return self._ctx

    # ---------- command bus ----------
    def _send(self, *lines: str) -> None:
        if not self.attached:
            raise TransportError("XMGR is detached; no more commands can be sent")
        for line in lines:
            if self.debug:
                print(f"XMGR: {line}")
            self.transport.send(line)

    def prt(self, *commands: str) -> None:
        """Send arbitrary XMGR commands, one per argument."""
        self._send(*(str(c) for c in commands))

    # ---------- plotting ----------
    def plot(self, *columns: Any, **options: Any) -> None:
        """Plot data as the current set on the current graph.

        Each positional argument is one column (list, tuple or numpy array;
        arrays are flattened). A single column is plotted against its index.
        How columns are interpreted depends on ``SETTYPE`` (e.g. three
        columns as XYDY or XYZ); the count is not checked against it. On a
        named pipe only the first two columns reach XMGR.

        Raises:
            OptionError: for an unknown option or value.
            UnsupportedInputType: for a column that isn't numeric data.
        """
        merged = merge(options)
        rows = rows_from_columns(*columns)
        self._send(*emit_plot_sequence(rows, merged, self._ctx, config.wire_mode()))

    def configure(self, **options: Any) -> None:
        """Restyle the current set; only the options given are changed.

        >>> xm.configure(SYMBOL=1, LINECOLOUR="red")
        """
        merged = merge(options, MergeMode.RESTRICTED)
        self._send(*emit_configure_sequence(merged, self._ctx))

    def killset(self, set_index: Optional[int] = None) -> None:
        """Kill a set (default: the current one)."""
        target = self._ctx.set if set_index is None else _check_index(set_index, "Set")
        self._send(kill_set_command(target))

    def select_graph(self) -> None:
        self._send(select_graph_command(self._ctx.graph))

    def autoscale(self) -> None:
        self._send(autoscale_command())

    def autoscale_on(self, set_index: Optional[int] = None) -> None:
        """Autoscale on a set (default: the current one)."""
        target = self._ctx.set if set_index is None else _check_index(set_index, "Set")
        self._send(autoscale_on_command(target))

    def world(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        """Set the world coordinates of the current graph."""
        self._send(world_command(xmin, xmax, ymin, ymax))

    def viewport(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        """Set where the current graph is drawn on the page."""
        self._send(viewport_command(xmin, xmax, ymin, ymax))

    def graphtype(self, graph_type: str) -> None:
        """Set the type of the current graph: XY, BAR, HBAR, STACKEDBAR,
        STACKEDHBAR, LOGX, LOGY, LOGXY, POLAR or SMITH."""
        self._send(graph_type_command(self._ctx.graph, graph_type))

    def title(self, text: str) -> None:
        self._send(title_command(text))

    def redraw(self) -> None:
        self._send(redraw_command())

    # ---------- lifecycle ----------
    def detach(self) -> None:
        """Release XMGR without asking it to exit; it stays open for the user.

        Nothing more can be sent through this object afterwards.
        """
        if self.attached:
            self.transport.detach()
            logger.info("Detached from XMGR")
        self.attached = False

    def close(self) -> None:
        """Ask XMGR to exit and release the pipe."""
        if self.attached:
            self.transport.close()
            logger.info("Closed XMGR")
        self.attached = False
