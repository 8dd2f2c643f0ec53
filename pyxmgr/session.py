"""Function interface on top of one shared :class:`~pyxmgr.client.XMGR`.

The session is the only process-wide client. It is created by :func:`init`,
either explicitly or on the first call to any function here, and can be
replaced by calling :func:`init` again. Creating an ``XMGR`` yourself never
touches the session.

    from pyxmgr import xmgr, xmgrset

    xmgr([1, 4, 2, 6, 5], LINESTYLE="dotted")
    xmgrset(1)
    xmgr([0, 1, 2], [3, 1, 4], SYMBOL="plus")
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .client import XMGR

logger = logging.getLogger(__name__)

_current: Optional[XMGR] = None


def init(**kwargs: Any) -> XMGR:
    """Start a new session client, closing the previous one.

    Keyword arguments are passed to :class:`XMGR`.
    """
    global _current
    reset()
    _current = XMGR(**kwargs)
    logger.debug("Session started")
    return _current


def current() -> XMGR:
    """The session client, started with default settings if there is none."""
    if _current is None:
        return init()
    return _current


def reset() -> None:
    """Close and forget the session client, if any."""
    global _current
    previous, _current = _current, None
    if previous is not None:
        previous.close()


def xmgr(*columns: Any, **options: Any) -> None:
    """Plot on the session client. See :meth:`XMGR.plot`."""
    current().plot(*columns, **options)


def xmgrset(index: int) -> int:
    """Select the current set (0, 1, ...) of the session client."""
    return current().set(index)


def xmgrprint(command: str) -> None:
    """Send an arbitrary command to the session client."""
    current().prt(command)


def xmgrdetach() -> None:
    """Hand the session's XMGR over to the user and end the session."""
    global _current
    client, _current = current(), None
    client.detach()
