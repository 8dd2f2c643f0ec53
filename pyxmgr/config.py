"""Process-wide settings.

Values are seeded from ``PYXMGR_*`` environment variables at import time and
may be reassigned afterwards, e.g. ``pyxmgr.config.NAMED_PIPE = False``.
``NAMED_PIPE`` is read every time a command sequence is built.
"""

from __future__ import annotations

import os

from .models import WireMode

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}")


# Named pipes need mkfifo; without it fall back to an anonymous pipe.
NAMED_PIPE: bool = _env_flag("PYXMGR_NAMED_PIPE", hasattr(os, "mkfifo"))

XMGR_EXECUTABLE: str = os.environ.get("PYXMGR_EXECUTABLE", "xmgr")

# Seconds to wait after spawning XMGR before checking it is still alive.
STARTUP_PAUSE: float = float(os.environ.get("PYXMGR_STARTUP_PAUSE", "1"))

DEFAULT_TITLE = "Python->XMGR"


def wire_mode() -> WireMode:
    """Return the wire mode selected by :data:`NAMED_PIPE` right now."""
    return WireMode.ADDRESSABLE if NAMED_PIPE else WireMode.STREAMING
