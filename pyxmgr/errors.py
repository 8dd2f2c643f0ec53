"""Exception types raised by pyxmgr.

Option and input errors are raised while a command sequence is being built,
before anything reaches XMGR. Transport errors come from delivering lines.
"""

from __future__ import annotations


class XmgrError(Exception):
    """Base class for all pyxmgr errors."""


class OptionError(XmgrError, ValueError):
    """A drawing option could not be resolved or translated."""


class UnknownOption(OptionError):
    """Option name matches no known option, synonym or prefix."""


class AmbiguousOption(OptionError):
    """Option prefix matches more than one option."""


class UnknownValue(OptionError):
    """Value is not valid for the option it was given to."""


class UnsupportedInputType(XmgrError, TypeError):
    """Dataset argument is neither a numeric sequence nor a numeric array."""


class TransportError(XmgrError, OSError):
    """A command line could not be delivered to XMGR."""


class StartupError(XmgrError, RuntimeError):
    """The XMGR process could not be started."""
