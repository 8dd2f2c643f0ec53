from .client import XMGR
from .models import (
    AddressingContext,
    DataLine,
    MergeMode,
    OptionKey,
    WireMode,
    COLOURS,
    DEFAULTS,
)
from .options import OptionRegistry, merge, resolve, translate
from .commands import (
    emit_option_commands,
    emit_plot_sequence,
    format_data_row,
    rows_from_columns,
)
from .transport import (
    AnonymousPipeTransport,
    NamedPipeTransport,
    StreamTransport,
    launch,
)
from .errors import (
    XmgrError,
    OptionError,
    UnknownOption,
    AmbiguousOption,
    UnknownValue,
    UnsupportedInputType,
    TransportError,
    StartupError,
)
from .session import xmgr, xmgrset, xmgrprint, xmgrdetach

__version__ = "0.96"

__all__ = [
    "XMGR",
    # Option registry
    "OptionKey",
    "OptionRegistry",
    "MergeMode",
    "COLOURS",
    "DEFAULTS",
    "resolve",
    "translate",
    "merge",
    # Command serialization
    "AddressingContext",
    "DataLine",
    "WireMode",
    "emit_option_commands",
    "emit_plot_sequence",
    "format_data_row",
    "rows_from_columns",
    # Transports
    "StreamTransport",
    "AnonymousPipeTransport",
    "NamedPipeTransport",
    "launch",
    # Errors
    "XmgrError",
    "OptionError",
    "UnknownOption",
    "AmbiguousOption",
    "UnknownValue",
    "UnsupportedInputType",
    "TransportError",
    "StartupError",
    # Function interface
    "xmgr",
    "xmgrset",
    "xmgrprint",
    "xmgrdetach",
]
