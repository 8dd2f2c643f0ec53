"""Drawing option registry: name resolution and value translation.

Option names are case-insensitive and "minimum match": any unambiguous
prefix of an option name (or of one of its synonyms) selects it, so
``LINECOL``, ``linecolor`` and ``LINEC`` all mean ``LINECOLOUR``.

Values given by name are translated to the integer codes XMGR uses::

    >>> translate(OptionKey.SYMBOL, "circle")
    2
    >>> merge({"symcol": "green"}, MergeMode.RESTRICTED)
    {<OptionKey.SYMCOLOUR: 'SYMCOLOUR'>: 3}
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import AmbiguousOption, UnknownOption, UnknownValue
from .models import (
    DEFAULTS,
    SET_TYPES,
    SYNONYMS,
    TRANSLATION,
    VALID_CODES,
    MergeMode,
    OptionKey,
)

MergedOptions = Dict[OptionKey, Any]

# Passed through without any checking.
_RAW_OPTIONS = frozenset({OptionKey.LINEWIDTH, OptionKey.SYMSIZE})

# Strings that switch AUTOSCALE off, like 0 does.
_FALSE_STRINGS = frozenset({"", "0", "none", "false", "no", "off"})


@dataclass(frozen=True)
class OptionRegistry:
    """Immutable option tables plus the lookups built on them."""

    defaults: Mapping[OptionKey, Any] = field(default_factory=lambda: DEFAULTS)
    synonyms: Mapping[str, OptionKey] = field(default_factory=lambda: SYNONYMS)
    translation: Mapping[OptionKey, Mapping[str, int]] = field(
        default_factory=lambda: TRANSLATION
    )
    valid_codes: Mapping[OptionKey, range] = field(
        default_factory=lambda: VALID_CODES
    )

    def resolve(self, key: Any) -> OptionKey:
        """Resolve an option name to its :class:`OptionKey`.

        Exact names and synonyms win; otherwise the name is treated as a
        prefix of every option name and synonym.

        Raises:
            UnknownOption: nothing matches (or ``key`` is not a string).
            AmbiguousOption: the prefix matches more than one option.
        """
        if isinstance(key, OptionKey):
            return key
        if not isinstance(key, str) or not key.strip():
            raise UnknownOption(f"Unknown option: {key!r}")

        name = key.strip().upper()
        if name in OptionKey.__members__:
            return OptionKey[name]
        if name in self.synonyms:
            return self.synonyms[name]

        matches = {opt for opt in OptionKey if opt.value.startswith(name)}
        matches.update(
            opt for alias, opt in self.synonyms.items() if alias.startswith(name)
        )

        if not matches:
            raise UnknownOption(f"Unknown option: {key!r}")
        if len(matches) > 1:
            names = ", ".join(sorted(opt.value for opt in matches))
            raise AmbiguousOption(f"Option {key!r} is ambiguous: matches {names}")
        return matches.pop()

    def translate(self, key: OptionKey, raw: Any) -> Any:
        """Convert ``raw`` to the canonical value XMGR expects for ``key``.

        Raises:
            UnknownValue: ``raw`` is not a known name or valid code for ``key``.
        """
        if key in _RAW_OPTIONS:
            return raw
        if key is OptionKey.AUTOSCALE:
            if isinstance(raw, str):
                return raw.strip().lower() not in _FALSE_STRINGS
            return bool(raw)
        if key is OptionKey.SETTYPE:
            if isinstance(raw, str) and raw.strip().lower() in SET_TYPES:
                return raw.strip().lower()
            raise UnknownValue(
                f"Unknown {key} value {raw!r}; expected one of {', '.join(SET_TYPES)}"
            )

        table = self.translation[key]
        if isinstance(raw, numbers.Integral):
            if int(raw) in self.valid_codes[key]:
                return int(raw)
        elif isinstance(raw, str):
            code = table.get(raw.strip().lower())
            if code is not None:
                return code
        raise UnknownValue(
            f"Unknown {key} value {raw!r}; expected one of {', '.join(table)} "
            f"or a code in {self.valid_codes[key].start}..{self.valid_codes[key].stop - 1}"
        )

    def merge(
        self,
        overrides: Optional[Mapping[Any, Any]] = None,
        mode: MergeMode = MergeMode.FULL,
    ) -> MergedOptions:
        """Resolve and translate ``overrides``.

        In FULL mode the result is the defaults with the overrides applied;
        in RESTRICTED mode it holds only the options named in ``overrides``.
        Either way the result is ordered like :class:`OptionKey`.
        """
        resolved: MergedOptions = {}
        for name, raw in (overrides or {}).items():
            key = self.resolve(name)
            resolved[key] = self.translate(key, raw)

        base = dict(self.defaults) if mode is MergeMode.FULL else {}
        base.update(resolved)
        return {key: base[key] for key in OptionKey if key in base}


REGISTRY = OptionRegistry()


def resolve(key: Any) -> OptionKey:
    return REGISTRY.resolve(key)


def translate(key: OptionKey, raw: Any) -> Any:
    return REGISTRY.translate(key, raw)


def merge(
    overrides: Optional[Mapping[Any, Any]] = None,
    mode: MergeMode = MergeMode.FULL,
) -> MergedOptions:
    return REGISTRY.merge(overrides, mode)
