"""
``anyfmt.registry``: Enabled formats
=====================================

A :class:`Registry` is the set of codecs a process can use. It replaces build
time feature selection: the default registry is built once, at import time,
from the built-in codecs whose libraries are installed (see the ``yaml``,
``toml`` and ``xml`` extras). It is never mutated afterwards.

"""

from __future__ import annotations

import logging
import types
from typing import Iterable, Mapping

from anyfmt import codec as _codec
from anyfmt import errors
from anyfmt.format import Format

__all__ = (
    "Registry",
    "default_registry",
    "supported_formats",
    "supported_extensions",
    "is_supported",
)

logger = logging.getLogger(__name__)

# Which pip extra enables a given format.
EXTRAS: Mapping[Format, str] = types.MappingProxyType(
    {Format.TOML: "toml", Format.YAML: "yaml", Format.XML: "xml"}
)


class Registry:
    """An immutable collection of codecs, at most one per format.

    Codecs are kept in :class:`~anyfmt.Format` declaration order, whatever
    order they were passed in. That order is the order in which formats are
    tried when probing.

    Args:
      codecs: The codecs to enable.

    Raises:
      ValueError: if two codecs implement the same format.
    """

    __slots__ = ("_codecs",)

    _codecs: Mapping[Format, _codec.Codec]

    def __init__(self, codecs: Iterable[_codec.Codec] = ()) -> None:
        table: dict[Format, _codec.Codec] = {}
        for c in codecs:
            if c.format in table:
                raise ValueError(
                    f"Two codecs for {c.format}: {table[c.format]!r} and {c!r}"
                )
            table[c.format] = c
        self._codecs = types.MappingProxyType(
            {fmt: table[fmt] for fmt in Format if fmt in table}
        )

    @classmethod
    def builtin(cls) -> Registry:
        """A registry with every built-in codec whose library is installed."""
        codecs = []
        for factory in _codec.BUILTIN:
            try:
                codecs.append(factory())
            except errors.CodecUnavailable as e:
                logger.debug("%s disabled: %s", e.format.title, e)
        return cls(codecs)

    def only(self, *formats: Format | str) -> Registry:
        """A new registry restricted to *formats*.

        Formats can be given by name (see :meth:`~anyfmt.Format.parse`).
        Formats that aren't enabled in this registry are ignored.
        """
        wanted = {
            fmt if isinstance(fmt, Format) else Format.parse(fmt)
            for fmt in formats
        }
        return Registry(c for fmt, c in self._codecs.items() if fmt in wanted)

    def formats(self) -> list[Format]:
        """The enabled formats, in priority order."""
        return list(self._codecs)

    def extensions(self) -> list[str]:
        """File extensions of the enabled formats.

        Ordered by format priority, then in the order of
        :data:`~anyfmt.format.EXTENSIONS`.
        """
        return [ext for fmt in self._codecs for ext in fmt.extensions]

    def is_supported(self, format: Format) -> bool:
        return format in self._codecs

    def codec(self, format: Format) -> _codec.Codec:
        """The codec for *format*.

        Raises:
          UnsupportedFormat: if *format* isn't enabled.
        """
        res = self._codecs.get(format)
        if res is None:
            extra = EXTRAS.get(format)
            hint = None
            # Only point at the extra if installing it would help.
            if extra is not None and not _DEFAULT.is_supported(format):
                hint = f"pip install anyfmt[{extra}]"
            raise errors.UnsupportedFormat(format, hint)
        return res

    def __repr__(self) -> str:
        formats = ", ".join(str(fmt) for fmt in self._codecs)
        return f"Registry({formats})"


_DEFAULT = Registry.builtin()


def default_registry() -> Registry:
    """The registry used when no registry is passed explicitly."""
    return _DEFAULT


def resolve(registry: Registry | None) -> Registry:
    return _DEFAULT if registry is None else registry


def supported_formats(registry: Registry | None = None) -> list[Format]:
    """Return the list of enabled formats, in priority order."""
    return resolve(registry).formats()


def supported_extensions(registry: Registry | None = None) -> list[str]:
    """Return the file extensions of the enabled formats."""
    return resolve(registry).extensions()


def is_supported(format: Format, registry: Registry | None = None) -> bool:
    """Checks whether *format* is enabled."""
    return resolve(registry).is_supported(format)
