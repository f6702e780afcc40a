"""
``anyfmt.format``: Formats and file extensions
===============================================

The set of formats :mod:`anyfmt` knows about is closed. Whether a format can
actually be used depends on the :class:`~anyfmt.registry.Registry` (see
:func:`Format.is_supported`); recognising a format from a file name does not.

"""

from __future__ import annotations

import enum
import os
from typing import Final

from anyfmt import errors

__all__ = (
    "Format",
    "EXTENSIONS",
    "file_extension",
    "guess_format",
    "guess_format_from_extension",
)


class Format(enum.Enum):
    """Serialisation formats.

    Members are declared in priority order: this is the order in which formats
    are tried when the format of a document has to be guessed.
    """

    #: TOML (Tom's Obvious, Minimal Language)
    TOML = "toml"

    #: JSON (JavaScript Object Notation)
    JSON = "json"

    #: YAML (YAML Ain't Markup Language)
    YAML = "yaml"

    #: RON (Rusty Object Notation). No codec ships with anyfmt.
    RON = "ron"

    #: XML (eXtensible Markup Language)
    XML = "xml"

    #: URL encoded query strings (``application/x-www-form-urlencoded``)
    URL = "url"

    def __str__(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        """Human readable name

        >>> Format.YAML.title
        'YAML'
        """
        return self.name

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions associated with this format

        >>> Format.YAML.extensions
        ('yml', 'yaml')
        >>> Format.URL.extensions
        ()
        """
        return tuple(ext for ext, fmt in EXTENSIONS.items() if fmt is self)

    def is_supported(self) -> bool:
        """Checks whether this format is enabled in the default registry."""
        from anyfmt import registry

        return registry.default_registry().is_supported(self)

    @classmethod
    def parse(cls, name: str) -> Format:
        """Find a format by its name (case insensitive).

        >>> Format.parse("Json")
        <Format.JSON: 'json'>

        Raises:
          UnknownFormatName: if *name* isn't the name of a format.
        """
        try:
            return cls(name.lower())
        except ValueError:
            raise errors.UnknownFormatName(name) from None


#: Extension -> format. The order of the entries is the order in which
#: :func:`~anyfmt.registry.supported_extensions` lists them.
EXTENSIONS: Final[dict[str, Format]] = {
    "toml": Format.TOML,
    "json": Format.JSON,
    "yml": Format.YAML,
    "yaml": Format.YAML,
    "ron": Format.RON,
    "xml": Format.XML,
}


def file_extension(path: str | os.PathLike[str]) -> str:
    """The extension of *path* without the leading dot ("" if there is none).

    >>> file_extension("config/settings.tar.yml")
    'yml'
    >>> file_extension(".bashrc")
    ''
    """
    _, ext = os.path.splitext(os.fspath(path))
    return ext[1:]


def guess_format_from_extension(ext: str) -> Format | None:
    """Guess the format from a file extension.

    The lookup is case sensitive. This may return a format that isn't enabled.

    >>> guess_format_from_extension("yml")
    <Format.YAML: 'yaml'>
    >>> guess_format_from_extension("dat") is None
    True
    """
    return EXTENSIONS.get(ext)


def guess_format(path: str | os.PathLike[str]) -> Format | None:
    """Guess the format from a file name.

    This may return a format that isn't enabled.

    Args:
      path: A file name, with or without directories.
    """
    ext = file_extension(path)
    if not ext:
        return None
    return guess_format_from_extension(ext)
