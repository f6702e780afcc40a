"""
``anyfmt.errors``: Exceptions
==============================

Every failure in :mod:`anyfmt` is reported by raising a subclass of
:class:`Error`. The hierarchy lets callers tell apart a format that was never
attempted (:class:`UnsupportedFormat`, :class:`UnsupportedFileExtension`)
from a format that was attempted and rejected the input (:class:`CodecError`,
or the entries of :class:`NoSuccessfulParse`).
"""

from __future__ import annotations

import contextlib
import typing
from typing import Iterator, Type

from anyfmt import convert

if typing.TYPE_CHECKING:  # pragma: no cover
    from anyfmt.format import Format

__all__ = (
    "Error",
    "CodecError",
    "IoError",
    "UnsupportedFormat",
    "UnsupportedFileExtension",
    "UnknownFormatName",
    "NoSuccessfulParse",
    "CodecUnavailable",
    "translate",
)


class Error(Exception):
    """Base class for all the errors raised by anyfmt."""


class CodecError(Error):
    """A codec failed to encode or decode a value.

    The codec's own exception is available as :attr:`cause` (and as
    ``__cause__``).
    """

    format: Format
    cause: BaseException

    def __init__(self, format: Format, cause: BaseException) -> None:
        super().__init__(format, cause)
        self.format = format
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.format.title} error: {self.cause}"


class IoError(Error):
    """Reading or writing a stream or a file failed."""

    cause: OSError

    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"IO error: {self.cause}"


class UnsupportedFormat(Error):
    """The format is known but isn't enabled."""

    format: Format
    hint: str | None

    def __init__(self, format: Format, hint: str | None = None) -> None:
        super().__init__(format)
        self.format = format
        self.hint = hint

    def __str__(self) -> str:
        msg = f"Format {self.format} not supported"
        if self.hint is not None:
            msg += f" ({self.hint})"
        return msg


class UnsupportedFileExtension(Error):
    """The extension of a file we're writing to does not map to a format."""

    extension: str

    def __init__(self, extension: str) -> None:
        super().__init__(extension)
        self.extension = extension

    def __str__(self) -> str:
        return f"File extension {self.extension!r} not supported"


class UnknownFormatName(Error, ValueError):
    """The string isn't the name of any format."""

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown format name: {self.name!r}"


class NoSuccessfulParse(Error):
    """None of the candidate formats could parse the source.

    Attributes:
      attempts: every format that was tried along with the error it raised, in
        the order in which they were tried.
    """

    attempts: list[tuple[Format, Error]]

    def __init__(self, attempts: list[tuple[Format, Error]]) -> None:
        super().__init__(attempts)
        self.attempts = attempts

    @property
    def formats(self) -> list[Format]:
        return [fmt for fmt, _ in self.attempts]

    def __str__(self) -> str:
        if not self.attempts:
            return "No format was able to parse the source: no format enabled"
        lines = ["No format was able to parse the source:"]
        for fmt, err in self.attempts:
            lines.append(f"  + {fmt}: {err}")
        return "\n".join(lines)


class CodecUnavailable(ModuleNotFoundError):
    """The library backing a codec isn't installed."""

    def __init__(self, format: Format, extra: str, name: str | None) -> None:
        super().__init__(
            f"Support for {format.title} is not available because of missing "
            f"dependencies. You can fix this by running "
            f"``pip install anyfmt[{extra}]``",
            name=name,
        )
        self.format = format
        self.extra = extra


@contextlib.contextmanager
def translate(
    format: Format, native: tuple[Type[Exception], ...]
) -> Iterator[None]:
    """Re-raise the errors of a codec as :class:`Error`.

    :class:`OSError` becomes :class:`IoError`; the exceptions listed in
    *native*, conversion errors and documents nested too deeply to be read
    become :class:`CodecError`.
    """
    try:
        yield
    except OSError as e:
        raise IoError(e) from e
    except (UnicodeError, RecursionError, *native, *convert.ERRORS) as e:
        raise CodecError(format, e) from e
