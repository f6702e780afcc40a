"""
``anyfmt.decode``: Reading values
==================================

All the functions in this module take a *type* keyword argument: the type of
the value to read. It defaults to :data:`typing.Any`, in which case the plain
data produced by the codec (mappings, lists, strings, numbers, ...) is returned
as is.

    >>> decode_from_str('{"name": "Radagast", "age": 8000}', Format.JSON)
    {'name': 'Radagast', 'age': 8000}

When the format isn't known in advance, :func:`decode_from_str_any` and
:func:`decode_from_bytes_any` try every enabled format in priority order and
return the first value that could be read:

    >>> decode_from_str_any('answer = 42')
    {'answer': 42}

"""

from __future__ import annotations

import logging
from typing import IO, Any, Callable, Type, TypeVar

from anyfmt import convert, errors
from anyfmt.format import Format
from anyfmt.registry import Registry, resolve

__all__ = (
    "decode_from_reader",
    "decode_from_str",
    "decode_from_bytes",
    "decode_from_str_any",
    "decode_from_bytes_any",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", str, bytes)


def decode_from_reader(
    reader: IO[Any],
    format: Format,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a text or binary stream.

    Args:
      reader: The stream to read from. It is consumed to the end if the codec
        needs the whole document.
      format: The format of the stream.
      type: The type of the value to read.
      registry: Registry to use instead of the default one.

    Raises:
      UnsupportedFormat: if *format* isn't enabled. Nothing is read.
      IoError: if reading from *reader* failed.
      CodecError: if the codec could not read a value of type *type*.
    """
    codec = resolve(registry).codec(format)
    with errors.translate(format, codec.errors):
        if codec.buffered:
            raw = reader.read()
            if isinstance(raw, bytes):
                data = codec.loadb(raw)
            else:
                data = codec.loads(raw)
        else:
            data = codec.load(reader)
        res: T = convert.from_data(data, type)
    return res


def decode_from_str(
    s: str,
    format: Format,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a string.

    Raises:
      UnsupportedFormat: if *format* isn't enabled.
      CodecError: if the codec could not read a value of type *type*.
    """
    codec = resolve(registry).codec(format)
    with errors.translate(format, codec.errors):
        res: T = convert.from_data(codec.loads(s), type)
    return res


def decode_from_bytes(
    b: bytes,
    format: Format,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a byte string.

    Raises:
      UnsupportedFormat: if *format* isn't enabled.
      CodecError: if the codec could not read a value of type *type*.
    """
    codec = resolve(registry).codec(format)
    with errors.translate(format, codec.errors):
        res: T = convert.from_data(codec.loadb(b), type)
    return res


def _probe(
    decode: Callable[..., T],
    src: S,
    type: Type[T] | Any,
    reg: Registry,
) -> T:
    attempts: list[tuple[Format, errors.Error]] = []
    for fmt in reg.formats():
        try:
            return decode(src, fmt, type=type, registry=reg)
        except errors.Error as e:
            logger.debug("Could not read the source as %s: %s", fmt.title, e)
            attempts.append((fmt, e))
    raise errors.NoSuccessfulParse(attempts)


def decode_from_str_any(
    s: str,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a string in any enabled format.

    Formats are tried one after the other, in the order given by
    :func:`~anyfmt.supported_formats`; the first one that can read a value of
    type *type* wins, even if a later format would also have succeeded.

    Raises:
      NoSuccessfulParse: if no format could read the string. Its
        :attr:`~anyfmt.errors.NoSuccessfulParse.attempts` hold the error of
        every format, in the order in which they were tried.
    """
    return _probe(decode_from_str, s, type, resolve(registry))


def decode_from_bytes_any(
    b: bytes,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a byte string in any enabled format.

    See :func:`decode_from_str_any`.
    """
    return _probe(decode_from_bytes, b, type, resolve(registry))

