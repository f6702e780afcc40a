"""
``anyfmt.encode``: Writing values
==================================

    >>> encode_to_string({"name": "Radagast", "age": 8000}, Format.JSON)
    '{"name":"Radagast","age":8000}'

Passing ``pretty=True`` asks for a human friendly layout. Formats that don't
have one silently use their usual layout:

    >>> print(encode_to_string({"age": 8000}, Format.JSON, pretty=True))
    {
      "age": 8000
    }

Values are always serialised in memory first; nothing is written to a stream
if serialisation fails.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Any

from anyfmt import convert, errors
from anyfmt.codec import Codec
from anyfmt.format import Format
from anyfmt.registry import Registry, resolve

__all__ = (
    "encode_to_string",
    "encode_to_bytes",
    "encode_to_writer",
)

logger = logging.getLogger(__name__)


def _codec(format: Format, registry: Registry | None, pretty: bool) -> Codec:
    codec = resolve(registry).codec(format)
    if pretty and not codec.pretty:
        logger.debug("%s has no pretty printer", format.title)
    return codec


def encode_to_string(
    value: Any,
    format: Format,
    *,
    pretty: bool = False,
    registry: Registry | None = None,
) -> str:
    """Serialise *value* to a string.

    Raises:
      UnsupportedFormat: if *format* isn't enabled.
      CodecError: if *value* cannot be represented in *format*.
    """
    codec = _codec(format, registry, pretty)
    with errors.translate(format, codec.errors):
        data = convert.to_data(value)
        return codec.dumps(data, pretty=pretty and codec.pretty)


def encode_to_bytes(
    value: Any,
    format: Format,
    *,
    pretty: bool = False,
    registry: Registry | None = None,
) -> bytes:
    """Serialise *value* to utf-8 encoded bytes.

    Raises:
      UnsupportedFormat: if *format* isn't enabled.
      CodecError: if *value* cannot be represented in *format*.
    """
    codec = _codec(format, registry, pretty)
    with errors.translate(format, codec.errors):
        data = convert.to_data(value)
        return codec.dumpb(data, pretty=pretty and codec.pretty)


def encode_to_writer(
    writer: IO[Any],
    value: Any,
    format: Format,
    *,
    pretty: bool = False,
    registry: Registry | None = None,
) -> None:
    """Serialise *value* to a stream.

    Text streams (instances of :class:`io.TextIOBase`) get a :class:`str`,
    every other stream gets :class:`bytes`.

    Raises:
      UnsupportedFormat: if *format* isn't enabled.
      CodecError: if *value* cannot be represented in *format*. Nothing was
        written.
      IoError: if writing to *writer* failed.
    """
    payload: str | bytes
    if isinstance(writer, io.TextIOBase):
        payload = encode_to_string(
            value, format, pretty=pretty, registry=registry
        )
    else:
        payload = encode_to_bytes(
            value, format, pretty=pretty, registry=registry
        )
    try:
        writer.write(payload)
    except OSError as e:
        raise errors.IoError(e) from e
