"""
``anyfmt.files``: Reading and writing files
============================================

The format of a file is guessed from its extension (see
:func:`~anyfmt.guess_format`).

+ When reading, a file whose extension isn't recognised is read in memory and
  every enabled format is tried (see :func:`~anyfmt.decode_from_bytes_any`). A
  recognised extension is trusted: if the file cannot be read in that format
  the error is reported as is.
+ When writing there is no guessing: the extension has to map to a format.

"""

from __future__ import annotations

import logging
import os
from typing import Any, Type, TypeVar

from anyfmt import decode, encode, errors
from anyfmt.format import Format, file_extension, guess_format
from anyfmt.registry import Registry, resolve

__all__ = (
    "decode_from_file",
    "decode_from_file_stem",
    "encode_to_file",
    "encode_to_file_pretty",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = str | os.PathLike[str]


def _read_bytes(path: PathLike) -> bytes:
    try:
        with open(path, "rb") as fp:
            return fp.read()
    except OSError as e:
        raise errors.IoError(e) from e


def decode_from_file(
    path: PathLike,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from a file.

    Raises:
      IoError: if the file cannot be opened or read. No format is tried.
      UnsupportedFormat: if the extension maps to a format that isn't enabled.
      CodecError: if the extension maps to a format and the file isn't a valid
        value of type *type* in that format.
      NoSuccessfulParse: if the extension isn't recognised and no enabled
        format can read the file.
    """
    reg = resolve(registry)
    fmt = guess_format(path)
    if fmt is None:
        logger.debug("%s: unknown extension, trying every format", path)
        return decode.decode_from_bytes_any(
            _read_bytes(path), type=type, registry=reg
        )
    # Fail before opening the file.
    reg.codec(fmt)
    logger.debug("%s: reading as %s", path, fmt.title)
    try:
        fp = open(path, "rb")
    except OSError as e:
        raise errors.IoError(e) from e
    with fp:
        return decode.decode_from_reader(fp, fmt, type=type, registry=reg)


def decode_from_file_stem(
    stem: PathLike,
    *,
    type: Type[T] | Any = Any,
    registry: Registry | None = None,
) -> T:
    """Read a value from the first file named *stem* plus a known extension.

    The candidates are ``f"{stem}.{ext}"`` for every *ext* in
    :func:`~anyfmt.supported_extensions`, in that order. For instance
    ``decode_from_file_stem("settings")`` looks at ``settings.toml``,
    ``settings.json``, ``settings.yml``, ``settings.yaml``, ...

    Raises:
      NoSuccessfulParse: if no candidate could be read. A missing file counts
        as a failed attempt; the attempts are listed in the order in which the
        candidates were tried.
    """
    reg = resolve(registry)
    attempts: list[tuple[Format, errors.Error]] = []
    for ext in reg.extensions():
        path = f"{os.fspath(stem)}.{ext}"
        try:
            return decode_from_file(path, type=type, registry=reg)
        except errors.Error as e:
            logger.debug("%s: %s", path, e)
            fmt = guess_format(path)
            assert fmt is not None, path
            attempts.append((fmt, e))
    raise errors.NoSuccessfulParse(attempts)


def encode_to_file(
    path: PathLike,
    value: Any,
    *,
    pretty: bool = False,
    registry: Registry | None = None,
) -> None:
    """Write *value* to a file in the format given by the file's extension.

    The value is serialised before the file is opened: the file is left
    untouched if anything but the final write fails.

    Raises:
      UnsupportedFileExtension: if the extension doesn't map to a format.
      UnsupportedFormat: if the extension maps to a format that isn't enabled.
      CodecError: if *value* cannot be represented in the format.
      IoError: if the file cannot be written.
    """
    fmt = guess_format(path)
    if fmt is None:
        raise errors.UnsupportedFileExtension(file_extension(path))
    payload = encode.encode_to_bytes(
        value, fmt, pretty=pretty, registry=registry
    )
    try:
        with open(path, "wb") as fp:
            fp.write(payload)
    except OSError as e:
        raise errors.IoError(e) from e


def encode_to_file_pretty(
    path: PathLike, value: Any, *, registry: Registry | None = None
) -> None:
    """Same as :func:`encode_to_file` with ``pretty=True``."""
    encode_to_file(path, value, pretty=True, registry=registry)
