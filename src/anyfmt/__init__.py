"""Serialise and deserialise values in a format chosen at runtime"""
from __future__ import annotations

from importlib import metadata

from .codec import Codec
from .decode import (
    decode_from_bytes,
    decode_from_bytes_any,
    decode_from_reader,
    decode_from_str,
    decode_from_str_any,
)
from .encode import encode_to_bytes, encode_to_string, encode_to_writer
from .errors import (
    CodecError,
    Error,
    IoError,
    NoSuccessfulParse,
    UnknownFormatName,
    UnsupportedFileExtension,
    UnsupportedFormat,
)
from .files import (
    decode_from_file,
    decode_from_file_stem,
    encode_to_file,
    encode_to_file_pretty,
)
from .format import Format, guess_format, guess_format_from_extension
from .registry import (
    Registry,
    default_registry,
    is_supported,
    supported_extensions,
    supported_formats,
)

# http://epydoc.sourceforge.net/manual-fields.html#module-metadata-variables

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)
__author__ = "The anyfmt authors"
# https://www.copyrightlaws.com/copyright-symbol-notice-year
__copyright__ = f"2026, {__author__}"

__all__ = (
    "Codec",
    "CodecError",
    "Error",
    "Format",
    "IoError",
    "NoSuccessfulParse",
    "Registry",
    "UnknownFormatName",
    "UnsupportedFileExtension",
    "UnsupportedFormat",
    "decode_from_bytes",
    "decode_from_bytes_any",
    "decode_from_file",
    "decode_from_file_stem",
    "decode_from_reader",
    "decode_from_str",
    "decode_from_str_any",
    "default_registry",
    "encode_to_bytes",
    "encode_to_file",
    "encode_to_file_pretty",
    "encode_to_string",
    "encode_to_writer",
    "guess_format",
    "guess_format_from_extension",
    "is_supported",
    "supported_extensions",
    "supported_formats",
)
