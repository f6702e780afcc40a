"""

:mod:`~anyfmt.codec` holds the adapters between :mod:`anyfmt` and the
libraries that actually read and write each format. A codec only deals with
*plain data* (mappings, lists and scalars); the dispatcher takes care of
converting to and from the caller's types.

Writing a new codec
-------------------

Subclass :class:`Codec`, set :attr:`Codec.format` and implement
:meth:`Codec.loads` and :meth:`Codec.dumps`. The codec can then be enabled by
building a :class:`~anyfmt.Registry` that includes it. This is the only way to
enable :attr:`~anyfmt.Format.RON`, for which no codec ships with anyfmt.

"""
from __future__ import annotations

from typing import Callable, Final

from .base import Codec, ImportGuard
from .json_codec import JsonCodec
from .toml_codec import TomlCodec
from .url_codec import UrlCodec
from .xml_codec import XmlCodec
from .yaml_codec import YamlCodec

#: Constructors for the codecs that ship with anyfmt, in priority order. They
#: raise :class:`~anyfmt.errors.CodecUnavailable` if their library is missing.
BUILTIN: Final[tuple[Callable[[], Codec], ...]] = (
    TomlCodec,
    JsonCodec,
    YamlCodec,
    XmlCodec,
    UrlCodec,
)

__all__ = (
    "BUILTIN",
    "Codec",
    "ImportGuard",
    "JsonCodec",
    "TomlCodec",
    "UrlCodec",
    "XmlCodec",
    "YamlCodec",
)
