"""``application/x-www-form-urlencoded`` query strings."""

from __future__ import annotations

import urllib.parse
from typing import Any, Iterator

from anyfmt.format import Format

from . import base


def _text(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | str):
        return str(value)
    raise TypeError(
        f"{key!r}: URL encoding only supports flat mappings of scalars, got "
        f"{type(value).__name__!r}"
    )


def _pairs(data: dict[str, Any]) -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, list):
            for item in value:
                yield key, _text(key, item)
        else:
            yield key, _text(key, value)


class UrlCodec(base.Codec):
    format = Format.URL
    buffered = True
    # UnicodeError is a ValueError
    errors = (ValueError, TypeError)

    def loads(self, s: str) -> Any:
        res: dict[str, Any] = {}
        for key, value in urllib.parse.parse_qsl(
            s, keep_blank_values=True, strict_parsing=True
        ):
            match res.get(key):
                case None:
                    res[key] = value
                case list() as prev:
                    prev.append(value)
                case prev:
                    res[key] = [prev, value]
        return res

    def dumps(self, data: Any, pretty: bool = False) -> str:
        if not isinstance(data, dict):
            raise TypeError(
                "URL encoding only supports mappings, got "
                f"{type(data).__name__!r}"
            )
        return urllib.parse.urlencode(list(_pairs(data)))
