"""JSON, using the standard library."""

from __future__ import annotations

import json
from typing import IO, Any, Final

from anyfmt.format import Format

from . import base

INDENT: Final = 2


class JsonCodec(base.Codec):
    format = Format.JSON
    pretty = True
    # JSONDecodeError is a ValueError
    errors = (ValueError, TypeError)

    def loads(self, s: str) -> Any:
        return json.loads(s)

    def loadb(self, b: bytes) -> Any:
        # json detects utf-8/16/32 on its own
        return json.loads(b)

    def load(self, fp: IO[Any]) -> Any:
        return json.load(fp)

    def dumps(self, data: Any, pretty: bool = False) -> str:
        if pretty:
            return json.dumps(data, indent=INDENT, ensure_ascii=False)
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
