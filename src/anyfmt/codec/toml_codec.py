"""TOML: :mod:`tomllib` to read, `tomli-w <https://pypi.org/project/tomli-w/>`_
to write."""

from __future__ import annotations

import tomllib
import typing
from typing import Any

from anyfmt.format import Format

from . import base

if typing.TYPE_CHECKING:  # pragma: no cover
    import types


def _drop_nulls(data: Any) -> Any:
    """TOML has no null: skip the ``None`` values in tables."""
    if isinstance(data, dict):
        return {k: _drop_nulls(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_drop_nulls(x) for x in data]
    return data


class TomlCodec(base.Codec):
    format = Format.TOML
    # tomllib only parses complete documents
    buffered = True

    tomli_w: types.ModuleType

    def __init__(self) -> None:
        with base.ImportGuard(Format.TOML, "toml"):
            import tomli_w

        self.tomli_w = tomli_w
        # TOMLDecodeError is a ValueError, tomli_w raises TypeError on values
        # it cannot represent.
        self.errors = (tomllib.TOMLDecodeError, ValueError, TypeError)

    def loads(self, s: str) -> Any:
        return tomllib.loads(s)

    def dumps(self, data: Any, pretty: bool = False) -> str:
        if not isinstance(data, dict):
            raise TypeError(
                "TOML documents must be tables, got "
                f"{type(data).__name__!r}"
            )
        res = self.tomli_w.dumps(_drop_nulls(data))
        assert isinstance(res, str)
        return res
