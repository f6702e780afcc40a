"""YAML, using PyYAML's safe loader and dumper."""

from __future__ import annotations

import typing
from typing import IO, Any

from anyfmt.format import Format

from . import base

if typing.TYPE_CHECKING:  # pragma: no cover
    import types


class YamlCodec(base.Codec):
    format = Format.YAML

    yaml: types.ModuleType

    def __init__(self) -> None:
        with base.ImportGuard(Format.YAML, "yaml"):
            import yaml

        self.yaml = yaml
        self.errors = (yaml.YAMLError, UnicodeError)

    def loads(self, s: str) -> Any:
        return self.yaml.safe_load(s)

    def loadb(self, b: bytes) -> Any:
        # PyYAML sniffs the BOM to pick the encoding
        return self.yaml.safe_load(b)

    def load(self, fp: IO[Any]) -> Any:
        return self.yaml.safe_load(fp)

    def dumps(self, data: Any, pretty: bool = False) -> str:
        res = self.yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        assert isinstance(res, str)
        return res
