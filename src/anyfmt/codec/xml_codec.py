"""
XML, using :mod:`lxml.etree`
============================

XML has no notion of numbers, booleans or lists so the mapping is lossy:

+ A mapping becomes a sequence of child elements named after the keys.
+ A list becomes repeated elements with the same name.
+ Scalars become the text of their element (``true``/``false`` for booleans,
  an empty element for ``None``).

When reading, leaf elements are returned as strings; it's up to the target
type to coerce them (``"111"`` becomes ``111`` for an :class:`int` field).
Elements that appear several times under the same parent are read as a list.

The encoding named in an XML declaration is honoured when reading bytes. It is
ignored when reading text, which has already been decoded.
"""

from __future__ import annotations

import re
import typing
from typing import Any, Final

from anyfmt.format import Format

from . import base

if typing.TYPE_CHECKING:  # pragma: no cover
    from lxml import etree

ROOT_TAG: Final = "root"

# libxml2 refuses str documents that carry an encoding declaration.
_DECLARATION: Final = re.compile(r"\A\ufeff?<\?xml\b[^>]*\?>")


def _scalar_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | str):
        return str(value)
    raise TypeError(
        f"Cannot write a value of type {type(value).__name__!r} as XML text"
    )


class XmlCodec(base.Codec):
    format = Format.XML
    pretty = True

    root_tag: str

    def __init__(self, root_tag: str = ROOT_TAG) -> None:
        with base.ImportGuard(Format.XML, "xml"):
            from lxml import etree

        self.etree = etree
        self.root_tag = root_tag
        self.errors = (etree.LxmlError, ValueError, TypeError)

    def _parser(self) -> etree.XMLParser:
        # Parsers are not thread safe: make a fresh one for every document.
        return self.etree.XMLParser(
            resolve_entities=False, no_network=True, remove_comments=True
        )

    def _to_data(self, element: etree._Element) -> Any:
        children = [c for c in element if isinstance(c.tag, str)]
        if not children:
            return element.text or ""
        res: dict[str, Any] = {}
        repeated = set[str]()
        for child in children:
            key = self.etree.QName(child).localname
            value = self._to_data(child)
            if key not in res:
                res[key] = value
            elif key in repeated:
                res[key].append(value)
            else:
                res[key] = [res[key], value]
                repeated.add(key)
        return res

    def _fill(self, parent: etree._Element, data: dict[str, Any]) -> None:
        for key, value in data.items():
            items = value if isinstance(value, list) else [value]
            for item in items:
                child = self.etree.SubElement(parent, key)
                if isinstance(item, dict):
                    self._fill(child, item)
                elif isinstance(item, list):
                    raise TypeError(f"{key!r}: nested lists cannot be written")
                else:
                    child.text = _scalar_text(item)

    def loadb(self, b: bytes) -> Any:
        return self._to_data(self.etree.fromstring(b, parser=self._parser()))

    def loads(self, s: str) -> Any:
        # The text is already decoded: whatever encoding the declaration
        # names no longer applies.
        s = _DECLARATION.sub("", s, count=1)
        return self.loadb(s.encode("utf-8"))

    def dumps(self, data: Any, pretty: bool = False) -> str:
        if not isinstance(data, dict):
            raise TypeError(
                "XML documents must be mappings, got "
                f"{type(data).__name__!r}"
            )
        root = self.etree.Element(self.root_tag)
        self._fill(root, data)
        res = self.etree.tostring(
            root, encoding="unicode", pretty_print=pretty
        )
        assert isinstance(res, str)
        return res
