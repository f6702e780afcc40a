from __future__ import annotations

import abc
import types
from typing import IO, Any, ClassVar, Type

from anyfmt import errors
from anyfmt.format import Format

__all__ = ("Codec", "ImportGuard")


class ImportGuard:
    """Report missing codec libraries as
    :class:`~anyfmt.errors.CodecUnavailable`.

    Codecs import their library lazily, in ``__init__``::

        with ImportGuard(Format.YAML, "yaml"):
            import yaml
    """

    def __init__(self, format: Format, extra: str) -> None:
        self.format = format
        self.extra = extra

    def __enter__(self) -> None:
        pass

    def __exit__(
        self,
        exctype: Type[BaseException] | None,
        excinst: BaseException | None,
        exctb: types.TracebackType | None,
    ) -> None:
        if isinstance(excinst, ModuleNotFoundError) and not isinstance(
            excinst, errors.CodecUnavailable
        ):
            raise errors.CodecUnavailable(
                self.format, self.extra, excinst.name
            ) from excinst


class Codec(abc.ABC):
    """The encode/decode capability backing one :class:`~anyfmt.Format`.

    Codecs work on *plain data*: mappings with string keys, lists, strings,
    numbers, booleans and ``None``. Converting to and from the caller's types
    is handled by :mod:`anyfmt.convert`.

    Attributes:

      format: The format this codec implements.

      buffered: ``True`` if :meth:`load` cannot consume a stream directly. The
        dispatcher then reads the whole stream and calls :meth:`loads` or
        :meth:`loadb` instead.

      pretty: ``True`` if :meth:`dumps` has a pretty-printed variant.

      errors: The exceptions the underlying library raises on bad input or
        unserialisable values.
    """

    format: ClassVar[Format]
    buffered: ClassVar[bool] = False
    pretty: ClassVar[bool] = False
    errors: tuple[Type[Exception], ...] = ()

    @abc.abstractmethod
    def loads(self, s: str) -> Any:  # pragma: no cover
        ...

    @abc.abstractmethod
    def dumps(
        self, data: Any, pretty: bool = False
    ) -> str:  # pragma: no cover
        ...

    def loadb(self, b: bytes) -> Any:
        return self.loads(b.decode("utf-8"))

    def load(self, fp: IO[Any]) -> Any:
        """Read from a text or binary stream."""
        raw = fp.read()
        if isinstance(raw, bytes):
            return self.loadb(raw)
        return self.loads(raw)

    def dumpb(self, data: Any, pretty: bool = False) -> bytes:
        return self.dumps(data, pretty=pretty).encode("utf-8")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} format={self.format}>"
