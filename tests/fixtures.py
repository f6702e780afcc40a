from __future__ import annotations

import dataclasses
import json
from typing import Any

from anyfmt import Codec, Format

MISSING = object()


@dataclasses.dataclass
class Hobbit:
    name: str
    age: int
    has_ring: bool


@dataclasses.dataclass
class Wizard:
    name: str
    is_late: bool
    color: str
    age: int
    friends: list[str]


def young_bilbo():
    return Hobbit(name="Bilbo Baggins", age=50, has_ring=False)


def old_bilbo():
    return Hobbit(name="Bilbo Baggins", age=111, has_ring=True)


def radagast():
    return Wizard(
        name="Radagast",
        color="Brown",
        is_late=True,
        age=8000,
        friends=["animals"],
    )


def gandalf_the_grey():
    return Wizard(
        name="Gandalf",
        color="Grey",
        is_late=False,
        age=9000,
        friends=["hobbits", "dwarves", "elves", "men"],
    )


class ScriptedCodec(Codec):
    """A codec whose answer is fixed in advance.

    Every call to `loads` is appended to `log`. If `result` is left unset the
    codec rejects every input.
    """

    errors = (ValueError,)

    def __init__(self, format: Format, result: Any = MISSING, log=None):
        self.format = format
        self.result = result
        self.log = [] if log is None else log

    def loads(self, s: str) -> Any:
        self.log.append(self.format)
        if self.result is MISSING:
            raise ValueError(f"{self.format} says no")
        return self.result

    def dumps(self, data: Any, pretty: bool = False) -> str:
        return json.dumps(data)


class RonCodec(Codec):
    """Stand in for a user supplied RON codec (it is really JSON)."""

    format = Format.RON
    errors = (ValueError, TypeError)

    def loads(self, s: str) -> Any:
        return json.loads(s)

    def dumps(self, data: Any, pretty: bool = False) -> str:
        return json.dumps(data)
