import io
import json

import pydantic
import pytest

import anyfmt
from anyfmt import Format, errors

from .fixtures import Hobbit


class BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def writable(self):
        return True

    def readinto(self, b):
        raise OSError("disk on fire")

    def write(self, b):
        raise OSError("disk on fire")


def test_codec_error_keeps_cause():
    with pytest.raises(errors.CodecError) as exc_info:
        anyfmt.decode_from_str("{", Format.JSON)
    e = exc_info.value
    assert e.format == Format.JSON
    assert isinstance(e.cause, json.JSONDecodeError)
    assert e.__cause__ is e.cause
    assert str(e) == f"JSON error: {e.cause}"


def test_conversion_error_is_codec_error():
    with pytest.raises(errors.CodecError) as exc_info:
        anyfmt.decode_from_str('{"name": "Bilbo"}', Format.JSON, type=Hobbit)
    assert isinstance(exc_info.value.cause, pydantic.ValidationError)


@pytest.mark.parametrize("fmt", anyfmt.supported_formats())
def test_read_failure_is_io_error(fmt):
    with pytest.raises(errors.IoError) as exc_info:
        anyfmt.decode_from_reader(io.BufferedReader(BrokenStream()), fmt)
    assert str(exc_info.value) == "IO error: disk on fire"


def test_write_failure_is_io_error():
    with pytest.raises(errors.IoError) as exc_info:
        anyfmt.encode_to_writer(BrokenStream(), {"a": 1}, Format.JSON)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_hierarchy():
    for exc in (
        errors.CodecError,
        errors.IoError,
        errors.UnsupportedFormat,
        errors.UnsupportedFileExtension,
        errors.UnknownFormatName,
        errors.NoSuccessfulParse,
    ):
        assert issubclass(exc, errors.Error)
    assert not issubclass(errors.CodecUnavailable, errors.Error)


def test_unsupported_format_hint():
    e = errors.UnsupportedFormat(Format.XML, "pip install anyfmt[xml]")
    assert str(e) == "Format xml not supported (pip install anyfmt[xml])"


def test_no_successful_parse_str():
    e = errors.NoSuccessfulParse(
        [
            (Format.JSON, errors.CodecError(Format.JSON, ValueError("nope"))),
            (Format.YAML, errors.IoError(FileNotFoundError("gone"))),
        ]
    )
    assert e.formats == [Format.JSON, Format.YAML]
    assert str(e) == (
        "No format was able to parse the source:\n"
        "  + json: JSON error: nope\n"
        "  + yaml: IO error: gone"
    )


class Opaque:
    pass


def test_type_without_schema():
    with pytest.raises(errors.CodecError) as exc_info:
        anyfmt.encode_to_string(Opaque(), Format.JSON)
    assert isinstance(
        exc_info.value.cause, pydantic.PydanticSchemaGenerationError
    )

    with pytest.raises(errors.CodecError):
        anyfmt.decode_from_str("{}", Format.JSON, type=Opaque)

    with pytest.raises(errors.NoSuccessfulParse) as exc_info:
        anyfmt.decode_from_str_any("{}", type=Opaque)
    assert Format.JSON in exc_info.value.formats
