import io
import logging

import pytest

import anyfmt
from anyfmt import Format, Registry, codec, errors

from . import fixtures

DEFAULT_FORMATS = [
    Format.TOML,
    Format.JSON,
    Format.YAML,
    Format.XML,
    Format.URL,
]


def test_default_formats():
    assert anyfmt.supported_formats() == DEFAULT_FORMATS
    assert anyfmt.supported_extensions() == [
        "toml",
        "json",
        "yml",
        "yaml",
        "xml",
    ]
    assert anyfmt.is_supported(Format.JSON)
    assert not anyfmt.is_supported(Format.RON)
    assert Format.JSON.is_supported()
    assert not Format.RON.is_supported()


def test_registries_are_snapshots():
    formats = anyfmt.supported_formats()
    formats.clear()
    assert anyfmt.supported_formats() == DEFAULT_FORMATS


def test_priority_ignores_construction_order():
    reg = Registry([codec.UrlCodec(), codec.JsonCodec(), codec.TomlCodec()])
    assert reg.formats() == [Format.TOML, Format.JSON, Format.URL]
    assert reg.extensions() == ["toml", "json"]


def test_one_codec_per_format():
    with pytest.raises(ValueError, match="Two codecs for json"):
        Registry([codec.JsonCodec(), codec.JsonCodec()])


def test_only():
    reg = anyfmt.default_registry().only("YAML", Format.JSON, "ron")
    # Ron isn't enabled in the default registry
    assert reg.formats() == [Format.JSON, Format.YAML]
    assert repr(reg) == "Registry(json, yaml)"
    with pytest.raises(errors.UnknownFormatName):
        anyfmt.default_registry().only("json5")


def test_empty_registry():
    reg = Registry()
    assert reg.formats() == []
    assert reg.extensions() == []
    with pytest.raises(errors.NoSuccessfulParse) as exc_info:
        anyfmt.decode_from_str_any("{}", registry=reg)
    assert exc_info.value.attempts == []


def test_unsupported_format():
    reg = anyfmt.default_registry().only(Format.JSON)
    with pytest.raises(errors.UnsupportedFormat) as exc_info:
        reg.codec(Format.YAML)
    assert exc_info.value.format == Format.YAML
    # The library is installed, installing the extra wouldn't help.
    assert exc_info.value.hint is None
    assert str(exc_info.value) == "Format yaml not supported"


def test_custom_codec():
    reg = Registry(
        [
            codec.TomlCodec(),
            codec.JsonCodec(),
            codec.YamlCodec(),
            codec.XmlCodec(),
            codec.UrlCodec(),
            fixtures.RonCodec(),
        ]
    )
    assert reg.formats() == [
        Format.TOML,
        Format.JSON,
        Format.YAML,
        Format.RON,
        Format.XML,
        Format.URL,
    ]
    assert reg.extensions() == ["toml", "json", "yml", "yaml", "ron", "xml"]
    wizard = fixtures.radagast()
    ron = anyfmt.encode_to_string(wizard, Format.RON, registry=reg)
    assert (
        anyfmt.decode_from_str(
            ron, Format.RON, type=fixtures.Wizard, registry=reg
        )
        == wizard
    )
    # Still disabled in the default registry
    with pytest.raises(errors.UnsupportedFormat):
        anyfmt.decode_from_str(ron, Format.RON)


def _missing_codec():
    with codec.ImportGuard(Format.YAML, "yaml"):
        import adfasdfasdf  # noqa: F401


def test_builtin_missing_library(monkeypatch, caplog):
    monkeypatch.setattr(codec, "BUILTIN", (codec.JsonCodec, _missing_codec))
    with caplog.at_level(logging.DEBUG, logger="anyfmt.registry"):
        reg = Registry.builtin()
    assert reg.formats() == [Format.JSON]
    assert "YAML disabled" in caplog.text


def test_import_guard():
    with pytest.raises(errors.CodecUnavailable) as exc_info:
        _missing_codec()
    e = exc_info.value
    assert isinstance(e, ModuleNotFoundError)
    assert e.name == "adfasdfasdf"
    assert e.format == Format.YAML
    assert "pip install anyfmt[yaml]" in str(e)


# Every dispatch function handles exactly the enabled formats.
@pytest.mark.parametrize("fmt", list(Format))
def test_dispatch_covers_enabled_formats(fmt):
    bilbo = fixtures.old_bilbo()
    Hobbit = fixtures.Hobbit
    if fmt not in anyfmt.supported_formats():
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.encode_to_string(bilbo, fmt)
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.encode_to_bytes(bilbo, fmt)
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.encode_to_writer(io.StringIO(), bilbo, fmt)
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.decode_from_str("", fmt)
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.decode_from_bytes(b"", fmt)
        with pytest.raises(errors.UnsupportedFormat):
            anyfmt.decode_from_reader(io.BytesIO(), fmt)
        return
    assert anyfmt.default_registry().codec(fmt).format == fmt
    s = anyfmt.encode_to_string(bilbo, fmt)
    b = anyfmt.encode_to_bytes(bilbo, fmt)
    assert b == s.encode("utf-8")
    out = io.StringIO()
    anyfmt.encode_to_writer(out, bilbo, fmt)
    assert out.getvalue() == s
    assert anyfmt.decode_from_str(s, fmt, type=Hobbit) == bilbo
    assert anyfmt.decode_from_bytes(b, fmt, type=Hobbit) == bilbo
    assert anyfmt.decode_from_reader(io.BytesIO(b), fmt, type=Hobbit) == bilbo


def test_unsupported_reader_is_not_read():
    reader = io.BytesIO(b"{}")
    with pytest.raises(errors.UnsupportedFormat):
        anyfmt.decode_from_reader(reader, Format.RON)
    assert reader.tell() == 0


def test_module_metadata():
    assert anyfmt.__version__
    assert anyfmt.__author__ in anyfmt.__copyright__
