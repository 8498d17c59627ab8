from dataclasses import dataclass

import pytest

from envlookup.core.binder import CoercionError, bind, coerce, parse_bool, parse_int
from envlookup.core.errors import ErrorKind
from envlookup.core.schema import describe, env_field


@dataclass
class Sample:
    name: str = env_field("NAME", default="")
    port: int = env_field("PORT", default=0)
    enabled: bool = env_field("ENABLED", default=False)
    ratio: float = env_field("RATIO", default=0.0)


def _descriptor(name):
    return next(d for d in describe(Sample) if d.name == name)


class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"), [("8080", 8080), ("-15", -15), ("+7", 7), ("007", 7)]
    )
    def test_valid(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1_000", " 1", "1.5", "0x10", ""])
    def test_invalid_syntax(self, raw):
        with pytest.raises(ValueError, match="invalid syntax"):
            parse_int(raw)

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="value out of range"):
            parse_int("9223372036854775808")


class TestParseBool:
    @pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, raw):
        assert parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["yes", "tRuE", "2"])
    def test_rejects_other_literals(self, raw):
        with pytest.raises(ValueError):
            parse_bool(raw)


class TestBind:
    def test_text_is_trimmed(self):
        target = Sample()

        bind(target, _descriptor("name"), "NAME", "  knight \n")

        assert target.name == "knight"

    def test_empty_value_leaves_default(self):
        target = Sample(port=42)

        bind(target, _descriptor("port"), "PORT", "")

        assert target.port == 42

    def test_int_failure_names_env(self):
        with pytest.raises(CoercionError) as excinfo:
            coerce(_descriptor("port"), "PORT", "abc")

        assert excinfo.value.kind is ErrorKind.COERCION_FAILURE
        assert str(excinfo.value) == 'error parsing int for PORT: parsing "abc": invalid syntax'

    def test_bool_failure_names_env(self):
        with pytest.raises(CoercionError, match="error parsing bool for ENABLED"):
            coerce(_descriptor("enabled"), "ENABLED", "maybe")

    def test_unsupported_type(self):
        with pytest.raises(CoercionError) as excinfo:
            coerce(_descriptor("ratio"), "RATIO", "0.5")

        assert excinfo.value.kind is ErrorKind.UNSUPPORTED_TYPE
        assert excinfo.value.message == "unsupported type float for RATIO"
