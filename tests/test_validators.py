import pytest

from envlookup.core.errors import ErrorKind
from envlookup.core.validators import (
    ExpectedValuesValidator,
    RequiredValidator,
    ValidatorRegistry,
    add_validator,
    new_expected_values_validator,
)


class TestBuiltinValidators:
    def test_required_rejects_empty(self):
        assert RequiredValidator().validate("NAME", "") == "NAME is required"

    def test_required_accepts_non_empty(self):
        assert RequiredValidator().validate("NAME", "knight") is None

    def test_required_kind(self):
        assert RequiredValidator.kind is ErrorKind.MISSING_REQUIRED

    def test_expected_values_accepts_listed_value(self):
        validator = new_expected_values_validator("a b c")

        assert validator.validate("ENV", "b") is None

    def test_expected_values_rejects_unlisted_value(self):
        validator = new_expected_values_validator("a b c")

        assert validator.validate("ENV", "d") == "ENV is unexpected value: d"

    def test_expected_values_is_case_sensitive(self):
        validator = ExpectedValuesValidator(["production"])

        assert validator.validate("ENV", "Production") == (
            "ENV is unexpected value: Production"
        )

    def test_expected_values_rejects_empty_value(self):
        validator = new_expected_values_validator("development production")

        assert validator.validate("ENV", "") == "ENV is unexpected value: "


class TestValidatorRegistry:
    def test_defaults_are_seeded(self, registry):
        assert registry.names() == ["expectedValues", "required"]
        assert "required" in registry
        assert registry.get("missing") is None

    def test_register_overwrites_existing_name(self, registry):
        # Given
        class Always:
            def validate(self, env_name, value):
                return f"{env_name} always fails"

        # When
        registry.register("required", lambda _args: Always())

        # Then
        validator = registry.get("required")("")
        assert validator.validate("X", "value") == "X always fails"

    def test_register_rejects_bad_input(self, registry):
        with pytest.raises(ValueError):
            registry.register("", lambda _args: RequiredValidator())
        with pytest.raises(TypeError):
            registry.register("noop", "not callable")

    def test_copy_is_independent(self, registry):
        copied = registry.copy()
        copied.unregister("required")

        assert "required" in registry
        assert "required" not in copied
        assert len(copied) == 1

    def test_add_validator_registers_on_default(self, clean_default_registry):
        add_validator("mock", lambda _args: RequiredValidator())

        assert clean_default_registry.get("mock") is not None

    def test_default_registry_restored_after_test(self, clean_default_registry):
        assert "mock" not in clean_default_registry
