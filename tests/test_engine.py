"""
Tests for the validation engine entry points.
"""

import asyncio

import pytest

import mailsift.engine as engine_module
from mailsift import (
    EngineError,
    ValidationEngine,
    ValidationResult,
    build_score_table,
    get_engine,
    reset_engine,
    validate_many,
    validate_many_async,
    validate_one,
    validate_one_async,
)
from mailsift.config import settings


class TestValidateOne:
    """Single-address entry point."""

    def test_valid_email(self):
        result = validate_one("test@example.com")

        assert result == ValidationResult.success("test", "example.com", 80.0)

    def test_invalid_format(self):
        result = validate_one("test2.com")

        assert result.is_valid is False
        assert result.local_part is None
        assert result.domain is None
        assert result.domain_score is None
        assert result.error_message == "Invalid email format"

    def test_empty_email_is_a_result(self):
        result = validate_one("")

        assert result.to_dict() == {"isValid": False, "errorMessage": "Email cannot be empty"}

    def test_overlong_email_raises(self):
        with pytest.raises(EngineError) as exc:
            validate_one("a" * 321)

        assert exc.value.error_type == "InvalidLength"
        assert exc.value.message == "Email exceeds maximum length of 320 characters"

    def test_overlong_valid_looking_email_raises(self):
        with pytest.raises(EngineError):
            validate_one("a" * 310 + "@example.com")

    @pytest.mark.parametrize("value", [123, None, 4.2, b"test@example.com"])
    def test_non_string_raises(self, value):
        with pytest.raises(EngineError) as exc:
            validate_one(value)

        assert exc.value.error_type == "InvalidInput"
        assert exc.value.message == "Email must be a string"

    def test_repeated_calls_identical(self):
        first = validate_one("user@company.net")
        second = validate_one("user@company.net")

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_internal_fault_wrapped(self, monkeypatch):
        def boom(email, table):
            raise RuntimeError("grammar exploded")

        monkeypatch.setattr(engine_module, "parse_email", boom)

        with pytest.raises(EngineError) as exc:
            validate_one("test@example.com")

        assert exc.value.error_type == "EngineFault"
        assert exc.value.message == "Validation engine failed: grammar exploded"
        assert "RuntimeError" in exc.value.details


class TestValidateMany:
    """Batch entry point with per-item isolation."""

    def test_mixed_batch(self):
        emails = [
            "valid@example.com",
            "invalid.email",
            "another@valid.com",
            "@invalid.com",
            "last@valid.org",
        ]

        results = validate_many(emails)

        assert [r.is_valid for r in results] == [True, False, True, False, True]

    def test_all_valid(self):
        results = validate_many(["test1@example.com", "test2@domain.org", "user@company.net"])

        assert len(results) == 3
        for r in results:
            assert r.is_valid is True
            assert r.domain_score == 80.0
            assert r.error_message is None

    def test_empty_batch(self):
        assert validate_many([]) == []

    def test_tuple_accepted(self):
        results = validate_many(("a@b.co",))

        assert results[0].is_valid is True

    def test_bad_elements_isolated(self):
        emails = ["valid@example.com", 123, "another@valid.com", None, "a" * 400, ""]

        results = validate_many(emails)

        assert len(results) == 6
        assert results[0].is_valid is True
        assert results[1].to_dict() == {"isValid": False, "errorMessage": "Email must be a string"}
        assert results[2].is_valid is True
        assert results[3].error_message == "Email must be a string"
        assert results[4].error_message == "Email exceeds maximum length of 320 characters"
        assert results[5].error_message == "Email cannot be empty"

    def test_order_preserved(self):
        emails = [f"user{i}@example.com" for i in range(100)]

        results = validate_many(emails)

        assert len(results) == 100
        assert [r.local_part for r in results] == [f"user{i}" for i in range(100)]

    @pytest.mark.parametrize("value", ["not an array", b"bytes", {"a": 1}, {"a@b.co"}, 42, None])
    def test_non_sequence_raises(self, value):
        with pytest.raises(EngineError) as exc:
            validate_many(value)

        assert exc.value.error_type == "InvalidInput"
        assert exc.value.message == "Emails must be an array"

    def test_generator_rejected(self):
        with pytest.raises(EngineError):
            validate_many(e for e in ["a@b.co"])

    def test_internal_fault_downgraded(self, monkeypatch):
        def boom(email, table):
            raise RuntimeError("grammar exploded")

        monkeypatch.setattr(engine_module, "parse_email", boom)

        results = validate_many(["a@b.co", "c@d.co"])

        assert [r.error_message for r in results] == ["Validation engine failed: grammar exploded"] * 2


class TestAttempt:
    """The internal pair-returning path."""

    def test_result_side(self):
        engine = ValidationEngine(build_score_table())

        result, error = engine.attempt("x@y.io")

        assert error is None
        assert result.is_valid is True

    def test_error_side(self):
        engine = ValidationEngine(build_score_table())

        result, error = engine.attempt(7)

        assert result is None
        assert error.error_type == "InvalidInput"


class TestEngineLifecycle:
    """Lazy one-time initialization."""

    def test_engine_reused(self):
        assert get_engine() is get_engine()

    def test_reset_rebuilds(self):
        first = get_engine()
        reset_engine()

        assert get_engine() is not first

    def test_settings_feed_score_table(self, monkeypatch):
        monkeypatch.setattr(settings, "EXTRA_TRUSTED_DOMAINS", "corp.example, partner.example")
        monkeypatch.setattr(settings, "EXTRA_DISPOSABLE_DOMAINS", "burner.test")
        monkeypatch.setattr(settings, "DEFAULT_DOMAIN_SCORE", 60.0)
        reset_engine()

        assert validate_one("a@corp.example").domain_score == 95.0
        assert validate_one("a@partner.example").domain_score == 95.0
        assert validate_one("a@burner.test").domain_score == 10.0
        assert validate_one("a@example.com").domain_score == 60.0

    def test_custom_engine_table(self):
        engine = ValidationEngine(build_score_table(extra_trusted=["example.com"]))

        assert engine.validate_one("test@example.com").domain_score == 95.0


class TestAsyncEntryPoints:
    """Awaitable wrappers behave like the sync calls."""

    def test_validate_one_async(self):
        result = asyncio.run(validate_one_async("test@example.com"))

        assert result == validate_one("test@example.com")

    def test_validate_one_async_raises(self):
        with pytest.raises(EngineError):
            asyncio.run(validate_one_async(None))

    def test_validate_many_async(self):
        results = asyncio.run(validate_many_async(["a@b.co", "nope"]))

        assert [r.is_valid for r in results] == [True, False]
