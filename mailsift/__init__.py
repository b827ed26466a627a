# mailsift/__init__.py

from .models import (
    ValidationResult,
    EngineError,
    INVALID_INPUT,
    INVALID_LENGTH,
    ENGINE_FAULT,
)
from .input_guard import MAX_EMAIL_LENGTH, check_input
from .syntax_engine import parse_email, is_syntax_valid, split_address
from .score_engine import DomainScoreTable, build_score_table
from .engine import (
    ValidationEngine,
    get_engine,
    reset_engine,
    validate_one,
    validate_many,
    validate_one_async,
    validate_many_async,
)

__all__ = [
    "ValidationResult",
    "EngineError",
    "INVALID_INPUT",
    "INVALID_LENGTH",
    "ENGINE_FAULT",
    "MAX_EMAIL_LENGTH",
    "check_input",
    "parse_email",
    "is_syntax_valid",
    "split_address",
    "DomainScoreTable",
    "build_score_table",
    "ValidationEngine",
    "get_engine",
    "reset_engine",
    "validate_one",
    "validate_many",
    "validate_one_async",
    "validate_many_async",
]
