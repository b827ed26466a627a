# mailsift/engine.py

import logging
from collections.abc import Mapping, Sequence
from typing import List, Optional, Tuple

from .config import settings, split_csv_setting
from .input_guard import check_input
from .models import EngineError, ValidationResult, ENGINE_FAULT, INVALID_INPUT
from .score_engine import DomainScoreTable, build_score_table
from .syntax_engine import parse_email

logger = logging.getLogger("mailsift.engine")

Outcome = Tuple[Optional[ValidationResult], Optional[EngineError]]


class ValidationEngine:
    """Input guard -> grammar -> domain scoring, for one address at a time."""

    def __init__(self, score_table: DomainScoreTable):
        self.score_table = score_table

    def attempt(self, email) -> Outcome:
        """
        Run the single-address path without raising.

        Returns (result, None) or (None, error), never both.
        """
        try:
            check_input(email)
        except EngineError as e:
            return None, e

        try:
            return parse_email(email, self.score_table), None
        except Exception as e:
            logger.error("validation engine fault on input of length %d: %s", len(email), e)
            return None, EngineError(
                f"Validation engine failed: {e}",
                ENGINE_FAULT,
                details=repr(e),
            )

    def validate_one(self, email) -> ValidationResult:
        result, error = self.attempt(email)
        if error is not None:
            raise error
        return result

    def validate_many(self, emails) -> List[ValidationResult]:
        if (
            not isinstance(emails, Sequence)
            or isinstance(emails, (str, bytes, bytearray, Mapping))
        ):
            raise EngineError("Emails must be an array", INVALID_INPUT)

        results = []
        for index, email in enumerate(emails):
            result, error = self.attempt(email)
            if error is not None:
                logger.debug("batch item %d downgraded: %s", index, error)
                result = ValidationResult.failure(error.message)
            results.append(result)
        return results


# ---------------------------------------------------------
# Lazy process-wide engine
# ---------------------------------------------------------
_engine: Optional[ValidationEngine] = None


def get_engine() -> ValidationEngine:
    """Create the engine on first use, reuse it afterwards."""
    global _engine
    if _engine is None:
        table = build_score_table(
            extra_trusted=split_csv_setting(settings.EXTRA_TRUSTED_DOMAINS),
            extra_disposable=split_csv_setting(settings.EXTRA_DISPOSABLE_DOMAINS),
            trusted_score=settings.TRUSTED_DOMAIN_SCORE,
            default_score=settings.DEFAULT_DOMAIN_SCORE,
            disposable_score=settings.DISPOSABLE_DOMAIN_SCORE,
        )
        _engine = ValidationEngine(table)
        logger.info(
            "validation engine initialized (%d trusted, %d disposable domains)",
            len(table.trusted), len(table.disposable),
        )
    return _engine


def reset_engine() -> None:
    """Drop the engine so the next call rebuilds it from current settings."""
    global _engine
    _engine = None


def validate_one(email) -> ValidationResult:
    return get_engine().validate_one(email)


def validate_many(emails) -> List[ValidationResult]:
    return get_engine().validate_many(emails)


# async entry points for callers that await; nothing here suspends
async def validate_one_async(email) -> ValidationResult:
    return validate_one(email)


async def validate_many_async(emails) -> List[ValidationResult]:
    return validate_many(emails)
