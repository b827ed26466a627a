"""
Result and error types shared by the validation engine and its callers.

A ``ValidationResult`` is the normal outcome for any string input, valid or not.
An ``EngineError`` is raised for inputs the engine refuses to look at (wrong type,
too long) and for faults inside the engine itself.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# error taxonomy
INVALID_INPUT = "InvalidInput"
INVALID_LENGTH = "InvalidLength"
ENGINE_FAULT = "EngineFault"


class ValidationResult(BaseModel):
    """
    Outcome of validating one address.

    Exactly one side is populated: ``local_part``/``domain``/``domain_score`` when
    ``is_valid`` is true, ``error_message`` otherwise.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    local_part: Optional[str] = None
    domain: Optional[str] = None
    domain_score: Optional[float] = None
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def check_one_side(self):
        success = (self.local_part, self.domain, self.domain_score)
        if self.is_valid:
            if any(v is None for v in success) or self.error_message is not None:
                raise ValueError("valid result needs local_part, domain and domain_score only")
        else:
            if self.error_message is None or any(v is not None for v in success):
                raise ValueError("invalid result needs error_message only")
        return self

    @classmethod
    def success(cls, local_part: str, domain: str, domain_score: float) -> "ValidationResult":
        return cls(is_valid=True, local_part=local_part, domain=domain, domain_score=domain_score)

    @classmethod
    def failure(cls, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=error_message)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dict with absent fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EngineError(Exception):
    """Raised by the single-address entry point for guard failures and engine faults."""

    def __init__(self, message: str, error_type: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        out = {"errorType": self.error_type, "message": self.message}
        if self.details is not None:
            out["details"] = self.details
        return out
