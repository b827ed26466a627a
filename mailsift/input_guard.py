# mailsift/input_guard.py
from .models import EngineError, INVALID_INPUT, INVALID_LENGTH

# RFC 5321 practical upper bound: local-part + "@" + domain
MAX_EMAIL_LENGTH = 320


def check_input(email) -> None:
    """Reject non-strings and overlong strings. Does not trim or normalize."""
    if not isinstance(email, str):
        raise EngineError("Email must be a string", INVALID_INPUT)
    if len(email) > MAX_EMAIL_LENGTH:
        raise EngineError(
            f"Email exceeds maximum length of {MAX_EMAIL_LENGTH} characters",
            INVALID_LENGTH,
        )
