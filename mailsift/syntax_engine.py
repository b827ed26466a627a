# mailsift/syntax_engine.py
import re
from typing import Optional, Tuple

from .models import ValidationResult
from .score_engine import DomainScoreTable

EMPTY_MESSAGE = "Email cannot be empty"
INVALID_FORMAT_MESSAGE = "Invalid email format"

# Practical grammar, ASCII only:
#   local  = no leading/trailing dot
#   domain = labels without edge hyphens, alphabetic TLD of 2+ chars
EMAIL_REGEX = re.compile(
    r"(?P<local>[A-Za-z0-9_%+-](?:[A-Za-z0-9._%+-]*[A-Za-z0-9_%+-])?)"
    r"@"
    r"(?P<domain>[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*"
    r"\.[A-Za-z]{2,})"
)


def split_address(addr: str) -> Optional[Tuple[str, str]]:
    """Return (local_part, domain) if addr matches the grammar, else None."""
    if not addr:
        return None
    m = EMAIL_REGEX.fullmatch(addr)
    if m is None:
        return None
    local = m.group("local")
    if ".." in local:
        return None
    return local, m.group("domain")


def is_syntax_valid(addr: str) -> bool:
    return split_address(addr) is not None


def parse_email(email: str, table: DomainScoreTable) -> ValidationResult:
    """
    Structural check of an already-guarded string.

    Malformed input is a normal negative result, never an exception. Only the
    empty string gets its own message; every other grammar failure reports
    "Invalid email format".
    """
    if email == "":
        return ValidationResult.failure(EMPTY_MESSAGE)

    parts = split_address(email)
    if parts is None:
        return ValidationResult.failure(INVALID_FORMAT_MESSAGE)

    local_part, domain = parts
    return ValidationResult.success(local_part, domain, table.score(domain))
