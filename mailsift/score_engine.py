# mailsift/score_engine.py
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

# Well-known mailbox providers, scored favorably
TRUSTED_PROVIDERS = frozenset({
    "gmail.com", "googlemail.com", "yahoo.com", "hotmail.com",
    "outlook.com", "icloud.com", "protonmail.com", "zoho.com",
})

# Minimal disposable provider list (extend through EXTRA_DISPOSABLE_DOMAINS)
DISPOSABLE_PROVIDERS = frozenset({
    "mailinator.com", "10minutemail.com", "tempmail.com", "trashmail.com",
    "guerrillamail.com", "yopmail.com", "dispostable.com",
})


@dataclass(frozen=True)
class DomainScoreTable:
    """
    Read-only domain -> score lookup with three tiers.

    Lookup is exact and case-sensitive: "Gmail.com" and "mail.gmail.com" both land
    in the default tier. A domain listed as both trusted and disposable scores as
    disposable.
    """
    trusted: FrozenSet[str] = TRUSTED_PROVIDERS
    disposable: FrozenSet[str] = DISPOSABLE_PROVIDERS
    trusted_score: float = 95.0
    default_score: float = 80.0
    disposable_score: float = 10.0

    def __post_init__(self):
        if not (0 <= self.disposable_score <= self.default_score <= self.trusted_score <= 100):
            raise ValueError(
                "domain scores must satisfy 0 <= disposable <= default <= trusted <= 100, got "
                f"{self.disposable_score}/{self.default_score}/{self.trusted_score}"
            )
        # accept any iterable from callers but store frozensets
        object.__setattr__(self, "trusted", frozenset(self.trusted))
        object.__setattr__(self, "disposable", frozenset(self.disposable))

    @property
    def scores(self) -> FrozenSet[float]:
        return frozenset({self.trusted_score, self.default_score, self.disposable_score})

    def is_trusted(self, domain: str) -> bool:
        return domain in self.trusted and domain not in self.disposable

    def is_disposable(self, domain: str) -> bool:
        return domain in self.disposable

    def score(self, domain: str) -> float:
        if domain in self.disposable:
            return self.disposable_score
        if domain in self.trusted:
            return self.trusted_score
        return self.default_score


def build_score_table(
    extra_trusted: Optional[Iterable[str]] = None,
    extra_disposable: Optional[Iterable[str]] = None,
    trusted_score: float = 95.0,
    default_score: float = 80.0,
    disposable_score: float = 10.0,
) -> DomainScoreTable:
    return DomainScoreTable(
        trusted=TRUSTED_PROVIDERS | frozenset(extra_trusted or ()),
        disposable=DISPOSABLE_PROVIDERS | frozenset(extra_disposable or ()),
        trusted_score=trusted_score,
        default_score=default_score,
        disposable_score=disposable_score,
    )
