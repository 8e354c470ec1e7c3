# propertyhub/services/moderation/terms.py
"""
Prohibited term table used by the listing moderator.

The table is an immutable value grouped by category. The moderator receives
it at construction so callers (and tests) can supply their own table.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

DISCRIMINATORY = "discriminatory"
MISLEADING_FINANCIAL = "misleading_financial"
ILLEGAL_ACTIVITY = "illegal_activity"
EXTRA = "extra"


@dataclass(frozen=True)
class ProhibitedTermTable:
    """Category name -> tuple of lower-case terms."""

    categories: Mapping[str, tuple[str, ...]]

    def __post_init__(self):
        normalized = {
            name: tuple(term.strip().lower() for term in terms if term.strip())
            for name, terms in self.categories.items()
        }
        object.__setattr__(self, "categories", MappingProxyType(normalized))

    @classmethod
    def from_terms(cls, terms: Iterable[str], category: str = EXTRA):
        return cls({category: tuple(terms)})

    def all_terms(self) -> tuple[str, ...]:
        """Every term once, in category then declaration order."""
        seen: dict[str, None] = {}
        for terms in self.categories.values():
            for term in terms:
                seen.setdefault(term, None)
        return tuple(seen)

    def category_of(self, term: str) -> str | None:
        term = term.lower()
        for name, terms in self.categories.items():
            if term in terms:
                return name
        return None

    def with_extra_terms(self, terms: Iterable[str], category: str = EXTRA):
        """Return a new table with ``terms`` appended under ``category``."""
        extra = tuple(terms)
        if not extra:
            return self
        merged = dict(self.categories)
        merged[category] = merged.get(category, ()) + extra
        return ProhibitedTermTable(merged)

    def __len__(self) -> int:
        return len(self.all_terms())


DEFAULT_PROHIBITED_TERMS = ProhibitedTermTable(
    {
        # Fair-housing violations
        DISCRIMINATORY: (
            "whites only",
            "no minorities",
            "no children",
            "adults only",
            "no section 8",
            "christian only",
            "no muslims",
            "no jews",
            "preferred religion",
            "males only",
            "females only",
            "no disabled",
            "no wheelchairs",
        ),
        # Misleading financial promises and scam indicators
        MISLEADING_FINANCIAL: (
            "guaranteed return",
            "guaranteed investment",
            "guaranteed profit",
            "risk-free investment",
            "100% financing",
            "no money down",
            "wire money",
            "western union",
            "moneygram",
            "cash only deal",
            "overseas owner",
            "out of country",
            "foreign investor",
        ),
        ILLEGAL_ACTIVITY: (
            "adult entertainment",
            "adult business",
            "adult services",
            "grow operation",
            "grow house",
            "drug manufacturing",
        ),
    }
)
