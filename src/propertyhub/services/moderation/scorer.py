# propertyhub/services/moderation/scorer.py
"""
Keyword scoring of listing text.

Each field (title, description) is scored against the prohibited term
table with its own weight and thresholds:

    score = min(matches * weight, 100)
    flagged  when score >= flag_at
    approved when score <  approve_below

The verdict is advisory. Nothing here writes to the database or changes a
listing's moderation status.
"""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings

from .terms import DEFAULT_PROHIBITED_TERMS, ProhibitedTermTable

MAX_SCORE = 100


@dataclass(frozen=True)
class FieldPolicy:
    weight: int
    flag_at: int
    approve_below: int


# Titles are more visible, so each match weighs more
TITLE_POLICY = FieldPolicy(weight=35, flag_at=20, approve_below=35)
DESCRIPTION_POLICY = FieldPolicy(weight=25, flag_at=25, approve_below=50)


@dataclass(frozen=True)
class ModerationVerdict:
    is_approved: bool = True
    flagged: bool = False
    prohibited_terms: tuple[str, ...] = ()
    moderation_score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_approved": self.is_approved,
            "flagged": self.flagged,
            "prohibited_terms": list(self.prohibited_terms),
            "moderation_score": self.moderation_score,
        }


CLEAN_VERDICT = ModerationVerdict()


@dataclass(frozen=True)
class ListingVerdict(ModerationVerdict):
    title_result: ModerationVerdict = field(default=CLEAN_VERDICT)
    description_result: ModerationVerdict = field(default=CLEAN_VERDICT)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["title_result"] = self.title_result.to_dict()
        data["description_result"] = self.description_result.to_dict()
        return data


class ListingModerator:
    """
    Scores listing titles and descriptions against a prohibited term table.

    Usage:
        moderator = ListingModerator()
        verdict = moderator.score_listing(title, description)
        if verdict.flagged:
            ...
    """

    def __init__(
        self,
        terms: ProhibitedTermTable = DEFAULT_PROHIBITED_TERMS,
        title_policy: FieldPolicy = TITLE_POLICY,
        description_policy: FieldPolicy = DESCRIPTION_POLICY,
    ):
        self.terms = terms
        self.title_policy = title_policy
        self.description_policy = description_policy

    def find_terms(self, text: str | None) -> tuple[str, ...]:
        """Distinct table terms contained in ``text``, case-insensitively."""
        if not text:
            return ()
        lowered = text.lower()
        return tuple(term for term in self.terms.all_terms() if term in lowered)

    def score_text(self, text: str | None, policy: FieldPolicy) -> ModerationVerdict:
        found = self.find_terms(text)
        if not found:
            return CLEAN_VERDICT

        score = min(len(found) * policy.weight, MAX_SCORE)
        return ModerationVerdict(
            is_approved=score < policy.approve_below,
            flagged=score >= policy.flag_at,
            prohibited_terms=found,
            moderation_score=score,
        )

    def score_title(self, text: str | None) -> ModerationVerdict:
        return self.score_text(text, self.title_policy)

    def score_description(self, text: str | None) -> ModerationVerdict:
        return self.score_text(text, self.description_policy)

    def score_listing(
        self, title: str | None, description: str | None
    ) -> ListingVerdict:
        """
        Combine the title and description verdicts.

        Terms are the union (title terms first), the score is the higher of
        the two, flagged if either field is flagged and approved only if
        both fields are approved.
        """
        title_result = self.score_title(title)
        description_result = self.score_description(description)

        terms = dict.fromkeys(
            title_result.prohibited_terms + description_result.prohibited_terms
        )
        return ListingVerdict(
            is_approved=title_result.is_approved and description_result.is_approved,
            flagged=title_result.flagged or description_result.flagged,
            prohibited_terms=tuple(terms),
            moderation_score=max(
                title_result.moderation_score, description_result.moderation_score
            ),
            title_result=title_result,
            description_result=description_result,
        )

    def check_content(
        self, title: str | None = None, text: str | None = None
    ) -> dict[str, Any]:
        """
        Content-filter check used by the public endpoint.

        ``text`` is scored as a description. A ``title`` only counts together
        with ``text`` (combined listing verdict); on its own it scores 0.
        """
        if title and text:
            verdict: ModerationVerdict = self.score_listing(title, text)
        else:
            verdict = self.score_description(text)

        return {
            "is_flagged": verdict.flagged,
            "reasons": [
                f'Contains prohibited term: "{term}"'
                for term in verdict.prohibited_terms
            ],
            "moderation_score": verdict.moderation_score,
        }


def get_default_moderator() -> ListingModerator:
    """Moderator over the built-in table plus LISTING_EXTRA_PROHIBITED_TERMS."""
    extra = getattr(settings, "LISTING_EXTRA_PROHIBITED_TERMS", [])
    return ListingModerator(terms=DEFAULT_PROHIBITED_TERMS.with_extra_terms(extra))
