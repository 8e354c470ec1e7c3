"""
Listing text moderation: prohibited term table and keyword scorer.
"""

from .scorer import (
    DESCRIPTION_POLICY,
    TITLE_POLICY,
    FieldPolicy,
    ListingModerator,
    ListingVerdict,
    ModerationVerdict,
    get_default_moderator,
)
from .terms import DEFAULT_PROHIBITED_TERMS, ProhibitedTermTable

__all__ = [
    "DEFAULT_PROHIBITED_TERMS",
    "DESCRIPTION_POLICY",
    "TITLE_POLICY",
    "FieldPolicy",
    "ListingModerator",
    "ListingVerdict",
    "ModerationVerdict",
    "ProhibitedTermTable",
    "get_default_moderator",
]
