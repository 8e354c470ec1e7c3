# propertyhub/models/choices.py
"""
Choice field definitions for model enums.

Values are the strings stored in the database and exchanged over the API.
"""

from collections.abc import Sequence as SequenceType
from enum import Enum


class ModerationStatus(str, Enum):
    """Visibility-governing moderation state of a listing."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    FLAGGED = "Flagged"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.value) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]

    @classmethod
    def review_statuses(cls) -> list[str]:
        """Statuses that put a listing in the admin moderation queue."""
        return [cls.PENDING.value, cls.FLAGGED.value]


class PropertyType(str, Enum):
    """Kinds of property a listing can describe."""

    HOUSE = "House"
    APARTMENT = "Apartment"
    CONDO = "Condo"
    TOWNHOUSE = "Townhouse"
    LAND = "Land"
    COMMERCIAL = "Commercial"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.value) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]


class ListingStatus(str, Enum):
    """Market status of a listing."""

    FOR_SALE = "For Sale"
    FOR_RENT = "For Rent"
    SOLD = "Sold"
    RENTED = "Rented"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.value) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]


class AppealStatus(str, Enum):
    """Status options for listing appeals."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.value) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]

    @classmethod
    def resolutions(cls) -> list[str]:
        return [cls.APPROVED.value, cls.REJECTED.value]


class NotificationType(str, Enum):
    """Severity of an in-app notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.name.title()) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]


class RelatedObjectType(str, Enum):
    """Kinds of object a notification can point at."""

    PROPERTY = "property"
    APPEAL = "appeal"

    @classmethod
    def choices(cls) -> SequenceType[tuple[str, str]]:
        return [(item.value, item.name.title()) for item in cls]

    @classmethod
    def values(cls) -> SequenceType[str]:
        return [item.value for item in cls]
