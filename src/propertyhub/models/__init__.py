"""
Models package for the propertyhub application.

Models are organized by domain:
- Base model class
- Users and roles
- Listings, reports and appeals
- Notifications
"""

from .appeal import ListingAppeal
from .base import BaseModel
from .choices import (
    AppealStatus,
    ListingStatus,
    ModerationStatus,
    NotificationType,
    PropertyType,
    RelatedObjectType,
)
from .listing import Listing
from .notification import Notification
from .report import ListingReport
from .user import Role, User, UserManager

__all__ = [
    "AppealStatus",
    "BaseModel",
    "Listing",
    "ListingAppeal",
    "ListingReport",
    "ListingStatus",
    "ModerationStatus",
    "Notification",
    "NotificationType",
    "PropertyType",
    "RelatedObjectType",
    "Role",
    "User",
    "UserManager",
]
