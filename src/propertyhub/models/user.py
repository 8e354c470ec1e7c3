# propertyhub/models/user.py
"""Accounts: email login, a role, and the agent profile columns."""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import models

from .base import BaseModel


class Role:
    ADMIN = "Admin"
    AGENT = "Agent"
    USER = "User"

    CHOICES = [
        (ADMIN, "Administrator"),
        (AGENT, "Agent"),
        (USER, "Standard User"),
    ]

    # May publish listings
    LISTING_ROLES = (ADMIN, AGENT)


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("An email address is required")
        defaults = {"role": Role.USER, "is_active": 1, "is_deleted": 0, "is_staff": False}
        user = self.model(email=self.normalize_email(email), **{**defaults, **extra_fields})
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Admin-role account with Django admin access."""
        extra_fields = {"role": Role.ADMIN, **extra_fields}
        for flag in ("is_staff", "is_superuser"):
            if extra_fields.setdefault(flag, True) is not True:
                raise ValueError(f"A superuser needs {flag}=True")
        return self.create_user(email, password, **extra_fields)

    def active(self):
        """Excludes deactivated and soft-deleted accounts."""
        return self.filter(is_active=1, is_deleted=0)

    def active_admins(self):
        return self.active().filter(role=Role.ADMIN)


class User(AbstractBaseUser, BaseModel):
    """
    Account of a platform user.

    Agents publish listings and may appeal rejections; admins moderate
    listings and resolve appeals; users browse and report listings.
    """

    user_id = models.AutoField(
        db_column="UserID",
        primary_key=True,
        help_text="Primary key",
    )
    full_name = models.CharField(
        db_column="FullName",
        max_length=255,
        help_text="Display name",
    )
    email = models.CharField(
        db_column="Email",
        unique=True,
        max_length=255,
        help_text="Login address, unique",
    )
    password = models.CharField(
        db_column="PasswordHash",
        max_length=255,
        help_text="Django password hash",
    )
    role = models.CharField(
        db_column="Role",
        max_length=12,
        choices=Role.CHOICES,
        default=Role.USER,
        help_text="Admin, Agent or User",
    )

    # Required by django.contrib.admin
    is_staff = models.BooleanField(
        default=False,
        help_text="May sign in to the Django admin",
    )
    is_superuser = models.BooleanField(
        default=False,
        help_text="Bypasses every permission check",
    )
    last_login = models.DateTimeField(
        db_column="LastLogin",
        blank=True,
        null=True,
        help_text="Set by Django on admin sign-in",
    )

    # Agent profile fields
    organization = models.CharField(
        db_column="Organization",
        max_length=255,
        blank=True,
        null=True,
        help_text="Agency or brokerage name",
    )
    license_number = models.CharField(
        db_column="LicenseNumber",
        max_length=100,
        blank=True,
        null=True,
        help_text="Real-estate license number (agents)",
    )
    phone = models.CharField(
        db_column="Phone",
        max_length=20,
        blank=True,
        null=True,
        help_text="Contact number shown on listings",
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["full_name"]

    class Meta:
        managed = True
        db_table = "Users"
        verbose_name = "User"
        verbose_name_plural = "Users"
        indexes = [
            models.Index(
                fields=["email", "is_active"], name="users_email_active_idx"
            ),
            models.Index(fields=["role", "is_active"], name="users_role_active_idx"),
        ]
        app_label = "propertyhub"

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}>"

    @property
    def id(self) -> int:
        return self.user_id

    def clean(self) -> None:
        if not self.email:
            return
        try:
            validate_email(self.email)
        except ValidationError:
            raise ValidationError({"email": "Enter a valid email address."}) from None

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def is_agent(self) -> bool:
        return self.role == Role.AGENT

    def can_publish_listings(self) -> bool:
        return self.role in Role.LISTING_ROLES

    # Django admin access: superusers and the Admin role get every permission
    def has_perm(self, perm, obj=None) -> bool:
        return self.is_superuser or self.is_admin()

    def has_module_perms(self, app_label) -> bool:
        return self.is_superuser or self.is_admin()
