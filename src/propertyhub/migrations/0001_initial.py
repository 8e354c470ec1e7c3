# Initial schema: users, listings, listing reports, listing appeals and
# notifications.

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def _bookkeeping_fields():
    return [
        (
            "is_active",
            models.IntegerField(
                blank=True,
                db_column="IsActive",
                default=1,
                help_text="1 while the row is in use, 0 once deactivated",
                null=True,
            ),
        ),
        (
            "is_deleted",
            models.IntegerField(
                blank=True,
                db_column="IsDeleted",
                default=0,
                help_text="1 once the row is soft-deleted",
                null=True,
            ),
        ),
        (
            "created_at",
            models.DateTimeField(
                auto_now_add=True,
                db_column="CreatedAt",
                help_text="Row creation time",
                null=True,
            ),
        ),
        (
            "updated_at",
            models.DateTimeField(
                auto_now=True,
                db_column="UpdatedAt",
                help_text="Last modification time",
                null=True,
            ),
        ),
        (
            "created_by",
            models.IntegerField(
                blank=True,
                db_column="CreatedBy",
                help_text="user_id of the creator",
                null=True,
            ),
        ),
        (
            "updated_by",
            models.IntegerField(
                blank=True,
                db_column="UpdatedBy",
                help_text="user_id of the last editor",
                null=True,
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "password",
                    models.CharField(
                        db_column="PasswordHash",
                        help_text="Django password hash",
                        max_length=255,
                    ),
                ),
                *_bookkeeping_fields(),
                (
                    "user_id",
                    models.AutoField(
                        db_column="UserID",
                        help_text="Primary key",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "full_name",
                    models.CharField(
                        db_column="FullName",
                        help_text="Display name",
                        max_length=255,
                    ),
                ),
                (
                    "email",
                    models.CharField(
                        db_column="Email",
                        help_text="Login address, unique",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("Admin", "Administrator"),
                            ("Agent", "Agent"),
                            ("User", "Standard User"),
                        ],
                        db_column="Role",
                        default="User",
                        help_text="Admin, Agent or User",
                        max_length=12,
                    ),
                ),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="May sign in to the Django admin",
                    ),
                ),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Bypasses every permission check",
                    ),
                ),
                (
                    "last_login",
                    models.DateTimeField(
                        blank=True,
                        db_column="LastLogin",
                        help_text="Set by Django on admin sign-in",
                        null=True,
                    ),
                ),
                (
                    "organization",
                    models.CharField(
                        blank=True,
                        db_column="Organization",
                        help_text="Agency or brokerage name",
                        max_length=255,
                        null=True,
                    ),
                ),
                (
                    "license_number",
                    models.CharField(
                        blank=True,
                        db_column="LicenseNumber",
                        help_text="Real-estate license number (agents)",
                        max_length=100,
                        null=True,
                    ),
                ),
                (
                    "phone",
                    models.CharField(
                        blank=True,
                        db_column="Phone",
                        help_text="Contact number shown on listings",
                        max_length=20,
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "User",
                "verbose_name_plural": "Users",
                "db_table": "Users",
                "managed": True,
                "indexes": [
                    models.Index(
                        fields=["email", "is_active"], name="users_email_active_idx"
                    ),
                    models.Index(
                        fields=["role", "is_active"], name="users_role_active_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Listing",
            fields=[
                *_bookkeeping_fields(),
                (
                    "listing_id",
                    models.AutoField(
                        db_column="ListingID",
                        help_text="Unique identifier for the listing",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        db_column="Title", help_text="Listing headline", max_length=255
                    ),
                ),
                (
                    "description",
                    models.TextField(
                        db_column="Description",
                        help_text="Free-text listing description",
                    ),
                ),
                (
                    "price",
                    models.DecimalField(
                        db_column="Price",
                        decimal_places=2,
                        help_text="Asking price or monthly rent",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("address", models.CharField(db_column="Address", max_length=255)),
                ("city", models.CharField(db_column="City", max_length=100)),
                ("state", models.CharField(db_column="State", max_length=100)),
                ("zip_code", models.CharField(db_column="ZipCode", max_length=20)),
                (
                    "latitude",
                    models.DecimalField(
                        blank=True,
                        db_column="Latitude",
                        decimal_places=6,
                        max_digits=9,
                        null=True,
                    ),
                ),
                (
                    "longitude",
                    models.DecimalField(
                        blank=True,
                        db_column="Longitude",
                        decimal_places=6,
                        max_digits=9,
                        null=True,
                    ),
                ),
                (
                    "bedrooms",
                    models.PositiveIntegerField(db_column="Bedrooms", default=0),
                ),
                (
                    "bathrooms",
                    models.DecimalField(
                        db_column="Bathrooms", decimal_places=1, default=0, max_digits=4
                    ),
                ),
                (
                    "area",
                    models.PositiveIntegerField(
                        db_column="Area",
                        default=0,
                        help_text="Floor area in square feet",
                    ),
                ),
                (
                    "property_type",
                    models.CharField(
                        choices=[
                            ("House", "House"),
                            ("Apartment", "Apartment"),
                            ("Condo", "Condo"),
                            ("Townhouse", "Townhouse"),
                            ("Land", "Land"),
                            ("Commercial", "Commercial"),
                        ],
                        db_column="PropertyType",
                        max_length=20,
                    ),
                ),
                (
                    "listing_status",
                    models.CharField(
                        choices=[
                            ("For Sale", "For Sale"),
                            ("For Rent", "For Rent"),
                            ("Sold", "Sold"),
                            ("Rented", "Rented"),
                        ],
                        db_column="ListingStatus",
                        default="For Sale",
                        max_length=20,
                    ),
                ),
                (
                    "year_built",
                    models.PositiveIntegerField(
                        blank=True, db_column="YearBuilt", null=True
                    ),
                ),
                (
                    "parking_spaces",
                    models.PositiveIntegerField(db_column="ParkingSpaces", default=0),
                ),
                (
                    "features",
                    models.JSONField(
                        blank=True,
                        db_column="Features",
                        default=list,
                        help_text="List of feature labels (pool, garage, ...)",
                    ),
                ),
                (
                    "is_featured",
                    models.BooleanField(db_column="IsFeatured", default=False),
                ),
                (
                    "moderation_status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Rejected", "Rejected"),
                            ("Flagged", "Flagged"),
                        ],
                        db_column="ModerationStatus",
                        default="Pending",
                        help_text="Visibility-governing moderation state",
                        max_length=10,
                    ),
                ),
                (
                    "moderation_notes",
                    models.TextField(
                        blank=True,
                        db_column="ModerationNotes",
                        help_text="Notes from the admin who last moderated the listing",
                        null=True,
                    ),
                ),
                (
                    "report_count",
                    models.PositiveIntegerField(
                        db_column="ReportCount",
                        default=0,
                        help_text="Number of distinct users who reported the listing",
                    ),
                ),
                ("views", models.PositiveIntegerField(db_column="Views", default=0)),
                (
                    "agent",
                    models.ForeignKey(
                        db_column="AgentID",
                        help_text="Agent (or admin) who published the listing",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listings",
                        to="propertyhub.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "db_table": "Listings",
                "ordering": ["-created_at"],
                "managed": True,
                "indexes": [
                    models.Index(
                        fields=["moderation_status", "created_at"],
                        name="listings_status_created_idx",
                    ),
                    models.Index(
                        fields=["agent", "moderation_status"],
                        name="listings_agent_status_idx",
                    ),
                    models.Index(
                        fields=["city", "property_type"], name="listings_city_type_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ListingReport",
            fields=[
                *_bookkeeping_fields(),
                (
                    "report_id",
                    models.AutoField(
                        db_column="ReportID",
                        help_text="Unique identifier for the report",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "reason",
                    models.TextField(
                        db_column="Reason",
                        help_text="Why the user reported the listing",
                    ),
                ),
                (
                    "reported_at",
                    models.DateTimeField(
                        db_column="ReportedAt",
                        default=django.utils.timezone.now,
                        help_text="When the report was filed",
                    ),
                ),
                (
                    "listing",
                    models.ForeignKey(
                        db_column="ListingID",
                        help_text="Reported listing",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reports",
                        to="propertyhub.listing",
                    ),
                ),
                (
                    "reporter",
                    models.ForeignKey(
                        db_column="ReporterID",
                        help_text="User who filed the report",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listing_reports",
                        to="propertyhub.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing Report",
                "verbose_name_plural": "Listing Reports",
                "db_table": "ListingReports",
                "ordering": ["reported_at", "report_id"],
                "managed": True,
                "indexes": [
                    models.Index(
                        fields=["listing", "reported_at"],
                        name="reports_listing_time_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("listing", "reporter"),
                        name="unique_report_per_reporter",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ListingAppeal",
            fields=[
                *_bookkeeping_fields(),
                (
                    "appeal_id",
                    models.AutoField(
                        db_column="AppealID",
                        help_text="Unique identifier for the appeal",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "reason",
                    models.TextField(
                        db_column="Reason", help_text="Reason for the appeal"
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Rejected", "Rejected"),
                        ],
                        db_column="Status",
                        default="Pending",
                        help_text="Current appeal status",
                        max_length=10,
                    ),
                ),
                (
                    "admin_notes",
                    models.TextField(
                        blank=True,
                        db_column="AdminNotes",
                        default="",
                        help_text="Notes from the reviewing admin",
                    ),
                ),
                (
                    "reviewed_at",
                    models.DateTimeField(
                        blank=True,
                        db_column="ReviewedAt",
                        help_text="When the appeal was resolved",
                        null=True,
                    ),
                ),
                (
                    "agent",
                    models.ForeignKey(
                        db_column="AgentID",
                        help_text="Agent submitting the appeal",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listing_appeals",
                        to="propertyhub.user",
                    ),
                ),
                (
                    "listing",
                    models.ForeignKey(
                        db_column="ListingID",
                        help_text="The rejected listing being appealed",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="appeals",
                        to="propertyhub.listing",
                    ),
                ),
                (
                    "reviewed_by",
                    models.ForeignKey(
                        blank=True,
                        db_column="ReviewedBy",
                        help_text="Admin who resolved the appeal",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="reviewed_appeals",
                        to="propertyhub.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing Appeal",
                "verbose_name_plural": "Listing Appeals",
                "db_table": "ListingAppeals",
                "ordering": ["-created_at"],
                "managed": True,
                "indexes": [
                    models.Index(
                        fields=["status", "created_at"],
                        name="appeals_status_created_idx",
                    ),
                    models.Index(
                        fields=["agent", "status"], name="appeals_agent_status_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                *_bookkeeping_fields(),
                (
                    "notification_id",
                    models.AutoField(
                        db_column="NotificationID",
                        help_text="Primary key",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        db_column="Title",
                        help_text="Short headline shown in the inbox",
                        max_length=255,
                    ),
                ),
                (
                    "message",
                    models.TextField(
                        db_column="Message",
                        help_text="Body text",
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("info", "Info"),
                            ("success", "Success"),
                            ("warning", "Warning"),
                            ("error", "Error"),
                        ],
                        db_column="Type",
                        default="info",
                        help_text="Notification severity",
                        max_length=7,
                    ),
                ),
                (
                    "related_type",
                    models.CharField(
                        blank=True,
                        choices=[("property", "Property"), ("appeal", "Appeal")],
                        db_column="RelatedType",
                        help_text="Kind of object the notification refers to",
                        max_length=10,
                        null=True,
                    ),
                ),
                (
                    "related_id",
                    models.IntegerField(
                        blank=True,
                        db_column="RelatedID",
                        help_text="Primary key of the referenced object",
                        null=True,
                    ),
                ),
                (
                    "is_read",
                    models.IntegerField(
                        db_column="IsRead",
                        default=0,
                        help_text="1 once the recipient opened it",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="UserID",
                        help_text="Recipient",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to="propertyhub.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Notification",
                "verbose_name_plural": "Notifications",
                "db_table": "Notifications",
                "ordering": ["-created_at", "-notification_id"],
                "managed": True,
                "indexes": [
                    models.Index(
                        fields=["user", "is_read", "created_at"],
                        name="notifications_inbox_idx",
                    ),
                ],
            },
        ),
    ]
