from django.contrib import admin
from django.utils.html import format_html

from .models import (
    Listing,
    ListingAppeal,
    ListingReport,
    ModerationStatus,
    Notification,
    User,
)

SYSTEM_FIELDS = (
    "System Fields",
    {
        "fields": (
            "is_active",
            "is_deleted",
            "created_by",
            "updated_by",
            "created_at",
            "updated_at",
        ),
        "classes": ("collapse",),
    },
)

STATUS_COLORS = {
    ModerationStatus.PENDING.value: "orange",
    ModerationStatus.APPROVED.value: "green",
    ModerationStatus.REJECTED.value: "red",
    ModerationStatus.FLAGGED.value: "purple",
}


# =============================================================================
# USER MANAGEMENT
# =============================================================================


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = (
        "user_id",
        "full_name",
        "email",
        "role",
        "is_active_status",
        "created_at",
    )
    list_filter = ("role", "is_active", "is_deleted")
    search_fields = ("full_name", "email", "organization", "license_number")
    readonly_fields = ("user_id", "created_at", "updated_at", "password")

    fieldsets = (
        ("Basic Information", {"fields": ("full_name", "email", "role", "password")}),
        (
            "Agent Profile",
            {
                "fields": ("organization", "license_number", "phone"),
                "classes": ("collapse",),
            },
        ),
        SYSTEM_FIELDS,
    )

    @admin.display(description="Status")
    def is_active_status(self, obj):
        if obj.is_active == 1:
            return format_html('<span style="color: {};">{}</span>', "green", "Active")
        return format_html('<span style="color: {};">{}</span>', "red", "Inactive")


# =============================================================================
# LISTINGS AND MODERATION
# =============================================================================


class ListingReportInline(admin.TabularInline):
    model = ListingReport
    extra = 0
    fields = ("reporter", "reason", "reported_at")
    readonly_fields = fields
    can_delete = False


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = (
        "listing_id",
        "title",
        "agent",
        "city",
        "price",
        "get_moderation_status",
        "report_count",
        "created_at",
    )
    list_filter = ("moderation_status", "property_type", "listing_status", "city")
    search_fields = ("title", "description", "address", "city", "agent__email")
    readonly_fields = (
        "listing_id",
        "report_count",
        "views",
        "created_at",
        "updated_at",
    )
    list_select_related = ("agent",)
    inlines = [ListingReportInline]

    fieldsets = (
        ("Listing", {"fields": ("agent", "title", "description", "features")}),
        (
            "Property",
            {
                "fields": (
                    "price",
                    "property_type",
                    "listing_status",
                    "bedrooms",
                    "bathrooms",
                    "area",
                    "year_built",
                    "parking_spaces",
                    "is_featured",
                )
            },
        ),
        (
            "Location",
            {
                "fields": (
                    "address",
                    "city",
                    "state",
                    "zip_code",
                    "latitude",
                    "longitude",
                ),
                "classes": ("collapse",),
            },
        ),
        (
            "Moderation",
            {
                "fields": (
                    "moderation_status",
                    "moderation_notes",
                    "report_count",
                    "views",
                )
            },
        ),
        SYSTEM_FIELDS,
    )

    @admin.display(description="Moderation", ordering="moderation_status")
    def get_moderation_status(self, obj):
        color = STATUS_COLORS.get(obj.moderation_status, "black")
        return format_html(
            '<span style="color: {};">{}</span>', color, obj.moderation_status
        )


@admin.register(ListingReport)
class ListingReportAdmin(admin.ModelAdmin):
    list_display = ("report_id", "listing", "get_reporter_name", "reported_at")
    search_fields = ("listing__title", "reporter__email", "reason")
    readonly_fields = ("report_id", "reported_at", "created_at", "updated_at")
    list_select_related = ("listing", "reporter")

    @admin.display(description="Reporter")
    def get_reporter_name(self, obj):
        return obj.reporter.full_name if obj.reporter else "-"


@admin.register(ListingAppeal)
class ListingAppealAdmin(admin.ModelAdmin):
    list_display = (
        "appeal_id",
        "listing",
        "agent",
        "status",
        "reviewed_by",
        "created_at",
    )
    list_filter = ("status",)
    search_fields = ("listing__title", "agent__email", "reason")
    readonly_fields = ("appeal_id", "reviewed_at", "created_at", "updated_at")
    list_select_related = ("listing", "agent", "reviewed_by")


# =============================================================================
# NOTIFICATIONS
# =============================================================================


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = (
        "notification_id",
        "get_user_name",
        "title",
        "type",
        "get_read_status",
        "created_at",
    )
    list_filter = ("type", "is_read", "related_type")
    search_fields = ("title", "message", "user__email")
    readonly_fields = ("notification_id", "created_at", "updated_at")
    list_select_related = ("user",)

    @admin.display(description="User")
    def get_user_name(self, obj):
        return obj.user.full_name if obj.user else "-"

    @admin.display(description="Read")
    def get_read_status(self, obj):
        if obj.is_read == 1:
            return format_html('<span style="color: {};">{}</span>', "green", "Read")
        return format_html('<span style="color: {};">{}</span>', "orange", "Unread")
