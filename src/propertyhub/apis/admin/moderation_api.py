# propertyhub/apis/admin/moderation_api.py

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from propertyhub.apis.common import error_response, paginated_response
from propertyhub.exceptions import InvalidRequestError
from propertyhub.models import ModerationStatus
from propertyhub.permissions import IsAdminRole
from propertyhub.serializers.listing_serializers import (
    AppealResolutionSerializer,
    ListingAppealSerializer,
    ListingReportSerializer,
    ListingSerializer,
    ModerationDecisionSerializer,
)
from propertyhub.services.appeal_service import AppealService
from propertyhub.services.listing_service import ListingService
from propertyhub.services.report_service import ReportService


class ModerationQueueAPI(APIView):
    """
    API for admins to view listings waiting for review.
    """

    permission_classes = [IsAdminRole]

    @swagger_auto_schema(
        operation_description=(
            "Listings awaiting review (Pending and Flagged by default), most "
            "reported first, then oldest first."
        ),
        manual_parameters=[
            openapi.Parameter(
                name="status",
                in_=openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=ModerationStatus.values(),
                description="Restrict the queue to one moderation status",
                required=False,
            ),
            openapi.Parameter(
                name="limit",
                in_=openapi.IN_QUERY,
                type=openapi.TYPE_INTEGER,
                description="Maximum number of items to return (default: 50)",
                required=False,
            ),
        ],
        responses={
            200: ListingSerializer(many=True),
            400: error_response("Invalid status or limit"),
        },
    )
    def get(self, request):
        limit = request.query_params.get("limit")
        try:
            limit = int(limit) if limit else None
        except ValueError:
            raise InvalidRequestError("limit must be a positive integer") from None

        listings = ListingService().get_moderation_queue(
            status=request.query_params.get("status"), limit=limit
        )
        return Response(
            {
                "message": "Moderation queue retrieved successfully",
                "count": len(listings),
                "data": ListingSerializer(listings, many=True).data,
            }
        )


class ModerateListingAPI(APIView):
    """
    API for admins to approve, reject or flag a listing.
    """

    permission_classes = [IsAdminRole]

    @swagger_auto_schema(
        operation_description=(
            "Approve, reject or flag a listing. The agent is notified of "
            "approvals and rejections."
        ),
        request_body=ModerationDecisionSerializer,
        responses={
            200: ListingSerializer,
            400: error_response("Invalid action"),
            404: error_response("Property not found"),
        },
    )
    def put(self, request, listing_id):
        serializer = ModerationDecisionSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        listing = ListingService().moderate_listing(
            listing_id,
            request.user,
            serializer.validated_data["action"],
            notes=serializer.validated_data["notes"],
        )
        return Response(
            {
                "message": (
                    f"Property {listing.moderation_status.lower()} successfully"
                ),
                "data": ListingSerializer(listing).data,
            }
        )


class ListingReportsAPI(APIView):
    """
    API for admins to read the reports filed against a listing.
    """

    permission_classes = [IsAdminRole]

    @swagger_auto_schema(
        operation_description="Reports filed against a listing, newest first.",
        responses={
            200: ListingReportSerializer(many=True),
            404: error_response("Property not found"),
        },
    )
    def get(self, request, listing_id):
        reports = ReportService().list_reports(listing_id)
        return paginated_response(
            request,
            self,
            reports,
            ListingReportSerializer,
            "Reports retrieved successfully",
        )


class ResolveAppealAPI(APIView):
    """
    API for admins to approve or reject an appeal.
    """

    permission_classes = [IsAdminRole]

    @swagger_auto_schema(
        operation_description=(
            "Resolve a pending appeal. Approving it approves the listing."
        ),
        request_body=AppealResolutionSerializer,
        responses={
            200: ListingAppealSerializer,
            400: error_response("Status is required"),
            404: error_response("Appeal not found"),
            409: error_response("Appeal has already been resolved"),
        },
    )
    def put(self, request, appeal_id):
        serializer = AppealResolutionSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        appeal = AppealService().resolve_appeal(
            appeal_id,
            request.user,
            serializer.validated_data["status"],
            admin_notes=serializer.validated_data["admin_notes"],
        )
        return Response(
            {
                "message": "Appeal updated successfully",
                "data": ListingAppealSerializer(appeal).data,
            }
        )
