from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from propertyhub.apis.common import error_response, paginated_response, query_flag
from propertyhub.models import ListingStatus, ModerationStatus, PropertyType
from propertyhub.permissions import IsAgentOrAdmin, IsAuthenticatedUser
from propertyhub.serializers.listing_serializers import (
    ListingReportSerializer,
    ListingSerializer,
    ListingWriteSerializer,
    ReportRequestSerializer,
)
from propertyhub.services.listing_service import ListingService
from propertyhub.services.report_service import ReportService

VERDICT_SCHEMA = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={
        "is_approved": openapi.Schema(type=openapi.TYPE_BOOLEAN),
        "flagged": openapi.Schema(type=openapi.TYPE_BOOLEAN),
        "prohibited_terms": openapi.Schema(
            type=openapi.TYPE_ARRAY, items=openapi.Schema(type=openapi.TYPE_STRING)
        ),
        "moderation_score": openapi.Schema(type=openapi.TYPE_INTEGER),
        "title_result": openapi.Schema(type=openapi.TYPE_OBJECT),
        "description_result": openapi.Schema(type=openapi.TYPE_OBJECT),
    },
)

LISTING_WITH_VERDICT = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={
        "message": openapi.Schema(type=openapi.TYPE_STRING),
        "data": openapi.Schema(type=openapi.TYPE_OBJECT),
        "moderation": VERDICT_SCHEMA,
    },
)


class ListListingsAPI(APIView):
    """Search listings. The public only sees approved listings."""

    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description=(
            "List listings. Anonymous users and regular users see approved "
            "listings only; admins may filter by moderation_status; mine=true "
            "returns the caller's own listings in every status."
        ),
        manual_parameters=[
            openapi.Parameter(
                "city", openapi.IN_QUERY, type=openapi.TYPE_STRING, required=False
            ),
            openapi.Parameter(
                "property_type",
                openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=PropertyType.values(),
                required=False,
            ),
            openapi.Parameter(
                "listing_status",
                openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=ListingStatus.values(),
                required=False,
            ),
            openapi.Parameter(
                "moderation_status",
                openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=ModerationStatus.values(),
                required=False,
            ),
            openapi.Parameter(
                "min_price", openapi.IN_QUERY, type=openapi.TYPE_NUMBER, required=False
            ),
            openapi.Parameter(
                "max_price", openapi.IN_QUERY, type=openapi.TYPE_NUMBER, required=False
            ),
            openapi.Parameter(
                "mine", openapi.IN_QUERY, type=openapi.TYPE_BOOLEAN, required=False
            ),
            openapi.Parameter(
                "page", openapi.IN_QUERY, type=openapi.TYPE_INTEGER, required=False
            ),
        ],
        responses={
            200: ListingSerializer(many=True),
            400: error_response("Invalid filter value"),
        },
    )
    def get(self, request):
        filters = {
            key: request.query_params.get(key)
            for key in (
                "city",
                "property_type",
                "listing_status",
                "moderation_status",
                "min_price",
                "max_price",
            )
        }
        filters["mine"] = query_flag(request, "mine")

        listings = ListingService().list_listings(filters, user=request.user)
        return paginated_response(
            request,
            self,
            listings,
            ListingSerializer,
            "Listings retrieved successfully",
        )


class CreateListingAPI(APIView):
    """Publish a new listing (agents and admins)."""

    permission_classes = [IsAgentOrAdmin]

    @swagger_auto_schema(
        operation_description=(
            "Create a listing. Agent listings start Pending, admin listings "
            "start Approved. The keyword moderation verdict is returned as "
            "advice and does not change the listing's status."
        ),
        request_body=ListingWriteSerializer,
        responses={
            201: openapi.Response("Listing created", LISTING_WITH_VERDICT),
            400: error_response("Validation errors"),
            403: error_response("Only agents and admins can create listings"),
        },
    )
    def post(self, request):
        serializer = ListingWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        listing, verdict = ListingService().create_listing(
            request.user, serializer.validated_data
        )
        return Response(
            {
                "message": "Listing created successfully",
                "data": ListingSerializer(listing).data,
                "moderation": verdict.to_dict(),
            },
            status=status.HTTP_201_CREATED,
        )


class GetListingAPI(APIView):
    """Listing detail; counts a view for everyone but the owner."""

    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description=(
            "Get a listing. Listings that are not approved are only visible "
            "to their agent and to admins."
        ),
        responses={
            200: ListingSerializer,
            404: error_response("Property not found"),
        },
    )
    def get(self, request, listing_id):
        listing = ListingService().get_listing(listing_id, user=request.user)
        return Response(
            {
                "message": "Listing retrieved successfully",
                "data": ListingSerializer(listing).data,
            }
        )


class UpdateListingAPI(APIView):
    """Edit a listing (owner or admin)."""

    permission_classes = [IsAgentOrAdmin]

    @swagger_auto_schema(
        operation_description=(
            "Update a listing's details. Moderation status, notes and report "
            "counters cannot be changed here."
        ),
        request_body=ListingWriteSerializer,
        responses={
            200: openapi.Response("Listing updated", LISTING_WITH_VERDICT),
            400: error_response("Validation errors"),
            403: error_response("Not the owner of the listing"),
            404: error_response("Property not found"),
        },
    )
    def put(self, request, listing_id):
        serializer = ListingWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        listing, verdict = ListingService().update_listing(
            listing_id, request.user, serializer.validated_data
        )
        return Response(
            {
                "message": "Listing updated successfully",
                "data": ListingSerializer(listing).data,
                "moderation": verdict.to_dict(),
            }
        )


class ReportListingAPI(APIView):
    """Report a listing. Three distinct reports flag it for review."""

    permission_classes = [IsAuthenticatedUser]

    @swagger_auto_schema(
        operation_description=(
            "Report a listing for review. Each user may report a listing "
            "once; the listing is flagged automatically once enough distinct "
            "users have reported it."
        ),
        request_body=ReportRequestSerializer,
        responses={
            201: ListingReportSerializer,
            400: error_response("Reason is required"),
            404: error_response("Property not found"),
            409: error_response("You have already reported this property"),
        },
    )
    def post(self, request, listing_id):
        serializer = ReportRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        report = ReportService().submit_report(
            listing_id, request.user_id, serializer.validated_data["reason"]
        )
        return Response(
            {
                "message": "Property reported successfully",
                "data": ListingReportSerializer(report).data,
            },
            status=status.HTTP_201_CREATED,
        )
