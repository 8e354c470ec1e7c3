from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from propertyhub.apis.common import error_response, paginated_response
from propertyhub.models import AppealStatus
from propertyhub.permissions import IsAgentOrAdmin
from propertyhub.serializers.listing_serializers import (
    AppealRequestSerializer,
    ListingAppealSerializer,
)
from propertyhub.services.appeal_service import AppealService


class AppealsAPI(APIView):
    """
    Agents appeal rejected listings and follow their appeals; admins list
    every appeal.
    """

    permission_classes = [IsAgentOrAdmin]

    @swagger_auto_schema(
        operation_description="List appeals (admins: all, agents: their own).",
        manual_parameters=[
            openapi.Parameter(
                "status",
                openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                enum=AppealStatus.values(),
                required=False,
            ),
        ],
        responses={200: ListingAppealSerializer(many=True)},
    )
    def get(self, request):
        appeals = AppealService().list_appeals(
            request.user, status=request.query_params.get("status")
        )
        return paginated_response(
            request,
            self,
            appeals,
            ListingAppealSerializer,
            "Appeals retrieved successfully",
        )

    @swagger_auto_schema(
        operation_description="Appeal the rejection of one of your listings.",
        request_body=AppealRequestSerializer,
        responses={
            201: ListingAppealSerializer,
            400: error_response("Only rejected properties can be appealed"),
            403: error_response("Only agents can submit appeals"),
            404: error_response("Property not found"),
            409: error_response("An appeal for this property is already pending"),
        },
    )
    def post(self, request):
        serializer = AppealRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        appeal = AppealService().submit_appeal(
            serializer.validated_data["listing_id"],
            request.user,
            serializer.validated_data["reason"],
        )
        return Response(
            {
                "message": "Appeal submitted successfully",
                "data": ListingAppealSerializer(appeal).data,
            },
            status=status.HTTP_201_CREATED,
        )
