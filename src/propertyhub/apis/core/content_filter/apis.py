from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from propertyhub.apis.common import error_response
from propertyhub.serializers.listing_serializers import ContentFilterSerializer
from propertyhub.services.listing_service import ListingService


class ContentFilterAPI(APIView):
    """Check free text against the prohibited term table before submitting."""

    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description=(
            "Score text with the listing keyword moderator. A title is only "
            "scored together with text. Nothing is stored."
        ),
        request_body=ContentFilterSerializer,
        responses={
            200: openapi.Response(
                description="Moderation result",
                schema=openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    properties={
                        "is_flagged": openapi.Schema(type=openapi.TYPE_BOOLEAN),
                        "reasons": openapi.Schema(
                            type=openapi.TYPE_ARRAY,
                            items=openapi.Schema(type=openapi.TYPE_STRING),
                        ),
                        "moderation_score": openapi.Schema(
                            type=openapi.TYPE_INTEGER
                        ),
                    },
                ),
            ),
            400: error_response("No content provided for filtering"),
        },
    )
    def post(self, request):
        serializer = ContentFilterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ListingService().check_content(
            title=serializer.validated_data["title"],
            text=serializer.validated_data["text"],
        )
        return Response(result)
