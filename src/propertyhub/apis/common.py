# propertyhub/apis/common.py
"""
Shared pieces of the API layer: OpenAPI schemas and list pagination.
"""

from drf_yasg import openapi
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

ERROR_SCHEMA = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={"error": openapi.Schema(type=openapi.TYPE_STRING)},
)


def error_response(description: str) -> openapi.Response:
    return openapi.Response(description=description, schema=ERROR_SCHEMA)


def paginated_response(request, view, queryset, serializer_class, message: str):
    """
    Paginate ``queryset`` with the REST_FRAMEWORK page settings.

    Returns the usual ``{"message", "data"}`` envelope with ``count``,
    ``next`` and ``previous`` added.
    """
    paginator = PageNumberPagination()
    page = paginator.paginate_queryset(queryset, request, view=view)
    serializer = serializer_class(page, many=True)
    return Response(
        {
            "message": message,
            "count": paginator.page.paginator.count,
            "next": paginator.get_next_link(),
            "previous": paginator.get_previous_link(),
            "data": serializer.data,
        }
    )


def query_flag(request, name: str) -> bool:
    return request.query_params.get(name, "").lower() in ("1", "true", "yes")
