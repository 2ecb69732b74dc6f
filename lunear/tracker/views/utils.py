# views/utils.py
"""
Shared tooling for drf-spectacular docs on route views.
Usage in your views:
    from .utils import (
        extend_schema, extend_schema_view, OpenApiResponse,
        path_str, q_str, q_list, intent_request, loader_responses, action_responses,
    )
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    PolymorphicProxySerializer,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers

# ---- Reusable schemas
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

ActionResultSerializer = inline_serializer(
    name="ActionResult",
    fields={
        "status": serializers.ChoiceField(choices=["success", "error"]),
        "data": serializers.JSONField(required=False),
        "errors": serializers.DictField(required=False),
        "toast": serializers.DictField(required=False),
    }
)

# ---- Param helpers

def path_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.PATH, description=description)

def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)

def q_list(name: str, description: str, item_type=OpenApiTypes.STR):
    """Repeated query key, e.g. ?status=1&status=2"""
    return OpenApiParameter(
        name, item_type, OpenApiParameter.QUERY,
        required=False, many=True, explode=True, description=description
    )

# ---- Intent bodies

def intent_request(component_name: str, schema):
    """One request body per intent, discriminated by the `intent` field."""
    return PolymorphicProxySerializer(
        component_name=component_name,
        serializers=[serializer_class for _, serializer_class in schema.variants.values()],
        resource_type_field_name=None,
    )

# ---- Convenience for common responses

def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        302: OpenApiResponse(description="Not signed in: redirect to the sign-in page"),
        401: OpenApiResponse(ErrorSerializer, description="Unauthorized"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs


def loader_responses(description: str):
    return {200: OpenApiResponse(OpenApiTypes.OBJECT, description=description), **std_errors()}


def action_responses(extra: dict | None = None):
    mapping = {
        200: OpenApiResponse(ActionResultSerializer, description="Refreshed loader data or an error toast"),
        400: OpenApiResponse(ActionResultSerializer, description="Field errors of the submission"),
        **std_errors(),
    }
    if extra:
        mapping.update(extra)
    return mapping
