import math

from django.conf import settings
from rest_framework import serializers

from flights.types import DEFAULT_LIMIT, DEFAULT_PAGE, SearchCriteria


class LenientFloatField(serializers.FloatField):
    """Unparseable or non-finite input becomes None instead of a validation error."""

    def to_internal_value(self, data):
        try:
            value = super().to_internal_value(data)
        except serializers.ValidationError:
            return None
        return value if math.isfinite(value) else None


class LenientIntegerField(serializers.IntegerField):
    def to_internal_value(self, data):
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError:
            return None


class OptionalCharField(serializers.CharField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_blank", True)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)
        # Free text is a substring filter; odd characters just fail to match.
        self.validators = []


class FlightSearchSerializer(serializers.Serializer):
    origin = OptionalCharField()
    destination = OptionalCharField()
    date = OptionalCharField()
    maxPrice = LenientFloatField(source="max_price", required=False, allow_null=True)
    minPrice = LenientFloatField(source="min_price", required=False, allow_null=True)
    stops = OptionalCharField()
    minDuration = LenientFloatField(source="min_duration", required=False, allow_null=True)
    maxDuration = LenientFloatField(source="max_duration", required=False, allow_null=True)
    flightCode = OptionalCharField(source="flight_code")
    status = OptionalCharField()
    sortBy = OptionalCharField(source="sort_by")
    page = LenientIntegerField(required=False, allow_null=True)
    limit = LenientIntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        default_limit = getattr(settings, "FLIGHTS_DEFAULT_PAGE_SIZE", DEFAULT_LIMIT)
        max_limit = getattr(settings, "FLIGHTS_MAX_PAGE_SIZE", None)

        page = attrs.get("page")
        attrs["page"] = page if page is not None and page >= 1 else DEFAULT_PAGE

        limit = attrs.get("limit")
        limit = limit if limit is not None and limit >= 1 else default_limit
        if max_limit:
            limit = min(limit, max_limit)
        attrs["limit"] = limit

        # Blank text parameters mean "no constraint".
        for key in ("origin", "destination", "date", "stops", "flight_code", "status", "sort_by"):
            if key in attrs:
                attrs[key] = (attrs[key] or "").strip() or None

        return attrs


def build_criteria(params) -> SearchCriteria:
    """Turn loosely-typed query parameters into SearchCriteria; never raises on bad numbers."""
    serializer = FlightSearchSerializer(data=params)
    serializer.is_valid(raise_exception=True)
    return SearchCriteria(**serializer.validated_data)
