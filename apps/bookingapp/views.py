# apps/bookingapp/views.py
from drf_yasg import openapi
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.documentation.api_doc_decorators import document_api_endpoint
from apps.bookingapp.serializers import (
    AvailabilityQuerySerializer,
    AvailabilitySummaryQuerySerializer,
    EnhancedAvailabilityQuerySerializer,
)
from apps.bookingapp.services.availability_service import AvailabilityService
from apps.bookingapp.services.staff_availability_service import StaffAvailabilityService

AVAILABILITY_RESPONSES = {
    status.HTTP_200_OK: "Success - Returns availability",
    status.HTTP_400_BAD_REQUEST: "Bad Request - Malformed id, date or duration",
    status.HTTP_404_NOT_FOUND: "Not Found - Offering, location or staff member missing",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Server Error - Store failure",
}

COMMON_QUERY_PARAMS = [
    {
        "name": "locationId",
        "description": "Location to compute availability for",
        "required": True,
        "format": openapi.FORMAT_UUID,
    },
    {
        "name": "offeringId",
        "description": "Offering being booked",
        "required": True,
        "format": openapi.FORMAT_UUID,
    },
    {
        "name": "date",
        "description": "Calendar date (YYYY-MM-DD)",
        "required": True,
        "format": openapi.FORMAT_DATE,
    },
    {
        "name": "duration",
        "description": "Overrides the offering duration (minutes)",
        "type": openapi.TYPE_INTEGER,
    },
]


def query_data(request, names):
    """
    Collect query parameters into serializer input

    Empty values are treated as absent. ``names`` maps query parameter names
    to serializer field names.
    """
    data = {}
    for param, field_name in names.items():
        value = request.query_params.get(param)
        if value:
            data[field_name] = value
    return data


class AvailabilityView(APIView):
    """Location-wide availability for an offering on a date"""

    permission_classes = [permissions.AllowAny]

    @document_api_endpoint(
        summary="Check location availability",
        description="Get bookable time slots for an offering at a location on a date",
        responses=AVAILABILITY_RESPONSES,
        query_params=[
            {
                "name": "location_id",
                "description": "Location to compute availability for",
                "required": True,
                "format": openapi.FORMAT_UUID,
            },
            {
                "name": "offering_id",
                "description": "Offering being booked",
                "required": True,
                "format": openapi.FORMAT_UUID,
            },
            {
                "name": "date",
                "description": "Calendar date (YYYY-MM-DD)",
                "required": True,
                "format": openapi.FORMAT_DATE,
            },
            {
                "name": "duration",
                "description": "Overrides the offering duration (minutes)",
                "type": openapi.TYPE_INTEGER,
            },
        ],
        tags=["Availability"],
    )
    def get(self, request):
        """Get location availability from query parameters"""
        data = query_data(
            request,
            {
                "location_id": "locationId",
                "offering_id": "offeringId",
                "date": "date",
                "duration": "duration",
            },
        )
        return self.slots_response(data)

    @document_api_endpoint(
        summary="Check location availability",
        description="Get bookable time slots for an offering at a location on a date",
        request_body=AvailabilityQuerySerializer,
        responses=AVAILABILITY_RESPONSES,
        tags=["Availability"],
    )
    def post(self, request):
        """Get location availability from a JSON body"""
        return self.slots_response(request.data)

    def slots_response(self, data):
        serializer = AvailabilityQuerySerializer(data=data)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data

        slots = AvailabilityService.get_available_slots(
            params["locationId"],
            params["offeringId"],
            params["date"],
            duration_override=params.get("duration"),
        )
        return Response({"slots": [slot.to_dict() for slot in slots]})


class EnhancedAvailabilityView(APIView):
    """Staff-aware availability: one staff member, all of them, or a capacity rollup"""

    permission_classes = [permissions.AllowAny]

    @document_api_endpoint(
        summary="Check staff availability",
        description=(
            "Get per-staff time slots. With staffId only that staff member is "
            "returned; with aggregated=true all staff are rolled up into "
            "capacity metrics; otherwise every staff member is listed."
        ),
        responses=AVAILABILITY_RESPONSES,
        query_params=COMMON_QUERY_PARAMS
        + [
            {
                "name": "staffId",
                "description": "Restrict to one staff member",
                "format": openapi.FORMAT_UUID,
            },
            {
                "name": "aggregated",
                "description": "Roll all staff up into capacity metrics",
                "type": openapi.TYPE_BOOLEAN,
            },
        ],
        tags=["Availability"],
    )
    def get(self, request):
        """Get staff availability"""
        serializer = EnhancedAvailabilityQuerySerializer(
            data=query_data(
                request,
                {
                    "locationId": "locationId",
                    "offeringId": "offeringId",
                    "date": "date",
                    "staffId": "staffId",
                    "aggregated": "aggregated",
                    "duration": "duration",
                },
            )
        )
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data

        result = StaffAvailabilityService.get_staff_availability(
            params["locationId"],
            params["offeringId"],
            params["date"],
            staff_id=params.get("staffId"),
            aggregated=params.get("aggregated", False),
            duration_override=params.get("duration"),
        )
        return Response(result.to_dict())


class AvailabilitySummaryView(APIView):
    """Digest of a day's location availability"""

    permission_classes = [permissions.AllowAny]

    @document_api_endpoint(
        summary="Summarize location availability",
        description=(
            "Get occupancy, the next free slot, runs of back-to-back free "
            "slots, suggested times and the hours with most free slots"
        ),
        responses=AVAILABILITY_RESPONSES,
        query_params=COMMON_QUERY_PARAMS
        + [
            {
                "name": "minConsecutive",
                "description": "Shortest run of back-to-back free slots to report",
                "type": openapi.TYPE_INTEGER,
            },
            {
                "name": "dayPart",
                "description": "Suggest times in the morning, afternoon or evening only",
            },
        ],
        tags=["Availability"],
    )
    def get(self, request):
        """Get availability summary"""
        serializer = AvailabilitySummaryQuerySerializer(
            data=query_data(
                request,
                {
                    "locationId": "locationId",
                    "offeringId": "offeringId",
                    "date": "date",
                    "duration": "duration",
                    "minConsecutive": "minConsecutive",
                    "dayPart": "dayPart",
                },
            )
        )
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data

        summary = AvailabilityService.get_availability_summary(
            params["locationId"],
            params["offeringId"],
            params["date"],
            duration_override=params.get("duration"),
            min_consecutive=params["minConsecutive"],
            day_part=params.get("dayPart"),
        )
        return Response(summary)
