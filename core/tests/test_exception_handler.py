# core/tests/test_exception_handler.py
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.test import SimpleTestCase
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import (
    AvailabilityComputationException,
    OfferingNotFoundException,
    ResourceNotFoundException,
    StaffNotFoundException,
)
from core.exceptions.exception_handler import exception_handler


class ExceptionHandlerTest(SimpleTestCase):
    """Test cases for the error payload produced for API views"""

    def handle(self, exc):
        return exception_handler(exc, {"view": None})

    def test_custom_not_found(self):
        response = self.handle(OfferingNotFoundException())

        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.data, {"error": "offering_not_found", "message": "Offering not found"}
        )

    def test_custom_message(self):
        response = self.handle(StaffNotFoundException("No staff members found"))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "No staff members found")

    def test_custom_errors_become_details(self):
        response = self.handle(
            ResourceNotFoundException(errors={"staffId": ["Unknown staff member"]})
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "not_found")
        self.assertEqual(response.data["details"], {"staffId": ["Unknown staff member"]})

    def test_drf_validation_error(self):
        response = self.handle(ValidationError({"locationId": ["Must be a valid UUID."]}))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "validation_error")
        self.assertEqual(response.data["message"], "Validation error")
        self.assertIn("locationId", response.data["details"])

    def test_django_validation_error(self):
        response = self.handle(DjangoValidationError({"end_time": ["Must be after start"]}))

        self.assertEqual(response.status_code, 400)
        self.assertIn("end_time", response.data["details"])

    def test_drf_not_found(self):
        response = self.handle(NotFound())

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "not_found")

    def test_computation_failure(self):
        response = self.handle(AvailabilityComputationException())

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.data, {"error": "internal_error", "message": "Internal server error"}
        )

    def test_database_error(self):
        response = self.handle(DatabaseError("connection lost"))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"], "database_error")
        self.assertNotIn("connection lost", response.data["message"])

    def test_unexpected_error(self):
        response = self.handle(RuntimeError("secret internals"))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.data, {"error": "internal_error", "message": "Internal server error"}
        )
