"""
Unit tests for clients/ and shared/http.py

Tests request construction, response parsing, and conversion of
transport, status and parse failures into ProviderError subclasses.
"""

import unittest
from unittest.mock import patch

import requests

from clients import AvailabilityClient, BackendClient, EmailClient
from models import EmailPayload
from shared.errors import (
    DeserializationError,
    ProviderError,
    ProviderStatusError,
    TransportError,
)
from tests.fixtures.mock_helpers import create_mock_requests_response
from tests.fixtures.subscription_factory import (
    create_availability_body,
    create_test_facility,
    create_test_settings,
    create_test_subscription,
)


class TestBackendClient(unittest.TestCase):
    """Tests for BackendClient."""

    def setUp(self):
        self.client = BackendClient(create_test_settings())

    @patch("shared.http.requests.get")
    def test_fetch_subscriptions_confirmed_only(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data={"data": [create_test_subscription(email="a@example.com")]}
        )

        result = self.client.fetch_subscriptions()

        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].email, "a@example.com")
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://backend.example.com/subscriptions")
        self.assertEqual(kwargs["params"], {"status": "confirmed"})
        self.assertEqual(kwargs["timeout"], 5.0)

    @patch("shared.http.requests.get")
    def test_fetch_facilities_keeps_commas(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data={"data": [create_test_facility(1, "100"), create_test_facility(2, "200")]}
        )

        result = self.client.fetch_facilities("1,2")

        self.assertEqual([f.id for f in result], ["1", "2"])
        self.assertEqual(
            mock_get.call_args[0][0], "https://backend.example.com/facilities?ids=1,2"
        )

    @patch("shared.http.requests.get")
    def test_fetch_subscriptions_string_facility_ids(self, mock_get):
        """Non-numeric facility ids parse instead of failing the whole response."""
        mock_get.return_value = create_mock_requests_response(
            json_data={
                "data": [
                    create_test_subscription("a@example.com", "A"),
                    create_test_subscription("b@example.com", "B"),
                    create_test_subscription("c@example.com", "A"),
                ]
            }
        )

        result = self.client.fetch_subscriptions()

        self.assertEqual([s.facility_id for s in result], ["A", "B", "A"])

    @patch("shared.http.requests.get")
    def test_fetch_facilities_encodes_each_id(self, mock_get):
        mock_get.return_value = create_mock_requests_response(json_data={"data": []})

        self.client.fetch_facilities("pine lake,a&b,C")

        self.assertEqual(
            mock_get.call_args[0][0],
            "https://backend.example.com/facilities?ids=pine%20lake,a%26b,C",
        )

    @patch("shared.http.requests.get")
    def test_fetch_facilities_empty_ids(self, mock_get):
        """Empty id list returns no facilities without a request."""
        result = self.client.fetch_facilities("")

        self.assertEqual(result, [])
        mock_get.assert_not_called()

    @patch("shared.http.requests.get")
    def test_connection_error_is_transport_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(TransportError) as ctx:
            self.client.fetch_subscriptions()

        self.assertEqual(ctx.exception.operation, "fetch_subscriptions")
        self.assertIsInstance(ctx.exception.cause, requests.ConnectionError)

    @patch("shared.http.requests.get")
    def test_timeout_is_transport_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")

        with self.assertRaises(TransportError):
            self.client.fetch_facilities("1")

    @patch("shared.http.requests.get")
    def test_non_json_is_deserialization_error(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_error=ValueError("Expecting value")
        )

        with self.assertRaises(DeserializationError) as ctx:
            self.client.fetch_subscriptions()

        self.assertEqual(ctx.exception.operation, "fetch_subscriptions")

    @patch("shared.http.requests.get")
    def test_shape_mismatch_is_deserialization_error(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data={"data": [{"email": "a@example.com"}]}
        )

        with self.assertRaises(DeserializationError):
            self.client.fetch_subscriptions()

    @patch("shared.http.requests.get")
    def test_server_error_is_status_error(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            status_code=503, text="unavailable"
        )

        with self.assertRaises(ProviderStatusError) as ctx:
            self.client.fetch_facilities("1")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIsInstance(ctx.exception, ProviderError)


class TestAvailabilityClient(unittest.TestCase):
    """Tests for AvailabilityClient.fetch_availability()."""

    def setUp(self):
        self.client = AvailabilityClient(create_test_settings())

    @patch("shared.http.requests.get")
    def test_builds_month_url(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data=create_availability_body()
        )

        self.client.fetch_availability("232447", "11", year=2026)

        self.assertEqual(
            mock_get.call_args[0][0],
            "https://availability.example.com/api/camps/availability/campground/232447/month"
            "?start_date=2026-11-01T00%3A00%3A00.000Z",
        )

    @patch("shared.http.requests.get")
    def test_filters_available(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data=create_availability_body(
                {"A1": ["Available"], "B2": ["Booked"], "C3": ["Available"]}
            )
        )

        result = self.client.fetch_availability("232447", "11", year=2026)

        self.assertEqual(sorted(result), ["A1", "C3"])

    @patch("shared.http.requests.get")
    def test_no_openings(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data=create_availability_body({"A1": ["Reserved", "Not Available"]})
        )

        result = self.client.fetch_availability("232447", "11", year=2026)

        self.assertEqual(result, [])

    @patch("shared.http.requests.get")
    def test_defaults_to_current_year(self, mock_get):
        mock_get.return_value = create_mock_requests_response(
            json_data=create_availability_body()
        )

        with patch("clients.availability_api.datetime") as mock_datetime:
            mock_datetime.now.return_value.year = 2031
            self.client.fetch_availability("232447", "02")

        self.assertIn("start_date=2031-02-01", mock_get.call_args[0][0])

    @patch("shared.http.requests.get")
    def test_failure_carries_operation(self, mock_get):
        mock_get.return_value = create_mock_requests_response(status_code=500)

        with self.assertRaises(ProviderStatusError) as ctx:
            self.client.fetch_availability("232447", "11", year=2026)

        self.assertEqual(ctx.exception.operation, "fetch_availability")


class TestEmailClient(unittest.TestCase):
    """Tests for EmailClient.send_email()."""

    def setUp(self):
        self.client = EmailClient(create_test_settings())
        self.payload = EmailPayload(
            from_email="info@example.com",
            to="camper@example.com",
            subject="Your spot opened up!",
            text_body="text",
            html_body="<p>html</p>",
        )

    @patch("shared.http.requests.post")
    def test_posts_payload_with_headers(self, mock_post):
        mock_post.return_value = create_mock_requests_response(
            json_data={"MessageID": "abc-123", "ErrorCode": 0}
        )

        email_id = self.client.send_email(self.payload)

        self.assertEqual(email_id, "abc-123")
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "https://postmark.example.com/email")
        self.assertEqual(kwargs["headers"]["Accept"], "application/json")
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")
        self.assertEqual(kwargs["headers"]["X-Postmark-Server-Token"], "test-token")
        self.assertEqual(kwargs["json"]["To"], "camper@example.com")
        self.assertEqual(kwargs["json"]["MessageStream"], "outbound")

    @patch("shared.http.requests.post")
    def test_non_json_success_body(self, mock_post):
        mock_post.return_value = create_mock_requests_response(
            json_error=ValueError("no body")
        )

        self.assertIsNone(self.client.send_email(self.payload))

    @patch("shared.http.requests.post")
    def test_non_2xx_is_failure(self, mock_post):
        mock_post.return_value = create_mock_requests_response(
            status_code=422, text='{"ErrorCode": 300}'
        )

        with self.assertRaises(ProviderStatusError) as ctx:
            self.client.send_email(self.payload)

        self.assertEqual(ctx.exception.operation, "send_digest_email")
        self.assertEqual(ctx.exception.status_code, 422)

    @patch("shared.http.requests.post")
    def test_redirect_status_is_failure(self, mock_post):
        mock_post.return_value = create_mock_requests_response(status_code=302)

        with self.assertRaises(ProviderStatusError):
            self.client.send_email(self.payload)


if __name__ == "__main__":
    unittest.main()
