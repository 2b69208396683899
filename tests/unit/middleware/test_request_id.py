"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpRequest, HttpResponse

from restful.constants import REQUEST_ID_HEADER
from restful.logging.context import get_request_id
from restful.middleware.request_id import RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.seen_request_ids = []

        def get_response(request):
            self.seen_request_ids.append(get_request_id())
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(get_response)

    def _create_request(self, headers=None):
        """Helper to create a test request."""
        request = HttpRequest()
        request.method = "GET"
        request.path = "/api/v1/paging/probe"
        for key, value in (headers or {}).items():
            request.META[f"HTTP_{key.upper().replace('-', '_')}"] = value
        return request

    def test_generates_request_id_when_not_present(self):
        """Test that a UUID is generated when no request ID is provided."""
        request = self._create_request()
        response = self.middleware(request)

        uuid.UUID(request.request_id)
        self.assertEqual(response[REQUEST_ID_HEADER], request.request_id)

    def test_uses_existing_request_id(self):
        """Test that an incoming X-Request-ID header is reused."""
        existing_id = str(uuid.uuid4())
        request = self._create_request(headers={REQUEST_ID_HEADER: existing_id})

        response = self.middleware(request)

        self.assertEqual(request.request_id, existing_id)
        self.assertEqual(response[REQUEST_ID_HEADER], existing_id)

    def test_request_id_is_bound_only_during_request(self):
        """Test that the ID is visible to the view and cleared afterwards."""
        request = self._create_request()
        self.middleware(request)

        self.assertEqual(self.seen_request_ids, [request.request_id])
        self.assertIsNone(get_request_id())


if __name__ == "__main__":
    unittest.main()
