"""Unit tests for request argument binding."""

import unittest

from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from restful.binding import bind_arguments
from restful.contracts import DeclaredParameter, QueryParam

PAGE = DeclaredParameter(
    position=1,
    name="page",
    annotation=int | None,
    default=0,
    query_param=QueryParam("page", default=0),
)
SIZE = DeclaredParameter(
    position=2,
    name="size",
    annotation=int | None,
    default=None,
    query_param=QueryParam("size"),
)
ITEM_ID = DeclaredParameter(position=0, name="item_id", annotation=int)


class TestBindArguments(unittest.TestCase):
    """Test cases for bind_arguments."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = APIRequestFactory()

    def _request(self, params=None):
        """Helper to create a DRF request with query params."""
        return Request(self.factory.get("/items", params or {}))

    def test_coerces_query_values_to_declared_type(self):
        """Test that query strings are converted to ints."""
        arguments = bind_arguments(
            self._request({"page": "3", "size": "15"}), (PAGE, SIZE), {}
        )

        self.assertEqual(arguments, [3, 15])

    def test_omitted_query_values_take_defaults(self):
        """Test that omitted params get their declared default, possibly None."""
        arguments = bind_arguments(self._request(), (PAGE, SIZE), {})

        self.assertEqual(arguments, [0, None])

    def test_values_are_not_range_checked(self):
        """Test that binding leaves bounds validation to the guard."""
        arguments = bind_arguments(
            self._request({"page": "-4", "size": "1000"}), (PAGE, SIZE), {}
        )

        self.assertEqual(arguments, [-4, 1000])

    def test_uncoercible_value_is_validation_error(self):
        """Test that non-numeric values are rejected naming the param."""
        with self.assertRaises(ValidationError) as ctx:
            bind_arguments(self._request({"size": "ten"}), (PAGE, SIZE), {})

        self.assertIn("size", ctx.exception.detail)

    def test_url_kwargs_are_bound_by_name_and_consumed(self):
        """Test that path params are passed positionally and removed."""
        url_kwargs = {"item_id": 42, "format": "json"}

        arguments = bind_arguments(
            self._request({"size": "5"}), (ITEM_ID, PAGE, SIZE), url_kwargs
        )

        self.assertEqual(arguments, [42, 0, 5])
        self.assertEqual(url_kwargs, {"format": "json"})

    def test_unbound_parameter_takes_default(self):
        """Test that a non-query param absent from the URL gets its default."""
        arguments = bind_arguments(self._request(), (ITEM_ID,), {})

        self.assertEqual(arguments, [None])


if __name__ == "__main__":
    unittest.main()
