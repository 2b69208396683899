"""Unit tests for start_server module."""

import sys
import unittest
from unittest.mock import patch

import start_server


class TestStartServer(unittest.TestCase):
    """Tests for start_server script."""

    @patch("start_server.run")
    def test_main_runs_gunicorn_on_wsgi_app(self, mock_run):
        """Test that main() configures and starts Gunicorn."""
        with patch.object(sys, "argv", ["start_server.py"]):
            start_server.main()
            argv = list(sys.argv)

        mock_run.assert_called_once()
        self.assertEqual(argv[0], "gunicorn")
        self.assertIn("restful_service.wsgi:application", argv)
        self.assertIn("0.0.0.0:8000", argv)


if __name__ == "__main__":
    unittest.main()
