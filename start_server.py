"""Production server startup script for the pageable resource service.

Launches the Django application under Gunicorn for container deployments.
"""

import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the service with Gunicorn.

    Binds to 0.0.0.0:8000 with 4 workers of 2 threads each and logs to
    stdout/stderr for container log aggregation.
    """
    sys.argv = [
        "gunicorn",
        "restful_service.wsgi:application",
        "--bind",
        "0.0.0.0:8000",
        "--workers",
        "4",
        "--threads",
        "2",
        "--timeout",
        "30",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
