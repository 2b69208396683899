"""API views for the pageable resource service."""

import structlog
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from restful.api import PagingProbeApi
from restful.auth import JWTAuthentication
from restful.schemas import LivenessResponse, PageRequest

logger = structlog.get_logger(__name__)


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Exempt from authentication so orchestrator probes can reach it.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        return Response(
            LivenessResponse(status="alive").model_dump(), status=status.HTTP_200_OK
        )


class PagingProbeView(PagingProbeApi, APIView):
    """Paging probe endpoint.

    GET returns the validated ``page``/``size`` pair. Out-of-range values are
    rejected by the pagination guard before this handler runs.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, page, size):
        """Return the page request the caller is allowed to make.

        Args:
            request: HTTP request
            page: Zero-based page index
            size: Requested page length

        Returns:
            200 OK with the page request
        """
        page_request = PageRequest(page=page, size=size)

        logger.info(
            "Paging probe request accepted",
            user_id=getattr(request.user, "user_id", None),
            page=page_request.page,
            size=page_request.size,
        )

        return Response(page_request.model_dump(), status=status.HTTP_200_OK)
