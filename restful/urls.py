"""URL routing configuration for the restful application."""

from django.urls import path

from restful.routing import resource_path
from restful.views import LivenessCheckView, PagingProbeView

urlpatterns = [
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    resource_path("paging/probe", PagingProbeView, name="paging-probe"),
]
