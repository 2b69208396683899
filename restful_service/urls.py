"""Root URL configuration for the pageable resource service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("restful.urls")),
]
