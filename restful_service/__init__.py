"""Django project package for the pageable resource service."""
