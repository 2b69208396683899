"""Pageable resource Django application."""
