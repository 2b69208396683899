"""Authentication backends for the pageable resource service."""

from restful.auth.jwt import JWTAuthentication, JWTUser

__all__ = ["JWTAuthentication", "JWTUser"]
