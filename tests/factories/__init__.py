"""Factories for test data generation."""

import time

from django.conf import settings

import jwt
from faker import Faker

fake = Faker()


def make_access_token(secret=None, lifetime=300, **claims):
    """Encode an HS256 access token the way the identity provider issues them.

    Args:
        secret: Signing key, defaults to ``settings.JWT_SECRET``
        lifetime: Seconds until expiry; negative values give an expired token
        **claims: Claims overriding the generated defaults

    Returns:
        Encoded JWT string
    """
    now = int(time.time())
    payload = {
        "sub": fake.uuid4(),
        "upn": fake.email(),
        "groups": ["user"],
        "iat": now - max(0, -lifetime) - 1,
        "exp": now + lifetime,
    }
    payload.update(claims)
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm="HS256")
