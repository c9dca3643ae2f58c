"""Per-client request rate limits."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from taskboard.config import get_settings

settings = get_settings()

# Default limit covers every non-exempt route; auth routes get a stricter,
# shared bucket so register and login attempts count together.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.api_rate_limit],
    enabled=settings.rate_limit_enabled,
)

auth_rate_limit = limiter.shared_limit(settings.auth_rate_limit, scope="auth")

RATE_LIMIT_MESSAGE = "Too many requests, please try again later"
