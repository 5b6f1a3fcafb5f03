"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from casetrack.core.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().rate_limit_enabled,
)

LOGIN_LIMIT = "10/minute"
IMPORT_LIMIT = "30/minute"

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_import = limiter.limit(IMPORT_LIMIT)
