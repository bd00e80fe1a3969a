import os

from slowapi import Limiter
from slowapi.util import get_remote_address

ANALYZE_RATE_LIMIT = os.getenv("ANALYZE_RATE_LIMIT", "10/minute")

# Rate limiting, keyed on client address
limiter = Limiter(key_func=get_remote_address)
