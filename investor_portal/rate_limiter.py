"""Rate limiter configuration for auth endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Keyed on the peer address. Behind a proxy, run uvicorn with --proxy-headers
# and --forwarded-allow-ips so the peer is the real client.
limiter = Limiter(key_func=get_remote_address)
