"""Services layer - Kraken API access

Client handles OAuth and unauthenticated lookups; AccessClient carries an
Access for scoped operations. Both share the Transport of the Client.
"""

from .access_client import AccessClient
from .client import AccessCallback, Client
from .transport import Transport, build_headers, decode

__all__ = [
    "AccessCallback",
    "AccessClient",
    "Client",
    "Transport",
    "build_headers",
    "decode",
]
