"""NGL Relay - forwards an anonymous message to an NGL profile"""
__version__ = "0.1.0"

from .config import RelaySettings, get_settings
from .device import generate_device_id
from .errors import RelayError, RelayValidationError, UpstreamError, TransportError
from .messages import MessageCatalog
from .relay import RelayHandler
from .results import RelayFailure, RelayResult, RelaySuccess
from .target import extract_username
from .upstream import NGLClient, UpstreamReply

__all__ = [
    "RelaySettings",
    "get_settings",
    "generate_device_id",
    "RelayError",
    "RelayValidationError",
    "UpstreamError",
    "TransportError",
    "MessageCatalog",
    "RelayHandler",
    "RelayFailure",
    "RelayResult",
    "RelaySuccess",
    "extract_username",
    "NGLClient",
    "UpstreamReply",
]
