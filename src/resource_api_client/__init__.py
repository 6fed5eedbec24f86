"""Public package exports for the resource API client."""

from .async_client import AsyncResourceClient
from .config import ResourceClientConfig, TransportConfig
from .core.commands import Command
from .core.errors import (
    ResourceAbortError,
    ResourceApiError,
    ResourceClientClosedError,
    ResourceHttpError,
    ResourceTimeoutError,
    ResourceTransportError,
    ResourceValidationError,
)
from .core.pending import PendingResult
from .resources.options import UNSET, RequestDescriptor, RequestOptions

__all__ = [
    "AsyncResourceClient",
    "ResourceClientConfig",
    "TransportConfig",
    "Command",
    "PendingResult",
    "RequestOptions",
    "RequestDescriptor",
    "UNSET",
    "ResourceApiError",
    "ResourceValidationError",
    "ResourceClientClosedError",
    "ResourceTransportError",
    "ResourceAbortError",
    "ResourceTimeoutError",
    "ResourceHttpError",
]
