"""Resource request package."""

from .options import UNSET, RequestDescriptor, RequestOptions

__all__ = [
    "UNSET",
    "RequestOptions",
    "RequestDescriptor",
]
