from .client import DiscourseClient
from .errors import DecodeError, DiscourseError, HttpStatusError, TransportError
from .models import Badge, ClientConfig, Post, User

__all__ = [
    "DiscourseClient",
    "ClientConfig",
    "DiscourseError",
    "HttpStatusError",
    "TransportError",
    "DecodeError",
    "User",
    "Badge",
    "Post",
]
