from typing import Optional


class DiscourseError(Exception):
    """Base class for failed forum API calls."""

    def __init__(self, message: str, context: str = ""):
        super().__init__(message)
        self.context = context


class HttpStatusError(DiscourseError):
    """The forum answered with something other than 200 OK.

    The exception message is the raw response body, so callers can surface
    the forum's own error text.
    """

    def __init__(self, status_code: int, reason: str, body: str, context: str = ""):
        super().__init__(body, context)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class TransportError(DiscourseError):
    """No response was obtained (DNS, TLS, connection reset, timeout)."""

    def __init__(self, cause: Exception, context: str = ""):
        super().__init__(str(cause), context)
        self.cause = cause


class DecodeError(DiscourseError):
    """A 200 response whose body was not the JSON we expected."""

    def __init__(self, message: str, body: Optional[str] = None, context: str = ""):
        super().__init__(message, context)
        self.body = body
