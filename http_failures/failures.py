"""
Failure taxonomy for client/server interactions.

This module defines one exception class per recognized failure category:
a network connection failure, a generic exception, and one class per
relevant HTTP status code. Every failure carries an optional opaque
``additional_data`` payload; status-coded failures also carry an
``http_code`` that defaults to the conventional value for the category.

Failures are immutable values. They can be returned to a caller or raised
and caught by category:

    >>> failure = NotFound(additional_data={"path": "/users/123"})
    >>> failure.http_code
    404
    >>> str(failure)
    '404 Not Found'
"""

from typing import Any, Optional, Tuple

from httpx import codes


def _same(a: Any, b: Any) -> bool:
    # payloads whose == is not a plain bool fall back to identity
    if a is b:
        return True
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


class Failure(Exception):
    """Base class for every failure variant."""

    description: str = "Failure"

    def __init__(self, additional_data: Any = None):
        """
        Initialize a Failure.

        Args:
            additional_data: Opaque caller-supplied context, never inspected
        """
        if type(self) is Failure:
            raise TypeError("Failure is abstract, construct one of its variants")
        super().__init__(self.message)
        self._additional_data = additional_data

    @property
    def message(self) -> str:
        """Human-readable summary of the failure category."""
        return self.description

    @property
    def http_code(self) -> Optional[int]:
        """HTTP status code, or None when the category has none."""
        return None

    @property
    def status_code(self) -> Optional[int]:
        """Alias of ``http_code``."""
        return self.http_code

    @property
    def additional_data(self) -> Any:
        """Context payload supplied at construction."""
        return self._additional_data

    def _fields(self) -> Tuple[Any, ...]:
        return (self._additional_data,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(_same(a, b) for a, b in zip(self._fields(), other._fields()))

    def __hash__(self) -> int:
        # additional_data may be unhashable, so it stays out of the hash
        return hash((type(self), self.http_code))

    def __reduce__(self):
        return (type(self), self._fields())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(additional_data={self._additional_data!r})"


class NetworkConnection(Failure):
    """The network connection could not be established or was lost."""

    description = "Network connection failure"


class GenericException(Failure):
    """An unexpected exception not covered by any other category."""

    description = "Unexpected exception"


class HTTPFailure(Failure):
    """Base class for failures identified by an HTTP status code."""

    default_http_code: int

    def __init__(self, http_code: Optional[int] = None, additional_data: Any = None):
        """
        Initialize an HTTPFailure.

        Args:
            http_code: Status code, defaults to the category's conventional
                code; any value is accepted as-is
            additional_data: Opaque caller-supplied context, never inspected
        """
        if type(self) is HTTPFailure:
            raise TypeError("HTTPFailure is abstract, construct one of its variants")
        if http_code is None:
            http_code = self.default_http_code
        self._http_code = http_code
        super().__init__(additional_data)
        self.args = (str(self),)

    @property
    def http_code(self) -> int:
        """HTTP status code."""
        return self._http_code

    @property
    def reason_phrase(self) -> str:
        """Standard reason phrase for ``http_code``, empty if unknown."""
        return codes.get_reason_phrase(self._http_code)

    @property
    def message(self) -> str:
        return self.reason_phrase or type(self).__name__

    def _fields(self) -> Tuple[Any, ...]:
        return (self._http_code, self._additional_data)

    def __str__(self) -> str:
        return f"{self._http_code} {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(http_code={self._http_code!r}, "
            f"additional_data={self._additional_data!r})"
        )


# 4xx


class BadRequest(HTTPFailure):
    """The server could not understand the request (400)."""

    default_http_code = int(codes.BAD_REQUEST)


class Unauthorized(HTTPFailure):
    """The request lacks valid authentication credentials (401)."""

    default_http_code = int(codes.UNAUTHORIZED)


class PaymentRequired(HTTPFailure):
    """Payment is required to access the resource (402)."""

    default_http_code = int(codes.PAYMENT_REQUIRED)


class Forbidden(HTTPFailure):
    """Credentials were accepted but do not grant access (403)."""

    default_http_code = int(codes.FORBIDDEN)


class NotFound(HTTPFailure):
    """The requested resource does not exist (404)."""

    default_http_code = int(codes.NOT_FOUND)


class MethodNotAllowed(HTTPFailure):
    """The resource does not support the request method (405)."""

    default_http_code = int(codes.METHOD_NOT_ALLOWED)


class NotAcceptable(HTTPFailure):
    """No representation matches the request's Accept headers (406)."""

    default_http_code = int(codes.NOT_ACCEPTABLE)


class ProxyAuthenticationRequired(HTTPFailure):
    """The proxy requires authentication (407)."""

    default_http_code = int(codes.PROXY_AUTHENTICATION_REQUIRED)


class RequestTimeout(HTTPFailure):
    """The server timed out waiting for the request (408)."""

    default_http_code = int(codes.REQUEST_TIMEOUT)


class Conflict(HTTPFailure):
    """The request conflicts with the current state of the resource (409)."""

    default_http_code = int(codes.CONFLICT)


class Gone(HTTPFailure):
    """The resource existed but has been permanently removed (410)."""

    default_http_code = int(codes.GONE)


class LengthRequired(HTTPFailure):
    """The request must declare a Content-Length (411)."""

    default_http_code = int(codes.LENGTH_REQUIRED)


class PreconditionFailed(HTTPFailure):
    """A conditional request header did not match (412)."""

    default_http_code = int(codes.PRECONDITION_FAILED)


class PayloadTooLarge(HTTPFailure):
    """The request body exceeds what the server will accept (413)."""

    default_http_code = int(codes.REQUEST_ENTITY_TOO_LARGE)


class URITooLong(HTTPFailure):
    """The request URI is longer than the server will handle (414)."""

    default_http_code = int(codes.REQUEST_URI_TOO_LONG)


class UnsupportedMediaType(HTTPFailure):
    """The request body has a media type the server rejects (415)."""

    default_http_code = int(codes.UNSUPPORTED_MEDIA_TYPE)


class RangeNotSatisfiable(HTTPFailure):
    """The requested byte range cannot be served (416)."""

    default_http_code = int(codes.REQUESTED_RANGE_NOT_SATISFIABLE)


class ExpectationFailed(HTTPFailure):
    """The Expect header could not be met (417)."""

    default_http_code = int(codes.EXPECTATION_FAILED)


class MisdirectedRequest(HTTPFailure):
    """The request reached a server that cannot answer it (421)."""

    default_http_code = int(codes.MISDIRECTED_REQUEST)


class UnprocessableEntity(HTTPFailure):
    """The request was well-formed but semantically invalid (422)."""

    default_http_code = int(codes.UNPROCESSABLE_ENTITY)


class Locked(HTTPFailure):
    """The resource is locked (423)."""

    default_http_code = int(codes.LOCKED)


class FailedDependency(HTTPFailure):
    """The request depended on another request that failed (424)."""

    default_http_code = int(codes.FAILED_DEPENDENCY)


class TooEarly(HTTPFailure):
    """The server will not process a request that might be replayed (425)."""

    default_http_code = int(codes.TOO_EARLY)


class UpgradeRequired(HTTPFailure):
    """The client must switch to a different protocol (426)."""

    default_http_code = int(codes.UPGRADE_REQUIRED)


class PreconditionRequired(HTTPFailure):
    """The server requires a conditional request (428)."""

    default_http_code = int(codes.PRECONDITION_REQUIRED)


class TooManyRequests(HTTPFailure):
    """Rate limit exceeded (429)."""

    default_http_code = int(codes.TOO_MANY_REQUESTS)


class RequestHeaderFieldsTooLarge(HTTPFailure):
    """The request headers are too large (431)."""

    default_http_code = int(codes.REQUEST_HEADER_FIELDS_TOO_LARGE)


class UnavailableForLegalReasons(HTTPFailure):
    """The resource is withheld for legal reasons (451)."""

    default_http_code = int(codes.UNAVAILABLE_FOR_LEGAL_REASONS)


# 5xx


class InternalServerError(HTTPFailure):
    """The server failed to fulfil the request (500)."""

    default_http_code = int(codes.INTERNAL_SERVER_ERROR)


class ServerNotImplemented(HTTPFailure):
    """The server does not support the requested functionality (501)."""

    default_http_code = int(codes.NOT_IMPLEMENTED)


class BadGateway(HTTPFailure):
    """An upstream server returned an invalid response (502)."""

    default_http_code = int(codes.BAD_GATEWAY)


class ServiceUnavailable(HTTPFailure):
    """The server is temporarily unable to handle the request (503)."""

    default_http_code = int(codes.SERVICE_UNAVAILABLE)


class GatewayTimeout(HTTPFailure):
    """An upstream server did not respond in time (504)."""

    default_http_code = int(codes.GATEWAY_TIMEOUT)


class HTTPVersionNotSupported(HTTPFailure):
    """The server does not support the HTTP version used (505)."""

    default_http_code = int(codes.HTTP_VERSION_NOT_SUPPORTED)


class VariantAlsoNegotiates(HTTPFailure):
    """Content negotiation on the server is misconfigured (506)."""

    default_http_code = int(codes.VARIANT_ALSO_NEGOTIATES)


class InsufficientStorage(HTTPFailure):
    """The server cannot store what the request needs (507)."""

    default_http_code = int(codes.INSUFFICIENT_STORAGE)


class LoopDetected(HTTPFailure):
    """The server hit an infinite loop processing the request (508)."""

    default_http_code = int(codes.LOOP_DETECTED)


class NotExtended(HTTPFailure):
    """The request needs further extensions to be fulfilled (510)."""

    default_http_code = int(codes.NOT_EXTENDED)


class NetworkAuthenticationRequired(HTTPFailure):
    """The client must authenticate to gain network access (511)."""

    default_http_code = int(codes.NETWORK_AUTHENTICATION_REQUIRED)
