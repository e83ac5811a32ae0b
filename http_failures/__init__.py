"""
HTTP Failures - a closed taxonomy of client/server failure outcomes.

Every failure is an immutable exception value: one class for network
connection failures, one for unexpected exceptions, and one per relevant
HTTP status code. Status-coded failures default to the conventional code
for their category and accept an override; every failure can carry an
opaque ``additional_data`` payload.

Example (returning a failure):
    >>> from http_failures import NotFound
    >>> failure = NotFound(additional_data={"id": 123})
    >>> failure.http_code
    404

Example (raising and catching by category):
    >>> from http_failures import HTTPFailure, failure_for
    >>> try:
    ...     raise failure_for(503)
    ... except HTTPFailure as e:
    ...     print(e)
    503 Service Unavailable
"""

from .failures import (
    Failure,
    HTTPFailure,
    NetworkConnection,
    GenericException,
    BadRequest,
    Unauthorized,
    PaymentRequired,
    Forbidden,
    NotFound,
    MethodNotAllowed,
    NotAcceptable,
    ProxyAuthenticationRequired,
    RequestTimeout,
    Conflict,
    Gone,
    LengthRequired,
    PreconditionFailed,
    PayloadTooLarge,
    URITooLong,
    UnsupportedMediaType,
    RangeNotSatisfiable,
    ExpectationFailed,
    MisdirectedRequest,
    UnprocessableEntity,
    Locked,
    FailedDependency,
    TooEarly,
    UpgradeRequired,
    PreconditionRequired,
    TooManyRequests,
    RequestHeaderFieldsTooLarge,
    UnavailableForLegalReasons,
    InternalServerError,
    ServerNotImplemented,
    BadGateway,
    ServiceUnavailable,
    GatewayTimeout,
    HTTPVersionNotSupported,
    VariantAlsoNegotiates,
    InsufficientStorage,
    LoopDetected,
    NotExtended,
    NetworkAuthenticationRequired,
)
from .registry import (
    AnyFailure,
    FAILURE_TYPES,
    HTTP_FAILURE_TYPES,
    DEFAULT_HTTP_CODES,
    failure_class_for,
    failure_for,
)

__version__ = "0.1.0"

__all__ = [
    # Base classes
    "Failure",
    "HTTPFailure",
    # Non-HTTP failures
    "NetworkConnection",
    "GenericException",
    # 4xx
    "BadRequest",
    "Unauthorized",
    "PaymentRequired",
    "Forbidden",
    "NotFound",
    "MethodNotAllowed",
    "NotAcceptable",
    "ProxyAuthenticationRequired",
    "RequestTimeout",
    "Conflict",
    "Gone",
    "LengthRequired",
    "PreconditionFailed",
    "PayloadTooLarge",
    "URITooLong",
    "UnsupportedMediaType",
    "RangeNotSatisfiable",
    "ExpectationFailed",
    "MisdirectedRequest",
    "UnprocessableEntity",
    "Locked",
    "FailedDependency",
    "TooEarly",
    "UpgradeRequired",
    "PreconditionRequired",
    "TooManyRequests",
    "RequestHeaderFieldsTooLarge",
    "UnavailableForLegalReasons",
    # 5xx
    "InternalServerError",
    "ServerNotImplemented",
    "BadGateway",
    "ServiceUnavailable",
    "GatewayTimeout",
    "HTTPVersionNotSupported",
    "VariantAlsoNegotiates",
    "InsufficientStorage",
    "LoopDetected",
    "NotExtended",
    "NetworkAuthenticationRequired",
    # Registry
    "AnyFailure",
    "FAILURE_TYPES",
    "HTTP_FAILURE_TYPES",
    "DEFAULT_HTTP_CODES",
    "failure_class_for",
    "failure_for",
    # Version
    "__version__",
]
