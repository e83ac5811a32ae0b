"""
The closed set of failure variants and their default status codes.

``AnyFailure`` lets static checkers verify that a handler covers every
variant; ``FAILURE_TYPES`` is the same set at runtime.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union, get_args

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

logger = logging.getLogger(__name__)

AnyFailure = Union[
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
]

FAILURE_TYPES: Tuple[Type[Failure], ...] = get_args(AnyFailure)

HTTP_FAILURE_TYPES: Tuple[Type[HTTPFailure], ...] = tuple(
    cls for cls in FAILURE_TYPES if issubclass(cls, HTTPFailure)
)

DEFAULT_HTTP_CODES: Mapping[Type[HTTPFailure], int] = MappingProxyType(
    {cls: cls.default_http_code for cls in HTTP_FAILURE_TYPES}
)

_TYPES_BY_CODE: Dict[int, Type[HTTPFailure]] = {
    code: cls for cls, code in DEFAULT_HTTP_CODES.items()
}


def failure_class_for(http_code: int) -> Optional[Type[HTTPFailure]]:
    """
    Find the variant whose default status code is ``http_code``.

    Args:
        http_code: HTTP status code

    Returns:
        The matching variant class, or None if no variant claims the code
    """
    cls = _TYPES_BY_CODE.get(http_code)
    if cls is None:
        logger.debug(f"No failure variant for HTTP status {http_code}")
    return cls


def failure_for(http_code: int, additional_data: Any = None) -> Optional[HTTPFailure]:
    """
    Build the failure matching ``http_code``.

    Args:
        http_code: HTTP status code
        additional_data: Opaque context to attach to the failure

    Returns:
        A failure carrying ``http_code`` and ``additional_data``, or None if
        no variant claims the code
    """
    cls = failure_class_for(http_code)
    if cls is None:
        return None
    return cls(http_code, additional_data)
