"""Tests for the variant registry and status code lookup."""

import logging

import pytest

import http_failures
from http_failures.failures import (
    Failure,
    HTTPFailure,
    NetworkConnection,
    GenericException,
    NotFound,
    TooManyRequests,
    InternalServerError,
    ServerNotImplemented,
)
from http_failures.registry import (
    AnyFailure,
    FAILURE_TYPES,
    HTTP_FAILURE_TYPES,
    DEFAULT_HTTP_CODES,
    failure_class_for,
    failure_for,
)

EXPECTED_DEFAULTS = {
    "BadRequest": 400,
    "Unauthorized": 401,
    "PaymentRequired": 402,
    "Forbidden": 403,
    "NotFound": 404,
    "MethodNotAllowed": 405,
    "NotAcceptable": 406,
    "ProxyAuthenticationRequired": 407,
    "RequestTimeout": 408,
    "Conflict": 409,
    "Gone": 410,
    "LengthRequired": 411,
    "PreconditionFailed": 412,
    "PayloadTooLarge": 413,
    "URITooLong": 414,
    "UnsupportedMediaType": 415,
    "RangeNotSatisfiable": 416,
    "ExpectationFailed": 417,
    "MisdirectedRequest": 421,
    "UnprocessableEntity": 422,
    "Locked": 423,
    "FailedDependency": 424,
    "TooEarly": 425,
    "UpgradeRequired": 426,
    "PreconditionRequired": 428,
    "TooManyRequests": 429,
    "RequestHeaderFieldsTooLarge": 431,
    "UnavailableForLegalReasons": 451,
    "InternalServerError": 500,
    "ServerNotImplemented": 501,
    "BadGateway": 502,
    "ServiceUnavailable": 503,
    "GatewayTimeout": 504,
    "HTTPVersionNotSupported": 505,
    "VariantAlsoNegotiates": 506,
    "InsufficientStorage": 507,
    "LoopDetected": 508,
    "NotExtended": 510,
    "NetworkAuthenticationRequired": 511,
}


def _concrete_subclasses(cls):
    for sub in cls.__subclasses__():
        if sub is not HTTPFailure:
            yield sub
        yield from _concrete_subclasses(sub)


class TestVariantSet:
    """Test suite for the closed set of variants."""

    def test_every_defined_variant_is_registered(self):
        """Test that no Failure subclass is missing from the registry."""
        assert set(_concrete_subclasses(Failure)) == set(FAILURE_TYPES)

    def test_union_matches_runtime_tuple(self):
        """Test that AnyFailure and FAILURE_TYPES list the same classes."""
        assert AnyFailure.__args__ == FAILURE_TYPES

    def test_variant_count(self):
        """Test the number of variants."""
        assert len(FAILURE_TYPES) == 41
        assert len(HTTP_FAILURE_TYPES) == 39

    def test_non_http_variants(self):
        """Test that only the network and exception variants lack a code."""
        assert set(FAILURE_TYPES) - set(HTTP_FAILURE_TYPES) == {
            NetworkConnection,
            GenericException,
        }

    def test_variants_exported_from_package(self):
        """Test that every variant is part of the public surface."""
        for cls in FAILURE_TYPES:
            assert getattr(http_failures, cls.__name__) is cls
            assert cls.__name__ in http_failures.__all__

    def test_default_codes_are_unique(self):
        """Test that no two variants share a default code."""
        codes = list(DEFAULT_HTTP_CODES.values())
        assert len(codes) == len(set(codes))

    def test_default_codes_are_read_only(self):
        """Test that the default table cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_HTTP_CODES[NotFound] = 400


class TestDefaults:
    """Test suite for per-variant default codes."""

    @pytest.mark.parametrize("name,code", sorted(EXPECTED_DEFAULTS.items()))
    def test_default_code(self, name, code):
        """Test that each variant defaults to its conventional code."""
        cls = getattr(http_failures, name)
        assert DEFAULT_HTTP_CODES[cls] == code
        assert cls().http_code == code

    def test_table_covers_every_http_variant(self):
        """Test that the expected table and the registry agree."""
        assert {cls.__name__ for cls in HTTP_FAILURE_TYPES} == set(EXPECTED_DEFAULTS)

    def test_default_codes_are_plain_ints(self):
        """Test that defaults are ints rather than enum members."""
        assert all(type(code) is int for code in DEFAULT_HTTP_CODES.values())


class TestLookup:
    """Test suite for status code lookup."""

    def test_failure_class_for_known_code(self):
        """Test lookup of known codes."""
        assert failure_class_for(404) is NotFound
        assert failure_class_for(500) is InternalServerError
        assert failure_class_for(501) is ServerNotImplemented

    def test_failure_class_for_unknown_code(self):
        """Test that unclaimed codes return None."""
        assert failure_class_for(418) is None
        assert failure_class_for(200) is None

    def test_failure_for_builds_instance(self):
        """Test that failure_for attaches code and context."""
        failure = failure_for(429, {"retryAfter": 30})
        assert failure == TooManyRequests(429, {"retryAfter": 30})
        assert failure.additional_data == {"retryAfter": 30}

    def test_failure_for_without_context(self):
        """Test failure_for with no context."""
        assert failure_for(404) == NotFound()

    def test_failure_for_unknown_code(self):
        """Test that unclaimed codes build nothing."""
        assert failure_for(599, {"ignored": True}) is None

    def test_unknown_code_is_logged(self, caplog):
        """Test that a miss is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="http_failures.registry"):
            failure_class_for(418)

        assert "No failure variant for HTTP status 418" in caplog.text

    def test_known_code_is_not_logged(self, caplog):
        """Test that a hit logs nothing."""
        with caplog.at_level(logging.DEBUG, logger="http_failures.registry"):
            failure_class_for(404)

        assert caplog.records == []


class TestEveryVariant:
    """Test suite for properties that hold across the whole variant set."""

    @pytest.mark.parametrize("cls", HTTP_FAILURE_TYPES, ids=lambda cls: cls.__name__)
    def test_override_code_is_preserved(self, cls):
        """Test that an explicit code and payload are kept exactly."""
        payload = {"detail": cls.__name__}
        failure = cls(499, payload)
        assert failure.http_code == 499
        assert failure.additional_data is payload

    @pytest.mark.parametrize("cls", FAILURE_TYPES, ids=lambda cls: cls.__name__)
    def test_context_round_trips(self, cls):
        """Test that the payload comes back as the same object."""
        payload = object()
        assert cls(additional_data=payload).additional_data is payload

    @pytest.mark.parametrize("cls", FAILURE_TYPES, ids=lambda cls: cls.__name__)
    def test_never_equal_to_other_variants(self, cls):
        """Test that no two variants compare equal with the same payload."""
        payload = {"same": True}
        failure = cls(additional_data=payload)
        for other in FAILURE_TYPES:
            if other is cls:
                assert other(additional_data=payload) == failure
            else:
                assert other(additional_data=payload) != failure
