"""
Basic usage examples for the HTTP Failures library.

This module shows how a caller builds failures when something goes wrong
and how error-handling code discriminates on them.
"""

from http_failures import (
    AnyFailure,
    FAILURE_TYPES,
    GenericException,
    HTTPFailure,
    NetworkConnection,
    NotFound,
    TooManyRequests,
    failure_for,
)


def describe(failure: AnyFailure) -> str:
    """Turn a failure into a user-facing message."""
    if isinstance(failure, NetworkConnection):
        return "Check your internet connection and try again."
    if isinstance(failure, GenericException):
        return f"Something went wrong: {failure.additional_data}"
    if isinstance(failure, TooManyRequests):
        retry_after = (failure.additional_data or {}).get("retryAfter")
        return f"Slow down, retry in {retry_after} seconds."
    return f"Request failed: {failure}"


def construction_example():
    """Demonstrate building failures with and without overrides."""
    print("=== Construction ===\n")

    not_found = NotFound()
    print(f"{not_found!r} -> {not_found}")

    limited = TooManyRequests(additional_data={"retryAfter": 30})
    print(f"{limited!r} -> {describe(limited)}")

    try:
        {}["missing"]
    except KeyError as e:
        unexpected = GenericException(additional_data=e)
        print(f"{unexpected!r} -> {describe(unexpected)}")

    print()


def lookup_example():
    """Demonstrate building failures from received status codes."""
    print("=== Lookup by status code ===\n")

    for status in (401, 409, 503, 599):
        failure = failure_for(status, additional_data={"status": status})
        if failure is None:
            print(f"{status}: no matching failure")
            continue
        print(f"{status}: {type(failure).__name__} -> {describe(failure)}")

    print()


def raising_example():
    """Demonstrate raising failures and catching them by category."""
    print("=== Raising ===\n")

    try:
        raise NotFound(additional_data={"path": "/users/123"})
    except HTTPFailure as e:
        print(f"Caught {e.http_code} {e.reason_phrase} for {e.additional_data['path']}")

    print(f"\n{len(FAILURE_TYPES)} failure variants are defined.")


if __name__ == "__main__":
    construction_example()
    lookup_example()
    raising_example()
