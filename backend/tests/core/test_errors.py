"""Error Hierarchy — codes, statuses and the public envelope."""

from cicd_sample.core.errors import (
    ErrorContext, InternalServiceError, InvalidBodyError,
    RouteNotFoundError, SampleServiceError, UserNotFoundError,
)


def test_user_not_found():
    err = UserNotFoundError("999")
    assert (err.code, err.http_status) == ("USER_NOT_FOUND", 404)
    assert err.to_response() == {"error": "User not found"}
    assert err.context.detail == "user id '999'"


def test_route_not_found():
    err = RouteNotFoundError(ErrorContext(path="/nope"))
    assert (err.code, err.http_status) == ("ROUTE_NOT_FOUND", 404)
    assert err.to_response() == {"error": "Route not found"}
    assert err.context.path == "/nope"


def test_invalid_body_keeps_reason_out_of_response():
    err = InvalidBodyError("Expecting value: line 1 column 1")
    assert err.http_status == 400
    assert err.to_response() == {"error": "Invalid JSON body"}
    assert "Expecting value" in err.context.detail


def test_internal_error_is_generic():
    err = InternalServiceError()
    assert err.http_status == 500
    assert err.to_response() == {"error": "Internal server error"}


def test_all_errors_share_base():
    for err in (
        UserNotFoundError("x"), RouteNotFoundError(),
        InvalidBodyError("x"), InternalServiceError(),
    ):
        assert isinstance(err, SampleServiceError)
