# tests/auth/test_error_classification.py
import pytest

from mojauth.auth.errors import ErrorKind, RawErrorBody, classify_error, is_internal_error


def test_invalid_credentials():
    result = classify_error({
        "error": "ForbiddenOperationException",
        "errorMessage": "Invalid credentials. Invalid username or password.",
    })
    assert result == ErrorKind.INVALID_CREDENTIALS


def test_rate_limit_shares_invalid_credentials_prefix():
    result = classify_error({
        "error": "ForbiddenOperationException",
        "errorMessage": "Invalid credentials.",
    })
    assert result == ErrorKind.RATE_LIMITED


def test_user_migrated_cause_wins_over_message():
    result = classify_error({
        "error": "ForbiddenOperationException",
        "cause": "UserMigratedException",
        "errorMessage": "Invalid credentials. Invalid username or password.",
    })
    assert result == ErrorKind.USER_MIGRATED


@pytest.mark.parametrize("error", ["GoneException", "ResourceException"])
def test_gone(error):
    assert classify_error({"error": error}) == ErrorKind.GONE


def test_unrecognized_error_is_unknown_and_not_internal():
    result = classify_error({"error": "SomethingNeverSeenBefore"})
    assert result == ErrorKind.UNKNOWN
    assert is_internal_error(result) is False


def test_not_found_is_internal():
    result = classify_error({"error": "Not Found"})
    assert result == ErrorKind.NOT_FOUND
    assert is_internal_error(result) is True


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"error": "Method Not Allowed"}, ErrorKind.METHOD_NOT_ALLOWED),
        ({"error": "Unsupported Media Type"}, ErrorKind.UNSUPPORTED_MEDIA_TYPE),
        ({"error": "ForbiddenOperationException", "errorMessage": "Invalid token."}, ErrorKind.INVALID_TOKEN),
        ({"error": "ForbiddenOperationException", "errorMessage": "Forbidden"}, ErrorKind.CREDENTIALS_MISSING),
        (
            {"error": "IllegalArgumentException", "errorMessage": "Access token already has a profile assigned."},
            ErrorKind.ACCESS_TOKEN_HAS_PROFILE,
        ),
        ({"error": "IllegalArgumentException", "errorMessage": "Invalid salt version"}, ErrorKind.INVALID_SALT_VERSION),
    ],
)
def test_remaining_rules(body, expected):
    assert classify_error(body) == expected


def test_unmatched_branch_messages_fall_through_to_unknown():
    assert classify_error({"error": "ForbiddenOperationException", "errorMessage": "Nope"}) == ErrorKind.UNKNOWN
    assert classify_error({"error": "IllegalArgumentException", "errorMessage": "Nope"}) == ErrorKind.UNKNOWN


def test_matching_is_case_sensitive():
    assert classify_error({"error": "not found"}) == ErrorKind.UNKNOWN
    assert classify_error({
        "error": "ForbiddenOperationException",
        "errorMessage": "invalid token.",
    }) == ErrorKind.UNKNOWN


def test_cause_ignored_outside_forbidden_branch():
    assert classify_error({"error": "Not Found", "cause": "UserMigratedException"}) == ErrorKind.NOT_FOUND


def test_message_outside_its_branch_is_ignored():
    assert classify_error({"error": "IllegalArgumentException", "errorMessage": "Invalid token."}) == ErrorKind.UNKNOWN


@pytest.mark.parametrize("payload", [None, [], "Not Found", 42, {}, {"error": None}, {"error": 404}])
def test_malformed_payloads_classify_as_unknown(payload):
    assert classify_error(RawErrorBody.from_payload(payload)) == ErrorKind.UNKNOWN


def test_classification_is_deterministic():
    body = RawErrorBody(error="ForbiddenOperationException", error_message="Invalid credentials.")
    assert {classify_error(body) for _ in range(5)} == {ErrorKind.RATE_LIMITED}


def test_raw_error_body_reads_wire_aliases():
    body = RawErrorBody.model_validate({
        "error": "ForbiddenOperationException",
        "errorMessage": "Invalid token.",
        "cause": "",
    })
    assert body.error_message == "Invalid token."
    assert body.cause is None


def test_internal_kinds_are_exactly_the_request_defects():
    internal = {kind for kind in ErrorKind if is_internal_error(kind)}
    assert internal == {
        ErrorKind.METHOD_NOT_ALLOWED,
        ErrorKind.NOT_FOUND,
        ErrorKind.ACCESS_TOKEN_HAS_PROFILE,
        ErrorKind.CREDENTIALS_MISSING,
        ErrorKind.INVALID_SALT_VERSION,
        ErrorKind.UNSUPPORTED_MEDIA_TYPE,
    }
    assert is_internal_error(ErrorKind.NOT_PAID) is False


def test_error_kind_uses_named_values():
    assert ErrorKind("rate_limited") is ErrorKind.RATE_LIMITED
    assert ErrorKind.UNKNOWN.value == "unknown"


def test_classifier_never_produces_caller_only_kinds():
    errors = [
        "Method Not Allowed", "Not Found", "Unsupported Media Type", "ForbiddenOperationException",
        "IllegalArgumentException", "ResourceException", "GoneException", "", "Other",
    ]
    messages = [
        "Invalid credentials. Invalid username or password.", "Invalid credentials.", "Invalid token.",
        "Forbidden", "Access token already has a profile assigned.", "Invalid salt version", "", "Other",
    ]
    causes = [None, "UserMigratedException", "Other"]

    produced = {
        classify_error({"error": error, "errorMessage": message, "cause": cause})
        for error in errors
        for message in messages
        for cause in causes
    }

    assert ErrorKind.NOT_PAID not in produced
    assert ErrorKind.UNREACHABLE not in produced
    assert produced == set(ErrorKind) - {ErrorKind.NOT_PAID, ErrorKind.UNREACHABLE}
