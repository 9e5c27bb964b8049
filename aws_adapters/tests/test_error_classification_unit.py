from __future__ import annotations

import contextlib
import dataclasses
import types

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from aws_adapters.base.errors import (
    UNKNOWN_BEHAVIOUR_CODE,
    ClassifiedError,
    describe_cause,
    extract_http_status,
    extract_provider_code,
)
from aws_adapters.cognito import CognitoError, ERR_SECRET_HASH_ENCODING
from aws_adapters.dynamodb import DynamoDBError
from aws_adapters.s3 import S3Error


def client_error(code: str, message: str = "boom", status: int = 400, operation: str = "Op") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


def test_wrap_client_error_reuses_provider_code():
    err = CognitoError.wrap(client_error("UserNotFoundException", "User does not exist.", 400, "GetUser"), "get user failed")
    assert err.code == "UserNotFoundException"  # nosec B101 - assert is appropriate in unit tests
    assert err.user_not_found()  # nosec B101 - assert is appropriate in unit tests
    assert str(err) == "get user failed: UserNotFoundException: User does not exist."  # nosec B101 - assert is appropriate in unit tests
    assert err.http_status == 400  # nosec B101 - assert is appropriate in unit tests


def test_wrap_keeps_cause_chained():
    cause = client_error("ThrottlingException")
    err = DynamoDBError.wrap(cause, "put item failed")
    assert err.cause is cause  # nosec B101 - assert is appropriate in unit tests
    assert err.__cause__ is cause  # nosec B101 - assert is appropriate in unit tests
    assert err.retryable()  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize("cause", [ValueError("bad input"), RuntimeError(""), Exception("x" * 10)])
def test_wrap_plain_exception_message_and_unknown_code(cause):
    err = S3Error.wrap(cause, "put object failed")
    assert err.message.startswith("put object failed")  # nosec B101 - assert is appropriate in unit tests
    assert err.message.endswith(str(cause))  # nosec B101 - assert is appropriate in unit tests
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert err.unknown()  # nosec B101 - assert is appropriate in unit tests
    assert err.cause is cause  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize("cause", [None, object(), 42, "a string", types.SimpleNamespace(response="junk")])
def test_wrap_unrecognized_shape_never_raises(cause):
    err = CognitoError.wrap(cause, "op failed")
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert err.code  # nosec B101 - assert is appropriate in unit tests
    assert err.cause is None  # nosec B101 - assert is appropriate in unit tests
    assert err.message.startswith("op failed: ")  # nosec B101 - assert is appropriate in unit tests


def test_wrap_unknown_provider_code_lands_on_sentinel_but_is_retained():
    err = DynamoDBError.wrap(client_error("SomethingNewException"), "get item failed")
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert err.provider_code == "SomethingNewException"  # nosec B101 - assert is appropriate in unit tests
    assert not err.categories  # nosec B101 - assert is appropriate in unit tests


def test_botocore_local_error_is_unknown():
    cause = EndpointConnectionError(endpoint_url="http://localhost:1")
    err = S3Error.wrap(cause, "get object failed")
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert extract_http_status(cause) is None  # nosec B101 - assert is appropriate in unit tests


def test_wrap_previously_classified_error_keeps_code():
    inner = CognitoError.wrap(client_error("NotAuthorizedException", "Incorrect username or password."), "admin initiate auth failed")
    outer = CognitoError.wrap(inner, "sign in failed")
    assert outer.code == "NotAuthorizedException"  # nosec B101 - assert is appropriate in unit tests
    assert outer.not_authorized()  # nosec B101 - assert is appropriate in unit tests
    assert outer.message == (  # nosec B101 - assert is appropriate in unit tests
        "sign in failed: admin initiate auth failed: NotAuthorizedException: Incorrect username or password."
    )


def test_wrap_foreign_domain_code_is_unknown():
    inner = DynamoDBError.wrap(client_error("ConditionalCheckFailedException"), "put failed")
    outer = S3Error.wrap(inner, "copy failed")
    assert outer.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert outer.provider_code == "ConditionalCheckFailedException"  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize("cause", [None, object(), ValueError("v"), client_error("UserNotFoundException")])
@pytest.mark.parametrize("code", ["SecretHashEncodingErr", "Anything", ""])
def test_wrap_with_code_is_verbatim(cause, code):
    err = CognitoError.wrap_with_code(cause, "encode failed", code)
    assert err.code == code  # nosec B101 - assert is appropriate in unit tests


def test_wrap_with_code_secret_hash_scenario():
    err = CognitoError.wrap_with_code(ValueError("bad key"), "encode failed", ERR_SECRET_HASH_ENCODING)
    assert err.code == "SecretHashEncodingErr"  # nosec B101 - assert is appropriate in unit tests
    assert err.secret_hash_failed()  # nosec B101 - assert is appropriate in unit tests
    remote = [
        "alias_exists",
        "code_mismatch",
        "code_expired",
        "invalid_password",
        "not_authorized",
        "user_not_found",
        "username_exists",
        "internal_error",
        "retryable",
    ]
    assert not any(err.is_category(name) for name in remote)  # nosec B101 - assert is appropriate in unit tests
    assert str(err) == "encode failed: bad key"  # nosec B101 - assert is appropriate in unit tests


def test_predicates_are_idempotent():
    err = DynamoDBError.wrap(client_error("ResourceNotFoundException"), "get item failed")
    first = [err.resource_not_found(), err.retryable(), err.internal_error()]
    second = [err.resource_not_found(), err.retryable(), err.internal_error()]
    assert first == second == [True, False, False]  # nosec B101 - assert is appropriate in unit tests


def test_generic_classified_error_has_no_categories():
    err = ClassifiedError.wrap(client_error("UserNotFoundException"), "x")
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert err.categories == frozenset()  # nosec B101 - assert is appropriate in unit tests


def test_classified_error_is_raisable():
    with pytest.raises(S3Error) as info:
        raise S3Error.wrap(client_error("NoSuchKey", "The specified key does not exist.", 404), "get object failed")
    assert info.value.resource_not_found()  # nosec B101 - assert is appropriate in unit tests
    assert info.value.http_status == 404  # nosec B101 - assert is appropriate in unit tests


def test_extraction_helpers():
    ce = client_error("NoSuchBucket", "nope", 404)
    assert extract_provider_code(ce) == "NoSuchBucket"  # nosec B101 - assert is appropriate in unit tests
    assert extract_http_status(ce) == 404  # nosec B101 - assert is appropriate in unit tests
    assert describe_cause(ce) == "NoSuchBucket: nope"  # nosec B101 - assert is appropriate in unit tests
    assert extract_provider_code(ValueError("x")) is None  # nosec B101 - assert is appropriate in unit tests
    assert extract_http_status(types.SimpleNamespace(response={"ResponseMetadata": {"HTTPStatusCode": 999}})) is None  # nosec B101 - assert is appropriate in unit tests
    assert describe_cause(None) == "None"  # nosec B101 - assert is appropriate in unit tests


def test_fields_cannot_be_reassigned_or_deleted():
    err = CognitoError.wrap(ValueError("x"), "m")
    with pytest.raises(dataclasses.FrozenInstanceError):
        err.code = "UserNotFoundException"
    with pytest.raises(dataclasses.FrozenInstanceError):
        del err.message
    assert err.code == UNKNOWN_BEHAVIOUR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert not err.user_not_found()  # nosec B101 - assert is appropriate in unit tests


def test_frozen_error_still_chains_and_propagates():
    cause = client_error("ValidationException", "bad key")
    with pytest.raises(DynamoDBError) as info:
        try:
            raise cause
        except ClientError as e:
            raise DynamoDBError.wrap(e, "get item failed") from e
    assert info.value.__cause__ is cause  # nosec B101 - assert is appropriate in unit tests
    assert info.value.__traceback__ is not None  # nosec B101 - assert is appropriate in unit tests

    @contextlib.contextmanager
    def passthrough():
        yield

    with pytest.raises(ClassifiedError):
        with passthrough():
            raise ClassifiedError.wrap(None, "inside context manager")
