"""Cognito user pool adapter and its error taxonomy."""

from .client import CognitoAdapter
from .errors import (
    COGNITO_ERRORS,
    ERR_CODE_CHANGE_PASSWORD_REQUEST,
    ERR_CODE_RESPOND_TO_AUTH_CHALLENGE,
    ERR_CODE_SIGN_IN,
    ERR_SECRET_HASH_ENCODING,
    CognitoError,
)
from .models import (
    AuthenticationResult,
    CreateUserResult,
    DeliveryMedium,
    DeliveryMediums,
    GetUserResult,
    Group,
    ListGroupsResult,
    SignInResult,
)

__all__ = [
    "AuthenticationResult",
    "COGNITO_ERRORS",
    "CognitoAdapter",
    "CognitoError",
    "CreateUserResult",
    "DeliveryMedium",
    "DeliveryMediums",
    "ERR_CODE_CHANGE_PASSWORD_REQUEST",
    "ERR_CODE_RESPOND_TO_AUTH_CHALLENGE",
    "ERR_CODE_SIGN_IN",
    "ERR_SECRET_HASH_ENCODING",
    "GetUserResult",
    "Group",
    "ListGroupsResult",
    "SignInResult",
]
