"""Cognito user pool error taxonomy."""
from __future__ import annotations

from ..base.errors import ClassifiedError, ErrorDomain, codes

ERR_SECRET_HASH_ENCODING = "SecretHashEncodingErr"
ERR_CODE_SIGN_IN = "SignInErr"
ERR_CODE_RESPOND_TO_AUTH_CHALLENGE = "RespondToAuthChallengeErr"
ERR_CODE_CHANGE_PASSWORD_REQUEST = "ChangePasswordRequestErr"

COGNITO_ERRORS = ErrorDomain(
    name="cognito",
    categories={
        "alias_exists": codes("AliasExistsException"),
        "code_delivery_failure": codes("CodeDeliveryFailureException"),
        "code_mismatch": codes("CodeMismatchException"),
        "code_expired": codes("ExpiredCodeException"),
        "group_exists": codes("GroupExistsException"),
        "invalid_password": codes("InvalidPasswordException"),
        "not_authorized": codes("NotAuthorizedException"),
        "password_reset_required": codes("PasswordResetRequiredException"),
        "user_not_confirmed": codes("UserNotConfirmedException"),
        "user_not_found": codes("UserNotFoundException"),
        "username_exists": codes("UsernameExistsException"),
        "unsupported_user_state": codes("UnsupportedUserStateException"),
        "secret_hash_failed": codes(ERR_SECRET_HASH_ENCODING),
        "sign_in_failed": codes(ERR_CODE_SIGN_IN),
        "respond_to_auth_challenge_failed": codes(ERR_CODE_RESPOND_TO_AUTH_CHALLENGE),
        "change_password_request_failed": codes(ERR_CODE_CHANGE_PASSWORD_REQUEST),
        "internal_error": codes(
            "ConcurrentModificationException",
            "DuplicateProviderException",
            "EnableSoftwareTokenMFAException",
            "InternalErrorException",
            "InvalidEmailRoleAccessPolicyException",
            "InvalidLambdaResponseException",
            "InvalidOAuthFlowException",
            "InvalidParameterException",
            "InvalidSmsRoleAccessPolicyException",
            "InvalidSmsRoleTrustRelationshipException",
            "InvalidUserPoolConfigurationException",
            "LimitExceededException",
            "MFAMethodNotFoundException",
            "PreconditionNotMetException",
            "ResourceNotFoundException",
            "ScopeDoesNotExistException",
            "SoftwareTokenMFANotFoundException",
            "TooManyFailedAttemptsException",
            "TooManyRequestsException",
            "UnexpectedLambdaException",
            "UnsupportedIdentityProviderException",
            "UserImportInProgressException",
            "UserLambdaValidationException",
            "UserPoolAddOnNotEnabledException",
            "UserPoolTaggingException",
        ),
        # Throttling is also reported under internal_error.
        "retryable": codes(
            "InternalErrorException",
            "LimitExceededException",
            "TooManyRequestsException",
        ),
    },
    local_codes=codes(
        ERR_SECRET_HASH_ENCODING,
        ERR_CODE_SIGN_IN,
        ERR_CODE_RESPOND_TO_AUTH_CHALLENGE,
        ERR_CODE_CHANGE_PASSWORD_REQUEST,
    ),
    extra_codes=codes(
        "ForbiddenException",
        "PasswordHistoryPolicyViolationException",
        "UnauthorizedException",
        "UnsupportedOperationException",
        "UnsupportedTokenTypeException",
    ),
)


class CognitoError(ClassifiedError):
    domain = COGNITO_ERRORS

    def alias_exists(self) -> bool:
        return self.is_category("alias_exists")

    def code_delivery_failure(self) -> bool:
        return self.is_category("code_delivery_failure")

    def code_mismatch(self) -> bool:
        return self.is_category("code_mismatch")

    def code_expired(self) -> bool:
        return self.is_category("code_expired")

    def group_exists(self) -> bool:
        return self.is_category("group_exists")

    def invalid_password(self) -> bool:
        return self.is_category("invalid_password")

    def not_authorized(self) -> bool:
        return self.is_category("not_authorized")

    def password_reset_required(self) -> bool:
        return self.is_category("password_reset_required")

    def user_not_confirmed(self) -> bool:
        return self.is_category("user_not_confirmed")

    def user_not_found(self) -> bool:
        return self.is_category("user_not_found")

    def username_exists(self) -> bool:
        return self.is_category("username_exists")

    def unsupported_user_state(self) -> bool:
        return self.is_category("unsupported_user_state")

    def secret_hash_failed(self) -> bool:
        return self.is_category("secret_hash_failed")

    def sign_in_failed(self) -> bool:
        return self.is_category("sign_in_failed")

    def respond_to_auth_challenge_failed(self) -> bool:
        return self.is_category("respond_to_auth_challenge_failed")

    def change_password_request_failed(self) -> bool:
        return self.is_category("change_password_request_failed")

    def internal_error(self) -> bool:
        return self.is_category("internal_error")

    def retryable(self) -> bool:
        """Hint only: the adapters never retry on their own."""
        return self.is_category("retryable")


__all__ = [
    "COGNITO_ERRORS",
    "CognitoError",
    "ERR_CODE_CHANGE_PASSWORD_REQUEST",
    "ERR_CODE_RESPOND_TO_AUTH_CHALLENGE",
    "ERR_CODE_SIGN_IN",
    "ERR_SECRET_HASH_ENCODING",
]
