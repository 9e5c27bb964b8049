"""Cognito user pool adapter.

Purpose:
        Thin wrapper over the ``cognito-idp`` boto3 client for server-side
        (admin) authentication flows: sign-in/out, password change and reset,
        user creation and lookup, group listing.

External dependencies:
        - ``boto3`` client injected or built from :class:`AwsConfig`.

Error handling:
        - Every service call is wrapped exactly once into :class:`CognitoError`
          at the call boundary; nothing is retried.
        - Locally detected failures (secret hash, multi-step password change)
          carry explicit codes and keep the original error as cause.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..base.logging import get_logger
from ..base.resilience import raises_classified
from ..config import AwsConfig, resolve_client
from ..config.defaults import (
    COGNITO_ADMIN_AUTH_FLOW,
    COGNITO_NEW_PASSWORD_CHALLENGE,
    COGNITO_SERVICE,
)
from .errors import (
    ERR_CODE_CHANGE_PASSWORD_REQUEST,
    ERR_CODE_RESPOND_TO_AUTH_CHALLENGE,
    ERR_CODE_SIGN_IN,
    ERR_SECRET_HASH_ENCODING,
    CognitoError,
)
from .helpers import (
    create_user_result_from,
    from_attributes,
    generate_secret_hash,
    list_groups_result_from,
    sign_in_result_from,
    to_attributes,
)
from .models import (
    CreateUserResult,
    DeliveryMedium,
    DeliveryMediums,
    GetUserResult,
    ListGroupsResult,
    SignInResult,
)

_LOGGER = get_logger("aws_adapters.cognito")


class CognitoAdapter:
    def __init__(
        self,
        config: Optional[AwsConfig] = None,
        *,
        pool_id: str,
        client_id: str,
        client_secret: str,
        delivery_mediums: Iterable[DeliveryMedium] = DeliveryMediums.EMPTY,
        force_alias_creation: bool = False,
        client: Any = None,
    ):
        """Bind the adapter to one user pool app client.

        Parameters
        ----------
        config:
            Shared session configuration; ignored when ``client`` is given.
        pool_id, client_id, client_secret:
            User pool and app client identifiers. The secret feeds the
            ``SECRET_HASH`` sent with every client-scoped call.
        delivery_mediums:
            Default ``DesiredDeliveryMediums`` for :meth:`create_user`.
        force_alias_creation:
            Default ``ForceAliasCreation`` for :meth:`create_user`.
        client:
            Pre-built ``cognito-idp`` client (tests, custom sessions).
        """
        self._pool_id = pool_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._delivery_mediums = tuple(DeliveryMedium(m) for m in delivery_mediums)
        self._force_alias_creation = force_alias_creation
        self._client = resolve_client(config, COGNITO_SERVICE, client)

    @property
    def pool_id(self) -> str:
        return self._pool_id

    def _secret_hash(self, username: str) -> str:
        try:
            return generate_secret_hash(username, self._client_id, self._client_secret)
        except (AttributeError, TypeError, ValueError) as e:
            raise CognitoError.wrap_with_code(e, "cannot encode secret hash", ERR_SECRET_HASH_ENCODING) from e

    @raises_classified(CognitoError, "admin initiate auth failed", logger=_LOGGER)
    def sign_in(self, username: str, password: str) -> SignInResult:
        return self._initiate_auth(username, password)

    # Step helpers log nothing; the public entry point emits the one failure event.
    @raises_classified(CognitoError, "admin initiate auth failed")
    def _initiate_auth(self, username: str, password: str) -> SignInResult:
        secret_hash = self._secret_hash(username)
        output = self._client.admin_initiate_auth(
            UserPoolId=self._pool_id,
            ClientId=self._client_id,
            AuthFlow=COGNITO_ADMIN_AUTH_FLOW,
            AuthParameters={
                "USERNAME": username,
                "PASSWORD": password,
                "SECRET_HASH": secret_hash,
            },
        )
        return sign_in_result_from(output)

    @raises_classified(CognitoError, "admin user global sign out failed", logger=_LOGGER)
    def sign_out(self, username: str) -> None:
        self._client.admin_user_global_sign_out(UserPoolId=self._pool_id, Username=username)

    @raises_classified(CognitoError, "change password failed", logger=_LOGGER)
    def change_password(self, username: str, old_password: str, new_password: str) -> None:
        """Change a password, answering a NEW_PASSWORD_REQUIRED challenge if raised.

        Failures carry ``SignInErr``, ``RespondToAuthChallengeErr`` or
        ``ChangePasswordRequestErr`` depending on the failing step.
        """
        try:
            signed_in = self._initiate_auth(username, old_password)
        except CognitoError as e:
            raise CognitoError.wrap_with_code(e, "sign in failed", ERR_CODE_SIGN_IN) from e

        if signed_in.challenge_name == COGNITO_NEW_PASSWORD_CHALLENGE:
            try:
                self._respond_to_new_password_challenge(username, new_password, signed_in.session)
            except CognitoError as e:
                raise CognitoError.wrap_with_code(
                    e, "respond to auth challenge failed", ERR_CODE_RESPOND_TO_AUTH_CHALLENGE
                ) from e
            return

        auth = signed_in.authentication_result
        if auth is None or not auth.access_token:
            cause = ValueError(f"no access token issued (challenge: {signed_in.challenge_name or '-'})")
            raise CognitoError.wrap_with_code(cause, "sign in failed", ERR_CODE_SIGN_IN)
        try:
            self._change_password(old_password, new_password, auth.access_token)
        except CognitoError as e:
            raise CognitoError.wrap_with_code(
                e, "change password request failed", ERR_CODE_CHANGE_PASSWORD_REQUEST
            ) from e

    @raises_classified(CognitoError, "admin respond to auth challenge failed")
    def _respond_to_new_password_challenge(self, username: str, password: str, session: Optional[str]) -> None:
        params: dict[str, Any] = {
            "UserPoolId": self._pool_id,
            "ClientId": self._client_id,
            "ChallengeName": COGNITO_NEW_PASSWORD_CHALLENGE,
            "ChallengeResponses": {
                "USERNAME": username,
                "NEW_PASSWORD": password,
                "SECRET_HASH": self._secret_hash(username),
            },
        }
        if session:
            params["Session"] = session
        self._client.admin_respond_to_auth_challenge(**params)

    @raises_classified(CognitoError, "change password request failed")
    def _change_password(self, old_password: str, new_password: str, access_token: str) -> None:
        self._client.change_password(
            AccessToken=access_token,
            PreviousPassword=old_password,
            ProposedPassword=new_password,
        )

    @raises_classified(CognitoError, "admin reset user password failed", logger=_LOGGER)
    def reset_user_password(self, username: str) -> None:
        self._client.admin_reset_user_password(UserPoolId=self._pool_id, Username=username)

    @raises_classified(CognitoError, "confirm forgot password failed", logger=_LOGGER)
    def confirm_forgot_password(self, username: str, new_password: str, confirmation_code: str) -> None:
        self._client.confirm_forgot_password(
            ClientId=self._client_id,
            SecretHash=self._secret_hash(username),
            Username=username,
            ConfirmationCode=confirmation_code,
            Password=new_password,
        )

    @raises_classified(CognitoError, "get user failed", logger=_LOGGER)
    def get_user(self, access_token: str) -> GetUserResult:
        output = self._client.get_user(AccessToken=access_token)
        return GetUserResult(
            user_attributes=from_attributes(output.get("UserAttributes")),
            username=output.get("Username"),
        )

    @raises_classified(CognitoError, "admin create user failed", logger=_LOGGER)
    def create_user(
        self,
        username: str,
        password: str,
        attributes: Optional[Mapping[str, str]] = None,
        delivery_mediums: Optional[Iterable[DeliveryMedium]] = None,
        force_alias_creation: Optional[bool] = None,
    ) -> CreateUserResult:
        """Create a user with a temporary password.

        ``delivery_mediums`` and ``force_alias_creation`` fall back to the
        adapter defaults when omitted.
        """
        mediums = self._delivery_mediums if delivery_mediums is None else tuple(delivery_mediums)
        force_alias = self._force_alias_creation if force_alias_creation is None else force_alias_creation
        params: dict[str, Any] = {
            "UserPoolId": self._pool_id,
            "Username": username,
            "TemporaryPassword": password,
            "UserAttributes": to_attributes(attributes),
            "ForceAliasCreation": force_alias,
        }
        if mediums:
            params["DesiredDeliveryMediums"] = [DeliveryMedium(m).value for m in mediums]
        output = self._client.admin_create_user(**params)
        return create_user_result_from(output.get("User") or {})

    @raises_classified(CognitoError, "admin list groups for user failed", logger=_LOGGER)
    def list_groups(self, username: str, limit: Optional[int] = None, next_token: Optional[str] = None) -> ListGroupsResult:
        params: dict[str, Any] = {"UserPoolId": self._pool_id, "Username": username}
        if limit is not None:
            params["Limit"] = limit
        if next_token:
            params["NextToken"] = next_token
        return list_groups_result_from(self._client.admin_list_groups_for_user(**params))


__all__ = ["CognitoAdapter"]
