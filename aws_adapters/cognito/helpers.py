"""Request/response mapping helpers for the Cognito adapter."""
from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .models import (
    AuthenticationResult,
    CreateUserResult,
    Group,
    ListGroupsResult,
    SignInResult,
)


def generate_secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """Return base64(HMAC-SHA256(client_secret, username + client_id))."""
    mac = hmac.new(client_secret.encode("utf-8"), (username + client_id).encode("utf-8"), hashlib.sha256)
    return base64.b64encode(mac.digest()).decode("ascii")


def from_attributes(attrs: Optional[Iterable[Mapping[str, Any]]]) -> Dict[str, str]:
    """Convert ``[{"Name": ..., "Value": ...}]`` into a dict.

    Attributes reported without a value are skipped.
    """
    out: Dict[str, str] = {}
    for attr in attrs or ():
        name = attr.get("Name")
        value = attr.get("Value")
        if name is None or value is None:
            continue
        out[name] = value
    return out


def to_attributes(attributes: Optional[Mapping[str, str]]) -> List[Dict[str, str]]:
    return [{"Name": name, "Value": value} for name, value in (attributes or {}).items()]


def sign_in_result_from(output: Mapping[str, Any]) -> SignInResult:
    auth = output.get("AuthenticationResult")
    return SignInResult(
        authentication_result=(
            AuthenticationResult(
                access_token=auth.get("AccessToken"),
                expires_in=auth.get("ExpiresIn"),
                id_token=auth.get("IdToken"),
                refresh_token=auth.get("RefreshToken"),
                token_type=auth.get("TokenType"),
            )
            if auth is not None
            else None
        ),
        challenge_name=output.get("ChallengeName"),
        challenge_parameters=dict(output.get("ChallengeParameters") or {}),
        session=output.get("Session"),
    )


def create_user_result_from(user: Mapping[str, Any]) -> CreateUserResult:
    return CreateUserResult(
        attributes=from_attributes(user.get("Attributes")),
        enabled=user.get("Enabled"),
        create_date=user.get("UserCreateDate"),
        last_modified_date=user.get("UserLastModifiedDate"),
        user_status=user.get("UserStatus"),
        username=user.get("Username"),
    )


def list_groups_result_from(output: Mapping[str, Any]) -> ListGroupsResult:
    groups = [
        Group(
            group_name=g.get("GroupName"),
            user_pool_id=g.get("UserPoolId"),
            description=g.get("Description"),
            role_arn=g.get("RoleArn"),
            precedence=g.get("Precedence"),
            creation_date=g.get("CreationDate"),
            last_modified_date=g.get("LastModifiedDate"),
        )
        for g in output.get("Groups") or ()
    ]
    return ListGroupsResult(groups=groups, next_token=output.get("NextToken"))


__all__ = [
    "create_user_result_from",
    "from_attributes",
    "generate_secret_hash",
    "list_groups_result_from",
    "sign_in_result_from",
    "to_attributes",
]
