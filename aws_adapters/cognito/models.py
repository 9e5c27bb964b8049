"""
Pydantic result models returned by :class:`CognitoAdapter`.

These are transient value objects mapped from the boto3 response shapes; they
carry no behaviour. Every field is optional because Cognito omits members
freely (e.g. no ``AuthenticationResult`` while a challenge is pending).
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class DeliveryMedium(str, Enum):
    EMAIL = "EMAIL"
    SMS = "SMS"


class DeliveryMediums:
    """Preset ``DesiredDeliveryMediums`` combinations for user creation."""

    EMPTY: Tuple[DeliveryMedium, ...] = ()
    EMAIL: Tuple[DeliveryMedium, ...] = (DeliveryMedium.EMAIL,)
    SMS: Tuple[DeliveryMedium, ...] = (DeliveryMedium.SMS,)
    EMAIL_AND_SMS: Tuple[DeliveryMedium, ...] = (DeliveryMedium.EMAIL, DeliveryMedium.SMS)


class AuthenticationResult(BaseModel):
    access_token: Optional[str] = None
    expires_in: Optional[int] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: Optional[str] = None


class SignInResult(BaseModel):
    """Outcome of an admin sign-in: tokens, or a challenge to answer."""

    authentication_result: Optional[AuthenticationResult] = None
    challenge_name: Optional[str] = None
    challenge_parameters: Dict[str, str] = Field(default_factory=dict)
    session: Optional[str] = None


class CreateUserResult(BaseModel):
    attributes: Dict[str, str] = Field(default_factory=dict)
    enabled: Optional[bool] = None
    create_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    user_status: Optional[str] = None
    username: Optional[str] = None


class GetUserResult(BaseModel):
    user_attributes: Dict[str, str] = Field(default_factory=dict)
    username: Optional[str] = None


class Group(BaseModel):
    group_name: Optional[str] = None
    user_pool_id: Optional[str] = None
    description: Optional[str] = None
    role_arn: Optional[str] = None
    precedence: Optional[int] = None
    creation_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None


class ListGroupsResult(BaseModel):
    groups: List[Group] = Field(default_factory=list)
    next_token: Optional[str] = None


__all__ = [
    "AuthenticationResult",
    "CreateUserResult",
    "DeliveryMedium",
    "DeliveryMediums",
    "GetUserResult",
    "Group",
    "ListGroupsResult",
    "SignInResult",
]
