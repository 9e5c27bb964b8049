"""Pytest configuration for the adapters test suite.

Every test runs with a clean AWS environment: region, endpoint and config-file
variables are removed and the cached configuration is dropped, so nothing
from the developer's shell or ``~/.aws`` leaks into assertions. Clients are
built from a session with fake static credentials and driven through
``botocore.stub.Stubber``; no test talks to AWS.
"""

from __future__ import annotations

from typing import Iterator

import boto3
import pytest

from aws_adapters.config import reset_config_cache

TEST_REGION = "eu-west-1"

_ENV_VARS = (
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ADAPTERS_MAX_RETRIES",
    "AWS_ADAPTERS_CONFIG_FILE",
    "AWS_ADAPTERS_LOG_LEVEL",
    "COGNITO_ENDPOINT_URL",
    "DYNAMODB_ENDPOINT_URL",
    "S3_ENDPOINT_URL",
)


@pytest.fixture(autouse=True)
def clean_aws_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip adapter-related variables and point the .env loader at nothing."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-aws-credentials"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def boto_session() -> boto3.session.Session:
    return boto3.session.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name=TEST_REGION,
    )
