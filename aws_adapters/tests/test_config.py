from __future__ import annotations

import json
import os

import pytest

from aws_adapters.config import (
    ConfigurationError,
    Credentials,
    get_service_config,
    new_config,
    reset_config_cache,
)
from aws_adapters.config.env import get_endpoint_env_var, is_placeholder, resolve_region


def test_new_config_requires_region():
    with pytest.raises(ConfigurationError, match="AWS_REGION environment variable not found"):
        new_config()


def test_new_config_reads_region_from_env(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    cfg = new_config()
    assert cfg.region == "eu-central-1"  # nosec B101 - assert is appropriate in unit tests
    assert cfg.session.region_name == "eu-central-1"  # nosec B101 - assert is appropriate in unit tests


def test_region_alias_precedence(monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-west-2")
    assert resolve_region() == ("us-west-2", "AWS_DEFAULT_REGION")  # nosec B101 - assert is appropriate in unit tests
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    assert resolve_region() == ("eu-west-1", "AWS_REGION")  # nosec B101 - assert is appropriate in unit tests


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    monkeypatch.setenv("AWS_ADAPTERS_MAX_RETRIES", "7")
    cfg = new_config(region="ap-south-1", max_retries=2)
    assert cfg.region == "ap-south-1"  # nosec B101 - assert is appropriate in unit tests
    assert cfg.settings.max_retries == 2  # nosec B101 - assert is appropriate in unit tests


def test_invalid_retry_count_is_configuration_error(monkeypatch):
    monkeypatch.setenv("AWS_ADAPTERS_MAX_RETRIES", "many")
    with pytest.raises(ConfigurationError):
        new_config(region="eu-west-1")


def test_static_credentials_and_client_endpoint():
    cfg = new_config(
        region="eu-west-1",
        max_retries=0,
        credentials=Credentials(access_key_id="AKIDEXAMPLE", secret_access_key="secret"),
        endpoint_urls={"dynamodb": "http://localhost:8000"},
    )
    creds = cfg.session.get_credentials()
    assert creds.access_key == "AKIDEXAMPLE"  # nosec B101 - assert is appropriate in unit tests
    client = cfg.client("dynamodb")
    assert client.meta.endpoint_url == "http://localhost:8000"  # nosec B101 - assert is appropriate in unit tests
    assert client.meta.region_name == "eu-west-1"  # nosec B101 - assert is appropriate in unit tests
    assert cfg.endpoint_for("s3") is None  # nosec B101 - assert is appropriate in unit tests


def test_endpoint_env_override(monkeypatch):
    monkeypatch.setenv("S3_ENDPOINT_URL", "http://localhost:9000")
    cfg = new_config(region="eu-west-1")
    assert cfg.endpoint_for("s3") == "http://localhost:9000"  # nosec B101 - assert is appropriate in unit tests
    assert cfg.endpoint_for("s3", "http://other:1") == "http://other:1"  # nosec B101 - assert is appropriate in unit tests
    assert get_endpoint_env_var("DynamoDB") == "DYNAMODB_ENDPOINT_URL"  # nosec B101 - assert is appropriate in unit tests
    assert get_endpoint_env_var("sqs") is None  # nosec B101 - assert is appropriate in unit tests


def test_yaml_file_layers(monkeypatch, tmp_path):
    path = tmp_path / "adapters.yaml"
    path.write_text(
        "region: eu-north-1\nmax_retries: 3\ndynamodb:\n  endpoint_url: http://localhost:8000\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(path))
    reset_config_cache()

    shared = get_service_config()
    assert shared["region"] == "eu-north-1"  # nosec B101 - assert is appropriate in unit tests
    assert shared["max_retries"] == 3  # nosec B101 - assert is appropriate in unit tests
    assert shared["endpoint_url"] is None  # nosec B101 - assert is appropriate in unit tests
    assert get_service_config("dynamodb")["endpoint_url"] == "http://localhost:8000"  # nosec B101 - assert is appropriate in unit tests

    monkeypatch.setenv("AWS_REGION", "eu-west-3")
    assert get_service_config("dynamodb")["region"] == "eu-west-3"  # nosec B101 - assert is appropriate in unit tests


def test_json_file_and_overrides(monkeypatch, tmp_path):
    path = tmp_path / "adapters.json"
    path.write_text(json.dumps({"region": "eu-north-1", "s3": {"endpoint_url": "http://minio:9000"}}), encoding="utf-8")
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(path))
    reset_config_cache()
    cfg = get_service_config("s3", overrides={"region": None, "endpoint_url": "http://override:1"})
    assert cfg["region"] == "eu-north-1"  # nosec B101 - assert is appropriate in unit tests
    assert cfg["endpoint_url"] == "http://override:1"  # nosec B101 - assert is appropriate in unit tests


def test_malformed_file_is_configuration_error(monkeypatch, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(path))
    reset_config_cache()
    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        get_service_config()

    bad_json = tmp_path / "broken.json"
    bad_json.write_text("{oops", encoding="utf-8")
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(bad_json))
    reset_config_cache()
    with pytest.raises(ConfigurationError, match="unable to parse"):
        get_service_config()


def test_dotenv_fills_missing_variables(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# local settings\nAWS_REGION=sa-east-1\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    reset_config_cache()
    try:
        assert get_service_config()["region"] == "sa-east-1"  # nosec B101 - assert is appropriate in unit tests
    finally:
        os.environ.pop("AWS_REGION", None)


def test_is_placeholder():
    assert is_placeholder("changeme")  # nosec B101 - assert is appropriate in unit tests
    assert is_placeholder("<placeholder>")  # nosec B101 - assert is appropriate in unit tests
    assert not is_placeholder("eu-west-1")  # nosec B101 - assert is appropriate in unit tests
    assert not is_placeholder(None)  # nosec B101 - assert is appropriate in unit tests


def test_unreadable_file_is_configuration_error(monkeypatch, tmp_path):
    config_dir = tmp_path / "adapters.yaml"
    config_dir.mkdir()
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(config_dir))
    reset_config_cache()
    with pytest.raises(ConfigurationError, match="unable to read config file"):
        get_service_config()

    binary = tmp_path / "binary.yaml"
    binary.write_bytes(b"\xff\xfe\x00region")
    monkeypatch.setenv("AWS_ADAPTERS_CONFIG_FILE", str(binary))
    reset_config_cache()
    with pytest.raises(ConfigurationError, match="unable to read config file"):
        get_service_config()
