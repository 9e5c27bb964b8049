"""S3Client against a stubbed ``s3`` client; pre-signing runs offline with fake credentials."""

from __future__ import annotations

import io
from datetime import timedelta
from urllib.parse import urlparse

import pytest
from botocore.response import StreamingBody
from botocore.stub import Stubber

from aws_adapters.s3 import S3Client, S3Error, SIGNING_URL_ERR_CODE

BUCKET = "test-bucket"
KEY = "docs/report.pdf"


@pytest.fixture()
def s3_client(boto_session):
    return boto_session.client("s3")


@pytest.fixture()
def stubber(s3_client):
    with Stubber(s3_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture()
def s3(s3_client, stubber):
    return S3Client(client=s3_client)


def test_generate_put_url(s3):
    url = s3.generate_put_url(BUCKET, KEY, "application/pdf", expire=timedelta(minutes=5))
    parsed = urlparse(url)
    assert BUCKET in parsed.netloc or parsed.path.startswith(f"/{BUCKET}")  # nosec B101 - assert is appropriate in unit tests
    assert parsed.path.endswith(KEY)  # nosec B101 - assert is appropriate in unit tests
    assert "Signature" in parsed.query  # nosec B101 - assert is appropriate in unit tests


def test_generate_put_url_with_metadata(s3):
    url = s3.generate_put_url(BUCKET, KEY, "application/pdf", expire=60, metadata={"owner": "jane"})
    assert "Signature" in url  # nosec B101 - assert is appropriate in unit tests


def test_generate_get_url_default_expiry(s3):
    url = s3.generate_get_url(BUCKET, KEY)
    assert urlparse(url).path.endswith(KEY)  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize("expire", [0, -1, 0.5, timedelta(seconds=0), timedelta(milliseconds=999), timedelta(minutes=-5)])
def test_sub_second_expiry_is_signing_failure(s3, expire):
    with pytest.raises(S3Error) as info:
        s3.generate_get_url(BUCKET, KEY, expire=expire)
    assert info.value.code == SIGNING_URL_ERR_CODE  # nosec B101 - assert is appropriate in unit tests
    assert info.value.signing_failed()  # nosec B101 - assert is appropriate in unit tests
    assert str(info.value).startswith("signing get url failed: expiry must be at least 1s")  # nosec B101 - assert is appropriate in unit tests


def test_put_object(s3, stubber):
    stubber.add_response(
        "put_object",
        {"ETag": '"abc"'},
        {
            "Bucket": BUCKET,
            "Key": KEY,
            "Body": b"%PDF",
            "Metadata": {"owner": "jane"},
            "ContentType": "application/pdf",
        },
    )
    s3.put_object(BUCKET, KEY, b"%PDF", metadata={"owner": "jane"}, content_type="application/pdf")


def test_get_object_returns_body(s3, stubber):
    payload = b"hello world"
    stubber.add_response(
        "get_object",
        {"Body": StreamingBody(io.BytesIO(payload), len(payload)), "ContentLength": len(payload)},
        {"Bucket": BUCKET, "Key": KEY},
    )
    body = s3.get_object(BUCKET, KEY)
    assert body.read() == payload  # nosec B101 - assert is appropriate in unit tests


def test_get_object_missing_key(s3, stubber):
    stubber.add_client_error(
        "get_object",
        service_error_code="NoSuchKey",
        service_message="The specified key does not exist.",
        http_status_code=404,
    )
    with pytest.raises(S3Error) as info:
        s3.get_object(BUCKET, KEY)
    err = info.value
    assert err.resource_not_found()  # nosec B101 - assert is appropriate in unit tests
    assert err.http_status == 404  # nosec B101 - assert is appropriate in unit tests
    assert str(err) == "get object failed: NoSuchKey: The specified key does not exist."  # nosec B101 - assert is appropriate in unit tests


def test_delete_object(s3, stubber):
    stubber.add_response("delete_object", {}, {"Bucket": BUCKET, "Key": KEY})
    s3.delete_object(BUCKET, KEY)


def test_get_object_metadata(s3, stubber):
    stubber.add_response("head_object", {"Metadata": {"owner": "jane"}}, {"Bucket": BUCKET, "Key": KEY})
    assert s3.get_object_metadata(BUCKET, KEY) == {"owner": "jane"}  # nosec B101 - assert is appropriate in unit tests


def test_get_object_metadata_head_404(s3, stubber):
    stubber.add_client_error("head_object", service_error_code="404", service_message="Not Found", http_status_code=404)
    with pytest.raises(S3Error) as info:
        s3.get_object_metadata(BUCKET, KEY)
    assert info.value.resource_not_found()  # nosec B101 - assert is appropriate in unit tests
    assert not info.value.access_denied()  # nosec B101 - assert is appropriate in unit tests


def test_access_denied_is_not_retryable(s3, stubber):
    stubber.add_client_error("delete_object", service_error_code="AccessDenied", service_message="Access Denied", http_status_code=403)
    with pytest.raises(S3Error) as info:
        s3.delete_object(BUCKET, KEY)
    assert info.value.access_denied()  # nosec B101 - assert is appropriate in unit tests
    assert not info.value.retryable()  # nosec B101 - assert is appropriate in unit tests
