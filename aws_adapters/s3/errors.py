"""S3 error taxonomy.

HEAD requests carry no error body, so botocore reports their failures with the
bare HTTP status as code (``"404"``, ``"403"``); those are listed next to the
named codes.
"""
from __future__ import annotations

from ..base.errors import ClassifiedError, ErrorDomain, codes

SIGNING_URL_ERR_CODE = "SigningURLErr"

S3_ERRORS = ErrorDomain(
    name="s3",
    categories={
        "signing_failed": codes(SIGNING_URL_ERR_CODE),
        "resource_not_found": codes("NoSuchKey", "NoSuchBucket", "NoSuchUpload", "NoSuchVersion", "NotFound", "404"),
        "access_denied": codes("AccessDenied", "Forbidden", "InvalidAccessKeyId", "SignatureDoesNotMatch", "403"),
        "already_exists": codes("BucketAlreadyExists", "BucketAlreadyOwnedByYou"),
        "invalid_request": codes(
            "InvalidRequest",
            "InvalidArgument",
            "InvalidBucketName",
            "EntityTooLarge",
            "EntityTooSmall",
            "InvalidObjectState",
            "MalformedXML",
            "400",
        ),
        "internal_error": codes("InternalError", "500"),
        "retryable": codes("InternalError", "SlowDown", "ServiceUnavailable", "RequestTimeout", "500", "503"),
    },
    local_codes=codes(SIGNING_URL_ERR_CODE),
    extra_codes=codes("PreconditionFailed", "NotModified", "412", "304"),
)


class S3Error(ClassifiedError):
    domain = S3_ERRORS

    def signing_failed(self) -> bool:
        return self.is_category("signing_failed")

    def resource_not_found(self) -> bool:
        return self.is_category("resource_not_found")

    def access_denied(self) -> bool:
        return self.is_category("access_denied")

    def already_exists(self) -> bool:
        return self.is_category("already_exists")

    def invalid_request(self) -> bool:
        return self.is_category("invalid_request")

    def internal_error(self) -> bool:
        return self.is_category("internal_error")

    def retryable(self) -> bool:
        return self.is_category("retryable")


__all__ = ["S3Error", "S3_ERRORS", "SIGNING_URL_ERR_CODE"]
