"""S3 object adapter and its error taxonomy."""

from .client import S3Client
from .errors import S3_ERRORS, SIGNING_URL_ERR_CODE, S3Error

__all__ = ["S3Client", "S3Error", "S3_ERRORS", "SIGNING_URL_ERR_CODE"]
