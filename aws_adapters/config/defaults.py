"""aws_adapters.config.defaults
============================

Central place for small, stable default values used across the adapters.
These defaults can be overridden via environment variables or an external
configuration file, but provide sensible fallbacks for local development and
tests.

Only plain constants live here; no I/O and no imports from other adapter
packages.
"""

from __future__ import annotations

# ---- Service names (boto3 client identifiers) ----
COGNITO_SERVICE = "cognito-idp"
DYNAMODB_SERVICE = "dynamodb"
S3_SERVICE = "s3"

# ---- Session defaults ----
# None keeps botocore's own retry default; no retries are added by the adapters.
DEFAULT_MAX_RETRIES = None
DEFAULT_REGION = None

# ---- S3 ----
# Expiry applied to pre-signed URLs when callers pass no explicit duration.
S3_DEFAULT_PRESIGN_EXPIRY_SECONDS = 15 * 60

# ---- Cognito ----
COGNITO_ADMIN_AUTH_FLOW = "ADMIN_NO_SRP_AUTH"
COGNITO_NEW_PASSWORD_CHALLENGE = "NEW_PASSWORD_REQUIRED"
