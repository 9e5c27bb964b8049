"""aws_adapters package

Thin convenience adapters around AWS managed services: Cognito user pools,
DynamoDB items, S3 objects, API Gateway proxy events and AppSync resolver
errors.

Every adapter failure surfaces as a :class:`ClassifiedError` subclass carrying
a human-readable ``message``, a stable ``code`` from the service's closed
taxonomy, the original ``cause``, and predicate methods for the service's
failure categories. Nothing is retried.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`ClassifiedError`, :class:`ErrorDomain`
    - Configuration: :func:`new_config`, :class:`AwsConfig`,
      :class:`Credentials`, :class:`ConfigurationError`

Service adapters live in their subpackages (``aws_adapters.cognito``,
``aws_adapters.dynamodb``, ``aws_adapters.s3``, ``aws_adapters.apigw``,
``aws_adapters.appsync``).
"""

from .base.errors import ClassifiedError, ErrorDomain, UNKNOWN_BEHAVIOUR_CODE
from .config import AwsConfig, ConfigurationError, Credentials, new_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AwsConfig",
    "ClassifiedError",
    "ConfigurationError",
    "Credentials",
    "ErrorDomain",
    "UNKNOWN_BEHAVIOUR_CODE",
    "new_config",
]
