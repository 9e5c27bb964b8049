"""DynamoDB error taxonomy.

Retryable codes follow the service's documented guidance:
https://docs.aws.amazon.com/amazondynamodb/latest/developerguide/Programming.Errors.html
"""
from __future__ import annotations

from ..base.errors import ClassifiedError, ErrorDomain, codes

MARSHAL_ERR_CODE = "DynamoDBMarshalErr"
UNMARSHAL_ERR_CODE = "DynamoDBUnmarshalErr"
INVALID_CONDITION_ERR_CODE = "DynamoDBInvalidConditionErr"
VALIDATION_ERR_CODE = "ValidationException"
THROTTLING_ERR_CODE = "ThrottlingException"
UNRECOGNIZED_CLIENT_ERR_CODE = "UnrecognizedClientException"

DYNAMODB_ERRORS = ErrorDomain(
    name="dynamodb",
    categories={
        "marshalling_failed": codes(MARSHAL_ERR_CODE),
        "unmarshalling_failed": codes(UNMARSHAL_ERR_CODE),
        "invalid_condition": codes(INVALID_CONDITION_ERR_CODE),
        "validation_failed": codes(VALIDATION_ERR_CODE),
        "condition_failed": codes("ConditionalCheckFailedException"),
        "backup_unavailable": codes(
            "ContinuousBackupsUnavailableException",
            "PointInTimeRecoveryUnavailableException",
        ),
        "internal_error": codes("InternalServerError"),
        "resource_not_found": codes(
            "ResourceNotFoundException",
            "BackupNotFoundException",
            "GlobalTableNotFoundException",
            "IndexNotFoundException",
            "ReplicaNotFoundException",
            "TableNotFoundException",
        ),
        "resource_already_exists": codes(
            "GlobalTableAlreadyExistsException",
            "ReplicaAlreadyExistsException",
            "TableAlreadyExistsException",
        ),
        "invalid_operation": codes(
            "IdempotentParameterMismatchException",
            "InvalidRestoreTimeException",
            "TransactionCanceledException",
            "TransactionConflictException",
            "TransactionInProgressException",
        ),
        "limit_exceeded": codes(
            "ItemCollectionSizeLimitExceededException",
            "LimitExceededException",
            "RequestLimitExceeded",
            "ProvisionedThroughputExceededException",
        ),
        "resource_in_use": codes(
            "BackupInUseException",
            "ResourceInUseException",
            "TableInUseException",
        ),
        "retryable": codes(
            THROTTLING_ERR_CODE,
            UNRECOGNIZED_CLIENT_ERR_CODE,
            "ItemCollectionSizeLimitExceededException",
            "LimitExceededException",
            "ProvisionedThroughputExceededException",
            "RequestLimitExceeded",
            "InternalServerError",
        ),
    },
    local_codes=codes(MARSHAL_ERR_CODE, UNMARSHAL_ERR_CODE, INVALID_CONDITION_ERR_CODE),
    extra_codes=codes("AccessDeniedException", "MissingAuthenticationTokenException"),
)


class DynamoDBError(ClassifiedError):
    domain = DYNAMODB_ERRORS

    def marshalling_failed(self) -> bool:
        return self.is_category("marshalling_failed")

    def unmarshalling_failed(self) -> bool:
        return self.is_category("unmarshalling_failed")

    def invalid_condition(self) -> bool:
        return self.is_category("invalid_condition")

    def validation_failed(self) -> bool:
        return self.is_category("validation_failed")

    def condition_failed(self) -> bool:
        return self.is_category("condition_failed")

    def backup_unavailable(self) -> bool:
        return self.is_category("backup_unavailable")

    def internal_error(self) -> bool:
        return self.is_category("internal_error")

    def resource_not_found(self) -> bool:
        return self.is_category("resource_not_found")

    def resource_already_exists(self) -> bool:
        return self.is_category("resource_already_exists")

    def invalid_operation(self) -> bool:
        return self.is_category("invalid_operation")

    def limit_exceeded(self) -> bool:
        return self.is_category("limit_exceeded")

    def resource_in_use(self) -> bool:
        return self.is_category("resource_in_use")

    def retryable(self) -> bool:
        return self.is_category("retryable")


__all__ = [
    "DYNAMODB_ERRORS",
    "DynamoDBError",
    "INVALID_CONDITION_ERR_CODE",
    "MARSHAL_ERR_CODE",
    "THROTTLING_ERR_CODE",
    "UNMARSHAL_ERR_CODE",
    "UNRECOGNIZED_CLIENT_ERR_CODE",
    "VALIDATION_ERR_CODE",
]
