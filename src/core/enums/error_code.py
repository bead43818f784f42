"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_MEMBER_NAME = "invalid_member_name"
    INVALID_PAGINATION = "invalid_pagination"
    PAGINATION_NOT_SUPPORTED = "pagination_not_supported"
    SEARCH_NOT_SUPPORTED = "search_not_supported"
    UNSUPPORTED_FETCH_STRATEGY = "unsupported_fetch_strategy"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    MEMBER_NOT_FOUND = "member_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    MEMBER_ALREADY_EXISTS = "member_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"
