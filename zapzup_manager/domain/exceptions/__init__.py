"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and surface to
the caller unmodified.
"""

from zapzup_manager.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    ChatNotFoundError,
    UserNotFoundError,
)
from zapzup_manager.domain.exceptions.duplicated_id import DuplicatedIdError
from zapzup_manager.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "ChatNotFoundError",
    "UserNotFoundError",
    "DuplicatedIdError",
    "DomainValidationError",
]
