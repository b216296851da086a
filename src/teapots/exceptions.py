"""Domain exceptions raised by services and validators.

Every exception carries an ErrorKind tag. The single exception handler in
main.py looks the kind up in a status table and answers with the message
as a plain-text body.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    VALIDATION_FAILED = "validation_failed"


def _ids_message(entity: str, identifiers: tuple[object, ...], singular: str, plural: str) -> str:
    if len(identifiers) == 1:
        return f"{entity} with id {identifiers[0]} {singular}"
    joined = ", ".join(str(identifier) for identifier in identifiers)
    return f"{entity}s with ids {joined} {plural}"


class DomainError(Exception):
    """Base class for all domain exceptions."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when one or more requested entities do not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, *identifiers: object) -> None:
        self.entity = entity
        self.identifiers = identifiers
        super().__init__(_ids_message(entity, identifiers, "not found", "not found"))


class AlreadyExistsError(DomainError):
    """Raised when one or more entities collide with existing ids."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, entity: str, *identifiers: object) -> None:
        self.entity = entity
        self.identifiers = identifiers
        super().__init__(_ids_message(entity, identifiers, "already exists", "already exist"))


class ValidationFailedError(DomainError):
    """Raised when a request body violates field constraints."""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        lines = "".join(f"\n\t- {error}" for error in errors)
        super().__init__(f"Validation errors:{lines}")
