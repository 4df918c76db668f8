"""Domain-specific exceptions — framework-independent."""


class NoProjectSelectedError(Exception):
    """Raised when an operation needs a project context and none was given."""

    def __init__(self, message: str = "No project selected"):
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailedError(Exception):
    """Raised when a constructed entity or request violates its schema.

    ``errors`` carries one human-readable line per offending field.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class ReferentialIntegrityError(ValidationFailedError):
    """Raised when an entity points at an owner or bin that does not exist."""

    def __init__(self, errors: list[str]):
        super().__init__("Referential integrity failure", errors)


class DuplicateNameError(ValidationFailedError):
    """Raised when every candidate name of a create request already exists."""

    def __init__(self, entity_type: str, duplicates: list[str]):
        self.entity_type = entity_type
        self.duplicates = duplicates
        super().__init__(
            f"All provided {entity_type} names already exist",
            [f"duplicate name: {name}" for name in duplicates],
        )


class NothingToUndoError(Exception):
    """Raised when the undo stack is empty."""

    def __init__(self):
        super().__init__("Nothing to undo")


class NothingToRedoError(Exception):
    """Raised when the redo stack is empty."""

    def __init__(self):
        super().__init__("Nothing to redo")


class SnapshotPersistenceError(Exception):
    """Raised by a snapshot store when a history stack cannot be read or written.

    The snapshot manager recovers from it: the triggering mutation still
    proceeds, it just cannot be undone.
    """

    def __init__(self, stack: str, reason: str):
        self.stack = stack
        self.reason = reason
        super().__init__(f"Could not persist {stack} stack: {reason}")
