"""Exceptions raised while loading, converting and rendering API documents."""


class ApidocError(Exception):
    """Base class for all apidoc-openapi errors."""


class FieldError(ApidocError):
    """An error tied to a specific field of a document or of the options."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DuplicateOperationError(FieldError):
    """Two endpoints declare the same (path, method) pair."""

    def __init__(self, method: str, path: str = ""):
        self.method = method.lower()
        self.path = path
        super().__init__(f"paths.{self.method}", f"duplicate value for {path or 'path'}")


class DocLoadError(ApidocError):
    """The source document could not be read or validated."""
