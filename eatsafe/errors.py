"""Exceptions raised by the compliance core."""


class FrameworkDefinitionError(ValueError):
    """A framework definition is structurally invalid.

    Raised while the registry is being built, so authoring mistakes in a
    framework's overrides surface before deployment.
    """

    def __init__(self, message: str, path: str | None = None, errors: list[str] | None = None):
        self.path = path
        self.errors = errors or []
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
