"""Exceptions raised by the cw3d workflow."""


class Cw3dError(Exception):
    """Base class for errors the CLI reports as a one-line message."""


class UnknownChainError(Cw3dError):
    """Raised when a chain short name has no registry entry."""

    def __init__(self, short_name, known_short_names=()):
        self.short_name = short_name
        self.known_short_names = list(known_short_names)
        message = f"Unknown chain: {short_name}"
        if self.known_short_names:
            message += f" (expected one of: {', '.join(self.known_short_names)})"
        super().__init__(message)


class CloneError(Cw3dError):
    """Raised when the template repository could not be cloned."""


class InvalidProjectNameError(Cw3dError):
    """Raised when a project name does not resolve to a new subdirectory."""

    def __init__(self, project_name):
        self.project_name = project_name
        super().__init__(
            f"Invalid project name: {project_name!r} (must name a directory inside the current directory)"
        )
