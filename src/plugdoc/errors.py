"""Exceptions raised while composing variant documents.

Both errors are logic errors: the composer never retries, never returns
partial output, and leaves the decision to abort or substitute to the caller.
"""

from typing import Any


class PlugdocError(Exception):
    """Base class for plugdoc errors."""

    pass


class UnknownMode(PlugdocError, ValueError):
    """Raised when a mode value is not one of the recognized variants."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        self.message = message or f"Unknown mode: {value!r} (expected 'mono' or 'stereo')"
        super().__init__(self.message)


class MalformedTemplate(PlugdocError):
    """Raised when a template resolves to structurally invalid markup.

    Attributes:
        node: The offending node
        path: Location of the node in the template (e.g. "document/ul[2]/li[4]")
        mode: Mode under which the violation appeared (None if mode-independent)
    """

    def __init__(
        self,
        message: str,
        node: Any = None,
        path: str = "document",
        mode: Any = None,
    ) -> None:
        self.node = node
        self.path = path
        self.mode = mode
        full_message = f"Malformed template at {path}: {message}"
        if mode is not None:
            full_message += f" (mode: {mode})"
        super().__init__(full_message)
