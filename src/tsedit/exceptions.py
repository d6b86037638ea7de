# Custom exceptions for tsedit

class TsEditError(Exception):
    """Base exception for all application-specific errors."""
    pass


class InvalidOperationError(TsEditError):
    """Raised when an operation is not allowed in the node's current position or state."""
    pass


class NotFoundError(TsEditError):
    """Raised by *_or_throw accessors when the expected node or symbol is absent."""
    pass


class InvalidNodeError(TsEditError):
    """Raised when a node handle is used after its text range was removed."""

    def __init__(self, kind: str = "node", message: str = ""):
        self.kind = kind
        super().__init__(
            message
            or f"Attempted to use a {kind} that was removed or invalidated by a previous manipulation."
        )


class ArgumentError(TsEditError):
    """Raised when an argument (text, structure field, modifier name) is not acceptable."""

    def __init__(self, argument_name: str, message: str):
        self.argument_name = argument_name
        super().__init__(f"Argument error ({argument_name}): {message}")


class ManipulationError(TsEditError):
    """
    Raised when the tree could not be resynchronized after a text edit.

    The source file is left unusable; there is no rollback.
    """

    def __init__(self, file_path: str, message: str, new_text: str = ""):
        self.file_path = file_path
        self.new_text = new_text
        super().__init__(f"Manipulation error in {file_path}: {message}")


class ParserError(TsEditError):
    """Raised when a file cannot be parsed by tree-sitter."""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message}")


class ConfigError(TsEditError):
    """Raised for configuration-related problems."""
    pass
