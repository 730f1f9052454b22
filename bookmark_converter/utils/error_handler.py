"""
Unified exception hierarchy for the Bookmark Converter.

Every error surfaced to the command line derives from
BookmarkConverterError, so the CLI can report it as ``ERROR: <message>``.
"""

from typing import List, Optional


class BookmarkConverterError(Exception):
    """Base exception for all bookmark converter errors."""

    pass


# ============================================================================
# Field Errors (raised by the scalar readers)
# ============================================================================


class FieldError(BookmarkConverterError):
    """An error reading a single field of a bookmark node."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class KeyNotFoundError(FieldError):
    """The requested field is absent."""

    def __init__(self, field: str):
        super().__init__(field, f'Tag "{field}" is not found')


class WrongTypeError(FieldError):
    """The field is present but is not a string."""

    def __init__(self, field: str):
        super().__init__(field, f'Tag "{field}" is not a string')


class NotAnIntegerError(FieldError):
    """The field's string value does not parse as an integer."""

    def __init__(self, field: str, raw_value: str):
        self.raw_value = raw_value
        super().__init__(
            field, f'Value for tag "{field}" is not an integer: "{raw_value}"'
        )


class TimestampRangeError(FieldError):
    """The field decodes to an instant a datetime cannot represent."""

    def __init__(self, field: str, raw_value: str):
        self.raw_value = raw_value
        super().__init__(
            field, f'Value for tag "{field}" is out of timestamp range: "{raw_value}"'
        )


# ============================================================================
# Structural Errors (raised by the tree builder)
# ============================================================================


class StructuralError(BookmarkConverterError):
    """The shape of a bookmark node is not what the format allows."""

    def __init__(self, key: Optional[str], message: str):
        self.key = key
        super().__init__(message)


class UnexpectedNodeTypeError(StructuralError):
    def __init__(self, key: str):
        super().__init__(key, "Unexpected node type")


class TypeTagNotStringError(StructuralError):
    def __init__(self, key: str):
        super().__init__(key, "Type tag is not a string")


class UnknownTypeError(StructuralError):
    def __init__(self, key: str, tag: str):
        self.tag = tag
        super().__init__(key, f'Unknown type "{tag}"')


class ChildrenNotArrayError(StructuralError):
    def __init__(self, key: str):
        super().__init__(key, 'Unexpected "children" type')


class InvalidRootTypeError(StructuralError):
    def __init__(self):
        super().__init__(None, "Invalid root item type")


# ============================================================================
# Parse Errors
# ============================================================================


class ParseError(BookmarkConverterError):
    """
    A field or structural error annotated with the path to the failing node.

    Attributes:
        error: The underlying FieldError or StructuralError
        path: Keys traversed from the document root, outermost first
    """

    def __init__(self, error: BookmarkConverterError, path: Optional[List[str]] = None):
        self.error = error
        self.path = list(path) if path else []
        super().__init__(str(error))

    @property
    def path_string(self) -> str:
        return "/".join(self.path)

    def __str__(self) -> str:
        if not self.path:
            return str(self.error)
        return f"Node {self.path_string}: {self.error}"


# ============================================================================
# I/O and Setup Errors
# ============================================================================


class InputError(BookmarkConverterError):
    """The bookmarks file cannot be read or is not valid JSON."""

    pass


class SinkError(BookmarkConverterError):
    """Writing to the output destination failed."""

    pass


class ConfigurationError(BookmarkConverterError):
    """Configuration-related errors."""

    pass


class ValidationError(BookmarkConverterError):
    """Command line argument validation errors."""

    pass
