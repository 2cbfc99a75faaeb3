from typing import Type

from reflective.internal.helpers.types import Types


class ReflectionError(Exception):
    """Parent class for all reflection errors."""


class InvalidArgument(ReflectionError, ValueError):
    """Indicates that a required argument is missing."""

    arg_name: str

    def __init__(self, arg_name: str, message: str | None = None):
        super().__init__(message or f"Argument '{arg_name}' must not be None")
        self.arg_name = arg_name


class UnsupportedClass(ReflectionError):
    """Indicates that the reflected object is not a data class."""

    target: Type

    def __init__(self, target: Type, message: str | None = None):
        super().__init__(message or f"Not a data class: {Types.name(target)}")
        self.target = target


class UnknownField(ReflectionError):
    """Indicates that the data class doesn't declare the requested field."""

    class_name: str
    field_name: str

    def __init__(self, class_name: str, field_name: str, message: str | None = None):
        super().__init__(message or f"Field '{field_name}' not found in {class_name}")
        self.class_name = class_name
        self.field_name = field_name
