from typing import Type, Tuple

from reflective.errors import ReflectionError, InvalidArgument, UnsupportedClass, UnknownField
from reflective.internal.inspector import Config, Inspector
from reflective.model import MetaField
from reflective.modifiers import Modifier, Modifiers

# Specify exported symbols
__all__ = (
    "meta_fields",
    "meta_field",
    "Config",
    "MetaField",
    "Modifier",
    "Modifiers",
    "ReflectionError",
    "InvalidArgument",
    "UnsupportedClass",
    "UnknownField",
)


def meta_fields(data_class: Type, config: Config | None = None) -> Tuple[MetaField, ...]:
    """Describe fields of the data class."""
    inspector = Inspector(config or Config())
    return inspector.meta_fields(data_class)


def meta_field(data_class: Type, name: str, config: Config | None = None) -> MetaField:
    """Describe a single field of the data class."""
    if name is None:
        raise InvalidArgument("name")
    inspector = Inspector(config or Config())
    return inspector.meta_field(data_class, name)
