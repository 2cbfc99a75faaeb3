"""Collection of utils to work with dataclasses."""

import dataclasses
import inspect
from typing import Type, Iterable, Any

from reflective.internal.helpers.types import Types


class DataClasses:
    """DataClasses provides static utility methods
    to work data classes."""

    @staticmethod
    def is_dataclass(data_class: Any) -> bool:
        """Check if the argument is a data class object."""
        return inspect.isclass(data_class) and dataclasses.is_dataclass(data_class)

    @staticmethod
    def is_frozen(data_class: Type) -> bool:
        """Check if data class instances are immutable."""
        return data_class.__dataclass_params__.frozen

    @staticmethod
    def is_init_var(field: dataclasses.Field) -> bool:
        """Check if the field is an init-only pseudo-field."""
        return Types.is_init_var(field.type)

    @staticmethod
    def declared_fields(data_class: Type) -> Iterable[dataclasses.Field]:
        """Iterate over instance fields and class variables in declaration order.

        Init-only pseudo-fields are skipped.
        """
        for field in data_class.__dataclass_fields__.values():
            if not DataClasses.is_init_var(field):
                yield field

    @staticmethod
    def class_var_names(data_class: Type) -> frozenset:
        """Get names of the class variables known to the data class."""
        instance_fields = {field.name for field in dataclasses.fields(data_class)}
        return frozenset(field.name for field in DataClasses.declared_fields(data_class)) - instance_fields
