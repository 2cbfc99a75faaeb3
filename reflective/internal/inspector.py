import dataclasses
import logging
from dataclasses import dataclass
from typing import Type, Tuple, Any

from reflective.consts import REFLECTIVE
from reflective.errors import UnsupportedClass, UnknownField
from reflective.internal.helpers.data_classes import DataClasses
from reflective.internal.helpers.types import Types
from reflective.model import MetaField
from reflective.modifiers import Modifier, Modifiers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Reflection configuration."""

    include_class_vars: bool = True
    private_prefix: str = "__"
    protected_prefix: str = "_"


@dataclass
class Inspector:
    """Inspector derives field descriptors from data class declarations."""

    config: Config

    def meta_fields(self, data_class: Type) -> Tuple[MetaField, ...]:
        """Describe all fields of the data class in declaration order."""
        self.check_dataclass(data_class)
        class_vars = DataClasses.class_var_names(data_class)
        described = []
        for field in DataClasses.declared_fields(data_class):
            is_class_var = field.name in class_vars
            if is_class_var and not self.config.include_class_vars:
                continue
            described.append(self.describe(data_class, field, is_class_var))
        return tuple(described)

    def meta_field(self, data_class: Type, name: str) -> MetaField:
        """Describe a single field of the data class."""
        for meta_field in self.meta_fields(data_class):
            if meta_field.name == name:
                return meta_field
        raise UnknownField(class_name=Types.name(data_class), field_name=name)

    def describe(self, data_class: Type, field: dataclasses.Field, is_class_var: bool) -> MetaField:
        """Create field descriptor."""
        modifiers: int = self.visibility(data_class, field.name).value
        if is_class_var:
            modifiers |= Modifier.STATIC.value
        elif DataClasses.is_frozen(data_class):
            modifiers |= Modifier.FINAL.value
        if Types.is_final(field.type):
            modifiers |= Modifier.FINAL.value
        modifiers |= self._extra_modifiers(data_class, field)
        logger.debug(
            "Derived modifiers for %s.%s: %s",
            Types.name(data_class),
            field.name,
            Modifiers.describe(modifiers),
        )
        return MetaField(field.name, modifiers)

    def visibility(self, data_class: Type, name: str) -> Modifier:
        """Derive visibility modifier from the naming convention."""
        if name.startswith(self.config.private_prefix) or self.is_mangled(data_class, name):
            return Modifier.PRIVATE
        if name.startswith(self.config.protected_prefix):
            return Modifier.PROTECTED
        return Modifier.PUBLIC

    @staticmethod
    def is_mangled(data_class: Type, name: str) -> bool:
        """Check if the name is a "__name" mangled by the class or any of its bases."""
        # Names declared as "__name" inside the class body are mangled to "_Class__name"
        for owner in data_class.__mro__:
            stripped = owner.__name__.lstrip("_")
            if stripped and name.startswith(f"_{stripped}__"):
                return True
        return False

    @staticmethod
    def check_dataclass(data_class: Any):
        """Make sure the argument is a data class type."""
        if not DataClasses.is_dataclass(data_class):
            raise UnsupportedClass(data_class)

    @staticmethod
    def _extra_modifiers(data_class: Type, field: dataclasses.Field) -> int:
        """Resolve modifier bits supplied by the field metadata."""
        extra = field.metadata.get(REFLECTIVE)
        if extra is None:
            return 0
        if isinstance(extra, int) and not isinstance(extra, bool):
            return int(extra)
        raise TypeError(f"Unexpected type for field metadata: {Types.name(data_class)}.{field.name}: {type(extra)}")
