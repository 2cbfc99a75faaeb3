from dataclasses import dataclass
from typing import Tuple

from reflective.errors import InvalidArgument
from reflective.modifiers import Modifiers


@dataclass(frozen=True)
class MetaField:
    """Immutable field descriptor: a name and an opaque modifier bitmask.

    The record doesn't interpret the bitmask. Use :class:`~reflective.modifiers.Modifier`
    flags (or any other convention) to give the bits a meaning.
    """

    name: str
    modifiers: int

    def __post_init__(self):
        if self.name is None:
            raise InvalidArgument("name")

    def has(self, modifier: int) -> bool:
        """Check if all bits of the modifier are set."""
        return Modifiers.has(self.modifiers, modifier)

    def keywords(self) -> Tuple[str, ...]:
        """Get keywords of the modifiers set on the field."""
        return Modifiers.keywords(self.modifiers)
