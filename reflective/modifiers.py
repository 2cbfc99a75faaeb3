"""Modifier flags used to interpret MetaField bitmasks.

Flag values follow the access flags of the JVM class-file format,
so masks read from compiled classes can be used as is.
"""

import enum
from typing import Tuple


class Modifier(enum.IntFlag):
    """Single modifier bit."""

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SYNCHRONIZED = 0x0020
    VOLATILE = 0x0040
    TRANSIENT = 0x0080
    NATIVE = 0x0100
    ABSTRACT = 0x0400
    STRICT = 0x0800
    SYNTHETIC = 0x1000


# Canonical keyword order
KEYWORDS: Tuple[Tuple[Modifier, str], ...] = (
    (Modifier.PUBLIC, "public"),
    (Modifier.PRIVATE, "private"),
    (Modifier.PROTECTED, "protected"),
    (Modifier.STATIC, "static"),
    (Modifier.FINAL, "final"),
    (Modifier.SYNCHRONIZED, "synchronized"),
    (Modifier.VOLATILE, "volatile"),
    (Modifier.TRANSIENT, "transient"),
    (Modifier.NATIVE, "native"),
    (Modifier.ABSTRACT, "abstract"),
    (Modifier.STRICT, "strict"),
    (Modifier.SYNTHETIC, "synthetic"),
)


class Modifiers:
    """Utilities to work with modifier bitmasks."""

    @staticmethod
    def has(mask: int, modifier: int) -> bool:
        """Check if all bits of the modifier are set in the mask."""
        bits = int(modifier)
        return int(mask) & bits == bits

    @staticmethod
    def keywords(mask: int) -> Tuple[str, ...]:
        """Get keywords of the flags set in the mask.

        Bits without a known keyword are ignored.
        """
        return tuple(keyword for modifier, keyword in KEYWORDS if Modifiers.has(mask, modifier))

    @staticmethod
    def describe(mask: int, sep: str = " ") -> str:
        """Get human-readable representation of the mask."""
        return sep.join(Modifiers.keywords(mask))
