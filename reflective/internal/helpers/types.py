import dataclasses
import re
import typing
from typing import Any, ClassVar, Final, Tuple

# Leading (optionally module-qualified) name of a string annotation and its subscript
_STRING_ANNOTATION = re.compile(r"^\s*(?:\w+\s*\.\s*)*(\w+)\s*(?:\[(.*)\])?\s*$", re.DOTALL)

QUALIFIERS = ("ClassVar", "Final", "InitVar")


class Types:
    """Utilities to work with type annotations."""

    @staticmethod
    def name(value_type: Any) -> str:
        """Get more human-readable representation of the type."""
        if hasattr(value_type, "__name__"):
            return value_type.__name__
        return repr(value_type)

    @staticmethod
    def qualifiers(hint: Any) -> Tuple[str, ...]:
        """Get names of the nested annotation qualifiers.

        For example ``ClassVar[Final[int]]`` gives ``("ClassVar", "Final")``.
        String annotations (``from __future__ import annotations``) are
        matched by name, the same way ``dataclasses`` recognizes them.
        """
        found = []
        while True:
            if isinstance(hint, str):
                match = _STRING_ANNOTATION.match(hint)
                if match is None or match.group(1) not in QUALIFIERS:
                    break
                found.append(match.group(1))
                hint = match.group(2)
                if hint is None:
                    break
            elif hint is ClassVar:
                found.append("ClassVar")
                break
            elif hint is Final:
                found.append("Final")
                break
            elif hint is dataclasses.InitVar:
                found.append("InitVar")
                break
            elif isinstance(hint, dataclasses.InitVar):
                found.append("InitVar")
                hint = hint.type
            elif typing.get_origin(hint) is ClassVar:
                found.append("ClassVar")
                hint = typing.get_args(hint)[0]
            elif typing.get_origin(hint) is Final:
                found.append("Final")
                hint = typing.get_args(hint)[0]
            else:
                break
        return tuple(found)

    @staticmethod
    def is_final(hint: Any) -> bool:
        """Check if annotation is Final, possibly nested in other qualifiers."""
        return "Final" in Types.qualifiers(hint)

    @staticmethod
    def is_init_var(hint: Any) -> bool:
        """Check if annotation is InitVar or InitVar[T]."""
        return "InitVar" in Types.qualifiers(hint)
