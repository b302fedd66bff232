"""
Base classes for every CSS value.

CSSValue — immutable pydantic model whose str() is its CSS text.
CSSKeyword — str enum whose str() and format() are the bare keyword.
CSSUnion — abstract base of the variant-subclass types.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class CSSKeyword(str, Enum):
    """
    Enum of CSS keywords.

    Members render as their value both through str() and inside f-strings,
    independent of the interpreter's default Enum formatting.
    """

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


class CSSValue(BaseModel):
    """
    Immutable CSS value.

    Subclasses implement __str__ to return byte-exact CSS text. Instances are
    frozen (no mutation after construction), hashable and compare by type
    and fields, so two renderings of equal values are always identical.
    """

    model_config = {"frozen": True}

    def __str__(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not define a CSS rendering")

    @property
    def css(self) -> str:
        """CSS text of this value (same as str())."""
        return str(self)


class CSSUnion(CSSValue):
    """
    Base of a value type made of variant subclasses (Length, Color, Image).

    The base only carries the classmethods that build variants; it has no
    rendering of its own, so constructing it directly raises TypeError.
    """

    def __init__(self, **data: Any) -> None:
        if CSSUnion in type(self).__bases__:
            raise TypeError(
                f"{type(self).__name__} cannot be constructed directly; "
                f"use one of its classmethods (or a variant class)"
            )
        super().__init__(**data)
