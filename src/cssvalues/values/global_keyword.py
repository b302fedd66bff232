"""
Global CSS keywords.

inherit / initial / unset / revert / revert-layer are valid on every CSS
property and always render as the bare keyword.
"""

from typing import Any, Callable, Generic, TypeVar, Union

from cssvalues.core.formatting import css_text
from cssvalues.values.base import CSSKeyword, CSSValue


class GlobalKeyword(CSSKeyword):
    """CSS-wide keywords"""

    INHERIT = "inherit"
    INITIAL = "initial"
    UNSET = "unset"
    REVERT = "revert"
    REVERT_LAYER = "revert-layer"


class GlobalConvertible:
    """
    Mixin: a type that can hold a global keyword.

    Implement from_global(); the named constructors come for free.
    """

    @classmethod
    def from_global(cls, keyword: GlobalKeyword):
        raise NotImplementedError(f"{cls.__name__} must implement from_global()")

    @classmethod
    def inherit(cls):
        return cls.from_global(GlobalKeyword.INHERIT)

    @classmethod
    def initial(cls):
        return cls.from_global(GlobalKeyword.INITIAL)

    @classmethod
    def unset(cls):
        return cls.from_global(GlobalKeyword.UNSET)

    @classmethod
    def revert(cls):
        return cls.from_global(GlobalKeyword.REVERT)

    @classmethod
    def revert_layer(cls):
        return cls.from_global(GlobalKeyword.REVERT_LAYER)


T = TypeVar("T")
U = TypeVar("U")


class WithGlobal(CSSValue, GlobalConvertible, Generic[T]):
    """
    A value of type T, or a global keyword in its place.

    Examples:
        >>> str(WithGlobal(Number(2)))
        '2'
        >>> str(WithGlobal.inherit())
        'inherit'
    """

    value: Union[GlobalKeyword, T]

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_global(cls, keyword: GlobalKeyword) -> "WithGlobal[T]":
        return cls(keyword)

    @property
    def is_global(self) -> bool:
        return isinstance(self.value, GlobalKeyword)

    def map(self, transform: Callable[[T], U]) -> "WithGlobal[U]":
        """Apply transform to the wrapped value; a global keyword passes through."""
        if self.is_global:
            return WithGlobal(self.value)
        return WithGlobal(transform(self.value))

    def flat_map(self, transform: Callable[[T], "WithGlobal[U]"]) -> "WithGlobal[U]":
        """Like map(), for transforms that may themselves produce a global keyword."""
        if self.is_global:
            return WithGlobal(self.value)
        return transform(self.value)

    def __str__(self) -> str:
        return css_text(self.value)
