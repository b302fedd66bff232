"""
Property — base of every CSS property type.

A property wraps one value (or an ordered tuple of values) and knows its
CSS property name. str() renders the value, declaration() the full
"<name>: <value>" pair. Every property accepts a global keyword in place of
its value.
"""

from typing import Any, ClassVar

from cssvalues.core.formatting import css_text, join
from cssvalues.values.base import CSSValue
from cssvalues.values.global_keyword import GlobalConvertible, GlobalKeyword


class Property(CSSValue, GlobalConvertible):
    """
    CSS property value.

    Subclasses declare:
        property_name: the CSS property ("width", "font-weight", ...)
        value: a Union that includes GlobalKeyword
    """

    property_name: ClassVar[str]

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def from_global(cls, keyword: GlobalKeyword) -> "Property":
        return cls(GlobalKeyword(keyword))

    @property
    def is_global(self) -> bool:
        return isinstance(self.value, GlobalKeyword)

    def declaration(self) -> str:
        """
        Render as a declaration (without the trailing semicolon).

        Examples:
            >>> Width.px(200).declaration()
            'width: 200px'
        """
        return f"{self.property_name}: {self}"

    def __str__(self) -> str:
        if isinstance(self.value, tuple):
            return join(self.value)
        return css_text(self.value)
