"""
FontFamily — the font-family property

A comma-separated list of family names and generic families. A family name
containing a space, "-" or "." is written as a double-quoted string.
"""

from typing import Any, ClassVar, Iterable, Tuple, Union

from cssvalues.core.formatting import join, quote
from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.global_keyword import GlobalKeyword

QUOTE_TRIGGERS = (" ", "-", ".")


class GenericFamily(CSSKeyword):
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    SYSTEM_UI = "system-ui"
    UI_SERIF = "ui-serif"
    UI_SANS_SERIF = "ui-sans-serif"
    UI_MONOSPACE = "ui-monospace"
    UI_ROUNDED = "ui-rounded"
    MATH = "math"
    EMOJI = "emoji"
    FANGSONG = "fangsong"


class FamilyName(CSSValue):
    """
    A specific font family.

    Examples:
        >>> str(FamilyName(name="Arial"))
        'Arial'
        >>> str(FamilyName(name="Times New Roman"))
        '"Times New Roman"'
    """

    name: str

    def __str__(self) -> str:
        if any(char in self.name for char in QUOTE_TRIGGERS):
            return quote(self.name)
        return self.name


Family = Union[GenericFamily, FamilyName]


def _family(value: Union[Family, str]) -> Family:
    if isinstance(value, (GenericFamily, FamilyName)):
        return value
    return FamilyName(name=value)


class FontFamily(Property):
    """
    Examples:
        >>> str(FontFamily("Helvetica Neue", "Arial", GenericFamily.SANS_SERIF))
        '"Helvetica Neue", Arial, sans-serif'
    """

    property_name: ClassVar[str] = "font-family"

    value: Union[GlobalKeyword, Tuple[Family, ...]]

    SERIF: ClassVar["FontFamily"]
    SANS_SERIF: ClassVar["FontFamily"]
    MONOSPACE: ClassVar["FontFamily"]
    CURSIVE: ClassVar["FontFamily"]
    FANTASY: ClassVar["FontFamily"]
    SYSTEM_UI: ClassVar["FontFamily"]

    def __init__(self, *families: Any, **data: Any) -> None:
        """
        Args:
            families: One global keyword, or family names (plain strings)
                and GenericFamily members, in fallback order

        Raises:
            ValueError: If no family is given
        """
        if len(families) == 1 and isinstance(families[0], GlobalKeyword):
            super().__init__(families[0], **data)
            return
        if not families:
            raise ValueError("font-family needs at least one family")
        super().__init__(tuple(_family(f) for f in families), **data)

    @classmethod
    def with_fallback(cls, names: Iterable[str], fallback: GenericFamily) -> "FontFamily":
        return cls(*names, fallback)

    def __str__(self) -> str:
        if self.is_global:
            return str(self.value)
        return join(self.value, ", ")


FontFamily.SERIF = FontFamily(GenericFamily.SERIF)
FontFamily.SANS_SERIF = FontFamily(GenericFamily.SANS_SERIF)
FontFamily.MONOSPACE = FontFamily(GenericFamily.MONOSPACE)
FontFamily.CURSIVE = FontFamily(GenericFamily.CURSIVE)
FontFamily.FANTASY = FontFamily(GenericFamily.FANTASY)
FontFamily.SYSTEM_UI = FontFamily(GenericFamily.SYSTEM_UI)
