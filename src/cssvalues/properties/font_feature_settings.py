"""
FontFeatureSettings — the font-feature-settings property

normal | "<tag>" [<integer> | on | off], ... Tags are double-quoted; a
missing value means the feature is enabled (1).
"""

from typing import ClassVar, Mapping, Optional, Tuple, Union

from cssvalues.core.formatting import quote
from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword, CSSValue
from cssvalues.values.global_keyword import GlobalKeyword


class FeatureSwitch(CSSKeyword):
    ON = "on"
    OFF = "off"


FeatureValue = Optional[Union[FeatureSwitch, int]]


class FontFeatureKeyword(CSSKeyword):
    NORMAL = "normal"


class FeatureTag(CSSValue):
    """One OpenType feature setting"""

    tag: str
    setting: FeatureValue = None

    def __str__(self) -> str:
        if self.setting is None:
            return quote(self.tag)
        return f"{quote(self.tag)} {self.setting}"


class FontFeatureSettings(Property):
    """
    Examples:
        >>> str(FontFeatureSettings.features({"liga": FeatureSwitch.OFF, "tnum": None}))
        '"liga" off, "tnum"'
        >>> str(FontFeatureSettings.stylistic_set(3))
        '"ss03"'
    """

    property_name: ClassVar[str] = "font-feature-settings"

    value: Union[GlobalKeyword, FontFeatureKeyword, Tuple[FeatureTag, ...]]

    NORMAL: ClassVar["FontFeatureSettings"]

    @classmethod
    def features(cls, features: Mapping[str, FeatureValue]) -> "FontFeatureSettings":
        """Settings from a tag -> value mapping; an empty mapping means normal."""
        if not features:
            return cls.NORMAL
        return cls(tuple(FeatureTag(tag=tag, setting=setting) for tag, setting in features.items()))

    @classmethod
    def small_caps(cls) -> "FontFeatureSettings":
        return cls.features({"smcp": None})

    @classmethod
    def all_small_caps(cls) -> "FontFeatureSettings":
        return cls.features({"c2sc": None, "smcp": None})

    @classmethod
    def slashed_zero(cls) -> "FontFeatureSettings":
        return cls.features({"zero": None})

    @classmethod
    def historical(cls) -> "FontFeatureSettings":
        return cls.features({"hist": None})

    @classmethod
    def disable_ligatures(cls) -> "FontFeatureSettings":
        return cls.features({"liga": FeatureSwitch.OFF})

    @classmethod
    def tabular_figures(cls) -> "FontFeatureSettings":
        return cls.features({"tnum": None})

    @classmethod
    def fractions(cls) -> "FontFeatureSettings":
        return cls.features({"frac": None})

    @classmethod
    def stylistic_set(cls, number: int) -> "FontFeatureSettings":
        """Stylistic set ss01-ss20; numbers outside 1-20 give normal."""
        if not 1 <= number <= 20:
            return cls.NORMAL
        return cls.features({f"ss{number:02d}": None})

    def __str__(self) -> str:
        if isinstance(self.value, tuple):
            return ", ".join(str(feature) for feature in self.value)
        return str(self.value)


FontFeatureSettings.NORMAL = FontFeatureSettings(FontFeatureKeyword.NORMAL)
