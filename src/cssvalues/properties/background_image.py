"""
BackgroundImage — the background-image property

One image per background layer, comma separated; "none" for no image.
"""

from typing import Any, ClassVar, Iterable, Optional, Tuple, Union

from cssvalues.color.color import Color
from cssvalues.images.gradient import Gradient, Side
from cssvalues.images.image import Image
from cssvalues.properties.base import Property
from cssvalues.values.angle import Angle
from cssvalues.values.global_keyword import GlobalKeyword
from cssvalues.values.url import Url


class BackgroundImage(Property):
    """
    Examples:
        >>> str(BackgroundImage.url(Url("bg.png")))
        "url('bg.png')"
        >>> str(BackgroundImage.NONE)
        'none'
    """

    property_name: ClassVar[str] = "background-image"

    value: Union[GlobalKeyword, Tuple[Image, ...]]

    NONE: ClassVar["BackgroundImage"]
    DEFAULT: ClassVar["BackgroundImage"]

    def __init__(self, *layers: Any, **data: Any) -> None:
        """
        Args:
            layers: One global keyword, or one or more images (Image, Url
                or Gradient), top layer first

        Raises:
            ValueError: If no layer is given
        """
        if len(layers) == 1 and isinstance(layers[0], GlobalKeyword):
            super().__init__(layers[0], **data)
            return
        if not layers:
            raise ValueError("background-image needs at least one layer")
        super().__init__(tuple(self._image(layer) for layer in layers), **data)

    @staticmethod
    def _image(layer: Union[Image, Url, Gradient]) -> Image:
        if isinstance(layer, Url):
            return Image.url(layer)
        if isinstance(layer, Gradient):
            return Image.gradient(layer)
        return layer

    @classmethod
    def url(cls, url: Union[Url, str]) -> "BackgroundImage":
        return cls(Image.url(url))

    @classmethod
    def linear_gradient(
        cls,
        colors: Iterable[Color],
        to: Optional[Side] = None,
        angle: Optional[Angle] = None,
    ) -> "BackgroundImage":
        return cls(Gradient.linear_gradient(colors, to=to, angle=angle))

    @classmethod
    def radial_gradient(cls, colors: Iterable[Color]) -> "BackgroundImage":
        return cls(Gradient.radial_gradient(colors))

    @classmethod
    def conic_gradient(cls, colors: Iterable[Color], from_angle: Optional[Angle] = None) -> "BackgroundImage":
        return cls(Gradient.conic_gradient(colors, from_angle=from_angle))

    def __str__(self) -> str:
        if self.is_global:
            return str(self.value)
        return ", ".join(str(layer) for layer in self.value)


BackgroundImage.NONE = BackgroundImage(Image.NONE)
BackgroundImage.DEFAULT = BackgroundImage.NONE
