"""
Image — CSS <image>

url(), gradients, element(), cross-fade(), image-set(), paint() and the
none keyword.
"""

from typing import ClassVar, Iterable, Tuple, Union

from cssvalues.core.formatting import format_number
from cssvalues.images.gradient import Gradient
from cssvalues.values.base import CSSUnion, CSSValue
from cssvalues.values.percentage import Percentage
from cssvalues.values.resolution import Resolution
from cssvalues.values.url import Url


class Image(CSSUnion):
    """
    CSS image (base of the image variants).

    Examples:
        >>> str(Image.url(Url("hero.png")))
        "url('hero.png')"
        >>> str(Image.element("chart"))
        'element(#chart)'
    """

    NONE: ClassVar["Image"]

    @classmethod
    def url(cls, url: Union[Url, str]) -> "Image":
        if not isinstance(url, Url):
            url = Url(url)
        return UrlImage(source=url)

    @classmethod
    def gradient(cls, gradient: Gradient) -> "Image":
        return GradientImage(source=gradient)

    @classmethod
    def element(cls, element_id: str) -> "Image":
        return ElementImage(element_id=element_id)

    @classmethod
    def cross_fade(cls, percentage: Percentage, start: "Image", end: "Image") -> "Image":
        return CrossFadeImage(percentage=percentage, start=start, end=end)

    @classmethod
    def image_set(cls, items: Iterable[Tuple[Url, Resolution]]) -> "Image":
        return ImageSet(items=tuple(ImageSetItem(url=url, resolution=res) for url, res in items))

    @classmethod
    def paint(cls, name: str, *arguments: str) -> "Image":
        return PaintImage(name=name, arguments=arguments)


class UrlImage(Image):
    source: Url

    def __str__(self) -> str:
        return str(self.source)


class GradientImage(Image):
    source: Gradient

    def __str__(self) -> str:
        return str(self.source)


class ElementImage(Image):
    """element(#id)"""

    element_id: str

    def __str__(self) -> str:
        return f"element(#{self.element_id})"


class CrossFadeImage(Image):
    """cross-fade(<percentage> <image>, <image>)"""

    percentage: Percentage
    start: Image
    end: Image

    def __str__(self) -> str:
        return f"cross-fade({format_number(self.percentage.value)}% {self.start}, {self.end})"


class ImageSetItem(CSSValue):
    url: Url
    resolution: Resolution

    def __str__(self) -> str:
        return f"{self.url} {self.resolution}"


class ImageSet(Image):
    """image-set(<url> <resolution>, ...)"""

    items: Tuple[ImageSetItem, ...]

    def __str__(self) -> str:
        return f"image-set({', '.join(str(item) for item in self.items)})"


class PaintImage(Image):
    """paint(<worklet name>[, <argument>...])"""

    name: str
    arguments: Tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.arguments:
            return f"paint({self.name})"
        return f"paint({self.name}, {', '.join(self.arguments)})"


class NoImage(Image):
    def __str__(self) -> str:
        return "none"


Image.NONE = NoImage()
