"""
CSS image types: gradients and the <image> union.
"""

from cssvalues.images.gradient import (
    ColorStop,
    Gradient,
    GradientDirection,
    GradientKind,
    RadialOptions,
    RadialShape,
    RadialSize,
    RadialSizeKeyword,
    Side,
)
from cssvalues.images.image import (
    CrossFadeImage,
    ElementImage,
    GradientImage,
    Image,
    ImageSet,
    ImageSetItem,
    NoImage,
    PaintImage,
    UrlImage,
)

__all__ = [
    # Gradient
    "Gradient",
    "GradientKind",
    "GradientDirection",
    "Side",
    "ColorStop",
    "RadialOptions",
    "RadialShape",
    "RadialSize",
    "RadialSizeKeyword",
    # Image
    "Image",
    "UrlImage",
    "GradientImage",
    "ElementImage",
    "CrossFadeImage",
    "ImageSet",
    "ImageSetItem",
    "PaintImage",
    "NoImage",
]
