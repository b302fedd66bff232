"""
CSS property types built on the shared value layer.

Each property carries its CSS name and renders a declaration with
declaration(); every one accepts a global keyword.
"""

from cssvalues.properties.aspect_ratio import AspectRatio, AspectRatioKeyword
from cssvalues.properties.background_color import BackgroundColor
from cssvalues.properties.background_image import BackgroundImage
from cssvalues.properties.base import Property
from cssvalues.properties.border_width import BorderWidth, LineWidth, LineWidthKeyword
from cssvalues.properties.font_family import FamilyName, FontFamily, GenericFamily
from cssvalues.properties.font_feature_settings import (
    FeatureSwitch,
    FeatureTag,
    FontFeatureKeyword,
    FontFeatureSettings,
)
from cssvalues.properties.font_size import AbsoluteSize, FontSize, RelativeSize
from cssvalues.properties.font_weight import FontWeight, FontWeightKeyword
from cssvalues.properties.mask_composite import CompositingOperator, MaskComposite
from cssvalues.properties.opacity import Opacity
from cssvalues.properties.padding import Padding, shortest_box_form
from cssvalues.properties.rotate import AxisRotation, Rotate, RotateAxis, RotateKeyword, VectorRotation
from cssvalues.properties.width import FitContent, Width, WidthKeyword

__all__ = [
    "Property",
    # Box model
    "Width",
    "WidthKeyword",
    "FitContent",
    "Padding",
    "shortest_box_form",
    "BorderWidth",
    "LineWidth",
    "LineWidthKeyword",
    # Fonts
    "FontSize",
    "AbsoluteSize",
    "RelativeSize",
    "FontWeight",
    "FontWeightKeyword",
    "FontFamily",
    "FamilyName",
    "GenericFamily",
    "FontFeatureSettings",
    "FontFeatureKeyword",
    "FeatureTag",
    "FeatureSwitch",
    # Visual
    "Opacity",
    "AspectRatio",
    "AspectRatioKeyword",
    "Rotate",
    "RotateAxis",
    "RotateKeyword",
    "AxisRotation",
    "VectorRotation",
    # Colors
    "BackgroundColor",
    # Images and masking
    "BackgroundImage",
    "MaskComposite",
    "CompositingOperator",
]
