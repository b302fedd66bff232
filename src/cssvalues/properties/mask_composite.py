"""
MaskComposite — the mask-composite property

One compositing operator per mask layer, comma separated.
"""

from typing import Any, ClassVar, Tuple, Union

from cssvalues.properties.base import Property
from cssvalues.values.base import CSSKeyword
from cssvalues.values.global_keyword import GlobalKeyword


class CompositingOperator(CSSKeyword):
    ADD = "add"
    SUBTRACT = "subtract"
    INTERSECT = "intersect"
    EXCLUDE = "exclude"


class MaskComposite(Property):
    """
    Examples:
        >>> str(MaskComposite(CompositingOperator.ADD, CompositingOperator.EXCLUDE))
        'add, exclude'
    """

    property_name: ClassVar[str] = "mask-composite"

    value: Union[GlobalKeyword, Tuple[CompositingOperator, ...]]

    ADD: ClassVar["MaskComposite"]
    SUBTRACT: ClassVar["MaskComposite"]
    INTERSECT: ClassVar["MaskComposite"]
    EXCLUDE: ClassVar["MaskComposite"]
    DEFAULT: ClassVar["MaskComposite"]

    def __init__(self, *operators: Any, **data: Any) -> None:
        """
        Raises:
            ValueError: If no operator is given
        """
        if len(operators) == 1 and isinstance(operators[0], GlobalKeyword):
            super().__init__(operators[0], **data)
            return
        if not operators:
            raise ValueError("mask-composite needs at least one operator")
        super().__init__(tuple(CompositingOperator(op) for op in operators), **data)

    def __str__(self) -> str:
        if self.is_global:
            return str(self.value)
        return ", ".join(op.value for op in self.value)


MaskComposite.ADD = MaskComposite(CompositingOperator.ADD)
MaskComposite.SUBTRACT = MaskComposite(CompositingOperator.SUBTRACT)
MaskComposite.INTERSECT = MaskComposite(CompositingOperator.INTERSECT)
MaskComposite.EXCLUDE = MaskComposite(CompositingOperator.EXCLUDE)
MaskComposite.DEFAULT = MaskComposite.ADD
