"""
Url — CSS url()

Single quotes by default. Surrounding quotes in the input are dropped, the
chosen quote character is escaped, and for anything but data: URLs the
characters "(", ")", "," and " " are percent-encoded.
"""

from typing import Any, Optional

from cssvalues.values.base import CSSKeyword, CSSValue

URL_ESCAPES = (
    ("(", "%28"),
    (")", "%29"),
    (",", "%2C"),
    (" ", "%20"),
)


class QuoteStyle(CSSKeyword):
    """Quote character around a url() argument"""

    SINGLE = "'"
    DOUBLE = '"'


class Url(CSSValue):
    """
    CSS url().

    Examples:
        >>> str(Url("image.png"))
        "url('image.png')"
        >>> str(Url("my image.png", quotes=None))
        'url(my%20image.png)'
    """

    value: str
    quotes: Optional[QuoteStyle] = QuoteStyle.SINGLE

    def __init__(self, value: str, quotes: Optional[QuoteStyle] = QuoteStyle.SINGLE, **data: Any) -> None:
        super().__init__(value=value, quotes=quotes, **data)

    @classmethod
    def data_url(
        cls,
        mime_type: str,
        base64_data: str,
        quotes: Optional[QuoteStyle] = QuoteStyle.SINGLE,
    ) -> "Url":
        """
        Build a base64 data: URL.

        Examples:
            >>> str(Url.data_url("image/png", "iVBORw0KGgo="))
            "url('data:image/png;base64,iVBORw0KGgo=')"
        """
        return cls(f"data:{mime_type};base64,{base64_data}", quotes=quotes)

    @staticmethod
    def _strip_quotes(text: str) -> str:
        if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
            return text[1:-1]
        return text

    @staticmethod
    def _escape(text: str) -> str:
        if text.startswith("data:"):
            return text
        for char, encoded in URL_ESCAPES:
            text = text.replace(char, encoded)
        return text

    def __str__(self) -> str:
        text = self._escape(self._strip_quotes(self.value))
        if self.quotes is None:
            return f"url({text})"
        quote = self.quotes.value
        text = text.replace(quote, "\\" + quote)
        return f"url({quote}{text}{quote})"
