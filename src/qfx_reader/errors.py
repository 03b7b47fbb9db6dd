"""Exceptions raised while reading QFX/OFX documents."""

from __future__ import annotations


class QfxParseError(ValueError):
    """Base class for every failure raised by the QFX reader."""


class ElementNotFoundError(QfxParseError):
    """Raised when a container element has no ``<TAG>...</TAG>`` pair in the span."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f'Element <{tag}> with a matching </{tag}> not found')


class UnterminatedValueError(QfxParseError):
    """Raised when a scalar tag is not followed by any further ``<``."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f'Value of <{tag}> is not terminated by another tag')


class MalformedDocumentError(QfxParseError):
    """Raised when the document has no tagged section at all."""


class InvalidTimestampError(QfxParseError):
    """Raised when an OFX timestamp cannot be decoded."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'Invalid OFX timestamp: {text!r}')
