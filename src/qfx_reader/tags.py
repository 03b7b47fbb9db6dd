"""Tag resolution primitives shared by every extractor.

OFX files come in a strict dialect (``<CODE>0</CODE>``) and a loose SGML
dialect (``<CODE>0`` followed directly by the next tag). Both dialects can
be mixed inside one file, element by element. The helpers here never need to
know which dialect is in use:

* container elements (``STATUS``, ``CCSTMTRS``, ``BANKTRANLIST`` ...) are
  always closed, so they are located with :func:`element_span`;
* scalar values end at the next ``<``, which is either their own closing tag
  or the opening tag of the following sibling, see :func:`value_after_tag`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from qfx_reader.errors import ElementNotFoundError, UnterminatedValueError

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Iterator


def element_span(text: str, tag: str) -> str:
    """Return ``<tag>...</tag>`` (inclusive) for the first ``tag`` element in ``text``."""

    opening = f'<{tag}>'
    closing = f'</{tag}>'
    start = text.find(opening)
    if start == -1:
        raise ElementNotFoundError(tag)
    end = text.find(closing, start + len(opening))
    if end == -1:
        raise ElementNotFoundError(tag)
    return text[start : end + len(closing)]


def value_after_tag(text: str, tag: str) -> str:
    """Return the trimmed scalar value of the first ``tag`` in ``text``.

    A missing tag yields ``''``. The value runs up to the next ``<`` after the
    opening tag, so ``<CODE>0</CODE>`` and ``<CODE>0<SEVERITY>`` both give ``'0'``.
    """

    opening = f'<{tag}>'
    start = text.find(opening)
    if start == -1:
        return ''
    end = text.find('<', start + 1)
    if end == -1:
        raise UnterminatedValueError(tag)
    return text[start + len(opening) : end].strip()


def iter_element_spans(text: str, tag: str) -> Iterator[str]:
    """Yield every ``<tag>...</tag>`` span of ``text`` in document order."""

    opening = f'<{tag}>'
    closing = f'</{tag}>'
    cursor = 0
    while True:
        start = text.find(opening, cursor)
        if start == -1:
            return
        end = text.find(closing, start + len(opening))
        if end == -1:
            return
        cursor = end + len(closing)
        yield text[start:cursor]
