"""Classifying single lines of text into element types."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from hanschunks.element import ElementType

_SENTENCE_ENDINGS = "。！？；.!?;"
_SHORT_LINE_BYTES = 40

_RULES: tuple[tuple[ElementType, tuple[re.Pattern[str], ...]], ...] = (
    (ElementType.FOOTER, (re.compile(r"第\s*\d+\s*页"),)),
    (ElementType.CODE_BLOCK, (re.compile(r"^```"),)),
    (ElementType.QUOTE, (re.compile(r"^\s*>"),)),
    (
        ElementType.LIST_ITEM,
        (
            re.compile(r"^\s*[•\-*]\s+"),
            re.compile(r"^[一二三四五六七八九十]+[、：:]"),
            re.compile(r"^\d+[、：:.]"),
        ),
    ),
    (
        ElementType.heading(1),
        (
            re.compile(r"^第[一二三四五六七八九十百千]+[章节]"),
            re.compile(r"^[一二三四五六七八九十]+[、.]"),
        ),
    ),
    (ElementType.heading(2), (re.compile(r"^[(（][一二三四五六七八九十]+[)）]"),)),
    (
        ElementType.heading(3),
        (
            re.compile(r"^\d+(?:\.\d+)*\s*[\u4e00-\u9fff]{0,30}\Z"),
            re.compile(r"^[(（]?\d+[)）]"),
        ),
    ),
)


class ElementRecognizer(ABC):
    """Decides the element type of one line."""

    @abstractmethod
    def recognize(self, line: str) -> ElementType:
        """Return the element type of ``line``."""


class DefaultRecognizer(ElementRecognizer):
    """Recognizer for Chinese and plain-text document conventions."""

    def recognize(self, line: str) -> ElementType:
        trimmed = line.strip()
        if not trimmed:
            return ElementType.EMPTY

        for element_type, patterns in _RULES:
            if any(pattern.search(trimmed) for pattern in patterns):
                return element_type

        is_short = len(trimmed.encode("utf-8")) < _SHORT_LINE_BYTES
        if is_short and trimmed[-1] not in _SENTENCE_ENDINGS:
            return ElementType.heading(4)
        return ElementType.PARAGRAPH