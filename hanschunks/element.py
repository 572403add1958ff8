"""Text elements and the weights used to rank split points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_HEADING = "heading"
_KINDS = frozenset(
    {_HEADING, "paragraph", "list_item", "code_block", "table", "quote", "empty", "footer"}
)
_BOUNDARY_KINDS = frozenset({_HEADING, "list_item", "code_block", "table"})
_CONNECTORS = frozenset(":：,，、;；")


@dataclass(frozen=True)
class ElementType:
    """Kind of a text element; headings also carry their level."""

    kind: str
    level: int = 0

    PARAGRAPH: ClassVar[ElementType]
    LIST_ITEM: ClassVar[ElementType]
    CODE_BLOCK: ClassVar[ElementType]
    TABLE: ClassVar[ElementType]
    QUOTE: ClassVar[ElementType]
    EMPTY: ClassVar[ElementType]
    FOOTER: ClassVar[ElementType]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown element kind: {self.kind!r}")
        if self.kind == _HEADING:
            if not 0 <= self.level <= 255:
                raise ValueError(f"heading level out of range: {self.level}")
        elif self.level:
            raise ValueError(f"only headings have a level, not {self.kind!r}")

    @classmethod
    def heading(cls, level: int) -> ElementType:
        """A heading of the given level."""
        return cls(_HEADING, level)

    @property
    def is_heading(self) -> bool:
        return self.kind == _HEADING


ElementType.PARAGRAPH = ElementType("paragraph")
ElementType.LIST_ITEM = ElementType("list_item")
ElementType.CODE_BLOCK = ElementType("code_block")
ElementType.TABLE = ElementType("table")
ElementType.QUOTE = ElementType("quote")
ElementType.EMPTY = ElementType("empty")
ElementType.FOOTER = ElementType("footer")


@dataclass
class ElementWeights:
    """Split weights for each element kind."""

    heading_base: float = 100.0
    heading_level_penalty: float = 10.0
    code_block: float = 80.0
    table: float = 80.0
    list_item: float = 60.0
    paragraph: float = 40.0
    quote: float = 30.0
    empty: float = 10.0
    footer: float = 0.0


@dataclass(frozen=True)
class Element:
    """A piece of a document: its kind, text and first line number (1-based)."""

    element_type: ElementType
    content: str
    line_number: int

    @property
    def char_count(self) -> int:
        return len(self.content)

    def is_split_boundary(self) -> bool:
        """Whether a chunk may naturally break at this element."""
        return self.element_type.kind in _BOUNDARY_KINDS

    def weight(self, weights: ElementWeights) -> float:
        """Weight of this element as a split point."""
        element_type = self.element_type
        if element_type.is_heading:
            return weights.heading_base - element_type.level * weights.heading_level_penalty
        return getattr(weights, element_type.kind)

    def has_strong_connection(self) -> bool:
        """Whether the text ends with a connector that binds it to what follows."""
        trimmed = self.content.rstrip()
        return bool(trimmed) and trimmed[-1] in _CONNECTORS


@dataclass(frozen=True)
class SplitPoint:
    """A candidate split position with its weight and character count."""

    index: int
    weight: float
    char_count: int