"""Chunking configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from hanschunks.element import ElementWeights


@dataclass
class ChunkConfig:
    """Size limits and options for chunking."""

    min_size: int = 512
    max_size: int = 800
    merge_headings: bool = True
    preserve_boundaries: bool = True
    element_weights: ElementWeights = field(default_factory=ElementWeights)

    def set_element_weights(
        self,
        heading_base=None,
        heading_level_penalty=None,
        code_block=None,
        table=None,
        list_item=None,
        paragraph=None,
        quote=None,
        empty=None,
        footer=None,
    ) -> None:
        """Replace the weights that are given; the others stay as they are."""
        given = {
            "heading_base": heading_base,
            "heading_level_penalty": heading_level_penalty,
            "code_block": code_block,
            "table": table,
            "list_item": list_item,
            "paragraph": paragraph,
            "quote": quote,
            "empty": empty,
            "footer": footer,
        }
        changes = {name: float(value) for name, value in given.items() if value is not None}
        self.element_weights = dataclasses.replace(self.element_weights, **changes)