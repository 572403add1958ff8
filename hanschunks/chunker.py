"""Splitting a sequence of elements into size-bounded chunks."""

from __future__ import annotations

import math
import re
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from hanschunks.config import ChunkConfig
from hanschunks.element import Element

_PIECE_PATTERN = re.compile(r"[A-Za-z0-9]+|\s+|.", re.DOTALL)

_CONNECTED_END_PENALTY = 0.1
_NON_BOUNDARY_FACTOR = 0.1
_CONNECTED_SPLIT_FACTOR = 0.01


def tokenize(text: str) -> list[str]:
    """Cut text into tokens: runs of ASCII letters and digits, runs of whitespace,
    and every other character on its own. The tokens join back into ``text``."""
    return _PIECE_PATTERN.findall(text)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _join(elements: Sequence[Element]) -> str:
    return "\n".join(element.content for element in elements)


class Chunker:
    """Groups elements into chunks using dynamic programming over split points."""

    def __init__(self, config: ChunkConfig | None = None) -> None:
        self.config = config if config is not None else ChunkConfig()

    def chunk(self, elements: Sequence[Element]) -> list[str]:
        """Return the chunk texts for ``elements``, joined by newlines within a chunk."""
        elements = list(elements)
        if not elements:
            return []

        cumulative = self._cumulative_chars(elements)
        total = cumulative[-1]
        if self.config.min_size <= total <= self.config.max_size:
            return [_join(elements)]

        splits = self._optimal_splits(elements, cumulative)
        return self._chunks_from_splits(elements, splits)

    @staticmethod
    def _cumulative_chars(elements: Sequence[Element]) -> list[int]:
        """Running character totals, counting a newline between elements."""
        cumulative = [0]
        for position, element in enumerate(elements):
            separator = 1 if position else 0
            cumulative.append(cumulative[-1] + element.char_count + separator)
        return cumulative

    def _optimal_splits(self, elements: list[Element], cumulative: list[int]) -> list[int]:
        n = len(elements)
        max_size = self.config.max_size
        best = [-math.inf] * (n + 1)
        previous: list[int | None] = [None] * (n + 1)
        best[0] = 0.0

        for end in range(1, n + 1):
            is_last = end == n
            starts = range(0, end) if is_last else range(*self._valid_start_range(cumulative, end))
            end_penalty = (
                _CONNECTED_END_PENALTY if elements[end - 1].has_strong_connection() else 1.0
            )

            for start in starts:
                if is_last and best[start] == -math.inf:
                    continue
                chunk_chars = cumulative[end] - cumulative[start]
                split_weight = self._best_split_weight(elements, start, end - 1)
                total = (best[start] + split_weight) * end_penalty
                if is_last and chunk_chars > max_size:
                    total *= max_size / chunk_chars
                if total > best[end]:
                    best[end] = total
                    previous[end] = start

        splits: list[int] = []
        current = n
        while (start := previous[current]) is not None:
            if start > 0:
                splits.append(start - 1)
            current = start
        splits.reverse()
        return splits

    def _valid_start_range(self, cumulative: list[int], end: int) -> tuple[int, int]:
        """Starts whose chunk ending before ``end`` fits within the size limits."""
        target = cumulative[end]
        if target < self.config.min_size:
            return end, end

        lowest = max(0, target - self.config.max_size)
        first = bisect_left(cumulative, lowest, 0, end)
        highest = target - self.config.min_size
        last = min(bisect_right(cumulative, highest, 0, end), end)
        if first >= last:
            return end, end
        return first, last

    def _best_split_weight(self, elements: list[Element], start: int, end: int) -> float:
        if start >= end or end > len(elements):
            return 0.0
        weights = self.config.element_weights
        best = 0.0
        for element in elements[start:end]:
            weight = element.weight(weights)
            if not element.is_split_boundary():
                weight *= _NON_BOUNDARY_FACTOR
            if element.has_strong_connection():
                weight *= _CONNECTED_SPLIT_FACTOR
            best = max(best, weight)
        return best

    def _chunks_from_splits(self, elements: list[Element], splits: list[int]) -> list[str]:
        chunks: list[str] = []
        start = 0
        for split in splits:
            if split < len(elements):
                chunks.append(_join(elements[start : split + 1]))
                start = split + 1

        if start < len(elements):
            content = _join(elements[start:])
            if len(content) > self.config.max_size:
                chunks.extend(self._split_large(content))
            else:
                chunks.append(content)
        return chunks

    def _split_large(self, content: str) -> list[str]:
        lines = _lines(content)
        if len(lines) > 1:
            return self._pack(lines, "\n")
        return self._pack(tokenize(content), "")

    def _pack(self, pieces: list[str], separator: str) -> list[str]:
        """Greedily gather pieces into chunks no longer than the maximum size."""
        chunks: list[str] = []
        current = ""
        current_chars = 0
        extra = len(separator)

        for piece in pieces:
            if current_chars + len(piece) + extra > self.config.max_size and current_chars > 0:
                chunks.append(current)
                current = ""
                current_chars = 0
            if current:
                current += separator
                current_chars += extra
            current += piece
            current_chars += len(piece)

        if current:
            chunks.append(current)
        return chunks