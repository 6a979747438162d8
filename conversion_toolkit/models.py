"""
Core data model shared by extractors, encoders and the orchestrator.

An ``IntermediateDocument`` is an ordered sequence of blocks. Block order is
the only structure carried from extraction to encoding: there are no fonts,
styles or positions.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Union


class Format(Enum):
    """Closed set of document formats the engine knows about."""

    PDF = "pdf"
    DOCX = "docx"
    PPTX = "pptx"
    XLSX = "xlsx"
    IMAGE = "image"
    TXT = "txt"
    HTML = "html"


@dataclass(frozen=True)
class TextLine:
    text: str


@dataclass(frozen=True)
class PageBreak:
    pass


@dataclass(frozen=True)
class TableRow:
    cells: tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        object.__setattr__(self, 'cells', tuple(self.cells))

    def as_text(self, separator: str = " | ") -> str:
        return separator.join(self.cells)


@dataclass(frozen=True)
class Image:
    data: bytes
    mime_type: str


Block = Union[TextLine, PageBreak, TableRow, Image]


@dataclass(frozen=True)
class IntermediateDocument:
    """
    Ordered, immutable content model produced by extractors.

    Pages are the runs of blocks between ``PageBreak`` blocks. A document
    with no blocks has no pages.
    """
    blocks: tuple[Block, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'blocks', tuple(self.blocks))

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def pages(self) -> list[list[Block]]:
        """Group blocks into pages, splitting on ``PageBreak``."""
        if not self.blocks:
            return []
        pages: list[list[Block]] = [[]]
        for block in self.blocks:
            if isinstance(block, PageBreak):
                pages.append([])
            else:
                pages[-1].append(block)
        return pages

    def text_lines(self) -> list[TextLine]:
        return [b for b in self.blocks if isinstance(b, TextLine)]

    def table_rows(self) -> list[TableRow]:
        return [b for b in self.blocks if isinstance(b, TableRow)]

    def images(self) -> list[Image]:
        return [b for b in self.blocks if isinstance(b, Image)]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'IntermediateDocument':
        return cls(tuple(TextLine(line) for line in lines))

    @classmethod
    def concat(cls, documents: Iterable['IntermediateDocument']) -> 'IntermediateDocument':
        """
        Join documents in the given order.

        A ``PageBreak`` separates consecutive non-empty documents so each
        source starts on its own page; empty documents contribute nothing.
        """
        blocks: list[Block] = []
        for document in documents:
            if document.is_empty:
                continue
            if blocks:
                blocks.append(PageBreak())
            blocks.extend(document.blocks)
        return cls(tuple(blocks))


@dataclass(frozen=True)
class SourceFile:
    """One input file: its bytes and, when known, its original name."""
    data: bytes
    name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, 'data', bytes(self.data))

    @classmethod
    def coerce(cls, value: Union['SourceFile', bytes, bytearray, memoryview]) -> 'SourceFile':
        if isinstance(value, SourceFile):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(bytes(value))
        raise TypeError(f"Expected SourceFile or bytes, got {type(value).__name__}")


def suggest_filename(original_name: str | None, extension: str) -> str:
    """
    Build the download name for an artifact.

    Args:
        original_name: Name of the first input file, if known
        extension: Artifact extension without the dot

    Returns:
        '{base}_converted.{ext}' when a name is known, else 'converted.{ext}'
    """
    if original_name:
        base = os.path.splitext(os.path.basename(original_name))[0]
        if base:
            return f"{base}_converted.{extension}"
    return f"converted.{extension}"


@dataclass(frozen=True)
class Artifact:
    """Finished output of a successful conversion."""
    data: bytes = field(repr=False)
    mime_type: str
    extension: str
    suggested_filename: str = ''

    def __post_init__(self):
        if not self.suggested_filename:
            object.__setattr__(self, 'suggested_filename', suggest_filename(None, self.extension))

    @property
    def size(self) -> int:
        return len(self.data)

    def named_after(self, original_name: str | None) -> 'Artifact':
        """Return a copy whose suggested filename derives from ``original_name``."""
        return replace(self, suggested_filename=suggest_filename(original_name, self.extension))
