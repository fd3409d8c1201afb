"""Structure-aware code chunker.

Source code is split along its syntax tree so functions, classes and other
blocks stay intact whenever they fit:

1. Decompose: walk the tree depth-first. A node that fits in
   ``max_chunk_size`` becomes one atomic unit. A larger node is opened up;
   its children are visited and any non-whitespace text between them
   (comments, stray tokens) becomes its own unit. A large node without
   children is cut with the recursive chunker.
2. Merge: units are packed greedily, together with the source between them,
   into chunks of at most ``max_chunk_size`` bytes. With overlap enabled the
   next chunk is seeded with whole trailing units of the previous one.
"""

from pathlib import Path

from loguru import logger

from ...core.chunk import Chunk
from ...errors import ConfigurationError, FeatureUnavailableError, InvalidChunkSizeError, SyntaxTreeError
from ...observability import trace_span
from ...syntax.base import BaseSyntaxProvider, CodeLanguage, SyntaxNode
from ...syntax.providers.tree_sitter import TreeSitterSyntaxProvider
from ...utils.boundaries import decode_span, trimmed_span
from ...utils.performance import timer
from ..base import BaseChunker
from .recursive_character import RecursiveCharacterChunker

# Blank line, line, word, then a hard byte split
LEAF_SEPARATORS = ["\n\n", "\n", " "]


class CodeChunker(BaseChunker):
    """A chunker that respects code structure using a syntax tree.

    A single atomic unit larger than ``max_chunk_size`` (for example a huge
    comment between two functions) is still emitted as one chunk.

    Attributes:
        language: Resolved language, or None when the tag is not supported
        max_chunk_size: Maximum bytes per chunk
        chunk_overlap: Bytes of trailing units repeated in the next chunk
        syntax_provider: Parser producing the syntax tree
    """

    def __init__(
        self,
        language: CodeLanguage | str,
        max_chunk_size: int = 1500,
        chunk_overlap: int = 0,
        syntax_provider: BaseSyntaxProvider | None = None,
    ):
        """Initialize the code chunker.

        Args:
            language: A CodeLanguage, grammar name ("python") or extension ("py")
            max_chunk_size: Maximum bytes per chunk
            chunk_overlap: Overlap budget in bytes
            syntax_provider: Syntax tree source (tree-sitter by default)

        Raises:
            InvalidChunkSizeError: If max_chunk_size <= 0
            ConfigurationError: If chunk_overlap is negative
        """
        if max_chunk_size <= 0:
            raise InvalidChunkSizeError(max_chunk_size)
        if chunk_overlap < 0:
            raise ConfigurationError(f"chunk_overlap must be >= 0, got {chunk_overlap}")

        self.language = CodeLanguage.resolve(language)
        if self.language is None:
            logger.warning(f"Unsupported code language '{language}'; chunker will emit no chunks")

        self.max_chunk_size = max_chunk_size
        self.chunk_overlap = chunk_overlap
        self.syntax_provider = syntax_provider or TreeSitterSyntaxProvider()
        self._leaf_splitter = RecursiveCharacterChunker(max_chunk_size, LEAF_SEPARATORS)

    @classmethod
    def for_path(cls, path: str | Path, **kwargs) -> "CodeChunker":
        """Create a chunker for a file, picking the language from its extension."""
        return cls(Path(path).suffix, **kwargs)

    @trace_span("chunker.code")
    def chunk(self, text: str) -> list[Chunk]:
        if not text or self.language is None:
            return []

        data = text.encode("utf-8")
        try:
            with timer(f"Parsing {self.language.value} source ({len(data)} bytes)"):
                with self.syntax_provider.scoped_tree(self.language, data) as root:
                    units: list[tuple[int, int]] = []
                    blocks = self._decompose(root, data, units)
        except (FeatureUnavailableError, SyntaxTreeError) as e:
            logger.warning(f"Code chunking skipped: {e}")
            return []

        units.sort()
        chunks = self._merge(units, data)
        logger.debug(
            f"Merged {len(units)} atomic units ({blocks} intact blocks) "
            f"into {len(chunks)} code chunks"
        )
        return chunks

    def _decompose(self, node: SyntaxNode, data: bytes, units: list[tuple[int, int]]) -> int:
        """Collect atomic units below ``node``; returns how many were block nodes."""
        start, end = node.start_byte, node.end_byte
        if end <= start:
            return 0

        if end - start <= self.max_chunk_size:
            units.append((start, end))
            return int(self.language.is_block_node(node.type))

        children = [c for c in node.children if c.end_byte > c.start_byte]
        if not children:
            self._split_leaf(start, end, data, units)
            return 0

        blocks = 0
        cursor = start
        for child in children:
            self._add_gap(cursor, child.start_byte, data, units)
            blocks += self._decompose(child, data, units)
            cursor = max(cursor, child.end_byte)
        self._add_gap(cursor, end, data, units)
        return blocks

    @staticmethod
    def _add_gap(start: int, end: int, data: bytes, units: list[tuple[int, int]]) -> None:
        """Keep the non-whitespace part of the text between two children."""
        if end <= start:
            return
        gap_start, gap_end = trimmed_span(data, start, end)
        if gap_end > gap_start:
            units.append((gap_start, gap_end))

    def _split_leaf(self, start: int, end: int, data: bytes, units: list[tuple[int, int]]) -> None:
        for frag_start, frag_end in self._leaf_splitter.split_spans(decode_span(data, start, end)):
            units.append((start + frag_start, start + frag_end))

    def _merge(self, units: list[tuple[int, int]], data: bytes) -> list[Chunk]:
        chunks: list[Chunk] = []
        first = None  # index of the first unit in the current chunk
        chunk_start = chunk_end = 0

        for i, (unit_start, unit_end) in enumerate(units):
            if first is not None and unit_end - chunk_start > self.max_chunk_size:
                chunks.append(self._make_chunk(data, chunk_start, chunk_end, len(chunks)))
                first = self._overlap_seed(units, first, i, chunk_end, unit_end)
                if first is not None:
                    chunk_start = units[first][0]

            if first is None:
                first = i
                chunk_start, chunk_end = unit_start, unit_end
            else:
                chunk_end = max(chunk_end, unit_end)

        if first is not None:
            chunks.append(self._make_chunk(data, chunk_start, chunk_end, len(chunks)))
        return chunks

    def _overlap_seed(
        self,
        units: list[tuple[int, int]],
        first: int,
        current: int,
        flushed_end: int,
        next_end: int,
    ) -> int | None:
        """Pick the first unit of the next chunk from the tail of the flushed one.

        Walks back over whole units while the repeated suffix stays within
        the overlap budget, then drops units from the front until the seeded
        chunk plus the incoming unit fits.
        """
        if not self.chunk_overlap:
            return None

        seed = None
        j = current - 1
        while j >= first and flushed_end - units[j][0] <= self.chunk_overlap:
            seed = j
            j -= 1

        while seed is not None and next_end - units[seed][0] > self.max_chunk_size:
            seed = seed + 1 if seed + 1 < current else None
        return seed

    @staticmethod
    def _make_chunk(data: bytes, start: int, end: int, index: int) -> Chunk:
        return Chunk(text=decode_span(data, start, end), start=start, end=end, index=index)
