"""Syntax tree capability consumed by the code chunker."""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum
from typing import Protocol


class CodeLanguage(str, Enum):
    """Programming languages the code chunker understands.

    The value is the grammar name handed to the syntax provider.
    """

    RUST = "rust"
    PYTHON = "python"
    TYPESCRIPT = "typescript"
    GO = "go"

    @classmethod
    def from_extension(cls, ext: str) -> "CodeLanguage | None":
        """Guess the language from a file extension (with or without dot)."""
        return _EXTENSIONS.get(ext.lower().lstrip("."))

    @classmethod
    def resolve(cls, tag: "CodeLanguage | str") -> "CodeLanguage | None":
        """Accept a language, its grammar name, or a file extension."""
        if isinstance(tag, CodeLanguage):
            return tag
        try:
            return cls(tag.lower())
        except ValueError:
            return cls.from_extension(tag)

    def is_block_node(self, kind: str) -> bool:
        """Check if a node kind is a cohesive block (function, class, type)."""
        return kind in _BLOCK_KINDS[self]


_EXTENSIONS = {
    "rs": CodeLanguage.RUST,
    "py": CodeLanguage.PYTHON,
    "ts": CodeLanguage.TYPESCRIPT,
    "tsx": CodeLanguage.TYPESCRIPT,
    "js": CodeLanguage.TYPESCRIPT,
    "jsx": CodeLanguage.TYPESCRIPT,
    "go": CodeLanguage.GO,
}

_BLOCK_KINDS = {
    CodeLanguage.RUST: frozenset({
        "function_item",
        "impl_item",
        "mod_item",
        "struct_item",
        "enum_item",
        "trait_item",
    }),
    CodeLanguage.PYTHON: frozenset({"function_definition", "class_definition"}),
    CodeLanguage.TYPESCRIPT: frozenset({
        "function_declaration",
        "class_declaration",
        "method_definition",
        "interface_declaration",
        "enum_declaration",
    }),
    CodeLanguage.GO: frozenset({
        "function_declaration",
        "method_declaration",
        "type_declaration",
    }),
}


class SyntaxNode(Protocol):
    """The slice of a syntax tree node the code chunker reads.

    Offsets are UTF-8 byte offsets into the parsed source. Tree-sitter nodes
    satisfy this protocol as-is.
    """

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def type(self) -> str: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...


class BaseSyntaxProvider(ABC):
    """Abstract base class for parsers that produce syntax trees."""

    @abstractmethod
    def parse(self, language: CodeLanguage, source: bytes) -> SyntaxNode:
        """Parse ``source`` and return the root node.

        Raises:
            FeatureUnavailableError: If no grammar is available for ``language``
            SyntaxTreeError: If the source cannot be parsed at all
        """
        pass

    @contextmanager
    def scoped_tree(self, language: CodeLanguage, source: bytes) -> Iterator[SyntaxNode]:
        """Parse ``source`` for the duration of a ``with`` block.

        The root and every node reached from it are only valid inside the
        block; callers must copy out the offsets they need.
        """
        root = self.parse(language, source)
        try:
            yield root
        finally:
            del root
