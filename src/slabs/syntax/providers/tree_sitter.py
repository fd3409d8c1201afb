"""Tree-sitter syntax provider backed by tree-sitter-language-pack."""

from loguru import logger
from tree_sitter import Parser
from tree_sitter_language_pack import Error as LanguagePackError
from tree_sitter_language_pack import get_parser

from ...errors import FeatureUnavailableError, SyntaxTreeError
from ..base import BaseSyntaxProvider, CodeLanguage, SyntaxNode


class TreeSitterSyntaxProvider(BaseSyntaxProvider):
    """Parses source bytes with the prebuilt tree-sitter grammars.

    Parsers are created per call; tree-sitter parsers are not safe to share
    between threads.
    """

    def _parser_for(self, language: CodeLanguage) -> Parser:
        try:
            return get_parser(language.value)
        except (LanguagePackError, LookupError, ValueError, OSError) as e:
            # Grammars are fetched on first use; a failed download means no grammar
            raise FeatureUnavailableError(
                f"tree-sitter grammar '{language.value}'",
                original_error=e,
            ) from e

    def parse(self, language: CodeLanguage, source: bytes) -> SyntaxNode:
        parser = self._parser_for(language)
        tree = parser.parse(source)
        if tree is None:
            raise SyntaxTreeError(f"tree-sitter returned no tree for {language.value} source")

        root = tree.root_node
        if root.has_error:
            logger.debug(f"{language.value} source parsed with syntax errors")
        return root
