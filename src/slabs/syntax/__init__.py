"""Syntax tree capability for structure-aware code chunking."""

from .base import BaseSyntaxProvider, CodeLanguage, SyntaxNode
from .providers.tree_sitter import TreeSitterSyntaxProvider

__all__ = ["BaseSyntaxProvider", "CodeLanguage", "SyntaxNode", "TreeSitterSyntaxProvider"]
