from .tree_sitter import TreeSitterSyntaxProvider

__all__ = ["TreeSitterSyntaxProvider"]
