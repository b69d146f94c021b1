"""Shared schemas for docindex."""

from docindex.schemas.index import DocIndex, LanguageSection
from docindex.schemas.nodes import Leaf, Node, Section

__all__ = ["DocIndex", "LanguageSection", "Leaf", "Node", "Section"]
