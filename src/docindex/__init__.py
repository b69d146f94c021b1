"""docindex: parse and navigate language-partitioned documentation indexes."""

from docindex.exceptions import (
    DocIndexError,
    FetchError,
    IndexNotFoundError,
    MalformedIndexError,
    UnknownLanguageError,
)
from docindex.fetch import fetch_index
from docindex.loader import load_index, load_index_async, loads_index
from docindex.output_formatter import render_toc, render_tree, summarize
from docindex.parser import parse
from docindex.schemas import DocIndex, LanguageSection, Leaf, Node, Section
from docindex.serializer import dump, dumps
from docindex.traversal import breadcrumbs, count_nodes, iter_leaves, lookup, walk

__all__ = [
    "DocIndex",
    "DocIndexError",
    "FetchError",
    "IndexNotFoundError",
    "LanguageSection",
    "Leaf",
    "MalformedIndexError",
    "Node",
    "Section",
    "UnknownLanguageError",
    "breadcrumbs",
    "count_nodes",
    "dump",
    "dumps",
    "fetch_index",
    "iter_leaves",
    "load_index",
    "load_index_async",
    "loads_index",
    "lookup",
    "parse",
    "render_toc",
    "render_tree",
    "summarize",
    "walk",
]
