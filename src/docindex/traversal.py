"""Read-only traversal of a parsed index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from docindex.schemas import DocIndex, Leaf, Node, Section

PATH_SEPARATOR = "/"


def walk(index: DocIndex, language: str) -> Iterator[tuple[str, Node]]:
    """Yield ``(path, node)`` pairs depth-first, parents before children.

    Entries come out in source order at every level. ``path`` joins the keys
    from the language root down to the node with ``/``; keys are used
    literally, so a leaf keyed ``"intro/setup.wiki"`` inside section
    ``"intro"`` has the path ``"intro/intro/setup.wiki"``.

    Each call returns an independent generator.

    Raises:
        UnknownLanguageError: If ``language`` is not declared.
    """
    return _walk_contents(index.section(language).contents, "")


def _walk_contents(contents: Mapping[str, Node], prefix: str) -> Iterator[tuple[str, Node]]:
    for key, node in contents.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        yield path, node
        if isinstance(node, Section):
            yield from _walk_contents(node.contents, path)


def lookup(index: DocIndex, language: str, path: str | Sequence[str]) -> Node | None:
    """Resolve ``path`` to a node, or return None when nothing lives there.

    ``path`` is either a string in the form produced by ``walk`` or a
    sequence of literal keys. Matching is exact.

    Raises:
        UnknownLanguageError: If ``language`` is not declared.
    """
    chain = _resolve(index, language, path)
    return chain[-1] if chain else None


def breadcrumbs(index: DocIndex, language: str, path: str | Sequence[str]) -> list[str] | None:
    """Return the titles from the top-level entry down to the node at ``path``."""
    chain = _resolve(index, language, path)
    if chain is None:
        return None
    return [node.title for node in chain]


def iter_leaves(index: DocIndex, language: str) -> Iterator[tuple[str, Leaf]]:
    """Yield only the documents of ``language``, in reading order."""
    for path, node in walk(index, language):
        if isinstance(node, Leaf):
            yield path, node


def count_nodes(index: DocIndex, language: str | None = None) -> int:
    """Count nodes for one language, or across all languages when None."""
    languages = index.languages if language is None else (language,)
    return sum(1 for code in languages for _ in walk(index, code))


def _resolve(index: DocIndex, language: str, path: str | Sequence[str]) -> list[Node] | None:
    contents = index.section(language).contents
    if isinstance(path, str):
        if not path:
            return None
        return _resolve_string(contents, path)
    return _resolve_keys(contents, list(path))


def _resolve_keys(contents: Mapping[str, Node], keys: list[str]) -> list[Node] | None:
    if not keys:
        return None
    chain: list[Node] = []
    current: Mapping[str, Node] | None = contents
    for key in keys:
        node = current.get(key) if current is not None else None
        if node is None:
            return None
        chain.append(node)
        current = node.contents if isinstance(node, Section) else None
    return chain


def _resolve_string(contents: Mapping[str, Node], remainder: str) -> list[Node] | None:
    # Keys may themselves contain the separator, so try every key that
    # prefixes the remainder rather than splitting it up front.
    node = contents.get(remainder)
    if node is not None:
        return [node]
    for key, node in contents.items():
        if not isinstance(node, Section) or not remainder.startswith(key + PATH_SEPARATOR):
            continue
        rest = _resolve_string(node.contents, remainder[len(key) + len(PATH_SEPARATOR):])
        if rest is not None:
            return [node, *rest]
    return None
