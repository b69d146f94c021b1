"""Table-of-contents node models."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, WrapSerializer


def freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``value`` that keeps its key order."""
    return MappingProxyType(dict(value))


def thaw_mapping(value: Mapping[str, Any], handler: Any) -> Any:
    return handler(dict(value))


def same_entries(left: Mapping[str, Any], right: Mapping[str, Any]) -> bool:
    """Compare two mappings key by key, order included."""
    return list(left.items()) == list(right.items())


class Leaf(BaseModel):
    """A single documentation page."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str


class Section(BaseModel):
    """A titled group of nodes, kept in author order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    contents: Annotated[
        Mapping[str, Node],
        AfterValidator(freeze_mapping),
        WrapSerializer(thaw_mapping),
    ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.title == other.title and same_entries(self.contents, other.contents)

    __hash__ = None  # type: ignore[assignment]


Node = Union[Leaf, Section]

Section.model_rebuild()
