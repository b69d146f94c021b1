"""Language-partitioned index models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, WrapSerializer, model_validator

from docindex.exceptions import UnknownLanguageError
from docindex.schemas.nodes import Node, freeze_mapping, same_entries, thaw_mapping


class LanguageSection(BaseModel):
    """Title, description and top-level contents for one language."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = ""
    description: str = ""
    contents: Annotated[
        Mapping[str, Node],
        AfterValidator(freeze_mapping),
        WrapSerializer(thaw_mapping),
    ] = Field(default_factory=dict, validate_default=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageSection):
            return NotImplemented
        return (
            self.title == other.title
            and self.description == other.description
            and same_entries(self.contents, other.contents)
        )

    __hash__ = None  # type: ignore[assignment]


class DocIndex(BaseModel):
    """A parsed documentation index.

    Every mapping inside is read-only and keeps source order; two indexes are
    equal only when their entries match in the same order.

    Attributes:
        languages: Declared language codes, in source order.
        category: Optional category label carried by the source.
        sections: One ``LanguageSection`` per declared language.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    languages: tuple[str, ...]
    category: str | None = None
    sections: Annotated[
        Mapping[str, LanguageSection],
        AfterValidator(freeze_mapping),
        WrapSerializer(thaw_mapping),
    ]

    @model_validator(mode="after")
    def _check_languages(self) -> DocIndex:
        if not self.languages:
            raise ValueError("at least one language is required")
        if len(set(self.languages)) != len(self.languages):
            raise ValueError("language codes must be unique")
        if list(self.sections) != list(self.languages):
            raise ValueError("sections must match the declared languages, in order")
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocIndex):
            return NotImplemented
        return (
            self.languages == other.languages
            and self.category == other.category
            and same_entries(self.sections, other.sections)
        )

    __hash__ = None  # type: ignore[assignment]

    def section(self, language: str) -> LanguageSection:
        """Return the section for ``language``.

        Raises:
            UnknownLanguageError: If the language is not declared.
        """
        try:
            return self.sections[language]
        except KeyError:
            raise UnknownLanguageError(f"Language {language!r} is not declared in this index") from None

    def has_language(self, language: str) -> bool:
        return language in self.sections
