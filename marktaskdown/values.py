"""
Value objects for a task: its slug, title and description.

All three are immutable and validate on construction; invalid input raises a
ValidationError subclass instead of being silently corrected.
"""
import re

from .errors import (
    DescriptionTooLong,
    EmptyId,
    EmptySlug,
    EmptyTitle,
    InvalidId,
    InvalidSlugCharacters,
    SlugHyphenBoundary,
    TitleTooLong,
)

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
ID_RE = re.compile(r"^[a-z0-9]+$")

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


class _Value:
    __slots__ = ("_value",)

    def __init__(self, value: str):
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> str:
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class Slug(_Value):
    """Canonical task identifier, also the stem of the task's file name."""

    __slots__ = ()

    def __init__(self, value: str):
        if not value:
            raise EmptySlug()
        if not re.fullmatch(r"[a-z0-9-]+", value):
            raise InvalidSlugCharacters(value)
        if value.startswith("-") or value.endswith("-"):
            raise SlugHyphenBoundary(value)
        # interior runs of hyphens are the only shape left to reject
        if not SLUG_RE.match(value):
            raise InvalidSlugCharacters(value)
        super().__init__(value)

    @classmethod
    def from_id_and_title(cls, id, title: str) -> "Slug":
        """Build ``<id>-<normalized title>``.

        The title is lowercased, stripped of anything outside ``[a-z0-9\\s-]``,
        whitespace runs become one hyphen and hyphen runs collapse.
        """
        id = "" if id is None else str(id)
        if not id:
            raise EmptyId()
        if not ID_RE.match(id):
            raise InvalidId(id)
        if not title:
            raise EmptyTitle()
        slug_title = title.lower().strip()
        slug_title = re.sub(r"[^a-z0-9\s-]", "", slug_title)
        slug_title = re.sub(r"\s+", "-", slug_title)
        slug_title = re.sub(r"-+", "-", slug_title).strip("-")
        if not slug_title:
            raise EmptyTitle()
        return cls(f"{id}-{slug_title}")

    @property
    def id(self) -> str:
        """Part of the slug before the first hyphen."""
        return self._value.split("-", 1)[0]


class Title(_Value):
    __slots__ = ()

    def __init__(self, value: str):
        value = value.strip()
        if not value:
            raise EmptyTitle()
        if len(value) > TITLE_MAX_LENGTH:
            raise TitleTooLong(TITLE_MAX_LENGTH)
        super().__init__(value)


class Description(_Value):
    """Free text body of a task; may be empty, inner whitespace is kept as is."""

    __slots__ = ()

    def __init__(self, value: str = ""):
        value = value.strip()
        if len(value) > DESCRIPTION_MAX_LENGTH:
            raise DescriptionTooLong(DESCRIPTION_MAX_LENGTH)
        super().__init__(value)
