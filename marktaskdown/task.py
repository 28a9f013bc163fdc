"""
The Task entity.
"""
import random

from .values import Description, Slug, Title


def random_id() -> str:
    return str(random.randint(1, 10**9))


class Task:
    """A task identified by its slug.

    The slug is derived once, at construction, from the id and the title. Title and
    description cannot be reassigned; only the completion flag changes.
    """

    __slots__ = ("_slug", "_title", "_description", "_is_done")

    def __init__(self, title: Title, description: Description, is_done: bool = False,
                 id: str | None = None):
        if id is None:
            id = random_id()
        self._slug = Slug.from_id_and_title(id, title.value)
        self._title = title
        self._description = description
        self._is_done = bool(is_done)

    @property
    def slug(self) -> Slug:
        return self._slug

    @property
    def id(self) -> str:
        return self._slug.id

    @property
    def title(self) -> Title:
        return self._title

    @property
    def description(self) -> Description:
        return self._description

    @property
    def is_done(self) -> bool:
        return self._is_done

    def set_as_done(self) -> None:
        self._is_done = True

    def set_as_undone(self) -> None:
        self._is_done = False

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self._slug == other._slug

    def __hash__(self):
        return hash(self._slug)

    def __repr__(self):
        state = "done" if self._is_done else "pending"
        return f"Task({self._slug.value!r}, {state})"
