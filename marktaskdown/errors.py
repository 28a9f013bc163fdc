"""
Exception hierarchy for MarkTaskDown.

Validation errors are raised while building value objects and always reach the
caller. Storage read errors are absorbed by the repository; write errors are plain
OSError and propagate.
"""


class MarkTaskDownError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(MarkTaskDownError, ValueError):
    """A value object was constructed from invalid input."""


class InvalidSlug(ValidationError):
    pass


class EmptySlug(InvalidSlug):
    def __init__(self):
        super().__init__("Slug cannot be empty")


class InvalidSlugCharacters(InvalidSlug):
    def __init__(self, value: str):
        super().__init__(
            f"Slug can only contain lowercase letters, numbers, and hyphens: {value!r}")
        self.value = value


class SlugHyphenBoundary(InvalidSlug):
    def __init__(self, value: str):
        super().__init__(f"Slug cannot start or end with a hyphen: {value!r}")
        self.value = value


class EmptyId(ValidationError):
    def __init__(self):
        super().__init__("ID cannot be empty")


class InvalidId(ValidationError):
    def __init__(self, value: str):
        super().__init__(f"ID can only contain lowercase letters and numbers: {value!r}")
        self.value = value


class EmptyTitle(ValidationError):
    def __init__(self):
        super().__init__("Title cannot be empty")


class TitleTooLong(ValidationError):
    def __init__(self, limit: int):
        super().__init__(f"Title cannot exceed {limit} characters")
        self.limit = limit


class DescriptionTooLong(ValidationError):
    def __init__(self, limit: int):
        super().__init__(f"Description cannot exceed {limit} characters")
        self.limit = limit


class MalformedFrontMatter(MarkTaskDownError, ValueError):
    """A task file has no front-matter block, or its header is unusable."""


class TaskNotFound(MarkTaskDownError, LookupError):
    def __init__(self, slug: str):
        super().__init__(f"Task not found: {slug}")
        self.slug = slug
