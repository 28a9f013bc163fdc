"""
MarkTaskDown: tasks kept as Markdown files with YAML front matter.
"""
from .errors import MalformedFrontMatter, MarkTaskDownError, TaskNotFound, ValidationError
from .repository import FileSystemTaskRepository
from .task import Task
from .values import Description, Slug, Title

__version__ = "0.1.0"

__all__ = [
    "Description",
    "FileSystemTaskRepository",
    "MalformedFrontMatter",
    "MarkTaskDownError",
    "Slug",
    "Task",
    "TaskNotFound",
    "Title",
    "ValidationError",
]
