"""
Task operations exposed to the command line and other front ends.

Every function takes and returns plain values; domain objects stay inside.
Validation problems raise ValidationError, a missing task raises TaskNotFound.
"""
import logging
from pathlib import Path

from pydantic import BaseModel

from .errors import TaskNotFound
from .ids import next_incremental_id
from .repository import FileSystemTaskRepository
from .task import Task
from .values import Description, Slug, Title

logger = logging.getLogger(__name__)


class TaskView(BaseModel):
    slug: str
    id: str
    title: str
    description: str
    is_done: bool

    @property
    def status(self) -> str:
        return "DONE" if self.is_done else "PENDING"

    @classmethod
    def from_task(cls, task: Task) -> "TaskView":
        return cls(
            slug=task.slug.value,
            id=task.id,
            title=task.title.value,
            description=task.description.value,
            is_done=task.is_done,
        )


class InitResult(BaseModel):
    created: bool
    tasks_dir: str


def init_project(repository: FileSystemTaskRepository) -> InitResult:
    created = repository.initialize()
    return InitResult(created=created, tasks_dir=str(repository.tasks_dir))


def create_task(repository: FileSystemTaskRepository, title: str, description: str = "",
                id: str | None = None) -> TaskView:
    """Create and save a task; without an id the next sequential one is used."""
    title_vo = Title(title)
    description_vo = Description(description)
    if id is None:
        id = next_incremental_id(repository)
    task = Task(title_vo, description_vo, False, id)
    if repository.path_for(task.slug).exists():
        logger.info("Overwriting existing task file for %s", task.slug)
    repository.save(task)
    return TaskView.from_task(task)


def _require(repository: FileSystemTaskRepository, slug: str) -> Task:
    task = repository.find_by_slug(Slug(slug))
    if task is None:
        raise TaskNotFound(slug)
    return task


def get_task(repository: FileSystemTaskRepository, slug: str) -> TaskView:
    return TaskView.from_task(_require(repository, slug))


def list_tasks(repository: FileSystemTaskRepository) -> list[TaskView]:
    return [TaskView.from_task(t) for t in repository.find_all()]


def set_done(repository: FileSystemTaskRepository, slug: str) -> TaskView:
    task = _require(repository, slug)
    task.set_as_done()
    repository.save(task)
    return TaskView.from_task(task)


def set_undone(repository: FileSystemTaskRepository, slug: str) -> TaskView:
    task = _require(repository, slug)
    task.set_as_undone()
    repository.save(task)
    return TaskView.from_task(task)


def delete_task(repository: FileSystemTaskRepository, slug: str) -> TaskView:
    task = _require(repository, slug)
    repository.delete(Slug(slug))
    return TaskView.from_task(task)


def check_tasks(repository: FileSystemTaskRepository) -> list[tuple[Path, str]]:
    """Return ``(path, reason)`` for every task file that cannot be loaded."""
    return [(r.path, r.reason) for r in repository.scan() if not r.ok]
