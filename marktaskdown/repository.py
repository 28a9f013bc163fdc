"""
File-system task repository.

One task per ``<slug>.md`` file in a flat directory. Writes raise on failure; reads
treat an unreadable or malformed file as an absent record and log a warning, so a
single foreign file never breaks a listing.

There is no locking: two processes saving the same slug race and the last write wins.
"""
import logging
from dataclasses import dataclass
from pathlib import Path

from . import frontmatter
from .frontmatter import TaskFrontMatter
from .task import Task
from .values import Description, Slug, Title

logger = logging.getLogger(__name__)

TASK_SUFFIX = ".md"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one task file: either a task or the reason it was dropped."""

    path: Path
    task: Task | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.task is not None


class FileSystemTaskRepository:
    def __init__(self, tasks_dir: str | Path):
        self.tasks_dir = Path(tasks_dir)

    def path_for(self, slug: Slug) -> Path:
        return self.tasks_dir / f"{slug.value}{TASK_SUFFIX}"

    def initialize(self) -> bool:
        """Create the tasks directory; return True if it did not exist before."""
        created = not self.tasks_dir.is_dir()
        self.tasks_dir.mkdir(parents=True, exist_ok=True)
        return created

    def save(self, task: Task) -> None:
        """Write the task to ``<slug>.md``, replacing any file already there."""
        self.tasks_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(task.slug)
        front_matter = TaskFrontMatter(title=task.title.value, is_done=task.is_done)
        frontmatter.dump(path, task.description.value, front_matter.model_dump())
        logger.debug("Saved task %s to %s", task.slug, path)

    def find_by_slug(self, slug: Slug) -> Task | None:
        path = self.path_for(slug)
        if not path.is_file():
            return None
        result = self._load(path)
        if not result.ok:
            logger.warning("Could not parse task file %s: %s", path.name, result.reason)
        return result.task

    def scan(self) -> list[LoadResult]:
        """Load every task file in the directory, sorted by file name."""
        if not self.tasks_dir.is_dir():
            return []
        paths = sorted(p for p in self.tasks_dir.iterdir()
                       if p.suffix == TASK_SUFFIX and p.is_file())
        return [self._load(p) for p in paths]

    def find_all(self) -> list[Task]:
        tasks: list[Task] = []
        for result in self.scan():
            if result.ok:
                tasks.append(result.task)
            else:
                logger.warning("Could not parse task file %s: %s", result.path.name,
                               result.reason)
        return tasks

    def delete(self, slug: Slug) -> None:
        """Remove the task file; absent files are ignored."""
        path = self.path_for(slug)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.debug("Deleted task file %s", path)

    def _load(self, path: Path) -> LoadResult:
        try:
            data, body = frontmatter.load(path)
            meta = TaskFrontMatter.parse(data)
            # the id comes from the file name, the rest of the slug from the title
            slug_id = path.stem.split("-", 1)[0]
            task = Task(Title(meta.title), Description(body), meta.is_done, id=slug_id)
        except (OSError, ValueError) as e:
            return LoadResult(path, reason=str(e) or type(e).__name__)
        return LoadResult(path, task=task)
