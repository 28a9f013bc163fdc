"""
Sequential id assignment for new tasks.

The next id is one more than the largest numeric id currently on disk. Nothing
reserves the id between reading the directory and saving the new task, so two
concurrent creations can pick the same id; when their titles also match, the second
save overwrites the first file.
"""
from .repository import FileSystemTaskRepository


def next_id(ids) -> str:
    numeric = [int(i) for i in ids if i.isdecimal()]
    if not numeric:
        return "1"
    return str(max(numeric) + 1)


def next_incremental_id(repository: FileSystemTaskRepository) -> str:
    return next_id(task.id for task in repository.find_all())
