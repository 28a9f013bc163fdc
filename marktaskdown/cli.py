"""
mtd: manage tasks kept as Markdown files.
"""
import sys

import click
from tabulate import tabulate

from . import __version__, usecases
from .config import TASKS_DIR_ENV, resolve_tasks_dir
from .errors import TaskNotFound, ValidationError
from .logging_setup import setup_logging
from .repository import FileSystemTaskRepository

pass_repo = click.make_pass_decorator(FileSystemTaskRepository)


def require_tasks_dir(repo: FileSystemTaskRepository) -> None:
    if not repo.tasks_dir.is_dir():
        click.echo("Tasks directory does not exist. Run 'mtd init' first.", err=True)
        sys.exit(1)


def _run(op, repo, slug):
    try:
        return op(repo, slug)
    except (ValidationError, TaskNotFound) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _run_each(op, repo, slugs, verb):
    failed = False
    for slug in slugs:
        try:
            task = op(repo, slug)
        except (ValidationError, TaskNotFound) as e:
            click.echo(f"Error: {e}", err=True)
            failed = True
            continue
        click.echo(f"{verb}: {task.title}")
    if failed:
        sys.exit(1)


@click.group()
@click.option('--tasks-dir', type=click.Path(file_okay=False),
              help=f'Directory holding the task files (default: ${TASKS_DIR_ENV} or ./tasks).')
@click.option('-v', '--verbose', count=True, help='Log more; repeat for debug output.')
@click.version_option(__version__, prog_name='mtd')
@click.pass_context
def cli(ctx, tasks_dir, verbose):
    """Manage tasks kept as Markdown files with YAML front matter."""
    setup_logging(verbose)
    ctx.obj = FileSystemTaskRepository(resolve_tasks_dir(tasks_dir))


@cli.command()
@pass_repo
def init(repo):
    """Create the tasks directory."""
    result = usecases.init_project(repo)
    if result.created:
        click.echo(f"Created tasks directory at {result.tasks_dir}")
    else:
        click.echo(f"Tasks directory already exists at {result.tasks_dir}")


@cli.command()
@click.argument('title')
@click.option('-d', '--description', default='', help='Description of the task.')
@click.option('--id', 'task_id', help='Explicit id (default: next free number).')
@pass_repo
def add(repo, title, description, task_id):
    """Add a task titled TITLE."""
    require_tasks_dir(repo)
    try:
        task = usecases.create_task(repo, title, description, task_id)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Created task: {task.title}")
    click.echo(f"File: {task.slug}.md")


@cli.command('list')
@pass_repo
def list_(repo):
    """Show a table of slug, title and status."""
    require_tasks_dir(repo)
    tasks = usecases.list_tasks(repo)
    if not tasks:
        click.echo("No tasks found.")
        return
    rows = [(t.slug, t.title, t.status) for t in tasks]
    click.echo(tabulate(rows, headers=['Slug', 'Title', 'Status'], tablefmt='github'))


@cli.command()
@click.argument('slug')
@pass_repo
def show(repo, slug):
    """Print one task."""
    require_tasks_dir(repo)
    task = _run(usecases.get_task, repo, slug)
    click.echo(f"{task.title} ({task.status})")
    click.echo(f"Slug: {task.slug}")
    if task.description:
        click.echo()
        click.echo(task.description)


@cli.command()
@click.argument('slugs', nargs=-1, required=True)
@pass_repo
def done(repo, slugs):
    """Mark SLUGS as done."""
    require_tasks_dir(repo)
    _run_each(usecases.set_done, repo, slugs, "Marked task as done")


@cli.command()
@click.argument('slugs', nargs=-1, required=True)
@pass_repo
def undone(repo, slugs):
    """Mark SLUGS as not done."""
    require_tasks_dir(repo)
    _run_each(usecases.set_undone, repo, slugs, "Marked task as undone")


@cli.command()
@click.argument('slugs', nargs=-1, required=True)
@pass_repo
def delete(repo, slugs):
    """Delete the task files for SLUGS."""
    require_tasks_dir(repo)
    _run_each(usecases.delete_task, repo, slugs, "Deleted task")


@cli.command()
@pass_repo
def check(repo):
    """Validate every task file; exit 1 if any is malformed."""
    require_tasks_dir(repo)
    failures = usecases.check_tasks(repo)
    if failures:
        click.echo("Task file errors:", err=True)
        for path, reason in failures:
            click.echo(f"  {path.name}: {reason}", err=True)
        click.echo(f"\nFound {len(failures)} malformed task files.", err=True)
        sys.exit(1)
    click.echo("All task files OK.")


def main():
    cli()


if __name__ == '__main__':
    main()
