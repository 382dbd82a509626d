# type: ignore
from invoke import task


@task
def lint(ctx):
    """
    Perform static analysis on the source code to check for syntax errors and enforce style consistency.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=plejdreg --cov-report=term-missing", pty=True)
