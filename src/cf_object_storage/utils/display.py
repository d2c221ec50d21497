"""
Display utilities for CLI
Handles progress spinners, result formatting and tables
"""

import logging
from typing import Mapping, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

console = Console()
logger = logging.getLogger(__name__)

# ANSI control sequences
CLEAR_LINE = "\033[2K"
GREEN = "\033[0;32m"
RESET = "\033[0m"


def green(text: str) -> str:
    """Wrap text in green ANSI color codes"""
    return f"{GREEN}{text}{RESET}"


def ok_message(body: str) -> str:
    """Format a command result: clear the spinner line, then OK and the body"""
    return f"\r{CLEAR_LINE}{green('OK')}\n\n{body}\n"


def create_progress_context(description: str = "Processing..."):
    """Create a progress context manager"""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True
    )


class ConsoleWriter:
    """
    Stage sink for long-running commands

    Without a progress bar the writer only logs stages, which keeps it usable
    from tests and non-interactive callers. Used as a context manager it owns
    a transient spinner whose description follows the current stage.
    """

    def __init__(self, progress: Optional[Progress] = None, task_id=None):
        self.progress = progress
        self.task_id = task_id
        self.stages = []

    def set_current_stage(self, stage: str):
        """Record the current stage and update the spinner if attached"""
        self.stages.append(stage)
        logger.debug(f"Stage: {stage}")
        if self.progress is not None and self.task_id is not None:
            self.progress.update(self.task_id, description=f"{stage}...")

    def __enter__(self) -> 'ConsoleWriter':
        if self.progress is None:
            self.progress = create_progress_context()
        self.progress.start()
        self.task_id = self.progress.add_task("Working...", total=None)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.progress.stop()
        return False


def create_headers_table(headers: Mapping[str, str], title: str = "🏷  Header Shorthands") -> Table:
    """Create a table for the shorthand header listing"""
    table = Table(title=title)
    table.add_column("Shorthand", style="cyan", no_wrap=True)
    table.add_column("Header", style="green")
    for short, full in headers.items():
        table.add_row(short, full)
    return table
