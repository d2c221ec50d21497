"""
Logging utilities for CLI debugging
"""

import logging
import traceback

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console(stderr=True)

# Global debug flag
_DEBUG_MODE = False


def set_debug_mode(debug: bool):
    """Enable or disable debug mode globally"""
    global _DEBUG_MODE
    _DEBUG_MODE = debug

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.WARNING)


def is_debug_mode() -> bool:
    """Check if debug mode is enabled"""
    return _DEBUG_MODE


def setup_logging(debug: bool = False):
    """Setup logging configuration"""
    # Configure root logger before the level is applied
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=debug,
                show_time=debug,
                show_path=debug
            )
        ],
        force=True
    )
    set_debug_mode(debug)

    # swiftclient logs every failed request at ERROR; the CLI reports it once
    logging.getLogger("swiftclient").setLevel(logging.DEBUG if debug else logging.CRITICAL)


def log_exception(e: Exception, context: str = ""):
    """Log an exception with context and stack trace in debug mode"""
    if context:
        console.print(f"[red]❌ {escape(context)}[/red]")

    console.print(f"[red]Error: {escape(str(e))}[/red]")

    if _DEBUG_MODE:
        console.print("[dim]Stack trace:[/dim]")
        tb_lines = traceback.format_exception(type(e), e, e.__traceback__)
        console.print("[dim]" + escape("".join(tb_lines)) + "[/dim]")
    else:
        console.print("[yellow]💡 Tip: Run with --debug flag for detailed stack trace[/yellow]")
