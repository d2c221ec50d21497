"""
CLI Utils Package
Display and logging utilities
"""

from .display import (
    console,
    CLEAR_LINE,
    green,
    ok_message,
    create_progress_context,
    create_headers_table,
    ConsoleWriter
)
from .logger import setup_logging, log_exception, is_debug_mode

__all__ = [
    'console',
    'CLEAR_LINE',
    'green',
    'ok_message',
    'create_progress_context',
    'create_headers_table',
    'ConsoleWriter',
    'setup_logging',
    'log_exception',
    'is_debug_mode'
]
