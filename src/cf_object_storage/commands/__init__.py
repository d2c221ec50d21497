"""
CLI Commands Package
Container management commands
"""

from . import containers

__all__ = ['containers']
