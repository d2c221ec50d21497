"""
Error types for container commands
Tagged errors carrying the failed action and entity, rendered only at the CLI boundary
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """What went wrong, independent of the message"""
    PARSE = "parse"
    REMOTE = "remote"
    CONFIG = "config"


class StorageCommandError(Exception):
    """
    Base error for every container command failure

    Args:
        kind: Error category
        action: Static phrase naming the failed action (e.g. "delete object")
        entity: Container, object or service name the action applied to
        cause: Underlying exception, if any
        message: Full message, used instead of the action/entity rendering
    """

    default_kind = ErrorKind.REMOTE

    def __init__(
        self,
        action: str = "",
        entity: Optional[str] = None,
        cause: Optional[BaseException] = None,
        kind: Optional[ErrorKind] = None,
        message: Optional[str] = None
    ):
        if kind is None:
            # Wrapping keeps the category of the innermost failure
            if isinstance(cause, StorageCommandError):
                kind = cause.kind
            else:
                kind = self.default_kind
        self.kind = kind
        self.action = action
        self.entity = entity
        self.cause = cause
        self.message = message
        super().__init__(self.render())

    def render(self) -> str:
        """Render the error as user-facing text"""
        if self.message:
            return self.message

        text = f"Failed to {self.action}"
        if self.entity:
            text += f" {self.entity}"
        if self.cause is not None:
            text += f": {self.cause}"
        return text

    def __str__(self) -> str:
        return self.render()


class HeaderParseError(StorageCommandError):
    """Malformed header token"""
    default_kind = ErrorKind.PARSE

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            action="parse header",
            entity=token,
            message="Unable to parse headers (must use format header-name:header-value)"
        )


class ArgumentError(StorageCommandError):
    """Missing or unknown positional arguments"""
    default_kind = ErrorKind.PARSE

    def __init__(self, message: str):
        super().__init__(action="parse arguments", message=message)


class RemoteError(StorageCommandError):
    """Failure reported by the object storage service"""
    default_kind = ErrorKind.REMOTE


class ConfigError(StorageCommandError):
    """Missing or invalid service configuration"""
    default_kind = ErrorKind.CONFIG

    def __init__(self, message: str, entity: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(action="load configuration", entity=entity, cause=cause, message=message)
