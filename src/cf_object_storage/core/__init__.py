"""
CLI Core Package
Errors, header parsing, configuration and storage operations
"""

from .errors import (
    ErrorKind,
    StorageCommandError,
    HeaderParseError,
    ArgumentError,
    RemoteError,
    ConfigError
)
from .headers import (
    SHORT_HEADERS,
    expand_shorthand,
    parse_header,
    parse_headers,
    format_header,
    carried_headers
)
from .config import (
    ServiceConfig,
    load_services,
    get_service_config
)
from .storage import (
    ContainerSummary,
    StorageConnection,
    SwiftStorage,
    connect
)

__all__ = [
    # Errors
    'ErrorKind',
    'StorageCommandError',
    'HeaderParseError',
    'ArgumentError',
    'RemoteError',
    'ConfigError',

    # Headers
    'SHORT_HEADERS',
    'expand_shorthand',
    'parse_header',
    'parse_headers',
    'format_header',
    'carried_headers',

    # Config
    'ServiceConfig',
    'load_services',
    'get_service_config',

    # Storage
    'ContainerSummary',
    'StorageConnection',
    'SwiftStorage',
    'connect'
]
