"""
cf-os: object storage container management CLI
Create, inspect, update, rename and delete OpenStack Swift containers
"""

__version__ = "1.0.0"
__description__ = "CLI for managing containers in OpenStack Swift object storage services"

__all__ = [
    '__version__',
    '__description__'
]
