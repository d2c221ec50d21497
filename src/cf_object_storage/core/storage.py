"""
Object storage operations
StorageConnection capability and its OpenStack Swift implementation
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Protocol, Tuple

from keystoneauth1 import session as ks_session
from keystoneauth1.identity import v3
from swiftclient.client import Connection as SwiftConnection

from .config import ServiceConfig

logger = logging.getLogger(__name__)


@dataclass
class ContainerSummary:
    """Name, object count and byte size of a container"""
    name: str
    count: int = 0
    bytes: int = 0


class StorageConnection(Protocol):
    """Remote storage operations used by the container commands"""

    def list_container_names(self) -> List[str]:
        ...

    def get_container(self, name: str) -> Tuple[ContainerSummary, Dict[str, str]]:
        ...

    def create_container(self, name: str, headers: Dict[str, str]) -> None:
        ...

    def delete_container(self, name: str) -> None:
        ...

    def list_object_names(self, container: str) -> List[str]:
        ...

    def delete_object(self, container: str, name: str) -> None:
        ...

    def move_object(self, src_container: str, src_name: str, dst_container: str, dst_name: str) -> None:
        ...


class SwiftStorage:
    """
    StorageConnection backed by python-swiftclient

    swiftclient.ClientException propagates unchanged; callers wrap it with
    the action that failed.
    """

    def __init__(self, connection: SwiftConnection):
        self.connection = connection

    def list_container_names(self) -> List[str]:
        logger.debug("Listing containers")
        _, containers = self.connection.get_account(full_listing=True)
        return [c["name"] for c in containers]

    def get_container(self, name: str) -> Tuple[ContainerSummary, Dict[str, str]]:
        logger.debug(f"Fetching container {name}")
        headers = self.connection.head_container(name)
        summary = ContainerSummary(
            name=name,
            count=int(headers.get("x-container-object-count", 0)),
            bytes=int(headers.get("x-container-bytes-used", 0))
        )
        return summary, dict(headers)

    def create_container(self, name: str, headers: Dict[str, str]) -> None:
        logger.debug(f"Creating container {name} with headers {headers}")
        self.connection.put_container(name, headers=headers)

    def delete_container(self, name: str) -> None:
        logger.debug(f"Deleting container {name}")
        self.connection.delete_container(name)

    def list_object_names(self, container: str) -> List[str]:
        logger.debug(f"Listing objects in {container}")
        _, objects = self.connection.get_container(container, full_listing=True)
        return [o["name"] for o in objects]

    def delete_object(self, container: str, name: str) -> None:
        logger.debug(f"Deleting object {container}/{name}")
        self.connection.delete_object(container, name)

    def move_object(self, src_container: str, src_name: str, dst_container: str, dst_name: str) -> None:
        """Server-side copy to the destination, then delete the source"""
        if (src_container, src_name) == (dst_container, dst_name):
            logger.debug(f"Object {src_container}/{src_name} already in place, not moving")
            return
        logger.debug(f"Moving object {src_container}/{src_name} to {dst_container}/{dst_name}")
        self.connection.copy_object(
            src_container,
            src_name,
            destination=f"/{dst_container}/{dst_name}"
        )
        self.connection.delete_object(src_container, src_name)

    def close(self):
        self.connection.close()


def connect(service: ServiceConfig) -> SwiftStorage:
    """
    Open a Swift connection for a configured service

    A preauthenticated storage_url/auth_token pair skips Keystone entirely;
    otherwise a Keystone v3 password session is built.
    """
    if service.storage_url and service.auth_token:
        logger.debug(f"Using preauthenticated endpoint for {service.name}")
        connection = SwiftConnection(
            preauthurl=service.storage_url,
            preauthtoken=service.auth_token,
            retries=service.retries
        )
        return SwiftStorage(connection)

    logger.debug(f"Authenticating {service.username} against {service.auth_url}")
    auth = v3.Password(
        auth_url=service.auth_url,
        username=service.username,
        password=service.password,
        user_domain_name=service.user_domain_name,
        project_id=service.project_id,
        project_name=service.project_name,
        project_domain_name=service.project_domain_name
    )
    sess = ks_session.Session(auth=auth)
    connection = SwiftConnection(
        session=sess,
        retries=service.retries,
        os_options={"region_name": service.region} if service.region else None
    )
    return SwiftStorage(connection)
