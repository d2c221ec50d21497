"""
Container management commands
Container operations: list, info, create, delete, update, rename

Every operation takes the storage connection, a stage writer and the flat
argument list, where positions 0 and 1 hold the program and command names.
"""

import logging
from typing import Callable, Dict, List

from ..core.errors import ArgumentError, RemoteError, StorageCommandError
from ..core.headers import carried_headers, format_header, parse_headers
from ..core.storage import StorageConnection
from ..utils.display import ConsoleWriter, ok_message

logger = logging.getLogger(__name__)

FORCE_FLAG = "-f"

Operation = Callable[[StorageConnection, ConsoleWriter, List[str]], str]


def _require(args: List[str], count: int, usage: str):
    """Fail before any remote call if positional arguments are missing"""
    if len(args) < count:
        raise ArgumentError(f"Missing arguments, usage: {usage}")


def show_containers(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """List the containers in a service"""
    writer.set_current_stage("Displaying containers")
    _require(args, 3, "containers SERVICE")

    service_name = args[2]

    try:
        containers = storage.list_container_names()
    except Exception as e:
        raise RemoteError("get containers in OS", service_name, cause=e) from e

    return ok_message(f"Containers in OS {service_name}: [{', '.join(containers)}]")


def get_container_info(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """Show object count, size and headers of a container"""
    writer.set_current_stage("Fetching container info")
    _require(args, 4, "container SERVICE CONTAINER")

    container = args[3]

    try:
        summary, headers = storage.get_container(container)
    except Exception as e:
        raise RemoteError("get container info for container", container, cause=e) from e

    lines = [
        f"Name: {summary.name}",
        f"number of objects: {summary.count}",
        f"Size: {summary.bytes} bytes",
        "Headers:"
    ]
    for name in sorted(headers):
        lines.append(f"\tName: {name} Value: {headers[name]}")

    return ok_message("\n".join(lines))


def make_container(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """Create a container, with optional name:value or shorthand headers"""
    writer.set_current_stage("Creating container")
    _require(args, 4, "create-container SERVICE CONTAINER [HEADER...]")

    service_name = args[2]
    container = args[3]

    # Parse everything before touching the store
    headers = parse_headers(args[4:])

    try:
        storage.create_container(container, headers)
    except Exception as e:
        raise RemoteError("create container", container, cause=e) from e

    return ok_message(f"Created container {container} in OS {service_name}")


def delete_container(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """Delete a container, first removing its objects when -f is given"""
    _require(args, 4, "delete-container SERVICE CONTAINER [-f]")

    service_name = args[2]
    container = args[3]

    if len(args) == 5 and args[4] == FORCE_FLAG:
        writer.set_current_stage("Deleting objects in container")

        try:
            objects = storage.list_object_names(container)
        except Exception as e:
            raise RemoteError("get objects to delete from container", container, cause=e) from e

        logger.debug(f"Deleting {len(objects)} objects from {container}")
        for obj in objects:
            try:
                storage.delete_object(container, obj)
            except Exception as e:
                raise RemoteError("delete object", obj, cause=e) from e

    writer.set_current_stage("Deleting container")

    try:
        storage.delete_container(container)
    except Exception as e:
        raise RemoteError("delete container", container, cause=e) from e

    return ok_message(f"Deleted container {container} from OS {service_name}")


def update_container(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """
    Update the headers of an existing container

    The container is looked up first so a missing container is reported as
    such; the headers are then sent with a create, which Swift applies to an
    existing container as a metadata update.
    """
    writer.set_current_stage("Updating container")
    _require(args, 4, "update-container SERVICE CONTAINER [HEADER...]")

    service_name = args[2]
    container = args[3]

    try:
        get_container_info(storage, writer, args)
    except StorageCommandError as e:
        raise StorageCommandError("get container", container, cause=e) from e

    try:
        make_container(storage, writer, args)
    except StorageCommandError as e:
        raise StorageCommandError("make container", container, cause=e) from e

    return ok_message(f"Updated container {container} in OS {service_name}")


def rename_container(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """
    Rename a container by recreating it and moving every object

    Steps run in order and stop at the first failure; nothing already done
    on the store is undone.
    """
    writer.set_current_stage("Renaming container")
    _require(args, 5, "rename-container SERVICE CONTAINER NEW_CONTAINER")

    container = args[3]
    new_container = args[4]

    try:
        _, headers = storage.get_container(container)
    except Exception as e:
        raise RemoteError("get container", container, cause=e) from e

    header_tokens = [format_header(name, value) for name, value in carried_headers(headers).items()]
    make_args = args[:3] + [new_container] + header_tokens
    try:
        make_container(storage, writer, make_args)
    except StorageCommandError as e:
        raise StorageCommandError("make container", new_container, cause=e) from e

    writer.set_current_stage("Renaming container")

    try:
        objects = storage.list_object_names(container)
    except Exception as e:
        raise RemoteError("get objects to move from container", container, cause=e) from e

    logger.debug(f"Moving {len(objects)} objects from {container} to {new_container}")
    for obj in objects:
        try:
            storage.move_object(container, obj, new_container, obj)
        except Exception as e:
            raise RemoteError("move object", obj, cause=e) from e

    try:
        delete_container(storage, writer, args[:4])
    except StorageCommandError as e:
        raise StorageCommandError("delete container", container, cause=e) from e

    return ok_message(f"Renamed container {container} to {new_container}")


# Command names as typed after the program name
COMMANDS: Dict[str, Operation] = {
    "containers": show_containers,
    "container": get_container_info,
    "create-container": make_container,
    "delete-container": delete_container,
    "update-container": update_container,
    "rename-container": rename_container,
}


def dispatch(storage: StorageConnection, writer: ConsoleWriter, args: List[str]) -> str:
    """Route a flat argument list to the operation named by args[1]"""
    _require(args, 2, "COMMAND [ARGS...]")
    operation = COMMANDS.get(args[1])
    if operation is None:
        raise ArgumentError(f"Unknown command '{args[1]}' (available: {', '.join(COMMANDS)})")
    return operation(storage, writer, args)
