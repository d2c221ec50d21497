#!/usr/bin/env python3
"""
cf-os CLI - Main Entry Point
Manage containers in an OpenStack Swift object storage service
"""

from typing import List, Optional

import typer

from .commands.containers import dispatch
from .core.config import get_service_config
from .core.errors import ErrorKind, StorageCommandError
from .core.headers import SHORT_HEADERS
from .core.storage import connect
from .utils.display import ConsoleWriter, console, create_headers_table
from .utils.logger import log_exception, setup_logging

PROG_NAME = "cf-os"

# Let shorthand tokens such as -gr through as positional header arguments
HEADER_COMMAND_SETTINGS = {"ignore_unknown_options": True}

app = typer.Typer(
    name=PROG_NAME,
    help="🪣 Manage containers in an OpenStack Swift object storage service",
    add_completion=False,
    no_args_is_help=True
)


def run_command(args: List[str]):
    """Connect to the service named in args, run the command and print its result"""
    command = args[1]
    try:
        service = get_service_config(args[2])
        storage = connect(service)
        try:
            with ConsoleWriter() as writer:
                result = dispatch(storage, writer, args)
        finally:
            storage.close()
    except StorageCommandError as e:
        context = "Invalid configuration" if e.kind is ErrorKind.CONFIG else f"{command} failed"
        log_exception(e, context)
        raise typer.Exit(1)

    typer.echo(result, nl=False)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Show debug logging and stack traces")
):
    """
    cf-os

    Create, inspect, update, rename and delete object storage containers.
    """
    setup_logging(debug)


@app.command("containers")
def containers(
    service: str = typer.Argument(..., help="Object storage service name")
):
    """📋 List containers in a service"""
    run_command([PROG_NAME, "containers", service])


@app.command("container")
def container(
    service: str = typer.Argument(..., help="Object storage service name"),
    name: str = typer.Argument(..., help="Container name")
):
    """ℹ️ Show container size, object count and headers"""
    run_command([PROG_NAME, "container", service, name])


@app.command("create-container", context_settings=HEADER_COMMAND_SETTINGS)
def create_container(
    service: str = typer.Argument(..., help="Object storage service name"),
    name: str = typer.Argument(..., help="Container name"),
    headers: Optional[List[str]] = typer.Argument(None, help="Headers as Name:Value, or a shorthand (see 'headers')")
):
    """➕ Create a container"""
    run_command([PROG_NAME, "create-container", service, name] + (headers or []))


@app.command("delete-container")
def delete_container(
    service: str = typer.Argument(..., help="Object storage service name"),
    name: str = typer.Argument(..., help="Container name"),
    force: bool = typer.Option(False, "--force", "-f", help="Delete all objects in the container first")
):
    """🗑  Delete a container"""
    args = [PROG_NAME, "delete-container", service, name]
    if force:
        args.append("-f")
    run_command(args)


@app.command("update-container", context_settings=HEADER_COMMAND_SETTINGS)
def update_container(
    service: str = typer.Argument(..., help="Object storage service name"),
    name: str = typer.Argument(..., help="Container name"),
    headers: Optional[List[str]] = typer.Argument(None, help="Headers as Name:Value, or a shorthand (see 'headers')")
):
    """✏️ Update the headers of a container"""
    run_command([PROG_NAME, "update-container", service, name] + (headers or []))


@app.command("rename-container")
def rename_container(
    service: str = typer.Argument(..., help="Object storage service name"),
    name: str = typer.Argument(..., help="Container name"),
    new_name: str = typer.Argument(..., help="New container name")
):
    """🔀 Rename a container, moving all of its objects"""
    run_command([PROG_NAME, "rename-container", service, name, new_name])


@app.command("headers")
def headers():
    """🏷  Show header shorthands"""
    console.print(create_headers_table(SHORT_HEADERS))


if __name__ == "__main__":
    app()
