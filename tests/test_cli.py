"""Tests for cf_object_storage.cli."""

import pytest
from typer.testing import CliRunner

from cf_object_storage import cli
from cf_object_storage.core.config import ServiceConfig
from cf_object_storage.core.errors import ConfigError

runner = CliRunner()


@pytest.fixture
def connected(monkeypatch, storage):
    """Route the CLI to the in-memory storage for service svcA"""
    def fake_get_service_config(name):
        if name != "svcA":
            raise ConfigError(f"Service '{name}' not found in configuration (available: svcA)", entity=name)
        return ServiceConfig(name=name, storage_url="https://swift.example.com/v1/AUTH_x", auth_token="tok")

    monkeypatch.setattr(cli, "get_service_config", fake_get_service_config)
    monkeypatch.setattr(cli, "connect", lambda service: storage)
    return storage


def test_containers(connected) -> None:
    connected.add("alpha")
    result = runner.invoke(cli.app, ["containers", "svcA"])
    assert result.exit_code == 0
    assert "Containers in OS svcA: [alpha]" in result.stdout
    assert connected.closed


def test_create_container_with_shorthand(connected) -> None:
    result = runner.invoke(cli.app, ["create-container", "svcA", "mybucket", "-gr", "X-Container-Meta-Team:web"])
    assert result.exit_code == 0
    assert connected.calls == [(
        "create_container", "mybucket",
        {"X-Container-Read": ".r:*", "X-Container-Meta-Team": "web"},
    )]
    assert "Created container mybucket in OS svcA" in result.stdout


def test_create_container_remove_read_shorthand(connected) -> None:
    result = runner.invoke(cli.app, ["create-container", "svcA", "mybucket", "-rm-gr"])
    assert result.exit_code == 0
    assert connected.calls == [("create_container", "mybucket", {"X-Remove-Container-Read": "1"})]


def test_create_container_bad_header(connected) -> None:
    result = runner.invoke(cli.app, ["create-container", "svcA", "mybucket", "badheader"])
    assert result.exit_code == 1
    assert "Unable to parse headers" in result.output
    assert connected.calls == []


def test_container_info(connected) -> None:
    connected.add("photos", headers={"x-container-meta-a": "1"}, objects=["p.jpg"])
    result = runner.invoke(cli.app, ["container", "svcA", "photos"])
    assert result.exit_code == 0
    assert "number of objects: 1" in result.stdout
    assert "Name: x-container-meta-a Value: 1" in result.stdout


def test_container_info_missing_container(connected) -> None:
    result = runner.invoke(cli.app, ["container", "svcA", "nope"])
    assert result.exit_code == 1
    assert "Failed to get" in result.output
    assert connected.closed


def test_delete_container_force(connected) -> None:
    connected.add("box", objects=["a", "b"])
    result = runner.invoke(cli.app, ["delete-container", "svcA", "box", "-f"])
    assert result.exit_code == 0
    assert connected.methods() == ["list_object_names", "delete_object", "delete_object", "delete_container"]
    assert "Deleted container box from OS svcA" in result.stdout


def test_delete_container_without_force(connected) -> None:
    connected.add("box")
    result = runner.invoke(cli.app, ["delete-container", "svcA", "box"])
    assert result.exit_code == 0
    assert connected.methods() == ["delete_container"]


def test_update_container(connected) -> None:
    connected.add("site")
    result = runner.invoke(cli.app, ["update-container", "svcA", "site", "-gr"])
    assert result.exit_code == 0
    assert connected.methods() == ["get_container", "create_container"]
    assert "Updated container site in OS svcA" in result.stdout


def test_rename_container(connected) -> None:
    connected.add("old", headers={"X-Container-Meta-Foo": "Bar"}, objects=["x.txt"])
    result = runner.invoke(cli.app, ["rename-container", "svcA", "old", "new"])
    assert result.exit_code == 0
    assert "Renamed container old to new" in result.stdout
    assert connected.objects == {"new": ["x.txt"]}


def test_unknown_service(connected) -> None:
    result = runner.invoke(cli.app, ["containers", "svcB"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert connected.calls == []


def test_headers_lists_shorthands() -> None:
    result = runner.invoke(cli.app, ["headers"])
    assert result.exit_code == 0
    assert "-gr" in result.stdout
    assert "-rm-gr" in result.stdout


def test_debug_flag(connected) -> None:
    result = runner.invoke(cli.app, ["--debug", "containers", "svcA"])
    assert result.exit_code == 0
    assert "Containers in OS svcA" in result.stdout
