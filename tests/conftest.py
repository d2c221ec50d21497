"""Shared fixtures: an in-memory storage connection recording every call."""

from typing import Dict, List, Tuple

import pytest

from cf_object_storage.core.storage import ContainerSummary
from cf_object_storage.utils.display import ConsoleWriter


class StorageFailure(Exception):
    pass


class FakeStorage:
    """StorageConnection keeping containers in memory.

    ``fail_on`` maps (method, argument) to the exception raised when the
    method is called with that positional argument; ``(method, None)`` fails
    every call.
    """

    def __init__(self):
        self.containers: Dict[str, Dict[str, str]] = {}
        self.objects: Dict[str, List[str]] = {}
        self.calls: List[Tuple] = []
        self.fail_on: Dict[Tuple[str, object], Exception] = {}
        self.closed = False

    def add(self, name, headers=None, objects=None):
        self.containers[name] = dict(headers or {})
        self.objects[name] = list(objects or [])

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        keys = [(method, arg) for arg in args if isinstance(arg, str)] + [(method, None)]
        for key in keys:
            if key in self.fail_on:
                raise self.fail_on[key]

    def methods(self):
        return [call[0] for call in self.calls]

    def list_container_names(self):
        self._record("list_container_names")
        return sorted(self.containers)

    def get_container(self, name):
        self._record("get_container", name)
        if name not in self.containers:
            raise StorageFailure(f"Container GET failed: 404 Not Found ({name})")
        summary = ContainerSummary(name=name, count=len(self.objects[name]), bytes=10 * len(self.objects[name]))
        return summary, dict(self.containers[name])

    def create_container(self, name, headers):
        self._record("create_container", name, dict(headers))
        self.containers.setdefault(name, {}).update(headers)
        self.objects.setdefault(name, [])

    def delete_container(self, name):
        self._record("delete_container", name)
        if self.objects.get(name):
            raise StorageFailure("Container DELETE failed: 409 Conflict")
        self.containers.pop(name, None)
        self.objects.pop(name, None)

    def list_object_names(self, container):
        self._record("list_object_names", container)
        return list(self.objects.get(container, []))

    def delete_object(self, container, name):
        self._record("delete_object", container, name)
        self.objects[container].remove(name)

    def move_object(self, src_container, src_name, dst_container, dst_name):
        self._record("move_object", src_container, src_name, dst_container, dst_name)
        if (src_container, src_name) == (dst_container, dst_name):
            return
        self.objects[src_container].remove(src_name)
        self.objects[dst_container].append(dst_name)

    def close(self):
        self.closed = True


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def writer():
    return ConsoleWriter()
