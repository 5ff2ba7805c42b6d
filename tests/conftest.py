"""Shared test fixtures for kubewait."""

import logging
from typing import Any

import pytest

from kubewait.waiter import ResourceInfo


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove KUBEWAIT_* variables inherited from the shell."""
    for var in (
        "KUBEWAIT_LOG_LEVEL",
        "KUBEWAIT_LOG_FORMAT",
        "KUBEWAIT_LOG_FILE",
        "KUBEWAIT_ALLOW_NO_RESOURCES",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def ready_pod() -> dict[str, Any]:
    """A running pod whose Ready condition is True."""
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"name": "web", "namespace": "default"},
        "spec": {"nodeName": "node-1"},
        "status": {
            "phase": "Running",
            "conditions": [
                {"type": "Initialized", "status": "True"},
                {"type": "Ready", "status": "True"},
                {"type": "ContainersReady", "status": "True"},
            ],
            "containerStatuses": [
                {"name": "app", "ready": True, "restartCount": 0},
                {"name": "sidecar", "ready": False, "restartCount": 2},
            ],
        },
    }


@pytest.fixture
def deployment() -> dict[str, Any]:
    """A deployment with three desired and two ready replicas."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "api", "namespace": "prod", "generation": 4},
        "spec": {"replicas": 3, "paused": False},
        "status": {
            "readyReplicas": 2,
            "replicas": 3,
            "conditions": [
                {"type": "Available", "status": "False", "reason": "MinimumReplicas"},
                {"type": "Progressing", "status": "True"},
            ],
        },
    }


@pytest.fixture
def make_info():
    """Factory wrapping a resource object in a ResourceInfo."""

    def _make(obj: dict[str, Any] | None, kind: str = "Pod") -> ResourceInfo:
        metadata = (obj or {}).get("metadata", {})
        return ResourceInfo(
            kind=kind,
            name=metadata.get("name", "web"),
            namespace=metadata.get("namespace"),
            object=obj,
        )

    return _make
