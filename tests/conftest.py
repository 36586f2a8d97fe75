"""Pytest fixtures for cluster-platform tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest
import yaml

ENV_VARS = (
    "KUBECONFIG",
    "CLUSTER_PLATFORM_MODE",
    "CLUSTER_PLATFORM_KUBECONFIG_PATH",
    "CLUSTER_PLATFORM_KUBECONFIG_CONTEXT",
    "CLUSTER_PLATFORM_CLI_PATH",
    "CLUSTER_PLATFORM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Isolate tests from the caller's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def infrastructure_data() -> dict[str, Any]:
    """Sample Infrastructure resource from an AWS cluster."""
    return {
        "apiVersion": "config.openshift.io/v1",
        "kind": "Infrastructure",
        "metadata": {
            "name": "cluster",
            "uid": "3e8f2b0c-0b52-4f8e-9c1a-2f6a1d2e7b11",
            "creationTimestamp": "2024-05-02T09:14:11Z",
        },
        "spec": {
            "cloudConfig": {"name": ""},
            "platformSpec": {"type": "AWS", "aws": {}},
        },
        "status": {
            "apiServerInternalURI": "https://api-int.demo.example.com:6443",
            "apiServerURL": "https://api.demo.example.com:6443",
            "controlPlaneTopology": "HighlyAvailable",
            "etcdDiscoveryDomain": "",
            "infrastructureName": "demo-x7k2p",
            "infrastructureTopology": "HighlyAvailable",
            "platform": "AWS",
            "platformStatus": {
                "aws": {"region": "us-east-2"},
                "type": "AWS",
            },
        },
    }


@pytest.fixture
def infrastructure_yaml(infrastructure_data: dict[str, Any]) -> str:
    """Infrastructure rendered the way ``oc get -o yaml`` prints it, with platformType."""
    data = dict(infrastructure_data)
    data["status"] = dict(data["status"], platformType="AWS")
    return yaml.safe_dump(data, default_flow_style=False)


@pytest.fixture
def mock_k8s() -> MagicMock:
    """Create a mock K8sClient."""
    mock = MagicMock()
    mock.is_connected = False
    return mock
