"""Tests for the view-model mapper."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from kubernetes import client

from conftest import make_raw_node, make_raw_pod
from nodescope.models.kubernetes import NodeStatus, PodStatus
from nodescope.services.view_model import (
    build_node_views,
    resolve_node_ip,
    resolve_node_status,
    resolve_pod_status,
)


class TestNodeFields:
    """Tests for node IP and status resolution."""

    def test_internal_ip_is_used(self) -> None:
        node = make_raw_node(
            "n1", internal_ip="10.0.0.5",
            extra_addresses=[("Hostname", "n1"), ("ExternalIP", "203.0.113.9")],
        )
        assert resolve_node_ip(node) == "10.0.0.5"

    def test_first_internal_ip_wins(self) -> None:
        node = make_raw_node("n1", extra_addresses=[("InternalIP", "10.0.0.1"), ("InternalIP", "10.0.0.2")])
        assert resolve_node_ip(node) == "10.0.0.1"

    def test_missing_internal_ip_is_unknown(self) -> None:
        node = make_raw_node("n1", extra_addresses=[("Hostname", "n1")])
        assert resolve_node_ip(node) == "Unknown"

    @pytest.mark.parametrize(
        ("ready", "expected"),
        [
            ("True", NodeStatus.READY),
            ("False", NodeStatus.NOT_READY),
            ("Unknown", NodeStatus.NOT_READY),
            (None, NodeStatus.NOT_READY),
        ],
    )
    def test_node_status(self, ready, expected) -> None:
        assert resolve_node_status(make_raw_node("n1", ready=ready)) == expected

    def test_other_conditions_are_ignored(self) -> None:
        node = make_raw_node("n1")
        node.status.conditions = [client.V1NodeCondition(type="MemoryPressure", status="True")]
        assert resolve_node_status(node) == NodeStatus.NOT_READY


class TestPodStatus:
    """Tests for pod status derivation."""

    @pytest.mark.parametrize(
        ("phase", "ready", "expected"),
        [
            ("Pending", None, PodStatus.PENDING),
            ("Failed", None, PodStatus.FAILED),
            ("Running", "True", PodStatus.READY),
            ("Running", "False", PodStatus.PENDING),
            ("Running", None, PodStatus.PENDING),
            ("Succeeded", None, PodStatus.PENDING),
            ("Unknown", None, PodStatus.PENDING),
            (None, None, PodStatus.PENDING),
        ],
    )
    def test_phase_mapping(self, phase, ready, expected) -> None:
        pod = make_raw_pod("p", "n1", phase=phase, ready=ready)
        assert resolve_pod_status(pod) == expected

    @pytest.mark.parametrize("phase", ["Pending", "Running", "Failed", "Succeeded", None])
    def test_deletion_timestamp_means_terminating(self, phase) -> None:
        pod = make_raw_pod("p", "n1", phase=phase, ready="True", deleting=True)
        assert resolve_pod_status(pod) == PodStatus.TERMINATING

    def test_pod_without_metadata_or_status(self) -> None:
        assert resolve_pod_status(SimpleNamespace(metadata=None, status=None)) == PodStatus.PENDING


class TestBuildNodeViews:
    """Tests for build_node_views."""

    def test_pods_are_joined_to_their_node(self) -> None:
        nodes = [make_raw_node("n1", "10.0.0.1", "True"), make_raw_node("n2", "10.0.0.2", "False")]
        pods = [
            make_raw_pod("a", "n2", phase="Running", ready="True"),
            make_raw_pod("b", "n1", phase="Pending"),
            make_raw_pod("c", "n2", phase="Failed"),
        ]

        result = build_node_views(nodes, pods)

        assert [n.name for n in result] == ["n1", "n2"]
        assert [p.name for p in result[0].pods] == ["b"]
        assert [p.name for p in result[1].pods] == ["a", "c"]
        assert result[0].status == NodeStatus.READY
        assert result[1].status == NodeStatus.NOT_READY
        assert result[1].ip == "10.0.0.2"

    def test_unscheduled_and_orphan_pods_are_dropped(self) -> None:
        nodes = [make_raw_node("n1")]
        pods = [make_raw_pod("orphan", "gone-node"), make_raw_pod("unscheduled", None)]

        result = build_node_views(nodes, pods)

        assert len(result) == 1
        assert result[0].pods == []

    def test_pod_fields_are_copied(self) -> None:
        pod = make_raw_pod(
            "web-1", "n1", phase="Running", ready="True",
            labels={"app": "web"}, annotations={"owner": "team-a"},
            containers=("nginx", "sidecar"),
        )

        view = build_node_views([make_raw_node("n1")], [pod])[0].pods[0]

        assert view.name == "web-1"
        assert [c.name for c in view.containers] == ["nginx", "sidecar"]
        assert view.labels == {"app": "web"}
        assert view.annotations == {"owner": "team-a"}
        assert view.status == PodStatus.READY

    def test_missing_optional_fields_use_defaults(self) -> None:
        node = client.V1Node(metadata=client.V1ObjectMeta(name="bare"))
        pod = client.V1Pod(
            metadata=client.V1ObjectMeta(name="p"),
            spec=client.V1PodSpec(node_name="bare", containers=[]),
        )

        result = build_node_views([node], [pod])

        assert result[0].ip == "Unknown"
        assert result[0].status == NodeStatus.NOT_READY
        view = result[0].pods[0]
        assert view.status == PodStatus.PENDING
        assert view.labels == {}
        assert view.annotations == {}
        assert view.containers == []

    def test_json_shape(self) -> None:
        pod = make_raw_pod("p", "n1", phase="Running", ready="True", labels={"env": "prod"})
        data = build_node_views([make_raw_node("n1", "10.0.0.1", "True")], [pod])[0].model_dump(mode="json")

        assert data == {
            "name": "n1",
            "ip": "10.0.0.1",
            "status": "Ready",
            "pods": [{
                "name": "p",
                "containers": [{"name": "app"}],
                "annotations": {},
                "labels": {"env": "prod"},
                "status": "Ready",
            }],
        }
