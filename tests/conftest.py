"""Shared fixtures and builders for kubernetes client objects."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from kubernetes import client

from nodescope.models.kubernetes import Container, Node, NodeStatus, Pod, PodStatus


def make_raw_node(name, internal_ip=None, ready=None, extra_addresses=()):
    """Build a V1Node; ready=None leaves out the Ready condition."""
    addresses = [client.V1NodeAddress(address=addr, type=kind) for kind, addr in extra_addresses]
    if internal_ip is not None:
        addresses.append(client.V1NodeAddress(address=internal_ip, type="InternalIP"))
    conditions = []
    if ready is not None:
        conditions.append(client.V1NodeCondition(type="Ready", status=ready))
    return client.V1Node(
        metadata=client.V1ObjectMeta(name=name),
        status=client.V1NodeStatus(
            addresses=addresses or None,
            conditions=conditions or None,
        ),
    )


def make_raw_pod(name, node_name, phase=None, ready=None, deleting=False,
                 labels=None, annotations=None, containers=("app",)):
    """Build a V1Pod; ready=None leaves out the Ready condition."""
    conditions = None
    if ready is not None:
        conditions = [client.V1PodCondition(type="Ready", status=ready)]
    return client.V1Pod(
        metadata=client.V1ObjectMeta(
            name=name,
            labels=labels,
            annotations=annotations,
            deletion_timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc) if deleting else None,
        ),
        spec=client.V1PodSpec(
            node_name=node_name,
            containers=[client.V1Container(name=c) for c in containers],
        ),
        status=client.V1PodStatus(phase=phase, conditions=conditions),
    )


def make_pod(name, labels=None, status=PodStatus.READY):
    return Pod(
        name=name,
        containers=[Container(name="app")],
        labels=labels or {},
        annotations={},
        status=status,
    )


def make_node(name, pods, status=NodeStatus.READY, ip="10.0.0.1"):
    return Node(name=name, ip=ip, status=status, pods=pods)


@pytest.fixture
def sample_nodes() -> list[Node]:
    """Two nodes with labelled pods."""
    return [
        make_node("worker-1", [
            make_pod("db-primary-0", {"app": "db", "tier": "backend"}),
            make_pod("web-1", {"app": "web", "tier": "frontend"}),
        ]),
        make_node("db-node-2", [
            make_pod("cache-1", {"app": "cache", "tier": "backend"}),
            make_pod("web-2", {"app": "web", "tier": "frontend"}, status=PodStatus.PENDING),
        ], ip="10.0.0.2"),
    ]
