from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Dict


class NodeStatus(str, Enum):
    """Node readiness derived from the Ready condition"""
    READY = "Ready"
    NOT_READY = "NotReady"


class PodStatus(str, Enum):
    """Simplified pod state shown on the dashboard"""
    READY = "Ready"
    PENDING = "Pending"
    TERMINATING = "Terminating"
    FAILED = "Failed"


class Container(BaseModel):
    """Container running inside a pod"""
    name: str


class Pod(BaseModel):
    """Pod scheduled on a node"""
    name: str
    containers: List[Container] = Field(default_factory=list)
    annotations: Dict[str, str] = Field(default_factory=dict)
    labels: Dict[str, str] = Field(default_factory=dict)
    status: PodStatus = PodStatus.PENDING


class Node(BaseModel):
    """Cluster node with the pods assigned to it"""
    name: str
    ip: str = "Unknown"
    status: NodeStatus = NodeStatus.NOT_READY
    pods: List[Pod] = Field(default_factory=list)


# label key -> distinct values, first-seen order
LabelIndex = Dict[str, List[str]]

# label key -> selected values, empty list means no constraint
LabelFilters = Dict[str, List[str]]


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str
