from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List
from nodescope.core.exceptions import AggregationFailed
from nodescope.services.kubernetes_service import KubernetesService, get_kubernetes_service
from nodescope.models.kubernetes import Node, LabelIndex, ErrorResponse
from nodescope.visualizer.filters import build_label_index

router = APIRouter()

_error_responses = {500: {"model": ErrorResponse}}


def _failure_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": AggregationFailed.message})


@router.get("/kubernetes", response_model=List[Node], responses=_error_responses)
def get_kubernetes_data(service: KubernetesService = Depends(get_kubernetes_service)):
    """Get every node with its pods, containers, labels and derived status"""
    try:
        return service.get_node_views()
    except AggregationFailed:
        return _failure_response()


@router.get("/kubernetes/labels", response_model=LabelIndex, responses=_error_responses)
def get_label_index(service: KubernetesService = Depends(get_kubernetes_service)):
    """Get the distinct values of every pod label key, in first-seen order"""
    try:
        return build_label_index(service.get_node_views())
    except AggregationFailed:
        return _failure_response()
