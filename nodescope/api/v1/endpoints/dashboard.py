from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from typing import List, Literal
from nodescope.core.exceptions import AggregationFailed
from nodescope.services.kubernetes_service import KubernetesService, get_kubernetes_service
from nodescope.visualizer.render import render_html
from nodescope.visualizer.store import VisualizerState, POLL_INTERVALS

router = APIRouter()


def parse_label_params(labels: List[str]) -> dict:
    """Group repeated key=value query parameters into label filters"""
    filters = {}
    for item in labels:
        key, sep, value = item.partition("=")
        if not sep or not key:
            continue
        selected = filters.setdefault(key, [])
        if value not in selected:
            selected.append(value)
    return filters


@router.get("/", response_class=HTMLResponse)
def dashboard(
    search: str = Query("", description="Match node name, pod name or pod label value"),
    label: List[str] = Query([], description="Label filter as key=value, repeatable"),
    view: Literal["compact", "detailed"] = Query("compact"),
    refresh: int = Query(0, description="Auto-refresh interval in seconds"),
    service: KubernetesService = Depends(get_kubernetes_service),
):
    """Server-rendered cluster dashboard"""
    if refresh not in POLL_INTERVALS:
        raise HTTPException(
            status_code=422,
            detail=f"refresh must be one of {', '.join(str(i) for i in POLL_INTERVALS)}",
        )

    state = VisualizerState(
        search_term=search,
        label_filters=parse_label_params(label),
        poll_interval=refresh,
    )
    state.set_detailed_view(view == "detailed")
    try:
        state.replace_nodes(service.get_node_views())
    except AggregationFailed:
        return HTMLResponse(render_html(state, error=AggregationFailed.message), status_code=500)
    return HTMLResponse(render_html(state))
