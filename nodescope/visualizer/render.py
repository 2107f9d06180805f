"""
Rendering module.
Turns the visible subset of a VisualizerState into terminal text or an HTML page.
"""

from html import escape
from urllib.parse import urlencode
from nodescope.models.kubernetes import PodStatus
from nodescope.visualizer.store import POLL_INTERVALS

STATUS_SWATCHES = {
    PodStatus.READY: "R",
    PodStatus.PENDING: "P",
    PodStatus.TERMINATING: "T",
    PodStatus.FAILED: "F",
}

STATUS_COLORS = {
    PodStatus.READY: "#22c55e",
    PodStatus.PENDING: "#eab308",
    PodStatus.TERMINATING: "#f97316",
    PodStatus.FAILED: "#ef4444",
}

INTERVAL_LABELS = {0: "No refresh", 5: "5 seconds", 10: "10 seconds", 30: "30 seconds", 60: "1 minute"}


def _format_mapping(mapping):
    return ", ".join(f"{key}={value}" for key, value in mapping.items()) or "-"


def render_text(state):
    """
    Render the visible nodes as plain text.

    Compact view prints one line per node with a swatch per pod,
    detailed view lists every pod with containers, labels and annotations.
    """
    nodes = state.visible_nodes()
    if not nodes:
        return "No nodes match the current filters."

    lines = []
    for node in nodes:
        if not state.detailed_view:
            swatches = "".join(STATUS_SWATCHES[pod.status] for pod in node.pods)
            lines.append(f"{node.name:<30} {swatches}")
            continue

        lines.append(f"{node.name}  IP: {node.ip}  Status: {node.status.value}")
        for pod in node.pods:
            containers = ", ".join(c.name for c in pod.containers) or "-"
            lines.append(f"  {pod.name} [{pod.status.value}]")
            lines.append(f"    containers:  {containers}")
            lines.append(f"    labels:      {_format_mapping(pod.labels)}")
            lines.append(f"    annotations: {_format_mapping(pod.annotations)}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def _query(state, **overrides):
    params = {
        "view": "detailed" if state.detailed_view else "compact",
        "refresh": state.poll_interval,
    }
    params.update(overrides)
    return "/?" + urlencode(params)


def _render_pod_detailed(pod):
    hover = f"Annotations: {_format_mapping(pod.annotations)}\nLabels: {_format_mapping(pod.labels)}"
    containers = "".join(
        f'<span class="container">{escape(c.name)}</span>' for c in pod.containers
    )
    return f"""
        <div class="pod" title="{escape(hover)}">
            <div class="pod-header">
                <h3>{escape(pod.name)}</h3>
                <span class="badge" style="background: {STATUS_COLORS[pod.status]}">{pod.status.value}</span>
            </div>
            <div>{containers}</div>
        </div>"""


def _render_node(node, detailed):
    if detailed:
        pods = "".join(_render_pod_detailed(pod) for pod in node.pods)
        return f"""
    <div class="card">
        <div class="card-header">
            <h2>{escape(node.name)}</h2>
            <p>IP: {escape(node.ip)}</p>
            <p>Status: {node.status.value}</p>
        </div>
        <div class="card-body">{pods}</div>
    </div>"""

    swatches = "".join(
        f'<div class="swatch" style="background: {STATUS_COLORS[pod.status]}" '
        f'title="{escape(pod.name)} ({pod.status.value})"></div>'
        for pod in node.pods
    )
    return f"""
    <div class="card compact">
        <div class="node-name" title="IP: {escape(node.ip)}, Status: {node.status.value}">{escape(node.name)}</div>
        <div class="swatches">{swatches}</div>
    </div>"""


def _render_label_filters(state):
    selects = []
    for key, values in state.label_index.items():
        selected = state.label_filters.get(key, [])
        options = "".join(
            f'<option value="{escape(f"{key}={value}")}"{" selected" if value in selected else ""}>'
            f"{escape(value)}</option>"
            for value in values
        )
        selects.append(
            f'<label class="label-filter">{escape(key)}'
            f'<select name="label" multiple>{options}</select></label>'
        )
    return "".join(selects)


def _render_hidden_label_filters(state, shown_index):
    """Hidden inputs for selected values that have no visible selector."""
    inputs = []
    for key, selected in state.label_filters.items():
        shown = shown_index.get(key, [])
        inputs.extend(
            f'<input type="hidden" name="label" value="{escape(f"{key}={value}")}">'
            for value in selected
            if value not in shown
        )
    return "".join(inputs)


def render_html(state, error=None):
    """
    Render the full dashboard page.

    Args:
        state: VisualizerState to render
        error: Optional message shown instead of the node grid
    """
    refresh_meta = (
        f'<meta http-equiv="refresh" content="{state.poll_interval}">'
        if state.poll_interval > 0 else ""
    )
    interval_options = "".join(
        f'<option value="{seconds}"{" selected" if seconds == state.poll_interval else ""}>'
        f"{INTERVAL_LABELS[seconds]}</option>"
        for seconds in POLL_INTERVALS
    )
    if state.detailed_view:
        label_filters = _render_label_filters(state) + _render_hidden_label_filters(state, state.label_index)
    else:
        label_filters = _render_hidden_label_filters(state, {})

    if error:
        body = f'<p class="error">{escape(error)}</p>'
    else:
        nodes = state.visible_nodes()
        grid_class = "grid detailed" if state.detailed_view else "grid"
        cards = "".join(_render_node(node, state.detailed_view) for node in nodes)
        body = f'<div class="{grid_class}">{cards}</div>' if nodes else \
            '<p class="empty">No nodes match the current filters.</p>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    {refresh_meta}
    <title>Kubernetes Cluster Visualizer</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 32px; background: #f3f4f6; color: #1f2937; }}
        h1 {{ text-align: center; margin-bottom: 32px; }}
        form {{ margin-bottom: 24px; }}
        .toolbar {{ display: flex; gap: 12px; align-items: center; flex-wrap: wrap; }}
        .toolbar input[type=text] {{ flex-grow: 1; padding: 8px; border: 1px solid #d1d5db; border-radius: 4px; }}
        .label-filter {{ display: inline-flex; flex-direction: column; margin: 8px; }}
        .grid {{ display: grid; gap: 24px; grid-template-columns: repeat(auto-fill, minmax(140px, 1fr)); }}
        .grid.detailed {{ grid-template-columns: repeat(auto-fill, minmax(360px, 1fr)); }}
        .card {{ background: #fff; border-radius: 8px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); overflow: hidden; }}
        .card.compact {{ padding: 8px; text-align: center; }}
        .card-header {{ background: #2563eb; color: #fff; padding: 16px; }}
        .card-header h2, .card-header p {{ margin: 0 0 4px 0; }}
        .card-body {{ padding: 16px; }}
        .pod {{ background: #f9fafb; border-radius: 4px; padding: 12px; margin-bottom: 16px; }}
        .pod-header {{ display: flex; justify-content: space-between; align-items: center; }}
        .pod-header h3 {{ margin: 0 0 8px 0; font-size: 16px; }}
        .badge {{ padding: 2px 8px; border-radius: 4px; color: #fff; font-size: 12px; }}
        .container {{ display: inline-block; padding: 2px 8px; margin: 2px; background: #dcfce7; color: #166534; border-radius: 9999px; font-size: 13px; }}
        .node-name {{ font-weight: 600; font-size: 14px; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }}
        .swatches {{ display: flex; flex-wrap: wrap; justify-content: center; margin-top: 4px; }}
        .swatch {{ width: 16px; height: 16px; border-radius: 2px; margin: 4px; }}
        .error {{ color: #b91c1c; text-align: center; }}
        .empty {{ text-align: center; color: #6b7280; }}
    </style>
</head>
<body>
    <h1>Kubernetes Cluster Visualizer</h1>
    <form method="get" action="/">
        <div class="toolbar">
            <input type="text" name="search" value="{escape(state.search_term)}" placeholder="Search by node name, pod name, or pod label">
            <button type="submit">Apply</button>
            <a href="{escape(_query(state))}">Clear Filters</a>
            <label>Refresh Interval <select name="refresh">{interval_options}</select></label>
            <label><input type="checkbox" name="view" value="detailed"{" checked" if state.detailed_view else ""}> Detailed View</label>
        </div>
        <div>{label_filters}</div>
    </form>
    {body}
</body>
</html>"""
