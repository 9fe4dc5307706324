"""Standalone HTML page for an interactive portfolio graph.

The page loads the force-graph library, draws the embedded graph data, and
wires the search form to the same matching and camera rules the Python
``PortfolioSession`` implements.
"""

from __future__ import annotations

import html
import json
from typing import TYPE_CHECKING, Any

from portfoliograph.navigation.navigator import ViewConfig
from portfoliograph.navigation.selection import MESSAGES, SearchStatus
from portfoliograph.viz import styles
from portfoliograph.viz.engine import DEFAULT_BBL_URL, to_graph_data

if TYPE_CHECKING:
    from portfoliograph.graph.core import GraphModel

FORCE_GRAPH_URL = "https://unpkg.com/force-graph@1"


def _script_json(value: Any) -> str:
    """JSON that is safe to embed inside a <script> element."""
    return json.dumps(value).replace("</", "<\\/")


def page_config(
    view: ViewConfig,
    bbl_url: str,
    status: str,
) -> dict[str, Any]:
    """Settings the page script needs, in one JSON-serializable dict."""
    return {
        "highlightColor": styles.HIGHLIGHT_COLOR,
        "zoomDurationMs": view.zoom_duration_ms,
        "zoomPaddingPx": view.zoom_padding_px,
        "centerDurationMs": view.center_duration_ms,
        "bblUrl": bbl_url,
        "status": status,
        "messages": {
            "reset": MESSAGES[SearchStatus.RESET],
            "none": MESSAGES[SearchStatus.NO_MATCHES],
            "one": MESSAGES[SearchStatus.SINGLE_MATCH],
            "many": MESSAGES[SearchStatus.MULTIPLE_MATCHES],
        },
    }


_SCRIPT = r"""
(function() {
  'use strict';
  const data = JSON.parse(document.getElementById('graph-data').textContent);
  const config = JSON.parse(document.getElementById('graph-config').textContent);
  const message = document.getElementById('message');
  const input = document.getElementById('search-input');
  let selected = new Set();

  const format = (template, query, count) =>
    template.replace('{query}', () => query).replace('{count}', () => String(count));

  const graph = ForceGraph()(document.getElementById('graph'))
    .graphData(data)
    .nodeLabel('name')
    .linkLabel('name')
    .linkDirectionalParticles(2)
    .nodeColor(node => selected.has(node.id) ? config.highlightColor : node.color)
    .linkLineDash(link => link.lineDash || null)
    .onLinkClick(link => {
      if (link.bbl) {
        window.open(config.bblUrl.replace('{bbl}', encodeURIComponent(link.bbl)), '_blank');
      }
    });

  message.textContent = config.status;

  document.getElementById('search-form').addEventListener('submit', event => {
    event.preventDefault();
    const query = input.value.trim();
    if (!query) {
      selected = new Set();
      message.textContent = config.messages.reset;
      graph.zoomToFit(config.zoomDurationMs, config.zoomPaddingPx);
      return;
    }
    const needle = query.toUpperCase();
    selected = new Set(data.nodes.filter(n => n.name.toUpperCase().includes(needle)).map(n => n.id));
    const inSelection = node => selected.has(node.id);
    if (selected.size === 0) {
      message.textContent = format(config.messages.none, query, 0);
    } else if (selected.size === 1) {
      message.textContent = format(config.messages.one, query, 1);
      const box = graph.getGraphBbox(inSelection);
      graph.centerAt((box.x[0] + box.x[1]) / 2, (box.y[0] + box.y[1]) / 2, config.centerDurationMs);
    } else {
      message.textContent = format(config.messages.many, query, selected.size);
      graph.zoomToFit(config.zoomDurationMs, config.zoomPaddingPx, inSelection);
    }
  });
})();
"""

_STYLES = """
body { margin: 0; font-family: system-ui, -apple-system, sans-serif; }
#graph { position: absolute; inset: 0; }
.overlay { position: absolute; top: 0; left: 0; padding: 8px 16px; background: rgba(255, 255, 255, 0.85); }
.overlay h1 { font-size: 18px; margin: 0 0 8px 0; }
#message { margin: 8px 0 0 0; font-size: 13px; }
"""


def generate_portfolio_html(
    model: GraphModel,
    *,
    view: ViewConfig | None = None,
    bbl_url: str = DEFAULT_BBL_URL,
    status: str | None = None,
) -> str:
    """Generate a complete HTML document for one portfolio.

    Args:
        model: Graph model to draw
        view: Camera animation settings
        bbl_url: Edge click link template containing ``{bbl}``
        status: Initial status line (defaults to the node/edge counts)
    """
    from portfoliograph.session import status_line

    view = view or ViewConfig()
    status = status if status is not None else status_line(model)
    title = html.escape(model.title)
    config = page_config(view, bbl_url, status)

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>{_STYLES}</style>
    <script src="{FORCE_GRAPH_URL}"></script>
</head>
<body>
    <div id="graph"></div>
    <div class="overlay">
        <h1>{title}</h1>
        <form id="search-form">
            <input type="search" value="" placeholder="&#128270;" id="search-input">
            <button type="submit">Search</button>
        </form>
        <p id="message"></p>
    </div>
    <script type="application/json" id="graph-data">{_script_json(to_graph_data(model))}</script>
    <script type="application/json" id="graph-config">{_script_json(config)}</script>
    <script>{_SCRIPT}</script>
</body>
</html>
"""
