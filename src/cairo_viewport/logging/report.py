from __future__ import annotations

import base64
import html as html_module
from pathlib import Path

from cairo_viewport.core.errors import ImageComparisonFailed


def write_mismatch_report(error: ImageComparisonFailed, out_path: Path | None = None) -> Path:
    """Write a self-contained HTML page showing both images of a failed comparison."""
    reference = Path(error.reference_image)
    fresh = Path(error.image_created_from_fn)
    if out_path is None:
        out_path = fresh.with_suffix(".html")

    html = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Image mismatch: {html_module.escape(reference.name)}</title>
<style>
    body {{ font-family: system-ui, sans-serif; background: #1a1a2e; color: #eee; margin: 2rem; }}
    h1 {{ text-align: center; color: #e94560; }}
    h2 {{ text-align: center; color: #aaa; font-weight: normal; }}
    .grid {{ display: flex; flex-wrap: wrap; gap: 1.5rem; justify-content: center; margin-top: 2rem; }}
    .card {{
        background: #16213e; border-radius: 12px; padding: 1rem;
        max-width: 45%; box-shadow: 0 4px 12px rgba(0,0,0,0.3);
    }}
    .card h3 {{ margin: 0 0 0.5rem; color: #e94560; font-size: 0.9rem; }}
    .card img {{ max-width: 100%; border-radius: 8px; background: #fff; }}
    .card .path {{ font-size: 0.75rem; color: #aaa; word-break: break-all; }}
</style>
</head>
<body>
<h1>Image mismatch</h1>
<h2>Similarity {error.score:.4f}</h2>
<div class="grid">
{_image_card("Reference", reference)}
{_image_card("Fresh render", fresh)}
</div>
</body>
</html>"""

    out_path.write_text(html)
    return out_path


def _image_card(label: str, path: Path) -> str:
    if path.exists():
        b64 = base64.b64encode(path.read_bytes()).decode()
        body = f'<img src="data:image/png;base64,{b64}" alt="{label}">'
    else:
        body = "<p>Image missing.</p>"
    return f"""
    <div class="card">
        <h3>{label}</h3>
        {body}
        <p class="path">{html_module.escape(str(path))}</p>
    </div>
    """
