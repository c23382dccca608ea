"""HTML landing page linking every demo endpoint."""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from podprobe.api.deps import get_app_settings, get_clock
from podprobe.config import Settings
from podprobe.services import system_info
from podprobe.services.clock import ProcessClock

router = APIRouter()

# (icon, title, href, description)
_CARDS = [
    ("🩺", "Health", "/healthz", "Liveness probe endpoint"),
    ("✅", "Ready", "/readyz", "Readiness probe endpoint"),
    ("🔍", "Container Info", "/info", "Runtime environment &amp; system details"),
    ("🧮", "Fibonacci", "/fib?n=40", "CPU stress test via naive recursion"),
    ("💥", "Crash Test", "/crash", "Trigger a crash &mdash; test restart policy"),
    ("📊", "Metrics", "/metrics", "Prometheus-style metrics"),
]

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>🐍 Python on OpenShift</title>
<style>
  :root {{ --accent: #3776ab; --bg: #0d1117; --card: #161b22; --text: #c9d1d9; --dim: #8b949e; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: 'Segoe UI', system-ui, sans-serif; background: var(--bg); color: var(--text); min-height: 100vh; display: flex; align-items: center; justify-content: center; }}
  .container {{ max-width: 720px; width: 90%; padding: 2rem; }}
  h1 {{ font-size: 2.5rem; margin-bottom: 0.25rem; }}
  h1 span {{ color: var(--accent); }}
  .subtitle {{ color: var(--dim); font-size: 1.1rem; margin-bottom: 2rem; }}
  .hostname {{ background: var(--card); border: 1px solid #30363d; border-radius: 8px; padding: 1rem 1.25rem; margin-bottom: 2rem; font-family: monospace; }}
  .hostname strong {{ color: var(--accent); }}
  .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1rem; margin-bottom: 2rem; }}
  .card {{ background: var(--card); border: 1px solid #30363d; border-radius: 8px; padding: 1.25rem; }}
  .card:hover {{ border-color: var(--accent); }}
  .card h3 {{ font-size: 0.85rem; text-transform: uppercase; letter-spacing: 0.05em; color: var(--dim); margin-bottom: 0.5rem; }}
  .card a {{ color: var(--accent); text-decoration: none; font-family: monospace; }}
  .card p {{ color: var(--dim); font-size: 0.85rem; margin-top: 0.4rem; }}
  .footer {{ color: var(--dim); font-size: 0.8rem; text-align: center; margin-top: 1rem; }}
</style>
</head>
<body>
<div class="container">
  <h1>🐍 <span>Python</span> on OpenShift</h1>
  <p class="subtitle">A lightweight container demo &mdash; running and ready.</p>

  <div class="hostname">
    <strong>Pod:</strong> {hostname} &nbsp;|&nbsp;
    <strong>Uptime:</strong> <span class="uptime">{uptime}s</span> &nbsp;|&nbsp;
    <strong>UID:</strong> {uid}
  </div>

  <div class="grid">
{cards}
  </div>

  <p class="footer">podprobe v{version} &bull; FastAPI &bull; uvicorn</p>
</div>
</body>
</html>"""

_CARD = """    <div class="card">
      <h3>{icon} {title}</h3>
      <a href="{href}">{href}</a>
      <p>{description}</p>
    </div>"""


def render_landing_page(hostname: str, uptime: int, uid: int, version: str) -> str:
    cards = "\n".join(
        _CARD.format(icon=icon, title=title, href=href, description=description)
        for icon, title, href, description in _CARDS
    )
    return _PAGE.format(
        hostname=escape(hostname),
        uptime=uptime,
        uid=uid,
        cards=cards,
        version=escape(version),
    )


@router.get("/", response_class=HTMLResponse)
async def landing_page(
    clock: ProcessClock = Depends(get_clock),
    settings: Settings = Depends(get_app_settings),
) -> str:
    return render_landing_page(
        hostname=system_info.get_hostname(),
        uptime=clock.uptime_seconds(),
        uid=system_info.get_user_id(),
        version=settings.app_version,
    )
