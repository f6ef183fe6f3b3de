"""HTML rendering for the monitor page."""

import html

from netrum_monitor.mining.models import MonitorPage


PAGE_STYLE = """
    body {
      font-family: sans-serif;
      padding: 2rem;
      max-width: 700px;
      margin: auto;
    }
    input[type="text"] {
      width: 100%;
      padding: 0.5rem;
      font-size: 1rem;
    }
    button {
      margin-top: 1rem;
      padding: 0.6rem 1.2rem;
      font-size: 1rem;
    }
    .status {
      margin-top: 2rem;
      font-family: monospace;
      font-size: 1.2rem;
      white-space: pre-wrap;
    }
"""


def render_status(page: MonitorPage) -> str:
    """Status block, empty when there is nothing to report."""
    if not page.has_status:
        return ""

    live_line = f"{html.escape(page.live_status)}<br/><br/>" if page.live_status else ""
    activity = "active" if page.mining_active else "stopped"
    return (
        "\n  📊 <b>Mining Status:</b><br/>\n"
        f"  {live_line}\n"
        f"  ⛏ <b>Mining Activity:</b> {activity}\n  "
    )


def render_page(
    live_status: str = "",
    mining_active: bool | None = None,
    address: str | None = None,
) -> str:
    """Render the full monitor page.

    Args:
        live_status: Live status line or error message, "" for none
        mining_active: Activity flag, None when no check ran
        address: Address to prefill in the form

    Returns:
        str: Complete HTML document
    """
    page = MonitorPage(
        live_status=live_status, mining_active=mining_active, address=address or ""
    )
    return render_monitor_page(page)


def render_monitor_page(page: MonitorPage) -> str:
    """Render the full monitor page from a view model."""
    address = html.escape(page.address, quote=True)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>Netrum Mining Monitor</title>
  <style>{PAGE_STYLE}  </style>
</head>
<body>
  <h1>📡 Netrum Node Mining Monitor</h1>
  <p style="color: orange; font-weight: bold;">
  ⏳ Please wait ~30 seconds after submitting. The data may take some time to load.
</p>
  <form method="POST">
    <label for="address">Enter your EVM node address:</label><br />
    <input type="text" id="address" name="address" required value="{address}" />
    <button type="submit">Check Mining</button>
  </form>

  <div class="status">
  {render_status(page)}
</div>
</body>
</html>
"""


__all__ = ["render_monitor_page", "render_page", "render_status"]
