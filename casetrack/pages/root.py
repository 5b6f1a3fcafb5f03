"""Placeholder page served when the front-end bundle has not been built."""

from html import escape


def render_backend_running_page(app_name: str, port: int, static_dir: str) -> str:
    """Return HTML stating that the API is up but no bundle was found."""
    name = escape(app_name)
    folder = escape(static_dir)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name} backend</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            padding: 2rem;
            color: #222;
        }}
        code {{
            font-family: ui-monospace, monospace;
            background: #f2f2f2;
            padding: 0.1rem 0.3rem;
        }}
        .warning {{ color: #8a5a00; }}
    </style>
</head>
<body>
    <h1>Backend running on port {port}</h1>
    <p>The API server is up. See <a href="/docs">/docs</a> for the v1 API.</p>
    <hr/>
    <p class="warning"><strong>Warning:</strong> the front-end bundle was not found in
    <code>{folder}</code>.</p>
    <p>Build the front-end into that folder and restart the server.</p>
</body>
</html>
"""
