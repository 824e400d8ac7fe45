"""
Sandboxed preview of untrusted HTML artifacts.

Proxy artifacts are third-party markup. They are only ever rendered
inside a sandbox with scripting, same-origin access, forms and popups
disabled:

- Inline: <iframe sandbox="" srcdoc="..."> via iframe_srcdoc()
- Standalone: served with a "Content-Security-Policy: sandbox" header
  via sandboxed_response()
"""

import html

from fastapi.responses import HTMLResponse

# An empty sandbox directive list enables every restriction.
SANDBOX_CSP = "sandbox; default-src 'none'; img-src * data:; style-src * 'unsafe-inline'"

SANDBOX_HEADERS = {
    "Content-Security-Policy": SANDBOX_CSP,
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


def iframe_srcdoc(artifact: str, title: str = "HTML Preview") -> str:
    """
    Embed artifact in a fully sandboxed iframe.

    The artifact is attribute-escaped, so it cannot break out of srcdoc.
    """
    return (
        f'<iframe sandbox="" title="{html.escape(title)}" '
        f'srcdoc="{html.escape(artifact, quote=True)}"></iframe>'
    )


def sandboxed_response(artifact: str) -> HTMLResponse:
    """Serve artifact as a standalone document under a sandbox CSP."""
    return HTMLResponse(content=artifact, headers=SANDBOX_HEADERS)
