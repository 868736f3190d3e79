"""Shared builders for search page markup and mocked HTTP responses."""

from unittest.mock import MagicMock


def card(*spans, heading="h2"):
    inner = "".join(f"<span>{s}</span>" for s in spans)
    return f'<div class="jobCard_mainContent"><{heading}>{inner}</{heading}></div>'


def page(*cards):
    return "<html><body>" + "".join(cards) + "</body></html>"


def make_response(text, status_code=200, content_type="text/html; charset=utf-8"):
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type}
    response.text = text
    response.content = text.encode("utf-8")
    return response
