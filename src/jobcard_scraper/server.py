"""
Idle HTTP listener.

Keeps the process alive after the scrape. The Flask app registers no
routes, so every request gets Flask's default 404 page.
"""

import logging
import threading

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    return Flask(__name__)


def start_listener(host: str, port: int) -> BaseWSGIServer:
    """Bind the listener and serve it from a daemon thread. werkzeug exits with SystemExit when the port is taken."""
    server = make_server(host, port, create_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    logger.info("server running on port %d", server.server_port)
    return server


def stop_listener(server: BaseWSGIServer):
    server.shutdown()
    server.server_close()
