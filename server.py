"""
Golf scoreboard proxy.

GET /api/golf returns the ESPN PGA scoreboard (cached for a few minutes),
or the fixed fallback snapshot when ESPN is unavailable. CORS is open so a
browser page on any origin can read it.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

import config
import scoreboard_feed

log = logging.getLogger(__name__)


def create_app():
    app = Flask(__name__, static_folder=None)
    CORS(app)

    @app.get("/api/golf")
    def golf_scoreboard():
        payload, source = scoreboard_feed.get_scoreboard()
        log.info("GET /api/golf -> %s data", source)
        return jsonify(payload), 200

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    return app


app = create_app()


if __name__ == "__main__":
    config.configure_logging()
    log.info("Starting scoreboard proxy on %s:%d", config.SERVER_HOST, config.SERVER_PORT)
    app.run(host=config.SERVER_HOST, port=config.SERVER_PORT)
