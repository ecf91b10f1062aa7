"""
project: Roguelike Level
module: __init__.py
License: MIT

Flask application factory for the level service.

The generator itself lives in :mod:`roguelike_level.level` and has no web
dependencies; this factory only wires the JSON blueprint that serializes
generated levels. Configuration is sourced from environment variables (a
local ``.env`` is loaded when present).
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so LEVEL_* and ROGUELIKE_LOG_* can be supplied
# without exporting shell variables during development.
load_dotenv()

__version__ = "0.1.0"


def create_app(overrides=None):
    """Return a new Flask app with the level blueprint registered."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.update(
        LEVEL_DISABLE_CACHE=os.getenv("LEVEL_DISABLE_CACHE", "0") == "1",
        LEVEL_CACHE_MAX=int(os.getenv("LEVEL_CACHE_MAX", "8")),
    )
    if overrides:
        app.config.update(overrides)

    from roguelike_level.routes.level_api import bp_level

    app.register_blueprint(bp_level)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app
