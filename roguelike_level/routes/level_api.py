"""
project: Roguelike Level
module: level_api.py
License: MIT

Level generation API routes.

These endpoints only serialize what :func:`generate_level` returns; they own
no generation logic. Seeds may be integers or arbitrary strings (hashed to a
stable integer) so that a shared link always reproduces the same level.
"""

import hashlib
import random
import threading
from dataclasses import astuple

from flask import Blueprint, Response, current_app, jsonify, request

from roguelike_level.level import LevelConfig, LevelConfigError, LevelGenerationError, generate_level
from roguelike_level.level.render import to_ascii
from roguelike_level.logging_utils import get_logger
from roguelike_level.utils.coord_compress import encode_coords

bp_level = Blueprint("level", __name__)
log = get_logger("level.api")

SEED_MAX = 2**31 - 1
_ROOM_ARGS = ("min_width", "max_width", "min_height", "max_height", "ideal")
_TRUE = {"1", "true", "yes", "on"}

# Small in-process cache (seed, config) -> LevelResult. Locked because the
# dev server may serve requests from several threads.
_level_cache = {}
_level_cache_lock = threading.Lock()


def _coerce_seed(payload_seed):
    """Convert a provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, bool):
        raise LevelConfigError("seed must be an integer or string")
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX
    raise LevelConfigError("seed must be an integer or string")


def _config_from_args(args) -> dict:
    """Map flat query args onto the nested config shape."""
    data = {k: args.get(k) for k in ("width", "height", "retry") if args.get(k) is not None}
    room = {k: args.get(k) for k in _ROOM_ARGS if args.get(k) is not None}
    if room:
        data["room"] = room
    if args.get("special") is not None:
        data["special"] = args.get("special")
    return data


def _build_config(data, seed) -> LevelConfig:
    try:
        config = LevelConfig.from_mapping(data)
    except (TypeError, ValueError) as exc:
        raise LevelConfigError(f"invalid level config: {exc}") from exc
    config.seed = seed
    return config.validate()


def get_cached_level(config: LevelConfig):
    if current_app.config.get("LEVEL_DISABLE_CACHE"):
        return generate_level(config)
    key = astuple(config)
    with _level_cache_lock:
        level = _level_cache.get(key)
    if level is not None:
        return level
    level = generate_level(config)
    with _level_cache_lock:
        _level_cache[key] = level
        if len(_level_cache) > current_app.config.get("LEVEL_CACHE_MAX", 8):
            first_key = next(iter(_level_cache.keys()))
            if first_key != key:
                _level_cache.pop(first_key, None)
    return level


def _generate_from_request():
    if request.method == "POST":
        body = request.get_json(silent=True) or {}
        seed = _coerce_seed(body.get("seed"))
        config = _build_config(body, seed)
    else:
        seed = _coerce_seed(request.args.get("seed"))
        config = _build_config(_config_from_args(request.args), seed)
    return get_cached_level(config)


@bp_level.errorhandler(LevelConfigError)
def _bad_config(exc):
    return jsonify({"error": str(exc)}), 400


@bp_level.errorhandler(LevelGenerationError)
def _generation_failed(exc):
    log.info(event="level_request_failed", which=exc.which)
    return jsonify({"error": str(exc), "which": exc.which}), 422


@bp_level.route("/api/level", methods=["GET", "POST"])
def level_json():
    """
    Generate (or fetch from cache) a level and return it as JSON.

    GET args: seed, width, height, retry, special, min_width, max_width,
    min_height, max_height, ideal, compact. POST takes the same settings as a
    nested JSON body ({"width":.., "room": {"ideal":..}, "seed":..}).
    Response: the level fields plus ``metrics``; with ``compact=1`` the wall
    list is delta-encoded into a string.
    """
    level = _generate_from_request()
    data = level.to_dict()
    data["metrics"] = level.metrics
    if request.args.get("compact", "").lower() in _TRUE:
        data["walls"] = encode_coords(level.walls)
    return jsonify(data)


@bp_level.route("/api/level/ascii", methods=["GET"])
def level_ascii():
    level = _generate_from_request()
    body = to_ascii(level) + "\n"
    return Response(body, mimetype="text/plain", headers={"X-Level-Seed": str(level.seed)})
