import json
import logging
import os


def _env(name: str, default: str = "") -> str:
    v = (os.environ.get(name) or "").strip()
    return v if v else default


def send_json(handler, status: int, payload: dict):
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    handler.send_response(status)
    handler.send_header("Content-Type", "application/json; charset=utf-8")
    handler.send_header("Cache-Control", "no-store")
    handler.send_header("Content-Length", str(len(body)))
    handler.end_headers()
    if handler.command != "HEAD":
        handler.wfile.write(body)


# =============================================================================
# Logging
# =============================================================================

_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Stream logger with a single handler per name.
    Level comes from LOG_LEVEL (defaults to INFO).
    """
    logger = logging.getLogger(name)
    level = _env("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(ch)
    # own handler only; a root handler set up by the runtime would print twice
    logger.propagate = False
    return logger


# =============================================================================
# CORS (any origin)
# =============================================================================

CORS_ALLOW_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


class CorsMixin:
    """
    Mix in before a BaseHTTPRequestHandler subclass.
    Adds Access-Control-Allow-Origin: * to every response and answers preflights.
    """

    def end_headers(self):
        self.send_header("Access-Control-Allow-Origin", "*")
        super().end_headers()

    def do_OPTIONS(self):
        self.send_response(204)
        self.send_header("Access-Control-Allow-Methods", CORS_ALLOW_METHODS)
        requested = (self.headers.get("Access-Control-Request-Headers") or "").strip()
        if requested:
            self.send_header("Access-Control-Allow-Headers", requested)
            self.send_header("Vary", "Access-Control-Request-Headers")
        self.send_header("Content-Length", "0")
        self.end_headers()
