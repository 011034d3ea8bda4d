"""
Standalone server: the price endpoint plus static files from public/.
On Vercel the endpoint is served directly by api/gold/price/details.py.
"""

import argparse
import logging
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlparse

from api._settings import load_settings
from api._utils import CorsMixin, get_logger
from api.gold.price.details import serve_price_details


PRICE_DETAILS_PATH = "/api/gold/price/details"

logger = get_logger("gold-rate-proxy")


class AppHandler(CorsMixin, SimpleHTTPRequestHandler):
    def _is_price_details(self) -> bool:
        return urlparse(self.path).path.rstrip("/") == PRICE_DETAILS_PATH

    def do_GET(self):
        if self._is_price_details():
            return serve_price_details(self)
        return super().do_GET()

    def do_HEAD(self):
        if self._is_price_details():
            return serve_price_details(self)
        return super().do_HEAD()

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)


def make_server(host: str, port: int, static_dir: str) -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), partial(AppHandler, directory=static_dir))


def run_server(host: str, port: int, static_dir: str) -> None:
    server = make_server(host, port, static_dir)
    logger.info("Server is running on port %s", server.server_address[1])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


def parse_args(settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gold/silver INR price proxy")
    parser.add_argument("--host", default="0.0.0.0", help="listen address")
    parser.add_argument("--port", type=int, default=settings.port, help="listen port (PORT)")
    parser.add_argument("--static-dir", default=settings.static_dir, help="static files directory (STATIC_DIR)")
    return parser.parse_args()


def main() -> None:
    settings = load_settings()
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    args = parse_args(settings)
    run_server(host=args.host, port=args.port, static_dir=args.static_dir)


if __name__ == "__main__":
    main()
