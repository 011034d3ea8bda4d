# api/gold/price/details.py
from http.server import BaseHTTPRequestHandler

# Import fallback to avoid Vercel module-path edge cases
try:
    from ..._cache import QUOTE_CACHE
    from ..._metalprice import UpstreamError, build_fetch_url, fetch_latest_rates, is_valid_payload
    from ..._pricing import compute_price_details
    from ..._settings import load_settings
    from ..._utils import CorsMixin, get_logger, send_json
except Exception:
    from api._cache import QUOTE_CACHE
    from api._metalprice import UpstreamError, build_fetch_url, fetch_latest_rates, is_valid_payload
    from api._pricing import compute_price_details
    from api._settings import load_settings
    from api._utils import CorsMixin, get_logger, send_json


logger = get_logger("gold-rate-proxy")

_SETTINGS = None


def _get_settings():
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def get_price_details(cache=None, settings=None) -> dict:
    """
    Cached payload if younger than the cache TTL; otherwise fetch, convert and store.

    When upstream reports failure, any cached payload (whatever its age) is
    returned as-is without touching its timestamp. With nothing cached,
    UpstreamError is raised with the upstream body attached.
    """
    cache = cache if cache is not None else QUOTE_CACHE
    settings = settings if settings is not None else _get_settings()

    cached = cache.get_fresh()
    if cached is not None:
        logger.info("Serving from cache (age %.1fs)...", cache.age() or 0.0)
        return cached

    logger.info("Fetching fresh data from MetalPrice API...")
    url = build_fetch_url(settings.api_url, settings.api_key)
    data = fetch_latest_rates(url, timeout=settings.timeout)

    if not is_valid_payload(data):
        logger.error("MetalPrice API Error response: %s", data)

        stale = cache.get_any()
        if stale is not None:
            logger.warning("Fallback to stale cache due to API error.")
            return stale

        raise UpstreamError(data)

    payload = compute_price_details(data["rates"])
    cache.store(payload)
    return payload


def serve_price_details(handler_obj):
    try:
        return send_json(handler_obj, 200, get_price_details())
    except UpstreamError as e:
        return send_json(handler_obj, 500, {"error": str(e), "details": e.details})
    except Exception:
        logger.exception("Error calculating metal prices")
        return send_json(handler_obj, 500, {"error": "Internal Server Error"})


class handler(CorsMixin, BaseHTTPRequestHandler):
    def do_GET(self):
        return serve_price_details(self)

    def do_HEAD(self):
        return serve_price_details(self)

    def log_message(self, format, *args):
        return
