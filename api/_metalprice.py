import requests


# base=USD: rates come back as units of currency/metal per 1 USD.
# EUR is not used in any calculation but stays in the request for compatibility.
BASE_CURRENCY = "USD"
CURRENCIES = ("EUR", "XAU", "XAG", "INR")

USER_AGENT = "GoldRateProxy/1.0"


class UpstreamError(RuntimeError):
    """
    Upstream answered but reported failure (or returned no rates).
    `details` keeps the raw upstream payload for diagnostics.
    """

    def __init__(self, details, message: str = "Failed to fetch rates from MetalPrice API"):
        super().__init__(message)
        self.details = details


def _join(url: str, param: str) -> str:
    return url + ("&" if "?" in url else "?") + param


def build_fetch_url(base_url: str, api_key: str = "") -> str:
    """
    Adds api_key only when configured and not already part of the URL,
    then the fixed base/currencies selection.
    """
    url = base_url
    if api_key and "api_key=" not in url:
        url = _join(url, f"api_key={api_key}")

    return _join(url, f"base={BASE_CURRENCY}&currencies={','.join(CURRENCIES)}")


def fetch_latest_rates(url: str, timeout=None):
    """
    Single GET, no retry. Returns the decoded JSON body whatever the HTTP status;
    the body's `success` flag decides. Network errors and non-JSON bodies raise.
    """
    r = requests.get(
        url,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        timeout=timeout,
    )
    return r.json()


def is_valid_payload(data) -> bool:
    # An empty rates mapping still passes; missing XAU/XAG/INR fail later in the conversion.
    return isinstance(data, dict) and bool(data.get("success")) and isinstance(data.get("rates"), dict)
