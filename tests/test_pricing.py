import pytest

from api._pricing import CUSTOMS_DUTY, GST, TROY_OUNCE_GRAMS, compute_price_details, convert_metal, invert_rate


RATES = {"XAU": 0.00059, "XAG": 0.047, "INR": 83.2, "EUR": 0.92}

EXPECTED_KEYS = [
    "goldPricePerGramInr",
    "silverPricePerGramInr",
    "xauUsd",
    "xagUsd",
    "usdInr",
    "goldInrPerOunce",
    "goldAfterCustoms",
    "goldAfterGst",
    "silverInrPerOunce",
    "silverAfterCustoms",
    "silverAfterGst",
]


def test_constants():
    assert CUSTOMS_DUTY == 1.06
    assert GST == 1.03
    assert TROY_OUNCE_GRAMS == 31.103


def test_invert_rate():
    assert invert_rate(0.5) == 2.0
    assert invert_rate("0.25") == 4.0


def test_convert_metal_breakdown():
    ounce, customs, gst, gram = convert_metal(2000.0, 80.0)

    assert ounce == 160000.0
    assert customs == ounce * 1.06
    assert gst == customs * 1.03
    assert gram == gst / 31.103


@pytest.mark.parametrize(
    "rates",
    [
        RATES,
        {"XAU": 0.000412, "XAG": 0.0321, "INR": 84.07},
        {"XAU": 1, "XAG": 1, "INR": 1},
    ],
)
def test_per_gram_formula_is_exact(rates):
    out = compute_price_details(rates)

    assert out["goldPricePerGramInr"] == ((1 / rates["XAU"]) * rates["INR"] * 1.06 * 1.03) / 31.103
    assert out["silverPricePerGramInr"] == ((1 / rates["XAG"]) * rates["INR"] * 1.06 * 1.03) / 31.103


def test_worked_example():
    out = compute_price_details(RATES)

    assert out["xauUsd"] == pytest.approx(1694.915, abs=1e-3)
    assert out["goldInrPerOunce"] == pytest.approx(141016.95, abs=0.01)
    assert out["goldAfterCustoms"] == pytest.approx(149477.97, abs=0.01)
    assert out["goldAfterGst"] == pytest.approx(153962.31, abs=0.01)
    assert out["goldPricePerGramInr"] == pytest.approx(4950.08, abs=0.01)
    assert out["usdInr"] == 83.2


def test_payload_has_full_breakdown_in_order():
    out = compute_price_details(RATES)

    assert list(out.keys()) == EXPECTED_KEYS
    assert all(isinstance(v, float) for v in out.values())


@pytest.mark.parametrize(
    "rates, exc",
    [
        ({"XAG": 0.047, "INR": 83.2}, KeyError),
        ({"XAU": 0.00059, "XAG": 0.047}, KeyError),
        ({"XAU": "n/a", "XAG": 0.047, "INR": 83.2}, ValueError),
        ({"XAU": None, "XAG": 0.047, "INR": 83.2}, TypeError),
        ({"XAU": 0, "XAG": 0.047, "INR": 83.2}, ZeroDivisionError),
    ],
)
def test_invalid_rates_raise(rates, exc):
    with pytest.raises(exc):
        compute_price_details(rates)
