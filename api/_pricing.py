CUSTOMS_DUTY = 1.06  # 6% import customs
GST = 1.03  # 3% GST, applied after customs
TROY_OUNCE_GRAMS = 31.103


def invert_rate(value) -> float:
    """
    Upstream quotes units of metal per 1 USD (base=USD).
    Inverting gives USD per troy ounce of metal.
    """
    return 1 / float(value)


def convert_metal(usd_per_ounce: float, usd_inr: float):
    """
    Returns (inr_per_ounce, after_customs, after_gst, price_per_gram_inr).
    Order of operations matters for exact float results.
    """
    inr_per_ounce = usd_per_ounce * usd_inr
    after_customs = inr_per_ounce * CUSTOMS_DUTY
    after_gst = after_customs * GST
    per_gram = after_gst / TROY_OUNCE_GRAMS
    return inr_per_ounce, after_customs, after_gst, per_gram


def compute_price_details(rates: dict) -> dict:
    """
    Builds the response payload from an upstream `rates` mapping.
    Missing or non-numeric XAU/XAG/INR raise (KeyError/TypeError/ValueError),
    and a zero metal rate raises ZeroDivisionError.
    """
    xau_usd = invert_rate(rates["XAU"])
    xag_usd = invert_rate(rates["XAG"])
    usd_inr = float(rates["INR"])

    gold_ounce, gold_customs, gold_gst, gold_gram = convert_metal(xau_usd, usd_inr)
    silver_ounce, silver_customs, silver_gst, silver_gram = convert_metal(xag_usd, usd_inr)

    return {
        "goldPricePerGramInr": gold_gram,
        "silverPricePerGramInr": silver_gram,
        "xauUsd": xau_usd,
        "xagUsd": xag_usd,
        "usdInr": usd_inr,
        # Calculation breakdown
        "goldInrPerOunce": gold_ounce,
        "goldAfterCustoms": gold_customs,
        "goldAfterGst": gold_gst,
        "silverInrPerOunce": silver_ounce,
        "silverAfterCustoms": silver_customs,
        "silverAfterGst": silver_gst,
    }
