import math

import config
from formatting import UNAVAILABLE, arbitrage_label, fmt2, fmt_inv_sum, fmt_money, roi_label
from models import ArbitrageStatus, RoiStatus


def test_fmt2():
    assert fmt2(0.125) == "0.13"
    assert fmt2(1000) == "1000.00"
    assert fmt2(math.nan) == UNAVAILABLE
    assert fmt2(None) == UNAVAILABLE


def test_fmt_money_appends_currency():
    assert fmt_money(12.5) == f"12.50 {config.CURRENCY}"
    assert fmt_money(math.inf) == UNAVAILABLE


def test_fmt_inv_sum():
    assert fmt_inv_sum(0.952381) == "0.952381"
    assert fmt_inv_sum(math.inf) == UNAVAILABLE


def test_arbitrage_label():
    assert arbitrage_label(None) == "CHECK INPUT"
    label = arbitrage_label(ArbitrageStatus(is_arb=True, inverse_odds_sum=0.95))
    assert label.startswith("ARB: yes")
    assert "0.950000" in label


def test_roi_label_names_the_reference_row():
    label = roi_label(RoiStatus(value=0.05, ref_row_index=1, mode="fixed"))
    assert label == "ROI 5.00% by F (2)"
    assert roi_label(None) == UNAVAILABLE
