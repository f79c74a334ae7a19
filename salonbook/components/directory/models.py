"""
Directory component - Data models.
"""

from __future__ import annotations

from enum import Enum

from salonbook.domain.entities import Customer

# --- Enums ---


class PhoneticRow(str, Enum):
    """The eleven gojūon row labels, in display order."""

    A = "あ行"
    KA = "か行"
    SA = "さ行"
    TA = "た行"
    NA = "な行"
    HA = "は行"
    MA = "ま行"
    YA = "や行"
    RA = "ら行"
    WA = "わ行"
    OTHER = "他"


# Katakana code point ranges per row, plain and voiced/semi-voiced forms.
ROW_RANGES: dict[PhoneticRow, tuple[tuple[str, str], ...]] = {
    PhoneticRow.A: (("ア", "オ"),),
    PhoneticRow.KA: (("カ", "コ"), ("ガ", "ゴ")),
    PhoneticRow.SA: (("サ", "ソ"), ("ザ", "ゾ")),
    PhoneticRow.TA: (("タ", "ト"), ("ダ", "ド")),
    PhoneticRow.NA: (("ナ", "ノ"),),
    PhoneticRow.HA: (("ハ", "ホ"), ("バ", "ボ"), ("パ", "ポ")),
    PhoneticRow.MA: (("マ", "モ"),),
    PhoneticRow.YA: (("ヤ", "ヨ"),),
    PhoneticRow.RA: (("ラ", "ロ"),),
    PhoneticRow.WA: (("ワ", "ン"),),
}

GroupedCustomers = dict[PhoneticRow, tuple[Customer, ...]]
