"""
Japanese reading collation.

Sort keys for kana readings in gojūon order. Levels, most significant first:

1. base kana: hiragana folded to katakana, small kana to large, voicing
   marks removed (カ == ガ == か). The long-vowel mark ー stands for the vowel
   of the kana before it (ユーコ == ユウコ) and the iteration marks ヽ ヾ ゝ ゞ
   repeat the kana before them.
2. voicing: plain < voiced (゛) < semi-voiced (゜), compared left to right
3. size: small kana before large (ァ < ア)
4. expansion: ー and iteration marks before the kana they stand for
5. script: hiragana before katakana
6. the raw string, so the order is total

Half-width katakana are widened first (NFKC).
"""

from __future__ import annotations

import unicodedata

_VOICED = "\u3099"
_SEMI_VOICED = "\u309a"
_MARK_WEIGHTS = {_VOICED: 1, _SEMI_VOICED: 2}

_HIRAGANA_FIRST = "\u3041"  # ぁ
_HIRAGANA_LAST = "\u3096"  # ゖ
_KATAKANA_OFFSET = 0x60

_SMALL_TO_LARGE = str.maketrans("ァィゥェォッャュョヮヵヶ", "アイウエオツヤユヨワカケ")

_LONG_VOWEL = "\u30fc"  # ー
# iteration mark -> voicing of the repeated kana
_ITERATION_MARKS = {"\u30fd": 0, "\u30fe": 1, "\u309d": 0, "\u309e": 1}  # ヽ ヾ ゝ ゞ
_HIRAGANA_ITERATION_MARKS = ("\u309d", "\u309e")

# each column starts with its vowel
_VOWEL_COLUMNS = (
    "アカサタナハマヤラワ",
    "イキシチニヒミリヰ",
    "ウクスツヌフムユル",
    "エケセテネヘメレヱ",
    "オコソトノホモヨロヲ",
)
_VOWEL_OF = {kana: column[0] for column in _VOWEL_COLUMNS for kana in column}

CollationKey = tuple[
    str, tuple[int, ...], tuple[int, ...], tuple[int, ...], tuple[int, ...], str
]


def to_katakana(ch: str) -> str:
    if _HIRAGANA_FIRST <= ch <= _HIRAGANA_LAST:
        return chr(ord(ch) + _KATAKANA_OFFSET)
    return ch


def collation_key(text: str) -> CollationKey:
    """Build a sort key for a kana reading. Empty text sorts first."""
    text = text or ""
    widened = unicodedata.normalize("NFKC", text)

    bases: list[str] = []
    voicing: list[int] = []
    sizes: list[int] = []
    expansions: list[int] = []
    scripts: list[int] = []

    for ch in widened:
        if ch in _MARK_WEIGHTS and voicing:
            voicing[-1] += _MARK_WEIGHTS[ch]
            continue

        if ch == _LONG_VOWEL and bases and bases[-1] in _VOWEL_OF:
            bases.append(_VOWEL_OF[bases[-1]])
            voicing.append(0)
            sizes.append(1)
            expansions.append(0)
            scripts.append(1)
            continue

        if ch in _ITERATION_MARKS and bases:
            bases.append(bases[-1])
            voicing.append(_ITERATION_MARKS[ch])
            sizes.append(1)
            expansions.append(0)
            scripts.append(0 if ch in _HIRAGANA_ITERATION_MARKS else 1)
            continue

        is_hiragana = _HIRAGANA_FIRST <= ch <= _HIRAGANA_LAST
        decomposed = unicodedata.normalize("NFD", to_katakana(ch))
        base = decomposed[0]
        large = base.translate(_SMALL_TO_LARGE)

        bases.append(large)
        voicing.append(sum(_MARK_WEIGHTS.get(m, 0) for m in decomposed[1:]))
        sizes.append(0 if large != base else 1)
        expansions.append(1)
        scripts.append(0 if is_hiragana else 1)

    return (
        "".join(bases),
        tuple(voicing),
        tuple(sizes),
        tuple(expansions),
        tuple(scripts),
        text,
    )
