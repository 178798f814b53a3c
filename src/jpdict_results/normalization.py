from __future__ import annotations

# Katakana letters (ァ..ヶ) map onto hiragana (ぁ..ゖ) at a fixed offset.
_KATAKANA_START = 0x30A1
_KATAKANA_END = 0x30F6
_KANA_OFFSET = 0x60

_ITERATION_MARKS = {
    "ヽ": "ゝ",
    "ヾ": "ゞ",
}


def kana_to_hiragana(text: str) -> str:
    """Fold katakana to hiragana, leaving every other character unchanged."""
    out: list[str] = []
    for ch in text:
        code = ord(ch)
        if _KATAKANA_START <= code <= _KATAKANA_END:
            out.append(chr(code - _KANA_OFFSET))
        else:
            out.append(_ITERATION_MARKS.get(ch, ch))
    return "".join(out)
