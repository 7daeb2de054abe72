"""
Cyrillic -> Latin transliteration following the Bulgarian streamlined system.
"""

_LOWER_MAP = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l",
    "м": "m", "н": "n", "о": "o", "п": "p", "р": "r", "с": "s",
    "т": "t", "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "sht", "ъ": "a", "ь": "y", "ю": "yu", "я": "ya",
}


def transliterate(text: str) -> str:
    """
    Transliterate Bulgarian Cyrillic to Latin.

    Георги -> Georgi, Щерьо -> Shteryo, Цветан -> Tsvetan.
    An uppercase letter maps to a capitalized digraph (Ж -> Zh).
    Characters outside the Bulgarian alphabet are kept as-is.
    """
    if not text or not isinstance(text, str):
        return ""

    out = []
    for ch in text:
        lower = ch.lower()
        latin = _LOWER_MAP.get(lower)
        if latin is None:
            out.append(ch)
        elif ch != lower:
            out.append(latin.capitalize())
        else:
            out.append(latin)
    return "".join(out)
