from typing import Dict

ACCENT_MAP: Dict[str, str] = {
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "Ā": "A", "ā": "a", "Ă": "A", "ă": "a", "Ą": "A", "ą": "a",
    "Ç": "C", "ç": "c", "Ć": "C", "ć": "c", "Ĉ": "C", "ĉ": "c",
    "Ċ": "C", "ċ": "c", "Č": "C", "č": "c", "Ď": "D", "ď": "d",
    "Đ": "D", "đ": "d", "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "è": "e", "é": "e", "ê": "e", "ë": "e", "Ē": "E", "ē": "e",
    "Ĕ": "E", "ĕ": "e", "Ė": "E", "ė": "e", "Ę": "E", "ę": "e",
    "Ě": "E", "ě": "e", "Ĝ": "G", "ĝ": "g", "Ğ": "G", "ğ": "g",
    "Ġ": "G", "ġ": "g", "Ģ": "G", "ģ": "g", "Ĥ": "H", "ĥ": "h",
    "Ħ": "H", "ħ": "h", "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "ì": "i", "í": "i", "î": "i", "ï": "i", "Ĩ": "I", "ĩ": "i",
    "Ī": "I", "ī": "i", "Ĭ": "I", "ĭ": "i", "Į": "I", "į": "i",
    "İ": "I", "ı": "i", "Ĵ": "J", "ĵ": "j", "Ķ": "K", "ķ": "k",
    "ĸ": "k", "Ĺ": "L", "ĺ": "l", "Ļ": "L", "ļ": "l", "Ľ": "L",
    "ľ": "l", "Ŀ": "L", "ŀ": "l", "Ł": "L", "ł": "l", "Ñ": "N",
    "ñ": "n", "Ń": "N", "ń": "n", "Ņ": "N", "ņ": "n", "Ň": "N",
    "ň": "n", "ŉ": "n", "Ŋ": "N", "ŋ": "n", "Ò": "O", "Ó": "O",
    "Ô": "O", "Õ": "O", "Ö": "O", "Ø": "O", "ò": "o", "ó": "o",
    "ô": "o", "õ": "o", "ö": "o", "ø": "o", "Ō": "O", "ō": "o",
    "Ŏ": "O", "ŏ": "o", "Ő": "O", "ő": "o", "Ŕ": "R", "ŕ": "r",
    "Ŗ": "R", "ŗ": "r", "Ř": "R", "ř": "r", "Ś": "S", "ś": "s",
    "Ŝ": "S", "ŝ": "s", "Ş": "S", "ş": "s", "Š": "S", "š": "s",
    "Ţ": "T", "ţ": "t", "Ť": "T", "ť": "t", "Ŧ": "T", "ŧ": "t",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U", "ù": "u", "ú": "u",
    "û": "u", "ü": "u", "Ũ": "U", "ũ": "u", "Ū": "U", "ū": "u",
    "Ŭ": "U", "ŭ": "u", "Ů": "U", "ů": "u", "Ű": "U", "ű": "u",
    "Ų": "U", "ų": "u", "Ŵ": "W", "ŵ": "w", "Ŷ": "Y", "ŷ": "y",
    "Ÿ": "Y", "Ź": "Z", "ź": "z", "Ż": "Z", "ż": "z", "Ž": "Z",
    "ž": "z", "ſ": "s",
}


def normalize_text(text: str) -> str:
    """Lowercase ``text`` and strip the accents listed in ``ACCENT_MAP``.

    Characters outside the table, non-Latin scripts included, pass through.
    """
    if not text:
        return ""
    normalized = text.lower()
    # str.lower maps "İ" to "i" plus a combining dot above
    normalized = normalized.replace("i\u0307", "i")
    for accent, replacement in ACCENT_MAP.items():
        normalized = normalized.replace(accent, replacement)
    return normalized
