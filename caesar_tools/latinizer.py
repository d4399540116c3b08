# caesar_tools/latinizer.py
"""
French alphabet -> pure latin (a..z) transcription.

Accented letters lose their accent, the cedilla is dropped and the
ligatures are split into their two letters. Anything outside the
French alphabet (spaces, digits, punctuation...) disappears.
"""

# ==============================
#  Transcription table
# ==============================
FRENCH_TO_LATIN = {
    "à": "a", "â": "a",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "î": "i", "ï": "i",
    "ô": "o",
    "ù": "u", "û": "u", "ü": "u",
    "ÿ": "y",
    "ç": "c",
    "æ": "ae",
    "œ": "oe",
}

LATIN = frozenset("abcdefghijklmnopqrstuvwxyz")


def latinize(ch: str) -> str:
    """Return the latin fragment ('', one or two letters) for one character."""
    out = []
    # lower() may yield more than one code point (e.g. "İ")
    for c in ch.lower():
        c = FRENCH_TO_LATIN.get(c, c)
        if c in LATIN or c in ("ae", "oe"):
            out.append(c)
    return "".join(out)


def normalize(text: str) -> str:
    return "".join(latinize(ch) for ch in text)
