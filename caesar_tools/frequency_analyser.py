from collections import Counter

from caesar_tools.caesar import ALPHABET
from caesar_tools.latinizer import normalize

# French letter frequencies (a..z), per mille-ish weights
# https://fr.wikipedia.org/wiki/Fr%C3%A9quence_d%27apparition_des_lettres_en_fran%C3%A7ais
FRENCH_FREQUENCIES = (
    711, 114, 318, 367, 1210, 111, 123, 111, 659, 34,
    29, 496, 262, 639, 502, 249, 65, 607, 651, 592,
    449, 111, 17, 38, 46, 15,
)


def letter_counts(s: str) -> list:
    """Occurrences of each letter a..z in a pure latin string."""
    freq = Counter(s)
    return [freq.get(letter, 0) for letter in ALPHABET]


def score(candidate: str) -> int:
    """
    Weighted letter count: the more the text looks like French, the higher.
    Purely a relative ranking signal, '' scores 0.
    """
    return sum(n * w for n, w in zip(letter_counts(candidate), FRENCH_FREQUENCIES))


def analyse(text):
    message = normalize(text)
    freq = Counter(message)
    # (letter, count) sorted by count desc, then letter
    freq_dist = sorted(freq.items(), key=lambda x: (-x[1], x[0]))
    return {
        "letters": len(message),
        "frequencies": freq_dist,
        "score": score(message),
    }
