"""
Caesar breaker for French text
------------------------------
Tries the 26 keys and ranks the decodings by how French their
letter distribution looks (see frequency_analyser.score).
"""

from typing import List, NamedTuple, Tuple

from caesar_tools.caesar import ALPHA_LEN, shift_string
from caesar_tools.frequency_analyser import score
from caesar_tools.latinizer import normalize


class Candidate(NamedTuple):
    text: str
    key: int
    score: int


def decode_all(ciphertext: str) -> List[Candidate]:
    """
    Decode `ciphertext` with every key, most plausible first.
    Ties keep ascending key order.
    """
    message = normalize(ciphertext)

    candidates = []
    for key in range(ALPHA_LEN):
        decoded = shift_string(message, -key)
        candidates.append(Candidate(decoded, key, score(decoded)))

    candidates.sort(key=lambda c: (-c.score, c.key))
    return candidates


def caesar_break(message: str) -> Tuple[int, str]:
    """Return (key, plaintext) of the best decoding; (0, '') without letters."""
    best = decode_all(message)[0]
    return best.key, best.text
