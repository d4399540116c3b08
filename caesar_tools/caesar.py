# caesar_tools/caesar.py
import math
import string
from numbers import Integral, Real

from caesar_tools.errors import InvalidKeyError
from caesar_tools.latinizer import normalize

# ==============================
#  Alphabet + utilities
# ==============================
ALPHABET = string.ascii_lowercase
ALPHA_LEN = len(ALPHABET)
MIN_KEY, MAX_KEY = 0, ALPHA_LEN - 1


def rank(ch: str) -> int:
    """1-based position of a latin letter (upper or lower case)."""
    return ord(ch.lower()) - ord("a") + 1


def _check_distance(distance) -> int:
    if isinstance(distance, bool) or not isinstance(distance, Real):
        raise TypeError(f"shift distance must be a number, got {type(distance).__name__}")
    if isinstance(distance, Integral):
        return int(distance)
    if not math.isfinite(distance) or not float(distance).is_integer():
        raise ValueError(f"shift distance must be a finite integer, got {distance!r}")
    return int(distance)


def _shift(c, distance):
    # +ALPHA_LEN keeps the dividend non-negative for negative distances
    return ALPHABET[(ALPHA_LEN + rank(c) - 1 + distance) % ALPHA_LEN]


# ==============================
#  SHIFT
# ==============================
def shift_char(c: str, distance) -> str:
    return _shift(c, _check_distance(distance))


def shift_string(s: str, distance) -> str:
    distance = _check_distance(distance) % ALPHA_LEN
    return "".join(_shift(c, distance) for c in s)


# ==============================
#  CAESAR (French text)
# ==============================
def validate_key(key) -> int:
    """
    Check an encryption key coming from the caller.
    Accepts ints (and integral floats such as 3.0) between 0 and 25.
    """
    if key is None or isinstance(key, bool) or not isinstance(key, Real):
        raise InvalidKeyError(key)
    if not isinstance(key, Integral):
        if not math.isfinite(key) or not float(key).is_integer():
            raise InvalidKeyError(key)
    key = int(key)
    if not MIN_KEY <= key <= MAX_KEY:
        raise InvalidKeyError(key)
    return key


def encode(text: str, key) -> str:
    """Encrypt French text: lowercase latin letters only, shifted by `key`."""
    return shift_string(normalize(text), validate_key(key))


def decode(text: str, key) -> str:
    """Decrypt with a known key (the text is normalized first)."""
    return shift_string(normalize(text), -validate_key(key))
