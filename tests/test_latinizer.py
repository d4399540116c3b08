import pytest

from caesar_tools.latinizer import latinize, normalize


@pytest.mark.parametrize("ch, expected", [
    ("a", "a"), ("A", "a"), ("z", "z"),
    ("à", "a"), ("â", "a"),
    ("é", "e"), ("è", "e"), ("ê", "e"), ("ë", "e"),
    ("î", "i"), ("ï", "i"),
    ("ô", "o"),
    ("ù", "u"), ("û", "u"), ("ü", "u"),
    ("ÿ", "y"), ("ç", "c"),
    ("æ", "ae"), ("œ", "oe"),
    ("É", "e"), ("Ç", "c"), ("Œ", "oe"), ("Ÿ", "y"),
])
def test_latinize_letters(ch, expected):
    assert latinize(ch) == expected


@pytest.mark.parametrize("ch", [" ", ".", "-", "\n", "7", "ß", "ñ", "€", ""])
def test_latinize_drops_other_symbols(ch):
    assert latinize(ch) == ""


def test_normalize_empty_and_symbols():
    assert normalize("") == ""
    assert normalize(" .-\n") == ""
    assert normalize(" ./-_{})([]\n") == ""


def test_normalize_ligatures_any_case():
    assert normalize("æœÆŒ") == "aeoeaeoe"


def test_normalize_accents():
    assert normalize("àâéèêëîïôùûüÿ") == "aaeeeeiiouuuy"
    assert normalize("œæŒÆàâéèêëîïôùûüÿç") == "oeaeoeaeaaeeeeiiouuuyc"


def test_normalize_keeps_order():
    assert normalize("Le cœur a ses raisons.") == "lecoeurasesraisons"
