from caesar_tools.frequency_analyser import (
    FRENCH_FREQUENCIES,
    analyse,
    letter_counts,
    score,
)


def test_table_shape():
    assert len(FRENCH_FREQUENCIES) == 26
    assert FRENCH_FREQUENCIES[4] == 1210


def test_score_values():
    assert score("") == 0
    assert score("e") == 1210
    assert score("ee") == 2420
    assert score("easi") == 3231


def test_letter_counts():
    counts = letter_counts("abracadabra")
    assert counts[0] == 5
    assert counts[1] == 2
    assert counts[17] == 2
    assert sum(counts) == 11


def test_analyse_normalizes_text():
    result = analyse("Élève !")
    assert result["letters"] == 5
    assert result["frequencies"][0] == ("e", 3)
    assert result["score"] == score("eleve")


def test_analyse_empty():
    assert analyse("123 ?") == {"letters": 0, "frequencies": [], "score": 0}


def test_each_letter_scores_its_table_weight():
    for i, weight in enumerate(FRENCH_FREQUENCIES):
        assert score(chr(ord("a") + i)) == weight
