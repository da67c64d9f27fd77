from text_normalizer import normalize


def test_strips_accents_and_collapses_whitespace():
    assert normalize("  Escritório   Central ") == "Escritorio Central"
    assert normalize("Limpeza e Conservação") == "Limpeza e Conservacao"
    assert normalize("a\n\tb") == "a b"


def test_deletes_characters_outside_allow_list():
    assert normalize("A → B") == "A B"
    assert normalize("Limpeza & Conservação (L/C)") == "Limpeza Conservacao (LC)"
    assert normalize("R$ 1.000,00!") == "R 1.000,00!"
    assert normalize("Reparo/Cons. - 2025?") == "ReparoCons. - 2025?"


def test_total_on_odd_input():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("→→") == ""
    assert normalize(5110507) == "5110507"
