"""
Bulgarian Cyrillic -> Latin transliteration tests.
"""
from namedays.utils.transliterate import transliterate


class TestTransliterate:
    def test_names(self):
        assert transliterate("Георги") == "Georgi"
        assert transliterate("Цветан") == "Tsvetan"
        assert transliterate("Йордан") == "Yordan"
        assert transliterate("Юлия") == "Yuliya"

    def test_digraph_capitalized_only_on_first_letter(self):
        assert transliterate("Щерьо") == "Shteryo"
        assert transliterate("Жоро") == "Zhoro"
        assert transliterate("ЩЪРКЕЛ") == "ShtARKEL"

    def test_hard_sign(self):
        assert transliterate("Петър") == "Petar"
        assert transliterate("Лъчезар") == "Lachezar"

    def test_matches_dataset_latin_forms(self):
        assert transliterate("Димитър") == "Dimitar"
        assert transliterate("Тодоровден") == "Todorovden"

    def test_non_cyrillic_passes_through(self):
        assert transliterate("Ivan 2026!") == "Ivan 2026!"
        assert transliterate("Свети Иван-Рилски") == "Sveti Ivan-Rilski"

    def test_invalid_input(self):
        assert transliterate("") == ""
        assert transliterate(None) == ""
        assert transliterate(5) == ""
