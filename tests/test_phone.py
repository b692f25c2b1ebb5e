"""
Unit tests for phone normalization.
"""

from grievances.phone import canonical_phone, same_phone


class TestCanonicalPhone:
    def test_strips_punctuation_and_spaces(self):
        assert canonical_phone("98765-43210") == "9876543210"
        assert canonical_phone("(98765) 43 210") == "9876543210"

    def test_keeps_last_ten_digits(self):
        assert canonical_phone("+91 98765-43210") == "9876543210"
        assert canonical_phone("0091 9876543210") == "9876543210"

    def test_short_numbers_are_not_padded(self):
        assert canonical_phone("04633-2234") == "046332234"
        assert canonical_phone("12 34") == "1234"

    def test_empty_values(self):
        assert canonical_phone(None) == ""
        assert canonical_phone("") == ""
        assert canonical_phone("n/a") == ""


class TestSamePhone:
    def test_country_code_and_formatting_match(self):
        assert same_phone("+91 98765-43210", "9876543210") is True

    def test_different_numbers_do_not_match(self):
        assert same_phone("9876543210", "9876543211") is False

    def test_equal_short_numbers_match(self):
        assert same_phone("1234", "12-34") is True

    def test_short_number_does_not_match_its_suffix_of_longer(self):
        assert same_phone("43210", "9876543210") is False

    def test_numbers_without_digits_never_match(self):
        assert same_phone("", "") is False
        assert same_phone("none", "n/a") is False
