"""Tests for a full comparison run."""

import pytest

from retouch import AbbreviationTable, InvalidInputError, TextComparator, validate_inputs

TEXT_A = "Le chat dort. Le chien court."


class TestCompare:
    """Tests for TextComparator.compare."""

    def test_identical_texts(self) -> None:
        """Test that identical texts give 0 % retouch and 100 % words."""
        result = TextComparator().compare(TEXT_A, TEXT_A)
        assert result.conserved_sentences == result.total_sentences_a == 2
        assert result.conserved_words == result.total_words_a == 6
        assert result.sentence_retouch_percent == 0
        assert result.word_conserved_percent == 100

    def test_texts_equal_after_normalization(self) -> None:
        """Test that case, spacing and repeated punctuation are ignored."""
        result = TextComparator().compare(TEXT_A, "  le CHAT   dort!!!\n\nLe chien court ?")
        assert result.modified_sentences == 0
        assert result.word_conserved_percent == 100

    def test_insertion_tolerance(self) -> None:
        """Test that sentences inserted in the revision are not penalized."""
        result = TextComparator().compare(TEXT_A, "Le chat dort. Un oiseau chante. Le chien court.")
        assert result.conserved_sentences == 2
        assert result.modified_sentences == 0
        assert result.sentence_retouch_percent == 0
        assert result.conserved_words == 6

    def test_reordering_penalty(self) -> None:
        """Test that swapped sentences count one as modified."""
        result = TextComparator().compare("Un. Deux.", "Deux. Un.")
        assert result.conserved_sentences == 1
        assert result.modified_sentences == 1
        assert result.sentence_retouch_percent == 50
        assert result.conserved_words == 1

    def test_word_level_edit(self) -> None:
        """Test that one changed word modifies its sentence but keeps the other words."""
        result = TextComparator().compare(TEXT_A, "Le chat dort. Le loup court.")
        assert result.conserved_sentences == 1
        assert result.sentence_retouch_percent == 50
        assert result.conserved_words == 5
        assert result.word_conserved_percent == 83

    def test_empty_inputs_give_zeros(self) -> None:
        """Test that the core stays total on empty strings."""
        result = TextComparator().compare("", "")
        assert all(value == 0 for value in result.to_dict().values())

    @pytest.mark.parametrize(
        "text_b",
        ["", "Le chien court. Le chat dort.", "Autre chose. Le chat dort. Le chat dort."],
    )
    def test_conserved_bounded(self, text_b: str) -> None:
        """Test that conserved sentences never exceed either sentence count."""
        comparator = TextComparator()
        result = comparator.compare(TEXT_A, text_b)
        count_b = len(comparator.splitter.split_sentences(text_b))
        assert result.conserved_sentences <= min(result.total_sentences_a, count_b)


class TestAbbreviationConfiguration:
    """Tests for the abbreviation table carried by a comparator."""

    def test_with_abbreviations_returns_new_comparator(self) -> None:
        """Test that changing the table affects only the new comparator."""
        text = "Dr. Martin est venu."
        plain = TextComparator(AbbreviationTable([]))
        guarded = plain.with_abbreviations(["dr."])
        assert guarded.compare(text, text).total_sentences_a == 1
        assert plain.compare(text, text).total_sentences_a == 2

    def test_keeps_matchers(self) -> None:
        """Test that the derived comparator reuses the matchers."""
        comparator = TextComparator()
        derived = comparator.with_abbreviations(["cf."])
        assert derived.sentence_matcher is comparator.sentence_matcher
        assert derived.word_matcher is comparator.word_matcher


class TestValidateInputs:
    """Tests for validate_inputs()."""

    @pytest.mark.parametrize("text_a,text_b", [("", "b"), ("a", ""), ("  \n", "b"), ("a", "\t")])
    def test_rejects_blank(self, text_a: str, text_b: str) -> None:
        """Test that blank texts are refused."""
        with pytest.raises(InvalidInputError):
            validate_inputs(text_a, text_b)

    def test_accepts_text(self) -> None:
        """Test that non-blank texts pass."""
        validate_inputs("a", "b")
