import unittest

from crossword_compiler.core.constants import Direction
from crossword_compiler.core.exceptions import GrammarError
from crossword_compiler.text.grammar import (
    LabelSegment,
    WordLength,
    parse_clue,
    parse_clue_text,
    parse_label_text,
    parse_length_text,
    split_clue,
)


class SplitClueTests(unittest.TestCase):
    def test_splits_well_formed_clues(self) -> None:
        examples = {
            "2.This is a clue(5)": ("2", "This is a clue", "5"),
            "2.This is a clue(5,3)": ("2", "This is a clue", "5,3"),
            "2,8.This is a clue(5,3)": ("2,8", "This is a clue", "5,3"),
            " 2 . This is a clue ( 5 ) ": ("2 ", " This is a clue ", " 5 "),
            "2.(5)": ("2", "", "5"),
            "2.     (5)": ("2", "     ", "5"),
            "5. Global health administration (1.1.1.)": (
                "5",
                " Global health administration ",
                "1.1.1.",
            ),
        }
        for clue, expected in examples.items():
            with self.subTest(clue=clue):
                parts = split_clue(clue)
                self.assertEqual((parts.label_text, parts.clue_text, parts.length_text), expected)

    def test_known_quirks_are_accepted(self) -> None:
        examples = {
            "2.8.This is a clue(5)": ("2", "8.This is a clue", "5"),
            "2.8.This is a clue((5)7)": ("2", "8.This is a clue(", "5)7"),
            "9. Clue (5(3(4)": ("9", " Clue (5(3", "4"),
            "9. Clue (5)3)4)": ("9", " Clue ", "5)3)4"),
            "9. Clue (5,3,4))": ("9", " Clue ", "5,3,4)"),
        }
        for clue, expected in examples.items():
            with self.subTest(clue=clue):
                parts = split_clue(clue)
                self.assertEqual((parts.label_text, parts.clue_text, parts.length_text), expected)

    def test_rejects_malformed_clues(self) -> None:
        for clue in ["This is a clue(5)", "2.This is a clue", "2.This is a clue(5", "2.This is a clue 5)", ""]:
            with self.subTest(clue=clue):
                with self.assertRaises(GrammarError) as ctx:
                    split_clue(clue)
                self.assertIn(f"Clue '{clue}' does not match the required pattern", str(ctx.exception))
                self.assertIn("<LabelText>.<ClueText>(<LengthText>)", str(ctx.exception))


class LabelGrammarTests(unittest.TestCase):
    def test_single_segments(self) -> None:
        self.assertEqual(parse_label_text("2"), [LabelSegment(2)])
        self.assertEqual(parse_label_text("2d"), [LabelSegment(2, "d")])

    def test_multi_segment_mixed_label(self) -> None:
        segments = parse_label_text("2a,3,5d,8,15")
        self.assertEqual([s.text for s in segments], ["2a", "3", "5d", "8", "15"])
        self.assertEqual(
            [s.direction for s in segments],
            [Direction.ACROSS, Direction.UNKNOWN, Direction.DOWN, Direction.UNKNOWN, Direction.UNKNOWN],
        )

    def test_padded_label(self) -> None:
        segments = parse_label_text("   2a  ,  3, 5d  ")
        self.assertEqual([s.text for s in segments], ["2a", "3", "5d"])

    def test_residuals_are_reported(self) -> None:
        examples = {
            "  ": "  ",
            "3b": "b",
            "3a,4b,7": "b,7",
            "2,3,5,8,": ",",
            "9,3b,4": "b,4",
            "a": "a",
            "9a3": "3",
            "9d12a": "12a",
            ",9": ",9",
            " - 9": " - 9",
        }
        for label, residual in examples.items():
            with self.subTest(label=label):
                with self.assertRaises(GrammarError) as ctx:
                    parse_label_text(label, f"{label}. Clue (5)")
                self.assertEqual(
                    str(ctx.exception),
                    f"'{label}. Clue (5)' Error in <labelText> near <{residual}>",
                )


class LengthGrammarTests(unittest.TestCase):
    def test_single_and_multi_word_lengths(self) -> None:
        self.assertEqual(parse_length_text("2"), [WordLength(2, "")])
        self.assertEqual(parse_length_text("2,5"), [WordLength(2, ","), WordLength(5, "")])
        self.assertEqual(
            parse_length_text("5,3-4"),
            [WordLength(5, ","), WordLength(3, "-"), WordLength(4, "")],
        )

    def test_padded_lengths(self) -> None:
        self.assertEqual(
            [w.length for w in parse_length_text("   2  ,  3, 5  ")],
            [2, 3, 5],
        )
        self.assertEqual(
            [w.terminator for w in parse_length_text("   2  ,  3, 5  ")],
            [",", ",", ""],
        )

    def test_whitespace_separated_words(self) -> None:
        self.assertEqual(parse_length_text("4 6"), [WordLength(4, " "), WordLength(6, "")])

    def test_acronym(self) -> None:
        self.assertEqual(
            parse_length_text("1.1.1."),
            [WordLength(1, "."), WordLength(1, "."), WordLength(1, ".")],
        )

    def test_separator_runs(self) -> None:
        self.assertEqual(
            parse_length_text("5,3-4-,6"),
            [WordLength(5, ","), WordLength(3, "-"), WordLength(4, "-,"), WordLength(6, "")],
        )

    def test_residuals_are_reported(self) -> None:
        examples = {
            "  ": "",
            "3b": "b",
            "3,4b,7": "b,7",
            "2,3,5,8,": ",",
            "5)7": ")7",
            "(5": "(5",
            "5)": ")",
            "(5)": "(5)",
            "a": "a",
            "0": "0",
            "5,0": "0",
        }
        for length, residual in examples.items():
            with self.subTest(length=length):
                with self.assertRaises(GrammarError) as ctx:
                    parse_length_text(length, "9. Clue")
                self.assertEqual(
                    str(ctx.exception), f"'9. Clue' Error in <lengthText> near <{residual}>"
                )


class ClueTextGrammarTests(unittest.TestCase):
    def test_trims_whitespace_only(self) -> None:
        self.assertEqual(parse_clue_text("2"), "2")
        self.assertEqual(parse_clue_text("    a clue text   "), "a clue text")
        self.assertEqual(parse_clue_text(""), "")
        self.assertEqual(
            parse_clue_text(". This i)s. (clue) text)("), ". This i)s. (clue) text)("
        )


class ParseClueTests(unittest.TestCase):
    def test_parse_full_clue(self) -> None:
        parsed = parse_clue("9,3a,4d,6. Clue (5)")
        self.assertEqual([s.text for s in parsed.label_segments], ["9", "3a", "4d", "6"])
        self.assertEqual(parsed.clue_text, "Clue")
        self.assertEqual(parsed.words, [WordLength(5, "")])

    def test_reports_length_residual_with_whole_clue(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            parse_clue("3. Red or green fruit (a)")
        self.assertEqual(
            str(ctx.exception), "'3. Red or green fruit (a)' Error in <lengthText> near <a>"
        )

    def test_reports_label_residual_with_whole_clue(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            parse_clue("a. Red or green fruit (5)")
        self.assertEqual(
            str(ctx.exception), "'a. Red or green fruit (5)' Error in <labelText> near <a>"
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
