import unittest

from tournament_scan.extraction import FieldExtractor, FieldLabel
from tournament_scan.extraction.field_labels import label_for, normalize_label, starts_with_label
from tournament_scan.models import Line


def _lines(*texts):
    return [Line(text=text) for text in texts]


class TestFieldLabels(unittest.TestCase):
    def test_normalize_label(self):
        self.assertEqual(normalize_label("Total Buy–In:"), "total buy-in")

    def test_exact_label(self):
        self.assertIs(label_for("Starting Chips"), FieldLabel.STARTING_CHIPS)
        self.assertIsNone(label_for("Starting Chips 20,000"))

    def test_prefix_label(self):
        self.assertIs(starts_with_label("Bounty Amount $100"), FieldLabel.BOUNTY_AMOUNT)
        self.assertIsNone(starts_with_label("Sunday Deepstack"))


class TestFieldExtractor(unittest.TestCase):
    def setUp(self):
        self.extractor = FieldExtractor()

    def test_prefix_and_adjacent_strategies(self):
        fields = self.extractor.extract(_lines(
            "Total Buy-In $400",
            "Deductions",
            "$50",
            "Re-entry",
            "No",
            "Starting Chips: 20,000",
        ))

        self.assertEqual(fields[FieldLabel.TOTAL_BUY_IN], "$400")
        self.assertEqual(fields[FieldLabel.DEDUCTIONS], "$50")
        self.assertEqual(fields[FieldLabel.RE_ENTRY], "No")
        self.assertEqual(fields[FieldLabel.STARTING_CHIPS], "20,000")

    def test_first_writer_wins(self):
        fields = self.extractor.extract(_lines("Guarantee $10,000", "Guarantee $5,000"))

        self.assertEqual(fields[FieldLabel.GUARANTEE], "$10,000")

    def test_consecutive_labels_are_not_paired(self):
        fields = self.extractor.extract(_lines("Level Time", "Game Type", "NLH"))

        self.assertNotIn(FieldLabel.LEVEL_TIME, fields)
        self.assertEqual(fields[FieldLabel.GAME_TYPE], "NLH")

    def test_boilerplate_value_is_not_paired(self):
        fields = self.extractor.extract(_lines("Event Name", "9:41"))

        self.assertNotIn(FieldLabel.EVENT_NAME, fields)

    def test_dash_variants_in_labels(self):
        fields = self.extractor.extract(_lines("Re–entry Unlimited"))

        self.assertEqual(fields[FieldLabel.RE_ENTRY], "Unlimited")

    def test_chrome_lines_ignored(self):
        self.assertEqual(self.extractor.extract(_lines("Back", "Share")), {})


if __name__ == "__main__":
    unittest.main()
