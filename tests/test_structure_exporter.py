import tempfile
import unittest
from pathlib import Path

from tournament_scan.export import STRUCTURE_COLUMNS, export_structure_csv, levels_frame
from tournament_scan.models import BlindLevelRecord, TournamentDescriptor


class TestStructureExporter(unittest.TestCase):
    def setUp(self):
        self.descriptor = TournamentDescriptor(
            name="Daily Deepstack",
            levels=(
                BlindLevelRecord(level_number=1, small_blind=100, big_blind=200, duration_minutes=20),
                BlindLevelRecord(level_number=2, small_blind=1000, big_blind=1500, ante=1500, duration_minutes=20),
                BlindLevelRecord.make_break(3, 15, "Break - End of Reg"),
            ),
        )

    def test_one_row_per_level(self):
        df = levels_frame(self.descriptor)

        self.assertEqual(list(df.columns), STRUCTURE_COLUMNS)
        self.assertEqual(len(df), len(self.descriptor.levels))
        self.assertEqual(df["level"].tolist(), [1, 2, 3])

    def test_blinds_display_column(self):
        df = levels_frame(self.descriptor)

        self.assertEqual(df["blinds"].tolist(), ["100/200", "1k/1.5k ante 1.5k", "Break - End of Reg"])
        self.assertEqual(df["is_break"].tolist(), [False, False, True])

    def test_empty_structure(self):
        df = levels_frame(TournamentDescriptor())

        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), STRUCTURE_COLUMNS)

    def test_export_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out" / "structure.csv"

            csv_text = export_structure_csv(self.descriptor, path)

            self.assertTrue(path.exists())
            self.assertEqual(path.read_text(encoding="utf-8"), csv_text)

        lines = csv_text.strip().splitlines()
        self.assertEqual(lines[0], ",".join(STRUCTURE_COLUMNS))
        self.assertEqual(len(lines), 4)


if __name__ == "__main__":
    unittest.main()
