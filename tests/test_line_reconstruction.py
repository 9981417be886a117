import unittest

from tournament_scan.models import FragmentBox, TextFragment
from tournament_scan.reconstruction import group_into_rows, reconstruct_lines


def _fragment(text, x, y, w=0.1, h=0.02):
    return TextFragment(text=text, box=FragmentBox(x=x, y=y, w=w, h=h))


class TestLineReconstruction(unittest.TestCase):
    def test_fragment_from_dict(self):
        fragment = TextFragment.from_dict({"text": "Guarantee", "box": {"x": 0.1, "y": 0.8, "w": 0.2, "h": 0.02}})

        self.assertEqual(fragment.text, "Guarantee")
        self.assertAlmostEqual(fragment.box.mid_y, 0.81)

    def test_rows_ordered_top_to_bottom_and_left_to_right(self):
        fragments = [
            _fragment("200", 0.7, 0.50),
            _fragment("Level", 0.1, 0.501),
            _fragment("Daily Deepstack", 0.1, 0.90),
            _fragment("100", 0.5, 0.499),
        ]

        lines = reconstruct_lines(fragments)

        self.assertEqual([line.text for line in lines], ["Daily Deepstack", "Level 100 200"])
        self.assertEqual(lines[1].fragment_count, 3)
        self.assertGreater(lines[0].mid_y, lines[1].mid_y)

    def test_line_count_never_exceeds_fragment_count(self):
        fragments = [_fragment(f"cell {i}", 0.1 * (i % 3), 0.9 - 0.05 * (i // 3)) for i in range(9)]

        lines = reconstruct_lines(fragments)

        self.assertLessEqual(len(lines), len(fragments))
        self.assertEqual(len(lines), 3)

    def test_fragments_outside_tolerance_start_new_row(self):
        fragments = [_fragment("A", 0.1, 0.50), _fragment("B", 0.2, 0.52)]

        rows = group_into_rows(fragments, tolerance=0.01)

        self.assertEqual([[f.text for f in row] for row in rows], [["B"], ["A"]])

    def test_wider_tolerance_merges_rows(self):
        fragments = [_fragment("A", 0.1, 0.50), _fragment("B", 0.2, 0.52)]

        lines = reconstruct_lines(fragments, tolerance=0.05)

        self.assertEqual([line.text for line in lines], ["A B"])

    def test_blank_fragments_are_dropped(self):
        fragments = [_fragment("   ", 0.1, 0.5), _fragment("", 0.2, 0.5)]

        self.assertEqual(reconstruct_lines(fragments), [])

    def test_empty_input(self):
        self.assertEqual(reconstruct_lines([]), [])


if __name__ == "__main__":
    unittest.main()
