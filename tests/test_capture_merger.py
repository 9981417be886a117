import unittest

from tournament_scan.extraction import BlindScheduleInterpreter
from tournament_scan.merging import dedup_key, deduplicate_and_renumber, merge_captures
from tournament_scan.models import BlindLevelRecord, GameType, Line, TournamentDescriptor


def _level(number, small_blind, big_blind, ante=0, duration=20):
    return BlindLevelRecord(
        level_number=number,
        small_blind=small_blind,
        big_blind=big_blind,
        ante=ante,
        duration_minutes=duration,
    )


class TestDedupKey(unittest.TestCase):
    def test_breaks_and_levels_never_collide(self):
        level = _level(1, 0, 0)
        pause = BlindLevelRecord.make_break(1, 0, None)

        self.assertNotEqual(dedup_key(level), dedup_key(pause))

    def test_level_number_and_duration_ignored_for_levels(self):
        self.assertEqual(dedup_key(_level(1, 100, 200, duration=20)), dedup_key(_level(5, 100, 200, duration=30)))

    def test_break_label_and_duration_matter(self):
        self.assertNotEqual(
            dedup_key(BlindLevelRecord.make_break(3, 15, "Break")),
            dedup_key(BlindLevelRecord.make_break(3, 10, "Break")),
        )


class TestMergeCaptures(unittest.TestCase):
    def setUp(self):
        self.first = TournamentDescriptor(
            name="Daily Deepstack",
            game_type=GameType.NLH,
            buy_in=100,
            levels=(_level(1, 100, 200), _level(2, 200, 400), _level(3, 300, 600, 75)),
        )

    def test_empty_input(self):
        self.assertEqual(merge_captures([]), TournamentDescriptor())

    def test_single_capture_passes_through(self):
        self.assertIs(merge_captures([self.first]), self.first)

    def test_idempotent(self):
        merged = merge_captures([self.first, self.first])

        self.assertEqual(merged.name, self.first.name)
        self.assertEqual(merged.buy_in, self.first.buy_in)
        self.assertEqual(len(merged.levels), len(self.first.levels))
        self.assertEqual([level.level_number for level in merged.levels], [1, 2, 3])

    def test_first_capture_wins_scalar_conflicts(self):
        second = TournamentDescriptor(name="Other Name", buy_in=999, guarantee=10000)

        merged = merge_captures([self.first, second])

        self.assertEqual(merged.name, "Daily Deepstack")
        self.assertEqual(merged.buy_in, 100)
        self.assertEqual(merged.guarantee, 10000)

    def test_overlapping_sections(self):
        second = TournamentDescriptor(levels=(
            _level(3, 300, 600, 75),
            BlindLevelRecord.make_break(4, 15, "Break"),
            _level(5, 400, 800, 100),
        ))

        merged = merge_captures([self.first, second])

        self.assertEqual(len(merged.levels), 5)
        self.assertEqual([level.level_number for level in merged.levels], [1, 2, 3, 4, 5])
        self.assertTrue(merged.levels[3].is_break)
        self.assertEqual(merged.levels[4].small_blind, 400)

    def test_out_of_order_captures_sorted_by_level_number(self):
        later = TournamentDescriptor(levels=(_level(4, 400, 800), _level(5, 500, 1000)))

        merged = merge_captures([later, self.first])

        self.assertEqual([level.small_blind for level in merged.levels], [100, 200, 300, 400, 500])

    def test_inputs_untouched(self):
        merge_captures([self.first, TournamentDescriptor(levels=(_level(9, 900, 1800),))])

        self.assertEqual([level.level_number for level in self.first.levels], [1, 2, 3])

    def test_round_trip_through_interpreter(self):
        lines = [Line(text=text) for text in (
            "Name Length SB BB Ante",
            "Level 1 20 100 200",
            "Level 2 20 200 400",
            "Level 3 20 300 600 75",
        )]
        levels = BlindScheduleInterpreter().interpret(lines)
        capture = TournamentDescriptor(levels=levels)

        merged = merge_captures([capture, capture])

        self.assertEqual(
            [(l.small_blind, l.big_blind, l.ante, l.duration_minutes) for l in merged.levels],
            [(l.small_blind, l.big_blind, l.ante, l.duration_minutes) for l in levels],
        )
        self.assertEqual([level.level_number for level in merged.levels], [1, 2, 3])


class TestDeduplicateAndRenumber(unittest.TestCase):
    def test_dense_numbering(self):
        levels = deduplicate_and_renumber([_level(7, 100, 200), _level(12, 200, 400)])

        self.assertEqual([level.level_number for level in levels], [1, 2])


if __name__ == "__main__":
    unittest.main()
