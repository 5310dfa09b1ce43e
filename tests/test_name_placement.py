import unittest

from tests.helpers import FakeFont, RecordingCanvas
from badge_settings import BADGE_TEXT_COLOR, NAME_START_SIZES
from name_placement import (
    NameLayout,
    draw_name,
    draw_pronouns,
    layout_name,
    layout_pronouns,
    split_name,
)

ORIGIN = (14, 10)
CENTER = 14 + 189.36 / 2


class SplitNameTests(unittest.TestCase):
    def test_first_word_then_rest(self):
        self.assertEqual(split_name("Jane Jordan Smith"), ("Jane", "Jordan Smith"))

    def test_single_word(self):
        self.assertEqual(split_name("Cher"), ("Cher", ""))

    def test_whitespace_collapsed(self):
        self.assertEqual(split_name("  Mary \t Ann   Lee "), ("Mary", "Ann Lee"))

    def test_empty(self):
        self.assertEqual(split_name(""), ("", ""))


class LayoutNameTests(unittest.TestCase):
    def test_two_lines_shrink_and_stack(self):
        layout = layout_name("Jane Jordan Smith", ORIGIN, FakeFont())
        first, second = layout.lines

        self.assertEqual((first.text, first.size), ("Jane", 30))
        self.assertAlmostEqual(first.y, 125)
        self.assertAlmostEqual(first.x, CENTER - 30)

        # second line starts from 24 and shrinks until 12 chars fit in 100pt
        self.assertEqual((second.text, second.size), ("Jordan Smith", 16))
        self.assertAlmostEqual(second.y, 125 - 16)
        self.assertAlmostEqual(second.x, CENTER - 48)
        self.assertAlmostEqual(layout.baseline, second.y)

    def test_second_line_never_larger_than_80_percent(self):
        layout = layout_name("Al Bo", ORIGIN, FakeFont())
        self.assertEqual([line.size for line in layout.lines], [30, 24])

    def test_long_first_name_compounds_the_shrink(self):
        layout = layout_name("Maximilianus Bo", ORIGIN, FakeFont())
        first, second = layout.lines
        self.assertEqual(first.size, 16)
        self.assertEqual(second.size, 12)

    def test_unfittable_first_word_still_shrinks_second_line(self):
        layout = layout_name("W" * 40 + " Bo", ORIGIN, FakeFont())
        first, second = layout.lines
        self.assertEqual(first.size, 6)
        self.assertEqual(second.size, 4)
        self.assertLess(second.size, first.size)

    def test_custom_minimum_size(self):
        layout = layout_name("W" * 200, ORIGIN, FakeFont(), min_size=2)
        self.assertEqual(layout.lines[0].size, 2)

    def test_single_word_draws_one_line(self):
        layout = layout_name("Cher", ORIGIN, FakeFont())
        self.assertEqual(len(layout.lines), 1)
        self.assertAlmostEqual(layout.baseline, 125)

    def test_plain_preset(self):
        layout = layout_name("Al", ORIGIN, FakeFont(), NAME_START_SIZES["plain"])
        self.assertEqual(layout.lines[0].size, 24)

    def test_decorative_spacing(self):
        layout = layout_name("Al Bo", ORIGIN, FakeFont(line_spacing=0.8))
        self.assertAlmostEqual(layout.lines[1].y, 125 - 24 * 0.8)

    def test_lines_stay_inside_name_band(self):
        layout = layout_name("Bartholomew Montgomery-Fitzgerald", ORIGIN, FakeFont())
        for line in layout.lines:
            self.assertLessEqual(line.width, 100)
            self.assertAlmostEqual(line.x + line.width / 2, CENTER)


class LayoutPronounsTests(unittest.TestCase):
    def test_blank_pronouns_omitted(self):
        for value in (None, "", "   "):
            self.assertIsNone(layout_pronouns(value, ORIGIN, 109, FakeFont()))

    def test_parenthesized_and_centered_below_anchor(self):
        placement = layout_pronouns("she/her", ORIGIN, 109, FakeFont())
        self.assertEqual(placement.text, "(she/her)")
        self.assertEqual(placement.size, 14)
        self.assertAlmostEqual(placement.y, 85)
        self.assertAlmostEqual(placement.x, CENTER - 9 * 14 * 0.5 / 2)


class DrawTests(unittest.TestCase):
    def test_each_line_drawn_as_three_layers(self):
        c = RecordingCanvas()
        layout = layout_name("Jane Jordan Smith", ORIGIN, FakeFont())
        draw_name(c, layout, FakeFont())

        strings = c.named("drawString")
        self.assertEqual(len(strings), 6)
        first = layout.lines[0]
        self.assertEqual(
            [call[1] for call in strings[:3]],
            [(first.x + 1, first.y - 1, "Jane"),
             (first.x + 0.5, first.y - 0.5, "Jane"),
             (first.x, first.y, "Jane")],
        )
        colors = [call[1] for call in c.named("setFillColorRGB")[:3]]
        self.assertEqual(colors, [(0.25, 0.25, 0.25), (0, 0, 0), BADGE_TEXT_COLOR])

    def test_no_pronouns_means_no_calls(self):
        c = RecordingCanvas()
        draw_pronouns(c, None, FakeFont())
        self.assertEqual(c.calls, [])

    def test_empty_layout_draws_nothing(self):
        c = RecordingCanvas()
        draw_name(c, NameLayout((), 125), FakeFont())
        self.assertEqual(c.calls, [])


if __name__ == "__main__":
    unittest.main()
