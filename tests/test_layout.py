from countdown_gif.layout import DisplayField, DrawCommand, display_fields, place_group
from countdown_gif.render import FrameRenderer
from countdown_gif.timing import TimeBreakdown


class ConstantMeasurer:
    def measure(self, text, point_size):
        return 40


def test_value_is_centered_over_label(cfg, fixed_measurer):
    commands, advance = place_group(fixed_measurer, cfg, 50, 50, DisplayField("days", "5"))

    label, value = commands
    # label 4 * 15 = 60 wide, value 1 * 25 = 25 wide: 30 - 12
    assert label == DrawCommand(50, 50 + 25 + 15 + 20, "days", 15)
    assert value == DrawCommand(68, 75, "5", 25)
    assert advance == 4 * 25


def test_equal_widths_give_no_offset(cfg):
    commands, _ = place_group(ConstantMeasurer(), cfg, 123, 50, DisplayField("hours", "7"))
    assert commands[0].x == commands[1].x == 123


def test_wide_value_shifts_left_of_label(cfg, fixed_measurer):
    commands, advance = place_group(fixed_measurer, cfg, 50, 50, DisplayField("days", "12345"))
    # 60 // 2 - 125 // 2 = 30 - 62
    assert commands[1].x == 50 - 32
    # spacing still follows the label
    assert advance == 100


def test_display_fields_fixed_order():
    fields = display_fields(TimeBreakdown(3, 4, 5, 6))
    assert fields == [
        DisplayField("days", "3"),
        DisplayField("hours", "4"),
        DisplayField("minutes", "5"),
        DisplayField("seconds", "6"),
    ]


def test_cursor_advances_by_half_label_plus_padding(cfg, fixed_measurer):
    renderer = FrameRenderer(cfg, measurer=fixed_measurer)
    commands = renderer.layout(display_fields(TimeBreakdown(0, 0, 0, 0)))

    label_xs = [c.x for c in commands if not c.text.isdigit()]
    # days: 100 // 2 + 50, hours: 125 // 2 + 50, minutes: 175 // 2 + 50
    assert label_xs == [50, 150, 262, 399]
