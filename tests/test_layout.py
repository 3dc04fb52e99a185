import pytest

from qaterial.layout import (
    EXTRA_LARGE_BREAKPOINT,
    LARGE_BREAKPOINT,
    MEDIUM_BREAKPOINT,
    SMALL_BREAKPOINT,
    Flow,
    Layout,
    LayoutBreakpoint,
    LayoutDirection,
    LayoutFill,
    LayoutItem,
    default_preferred_fill,
    size_to_type,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        (EXTRA_LARGE_BREAKPOINT, LayoutBreakpoint.EXTRA_LARGE),
        (EXTRA_LARGE_BREAKPOINT - 0.5, LayoutBreakpoint.LARGE),
        (LARGE_BREAKPOINT, LayoutBreakpoint.LARGE),
        (MEDIUM_BREAKPOINT, LayoutBreakpoint.MEDIUM),
        (SMALL_BREAKPOINT, LayoutBreakpoint.SMALL),
        (SMALL_BREAKPOINT - 0.5, LayoutBreakpoint.EXTRA_SMALL),
        (0.0, LayoutBreakpoint.EXTRA_SMALL),
    ],
)
def test_size_to_type(size, expected):
    assert size_to_type(size) == expected


@pytest.mark.parametrize(
    "breakpoint, fill",
    [
        (LayoutBreakpoint.EXTRA_LARGE, LayoutFill.FILL_TWELFTH),
        (LayoutBreakpoint.LARGE, LayoutFill.FILL_SIXTH),
        (LayoutBreakpoint.MEDIUM, LayoutFill.FILL_QUARTER),
        (LayoutBreakpoint.SMALL, LayoutFill.FILL_HALF),
        (LayoutBreakpoint.EXTRA_SMALL, LayoutFill.FILL_PARENT),
        (42, LayoutFill.FILL_PARENT),
    ],
)
def test_default_preferred_fill(breakpoint, fill):
    assert default_preferred_fill(breakpoint) == fill


def test_breakpoint_constants_exposed_on_layout():
    layout = Layout()
    assert layout.small_breakpoint == SMALL_BREAKPOINT
    assert layout.extra_large_breakpoint == EXTRA_LARGE_BREAKPOINT


@pytest.mark.parametrize(
    "width, columns, breakpoint",
    [
        (EXTRA_LARGE_BREAKPOINT, 12, LayoutBreakpoint.EXTRA_LARGE),
        (LARGE_BREAKPOINT, 12, LayoutBreakpoint.LARGE),
        (MEDIUM_BREAKPOINT, 8, LayoutBreakpoint.MEDIUM),
        (SMALL_BREAKPOINT, 4, LayoutBreakpoint.SMALL),
        (100.0, 4, LayoutBreakpoint.EXTRA_SMALL),
    ],
)
def test_columns_follow_type(width, columns, breakpoint):
    layout = Layout(width=width)
    assert layout.type == breakpoint
    assert layout.columns == columns


def test_extra_small_default_fill_takes_full_width():
    item = LayoutItem()
    layout = Layout()
    layout.set_items([item])
    layout.width = 300.0
    assert item.width == layout.width


def test_full_width_with_spacing_and_padding():
    item = LayoutItem()
    layout = Layout(spacing=6.0, left_padding=10.0, right_padding=20.0)
    layout.set_items([item])
    layout.width = 330.0
    assert item.width == layout.width - layout.left_padding - layout.right_padding


def test_attached_fill_half():
    item = LayoutItem()
    layout = Layout()
    Layout.attach(item).extra_small = LayoutFill.FILL_HALF
    layout.set_items([item])
    layout.width = 300.0
    assert item.width == layout.width / 2


def test_attached_zero_fill_gives_zero_size():
    item = LayoutItem(implicit_width=50.0)
    layout = Layout()
    Layout.attach(item).extra_small = 0
    layout.set_items([item])
    layout.width = 300.0
    assert item.width == 0.0


def test_attach_returns_same_object():
    item = LayoutItem()
    assert Layout.attach(item) is Layout.attach(item)
    assert Layout.attach(item).small == default_preferred_fill(LayoutBreakpoint.SMALL)


def test_non_items_are_ignored_but_kept():
    item = LayoutItem()
    layout = Layout(width=200.0)
    layout.set_items([item, "not an item"])
    assert layout.items == [item, "not an item"]
    assert item.width == layout.width


def test_user_columns_persist_and_reset():
    layout = Layout(width=100.0)
    layout.columns = 6
    layout.width = EXTRA_LARGE_BREAKPOINT
    assert layout.columns == 6
    layout.reset_user_columns()
    assert layout.columns == 12


def test_non_positive_user_columns_ignored():
    layout = Layout(width=100.0)
    layout.columns = 0
    layout.columns = -3
    assert layout.columns == 4
    layout.width = MEDIUM_BREAKPOINT
    assert layout.columns == 8


def test_columns_changed_emitted():
    layout = Layout()
    seen = []
    layout.columns_changed.connect(lambda: seen.append(layout.columns))
    layout.width = MEDIUM_BREAKPOINT
    assert seen == [8]


def test_right_to_left_resizes_in_reverse_order():
    first, second = LayoutItem(), LayoutItem()
    order = []
    first.width_changed.connect(lambda _: order.append("first"))
    second.width_changed.connect(lambda _: order.append("second"))
    layout = Layout(layout_direction=LayoutDirection.RIGHT_TO_LEFT)
    layout.set_items([first, second])
    layout.width = 200.0
    assert order == ["second", "first"]


def test_flow_change_resets_widths_and_sets_heights():
    item = LayoutItem(implicit_width=10.0, implicit_height=5.0)
    layout = Layout(width=200.0, height=120.0)
    layout.set_items([item])
    assert item.width == layout.width
    layout.flow = Flow.TOP_TO_BOTTOM
    assert item.width == item.implicit_width
    assert item.height == layout.height


def test_vertical_flow_ignores_width_changes():
    item = LayoutItem(implicit_width=10.0)
    layout = Layout(flow=Flow.TOP_TO_BOTTOM, height=100.0)
    layout.set_items([item])
    layout.width = 700.0
    assert item.width == item.implicit_width
    assert layout.type == LayoutBreakpoint.EXTRA_SMALL


def test_new_items_reset_previous_forced_widths():
    old = LayoutItem(implicit_width=7.0)
    layout = Layout(width=200.0)
    layout.set_items([old])
    assert old.width == layout.width
    layout.set_items([LayoutItem()])
    assert old.width == old.implicit_width


def test_force_update_recomputes_after_item_resize():
    item = LayoutItem()
    layout = Layout(width=200.0)
    layout.set_items([item])
    item.width = 1.0
    layout.force_update()
    assert item.width == layout.width


def test_unknown_property_rejected():
    with pytest.raises(TypeError):
        Layout(columns_count=3)