import pytest

from qaterial.elements import IconDescription
from qaterial.icon_label import IconLabel, Item
from qaterial.icon_label_positioner import Alignment, Display, Size


def _complete_label(display=Display.ICON_ONLY):
    label = IconLabel()
    label.width = 200
    label.height = 100
    label.display = display
    label.icon.source = "icon.svg"
    label.icon_item = Item()
    label.label_item = Item(implicit_width=50, implicit_height=20)
    label.component_complete()
    return label


def test_item_width_follows_implicit_until_set():
    item = Item(implicit_width=10, implicit_height=5)
    assert item.width == 10
    item.implicit_width = 30
    assert item.width == 30
    item.width = 7
    item.implicit_width = 40
    assert item.width == 7
    item.reset_width()
    assert item.width == 40


def test_item_signals_carry_new_values():
    item = Item()
    seen = []
    item.x_changed.connect(seen.append)
    item.set_position(3, 4)
    item.set_position(3, 4)
    assert seen == [3.0]
    assert (item.x, item.y) == (3.0, 4.0)


def test_items_are_parented_before_completion():
    label = IconLabel()
    icon_item, text_item = Item(), Item()
    label.icon_item = icon_item
    label.label_item = text_item
    assert icon_item.parent_item is label
    assert text_item.parent_item is label
    assert not label.is_component_complete


def test_nothing_is_laid_out_before_completion():
    label = IconLabel()
    label.width = 200
    label.height = 100
    label.icon.source = "icon.svg"
    icon_item = Item()
    label.icon_item = icon_item
    assert icon_item.size == Size(0.0, 0.0)
    assert not label.positioner.icon_implicit_size.is_valid


def test_icon_only_places_icon_item_at_icon_rect():
    label = _complete_label()
    rect = label.positioner.icon_rect
    assert label.icon_item.top_left if False else (label.icon_item.x, label.icon_item.y) == rect.top_left
    assert label.icon_item.size == rect.size
    assert rect.size == Size(24.0, 24.0)
    assert label.implicit_width == 24.0
    assert label.implicit_height == 24.0


def test_icon_only_hides_nothing_but_label_visibility_follows_display():
    label = _complete_label(Display.ICON_ONLY)
    assert label.icon_item.visible is True
    assert label.label_item.visible is False
    label.display = Display.TEXT_ONLY
    assert label.icon_item.visible is False
    assert label.label_item.visible is True


def test_text_only_places_label_and_resets_icon_size():
    label = _complete_label(Display.TEXT_ONLY)
    assert not label.positioner.icon_implicit_size.is_valid
    assert label.positioner.label_implicit_size == Size(50.0, 20.0)
    rect = label.positioner.label_rect
    assert (label.label_item.x, label.label_item.y) == rect.top_left
    assert label.label_item.width == rect.width


def test_icon_without_source_has_no_size():
    label = IconLabel()
    label.width = 100
    label.height = 100
    label.icon_item = Item()
    label.component_complete()
    assert not label.positioner.icon_implicit_size.is_valid
    label.icon.source = "icon.svg"
    assert label.positioner.icon_implicit_size == Size(24.0, 24.0)


def test_icon_size_changes_are_followed_after_completion():
    label = _complete_label()
    label.icon.width = 32
    label.icon.height = 16
    assert label.positioner.icon_implicit_size == Size(32.0, 16.0)
    assert label.icon_item.size == Size(32.0, 16.0)


def test_replacing_icon_disconnects_the_old_one():
    label = _complete_label()
    old = label.icon
    label.icon = IconDescription(source="other.svg", width=40, height=40)
    assert label.positioner.icon_implicit_size == Size(40.0, 40.0)
    old.width = 10
    assert label.positioner.icon_implicit_size == Size(40.0, 40.0)


def test_label_implicit_size_changes_are_followed():
    label = _complete_label(Display.TEXT_BESIDE_ICON)
    label.label_item.implicit_width = 80
    assert label.positioner.label_implicit_size == Size(80.0, 20.0)


def test_label_with_zero_implicit_width_has_no_size():
    label = _complete_label(Display.TEXT_ONLY)
    label.label_item.implicit_width = 0
    assert not label.positioner.label_implicit_size.is_valid


def test_replacing_label_item_releases_the_old_one():
    label = _complete_label(Display.TEXT_ONLY)
    old = label.label_item
    new = Item(implicit_width=30, implicit_height=10)
    label.label_item = new
    assert old.parent_item is None
    assert new.parent_item is label
    assert label.positioner.label_implicit_size == Size(30.0, 10.0)
    old.implicit_width = 99
    assert label.positioner.label_implicit_size == Size(30.0, 10.0)


def test_container_size_follows_item_size():
    label = _complete_label()
    label.width = 300
    assert label.positioner.container_size == Size(300.0, 100.0)


def test_proxy_properties_forward_and_notify():
    label = IconLabel()
    seen = []
    label.spacing_changed.connect(seen.append)
    label.spacing = 4
    assert label.positioner.spacing == 4.0
    assert seen == [4.0]
    label.horizontal_alignment = Alignment.LEFT
    assert label.positioner.horizontal_alignment == Alignment.LEFT
    label.mirrored = True
    assert label.positioner.mirrored is True


def test_display_setter_accepts_integers():
    label = IconLabel()
    label.display = 3
    assert label.display is Display.TEXT_UNDER_ICON
    with pytest.raises(ValueError):
        label.display = 42


def test_resets_restore_positioner_defaults():
    label = IconLabel()
    defaults = (
        label.horizontal_alignment,
        label.vertical_alignment,
        label.display,
        label.spacing,
        label.mirrored,
    )
    label.horizontal_alignment = Alignment.RIGHT
    label.vertical_alignment = Alignment.BOTTOM
    label.display = Display.TEXT_ONLY
    label.spacing = 8
    label.mirrored = True
    label.reset_horizontal_alignment()
    label.reset_vertical_alignment()
    label.reset_display()
    label.reset_spacing()
    label.reset_mirrored()
    assert (
        label.horizontal_alignment,
        label.vertical_alignment,
        label.display,
        label.spacing,
        label.mirrored,
    ) == defaults


def test_mirrored_beside_swaps_order():
    label = _complete_label(Display.TEXT_BESIDE_ICON)
    assert label.icon_item.x < label.label_item.x
    label.mirrored = True
    assert label.icon_item.x > label.label_item.x