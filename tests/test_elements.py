import pytest

from qaterial.elements import IconDescription, Signal, StepperElement


def test_signal_calls_slots_in_connection_order():
    signal = Signal()
    calls = []
    signal.connect(lambda value: calls.append(("first", value)))
    signal.connect(lambda value: calls.append(("second", value)))
    signal.emit(5)
    assert calls == [("first", 5), ("second", 5)]


def test_signal_passes_all_arguments():
    signal = Signal()
    received = []
    signal.connect(lambda *args: received.append(args))
    signal.emit(1, "two", None)
    assert received == [(1, "two", None)]


def test_signal_disconnect_stops_calls():
    signal = Signal()
    calls = []
    slot = calls.append
    signal.connect(slot)
    signal.emit("a")
    signal.disconnect(slot)
    signal.emit("b")
    assert calls == ["a"]
    assert len(signal) == 0


def test_signal_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_icon_description_defaults():
    icon = IconDescription()
    assert icon.width == 24
    assert icon.height == 24
    assert icon.cache is True
    assert icon.source == ""
    assert icon.color is None


def test_property_change_emits_new_value():
    icon = IconDescription()
    seen = []
    icon.width_changed.connect(seen.append)
    icon.width = 48
    assert icon.width == 48
    assert seen == [48]


def test_property_same_value_does_not_emit():
    icon = IconDescription()
    seen = []
    icon.height_changed.connect(seen.append)
    icon.height = icon.height
    assert seen == []


def test_signals_are_per_instance():
    first = StepperElement()
    second = StepperElement()
    seen = []
    first.text_changed.connect(seen.append)
    second.text = "other"
    first.text = "mine"
    assert seen == ["mine"]
    assert second.text == "other"


def test_constructor_sets_properties():
    step = StepperElement(text="Shipping", optional=True, alert_message="Missing address")
    assert step.text == "Shipping"
    assert step.optional is True
    assert step.alert_message == "Missing address"
    assert step.done is False
    assert step.supporting_text == ""


def test_constructor_rejects_unknown_property():
    with pytest.raises(TypeError):
        StepperElement(colour="red")


def test_stepper_done_toggle_notifies_each_change():
    step = StepperElement()
    seen = []
    step.done_changed.connect(seen.append)
    step.done = True
    step.done = True
    step.done = False
    assert seen == [True, False]