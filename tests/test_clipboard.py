import pytest

from qaterial.clipboard import Clipboard


@pytest.fixture
def apps():
    editor = Clipboard(application="editor")
    viewer = Clipboard(application="viewer")
    editor.clear()
    return editor, viewer


def test_empty_after_clear(apps):
    editor, viewer = apps
    assert editor.text == ""
    assert viewer.text == ""
    assert not editor.owns


def test_set_text_is_shared(apps):
    editor, viewer = apps
    editor.text = "my text to copy"
    assert viewer.text == "my text to copy"
    assert editor.text == "my text to copy"


def test_ownership_follows_writer(apps):
    editor, viewer = apps
    editor.text = "first"
    assert editor.owns and not viewer.owns
    viewer.text = "second"
    assert viewer.owns and not editor.owns
    assert editor.text == "second"


def test_other_application_is_notified(apps):
    editor, viewer = apps
    texts, owns = [], []
    viewer.text_changed.connect(lambda: texts.append(viewer.text))
    viewer.owns_changed.connect(lambda: owns.append(viewer.owns))
    editor.text = "hello"
    assert texts == ["hello"]
    assert owns == [False]


def test_same_text_from_owner_is_not_copied_again(apps):
    editor, _ = apps
    editor.text = "same"
    events = []
    editor.text_changed.connect(lambda: events.append("text"))
    editor.owns_changed.connect(lambda: events.append("owns"))
    editor.text = "same"
    assert events == []


def test_same_text_from_other_application_takes_ownership(apps):
    editor, viewer = apps
    editor.text = "same"
    viewer.text = "same"
    assert viewer.owns
    assert not editor.owns


def test_clear_drops_text_and_ownership(apps):
    editor, viewer = apps
    editor.text = "gone soon"
    texts, owns = [], []
    viewer.text_changed.connect(lambda: texts.append(viewer.text))
    viewer.owns_changed.connect(lambda: owns.append(viewer.owns))
    viewer.clear()
    assert editor.text == ""
    assert not editor.owns
    assert texts == []
    assert owns == [False]


def test_empty_string_is_text(apps):
    editor, viewer = apps
    seen = []
    viewer.text_changed.connect(lambda: seen.append(viewer.text))
    editor.text = ""
    assert seen == [""]
    assert editor.owns