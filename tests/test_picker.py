import pytest

from proompt.picker import FakePicker, PickerError, PickerItem, RealPicker

ITEMS = [
    PickerItem(name="test1", source="directory", path="path1"),
    PickerItem(name="test2", source="project", path="path2"),
]


def test_fake_picker_valid_selection():
    picker = FakePicker(selected_index=0)
    result = picker.pick(ITEMS)
    assert result.name == "test1"
    assert picker.selections == [ITEMS[0]]


def test_fake_picker_second_item():
    picker = FakePicker(selected_index=1)
    assert picker.pick(ITEMS) == ITEMS[1]


def test_fake_picker_no_items():
    with pytest.raises(PickerError, match="no items to pick from"):
        FakePicker().pick([])


@pytest.mark.parametrize("index", [5, -1])
def test_fake_picker_invalid_index(index):
    picker = FakePicker(selected_index=index)
    with pytest.raises(PickerError, match=f"invalid selection index: {index}"):
        picker.pick(ITEMS[:1])
    assert picker.selections == []


def test_fake_picker_failure():
    with pytest.raises(PickerError, match="picker failed"):
        FakePicker(should_fail=True).pick(ITEMS)


def test_picker_item_fields():
    item = PickerItem(name="test", source="directory", path="/path/to/test")
    assert (item.name, item.source, item.path) == ("test", "directory", "/path/to/test")


def test_new_fake_picker_defaults():
    picker = FakePicker()
    assert picker.selections == []
    assert picker.selected_index == 0


def test_real_picker_keeps_command():
    assert RealPicker("fzf").command == "fzf"


def test_real_picker_no_items():
    with pytest.raises(PickerError, match="no items to pick from"):
        RealPicker("cat").pick([])


def test_real_picker_returns_matching_item():
    assert RealPicker("tail -n 1").pick(ITEMS) == ITEMS[1]


def test_real_picker_empty_selection():
    with pytest.raises(PickerError, match="no selection made"):
        RealPicker("cat > /dev/null").pick(ITEMS)


def test_real_picker_unknown_selection():
    with pytest.raises(PickerError, match="selected item not found: nope"):
        RealPicker("cat > /dev/null; echo nope").pick(ITEMS)


def test_real_picker_failing_command():
    with pytest.raises(PickerError, match="exit status 2"):
        RealPicker("exit 2").pick(ITEMS)