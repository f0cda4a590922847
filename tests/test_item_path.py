import pytest

from spix.geometry import Point, Size
from spix.item_path import ItemPath, ItemPosition


def test_init_with_path_string():
    path = ItemPath("windowname/item/subitem")
    assert path.components == ("windowname", "item", "subitem")


def test_init_with_empty_string():
    assert ItemPath("").components == ()


def test_init_with_extra_slashes():
    path = ItemPath("/windowname/item/subitem/")
    assert len(path.components) == 3
    assert path.components[0] == "windowname"
    assert path.components[1] == "item"
    assert path.components[2] == "subitem"


def test_init_with_components():
    path = ItemPath(["windowname", "item", "subitem"])
    assert path.components == ("windowname", "item", "subitem")


def test_default_path_is_empty():
    assert ItemPath().components == ()
    assert str(ItemPath()) == ""


@pytest.mark.parametrize(
    "offset, expected",
    [
        (0, "windowname/item/subitem/subsubitem"),
        (1, "item/subitem/subsubitem"),
        (3, "subsubitem"),
        (4, ""),
        (100, ""),
    ],
)
def test_sub_path(offset, expected):
    path = ItemPath("windowname/item/subitem/subsubitem")
    assert str(path.sub_path(offset)) == expected


def test_string_round_trip():
    text = "mainWindow/myListView/listItem_0"
    assert str(ItemPath(text)) == text
    assert ItemPath(str(ItemPath(text))) == ItemPath(text)


def test_root_component():
    assert ItemPath("mainWindow/Button_1").root_component() == "mainWindow"


def test_root_component_of_empty_path_raises():
    with pytest.raises(IndexError):
        ItemPath("").root_component()


def test_copy_from_item_path_and_hash():
    original = ItemPath("a/b")
    copy = ItemPath(original)
    assert copy == original
    assert len({original, copy}) == 1


def test_item_position_apply_to_size():
    position = ItemPosition("windowname/item/subitem", Point(1.0, 0.0), Point(10.0, -5.0))
    resolved = position.position_for_item_size(Size(100.0, 40.0))
    assert resolved.x == pytest.approx(110.0)
    assert resolved.y == pytest.approx(-5.0)


def test_item_position_accepts_tuples():
    position = ItemPosition("windowname/item/subitem", (1.0, 0.0), (10.0, -5.0))
    assert position.proportion == Point(1.0, 0.0)
    assert position.offset == Point(10.0, -5.0)


def test_item_position_default_is_centre():
    position = ItemPosition("window/some/item")
    resolved = position.position_for_item_size(Size(100.0, 30.0))
    assert 49.0 < resolved.x < 51.0
    assert 14.0 < resolved.y < 16.0


def test_item_position_converts_path():
    position = ItemPosition("window/some/item")
    assert position.item_path == ItemPath(["window", "some", "item"])