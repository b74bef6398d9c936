from termwrap.format.text import is_indented, is_list_item, list_marker


def test_list_markers():
    assert list_marker("1. First") == "1. "
    assert list_marker("12) Twelfth") == "12) "
    assert list_marker("a) Letter") == "a) "
    assert list_marker("* Bullet") == "* "


def test_not_list_markers():
    assert not is_list_item("- dash is not a marker")
    assert not is_list_item("A) uppercase is not a marker")
    assert not is_list_item("1.no space")
    assert not is_list_item(" 1. indented")
    assert not is_list_item("Plain text.")


def test_indented():
    assert is_indented("  code")
    assert not is_indented("code")
    assert not is_indented("")
