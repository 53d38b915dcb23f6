from wikirelay.utils import find_key


def test_find_key_nested():
    data = {"batchcomplete": True, "query": {"pages": [{"title": "Cat"}]}}
    assert find_key("pages", data) == [{"title": "Cat"}]


def test_find_key_inside_list():
    data = {"query": {"pages": [{"title": "Cat", "thumbnail": {"width": 70}}]}}
    assert find_key("thumbnail", data) == {"width": 70}


def test_find_key_missing():
    assert find_key("pages", {"query": {"search": [1, 2, {"a": None}]}}) == {}
    assert find_key("pages", []) == {}
    assert find_key("pages", "pages") == {}


def test_find_key_shallowest_wins():
    data = {"a": {"b": {"key": "deep"}}, "key": "top"}
    assert find_key("key", data) == "top"


def test_find_key_same_depth_in_order():
    data = {"first": {"key": 1}, "second": {"key": 2}}
    assert find_key("key", data) == 1

    data = {"items": [{"other": 0}, {"key": "a"}, {"key": "b"}]}
    assert find_key("key", data) == "a"


def test_find_key_falsy_value():
    assert find_key("missing", {"page": {"missing": False}}) is False
    assert find_key("pages", {"query": {"pages": []}}) == []


def test_find_key_max_depth():
    data = {"a": {"b": {"c": {"key": "found"}}}}
    assert find_key("key", data, max_depth=3) == "found"
    assert find_key("key", data, max_depth=2) == {}
