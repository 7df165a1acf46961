import pytest

from openrdap.decode_data import DecodeData


@pytest.fixture
def data():
    d = DecodeData()
    d.set_value("handle", "EXAMPLECOM", known=True)
    d.set_value("port43", "whois.example.com", known=True)
    d.set_value("customField", {"a": 1})
    return d


def test_value_returns_recorded_value(data):
    assert data.value("handle") == "EXAMPLECOM"
    assert data.value("customField") == {"a": 1}


def test_value_of_missing_field_is_none(data):
    assert data.value("nope") is None


def test_fields_lists_known_and_unknown(data):
    assert sorted(data.fields()) == ["customField", "handle", "port43"]


def test_unknown_fields(data):
    assert data.unknown_fields() == ["customField"]


def test_fresh_data_is_empty():
    d = DecodeData()
    assert d.fields() == []
    assert d.unknown_fields() == []
    assert d.notes("handle") == []


def test_notes_accumulate_in_order():
    d = DecodeData()
    d.add_note("port43", "invalid JSON type, expecting string")
    d.add_note("port43", "second")
    assert d.notes("port43") == ["invalid JSON type, expecting string", "second"]
    assert d.notes("handle") == []


def test_notes_returns_copy():
    d = DecodeData()
    d.add_note("lang", "bad")
    d.notes("lang").append("extra")
    assert d.notes("lang") == ["bad"]


def test_set_value_can_change_known_state():
    d = DecodeData()
    d.set_value("x", 1)
    assert d.unknown_fields() == ["x"]
    d.set_value("x", 2, known=True)
    assert d.unknown_fields() == []
    assert d.value("x") == 2


def test_notes_do_not_create_fields():
    d = DecodeData()
    d.add_note("ghost", "note")
    assert d.fields() == []