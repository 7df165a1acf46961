from openrdap.decode_data import DecodeData
from openrdap.models import Autnum, Event, Link, Notice, PublicID, Remark


def test_autnum_range_defaults_unset():
    a = Autnum()
    assert a.start_autnum is None
    assert a.end_autnum is None
    assert a.handle == ""


def test_default_lists_are_independent():
    a, b = Autnum(), Autnum()
    a.status.append("active")
    assert b.status == []
    n1, n2 = Notice(), Notice()
    n1.description.append("x")
    assert n2.description == []


def test_autnum_holds_nested_objects():
    link = Link(rel="self", href="https://rdap.example.com/autnum/2856")
    event = Event(action="registration", date="2017-01-01T00:00:00Z")
    remark = Remark(title="t", description=["d1", "d2"], links=[link])
    a = Autnum(
        handle="AS2856",
        start_autnum=2856,
        end_autnum=2856,
        links=[link],
        events=[event],
        remarks=[remark],
    )
    assert a.links[0].href == "https://rdap.example.com/autnum/2856"
    assert a.events[0].action == "registration"
    assert a.remarks[0].links == [link]
    assert a.start_autnum == a.end_autnum == 2856


def test_equality_by_value():
    assert PublicID(type="IANA", identifier="9") == PublicID(type="IANA", identifier="9")
    assert Link(href="a") != Link(href="b")


def test_decode_data_attached():
    dd = DecodeData()
    dd.set_value("port43", "whois.example.com", known=True)
    a = Autnum(port43="whois.example.com", decode_data=dd)
    assert a.decode_data.value("port43") == a.port43