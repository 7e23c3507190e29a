import logging

import pytest
from urn_components import RQF, ParameterItem
from urn_components.rqf import find_indicator, parameters


def test_resolution_component():
    rqf = RQF.from_string("?+param1=value1")
    assert rqf.resolution == "param1=value1"
    assert rqf.query is None
    assert rqf.fragment is None


def test_query_component():
    rqf = RQF.from_string("?=param1=value1&param2=value2")
    assert rqf.resolution is None
    assert rqf.query == "param1=value1&param2=value2"
    assert rqf.fragment is None


def test_fragment_component():
    rqf = RQF.from_string("#example")
    assert rqf.resolution is None
    assert rqf.query is None
    assert rqf.fragment == "example"


def test_all_components():
    rqf = RQF.from_string("?+r=1?=q=2#f")
    assert rqf == RQF(resolution="r=1", query="q=2", fragment="f")
    assert str(rqf) == "?+r=1?=q=2#f"


@pytest.mark.parametrize("trailer", [None, "", "?", "some-value", "?-x"])
def test_no_rqf_component(trailer):
    assert RQF.from_string(trailer) is None


def test_empty_rqf_components():
    rqf = RQF.from_string("?+?=#")
    assert rqf.resolution == ""
    assert rqf.query == ""
    assert rqf.fragment == ""

    assert RQF.from_string("?+").resolution == ""
    assert RQF.from_string("?=").query == ""
    assert RQF.from_string("#").fragment == ""
    assert RQF.from_string("?+").query is None


def test_out_of_order_indicator_stays_in_payload():
    rqf = RQF.from_string("?=q?+r")
    assert rqf.resolution is None
    assert rqf.query == "q?+r"
    assert str(rqf) == "?=q?+r"

    rqf = RQF.from_string("?+r#f?=q")
    assert rqf.resolution == "r"
    assert rqf.query is None
    assert rqf.fragment == "f?=q"
    assert str(rqf) == "?+r#f?=q"


def test_text_before_first_indicator_is_ignored():
    rqf = RQF.from_string("junk#frag")
    assert rqf.fragment == "frag"
    assert str(rqf) == "#frag"


def test_no_indicator_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="urn_components.rqf"):
        assert RQF.from_string("garbage") is None
    assert "garbage" in caplog.text


def test_from_fields():
    assert RQF.from_fields() is None
    assert RQF.from_fields(fragment="") == RQF(fragment="")
    assert str(RQF.from_fields(resolution="a", fragment="b")) == "?+a#b"


def test_requires_a_component():
    with pytest.raises(ValueError):
        RQF()


def test_rqf_immutable():
    rqf = RQF(query="a=b")
    with pytest.raises(AttributeError):
        rqf.query = "c=d"


def test_parameter_items():
    assert parameters("k1=v1&k2=v2") == [ParameterItem("k1", "v1"), ParameterItem("k2", "v2")]
    assert parameters("bad&k=v") == [ParameterItem("k", "v")]


@pytest.mark.parametrize("payload", ["", "k", "k=", "=v", "a=b=c", "&&"])
def test_malformed_parameters_dropped(payload):
    assert parameters(payload) == []


def test_empty_parts_are_skipped_when_splitting():
    assert parameters("a==b&&c=d") == [ParameterItem("a", "b"), ParameterItem("c", "d")]


def test_dropped_parameter_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="urn_components.rqf"):
        parameters("broken&k=v")
    assert "broken" in caplog.text


def test_items_of_absent_components():
    rqf = RQF(fragment="x")
    assert rqf.resolution_items == []
    assert rqf.query_items == []


def test_query_items_keep_source_order():
    rqf = RQF.from_string("?=op=map&lat=39.56&lon=-104.85")
    assert [item.name for item in rqf.query_items] == ["op", "lat", "lon"]
    assert rqf.query_items[2].value == "-104.85"


def test_find_indicator():
    assert find_indicator("abc") is None
    assert find_indicator("a#b?+c") == 1
    assert find_indicator("a?=b#c") == 1
    assert find_indicator("a?=b#c", 2) == 4
    assert find_indicator("a?=b#c", 0, ("#",)) == 4
    assert find_indicator("a?b") is None
