import pytest

from nft.aggregator import AttributeAggregator
from nft.models import Attribute, Token


def test_record_tracks_names_values_and_counts_in_first_seen_order():
    aggregator = AttributeAggregator()
    first = Token(1, "GOGO #1", "", [Attribute("Eyes", "Laser"), Attribute("Body", "Gold")])
    second = Token(2, "GOGO #2", "", [Attribute("Body", "Slime"), Attribute("Eyes", "Laser")])

    aggregator.record_token(first)
    aggregator.record_token(second)
    table = aggregator.finalize()

    assert table.names == ("Eyes", "Body")
    assert table.values("Body") == ("Gold", "Slime")
    assert table.count("Eyes", "Laser") == 2
    assert table.count("Body", "Gold") == 1
    assert table.count("Body", "Missing") == 0
    assert table.token_count == 2
    assert len(table) == 3
    assert ("Eyes", "Laser") in table
    assert ("Hat", "Crown") not in table
    assert list(table.pairs()) == [
        ("Eyes", "Laser", 2),
        ("Body", "Gold", 1),
        ("Body", "Slime", 1),
    ]


def test_repeated_name_on_one_token_is_counted_twice():
    aggregator = AttributeAggregator()
    token = Token(1, "", "", [Attribute("Accessory", "Ring"), Attribute("Accessory", "Ring")])

    aggregator.record_token(token)

    assert aggregator.finalize().count("Accessory", "Ring") == 2


def test_finalized_table_is_read_only():
    aggregator = AttributeAggregator()
    token = Token(1, "", "", [Attribute("Body", "Gold")])
    aggregator.record_token(token)
    table = aggregator.finalize()

    with pytest.raises(TypeError):
        table.counts["Body"]["Gold"] = 10
    with pytest.raises(RuntimeError):
        aggregator.record(token, Attribute("Body", "Slime"))
    assert table.count("Body", "Gold") == 1
