import pytest

from nft.aggregator import AttributeAggregator
from nft.models import Attribute, Token
from nft.ranking import rank_by_id, rank_by_score
from nft.rarity_calculator import compute_percentages, compute_scores
from nft.report import format_token_id, write_attribute_report, write_id_report, write_rank_report


def _ranked():
    tokens = []
    for token_id, score in [(7, 12.5), (42, 1666.5), (1234, 3.0)]:
        token = Token(token_id, f"GOGO #{token_id}", "")
        token.score = score
        tokens.append(token)
    return rank_by_score(tokens)


def test_format_token_id():
    assert format_token_id(7) == "0007"
    assert format_token_id(1234) == "1234"
    assert format_token_id(7, padding=0) == "7"
    with pytest.raises(ValueError):
        format_token_id(7, padding=-1)


def test_rank_report_columns_and_order(tmp_path):
    path = tmp_path / "gogos-by-rank.csv"

    write_rank_report(_ranked(), str(path))

    assert path.read_text() == "rank,id,score\n1,0042,1666.5\n2,0007,12.5\n3,1234,3.0\n"


def test_id_report_unpadded(tmp_path):
    path = tmp_path / "reports" / "gogos-by-id.csv"

    write_id_report(rank_by_id(_ranked()), str(path), padding=0)

    assert path.read_text() == "id,rank,score\n7,2,12.5\n42,1,1666.5\n1234,3,3.0\n"


def test_attribute_report(tmp_path):
    aggregator = AttributeAggregator()
    aggregator.record_token(Token(1, "", "", [Attribute("Body", "Gold")]))
    aggregator.record_token(Token(2, "", "", [Attribute("Body", "Slime")]))
    aggregator.record_token(Token(3, "", "", [Attribute("Body", "Slime")]))
    table = aggregator.finalize()
    path = tmp_path / "gogos-attributes.csv"

    write_attribute_report(table, compute_scores(table, 4), compute_percentages(table, 4), str(path))

    assert path.read_text() == (
        "name,value,count,score,percentage\n"
        "Body,Gold,1,4.0,0.25\n"
        "Body,Slime,2,2.0,0.5\n"
    )


def test_empty_report_has_header(tmp_path):
    path = tmp_path / "empty.csv"

    write_rank_report([], str(path))

    assert path.read_text() == "rank,id,score\n"
