from nft.models import Token
from nft.ranking import rank_by_id, rank_by_score


def _scored(token_id, score):
    token = Token(token_id, f"GOGO #{token_id}", "")
    token.score = score
    return token


def test_rank_by_score_descending_with_id_tiebreak():
    t1, t2, t3 = _scored(1, 10.0), _scored(2, 25.0), _scored(3, 25.0)

    ranked = rank_by_score([t1, t2, t3])

    assert [e.token.id for e in ranked] == [2, 3, 1]
    assert [e.rank for e in ranked] == [1, 2, 3]


def test_ties_are_broken_by_id_regardless_of_input_order():
    ranked = rank_by_score([_scored(3, 25.0), _scored(1, 10.0), _scored(2, 25.0)])

    assert [e.token.id for e in ranked] == [2, 3, 1]


def test_rank_by_id_keeps_score_ranks():
    ranked = rank_by_score([_scored(1, 10.0), _scored(2, 25.0), _scored(3, 17.5)])

    by_id = rank_by_id(ranked)

    assert [(e.token.id, e.rank) for e in by_id] == [(1, 3), (2, 1), (3, 2)]


def test_empty_collection():
    assert rank_by_score([]) == []
    assert rank_by_id([]) == []
