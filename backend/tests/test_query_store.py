"""Tests for the Query Store"""

from querynest.models import Query
from querynest.schemas.query import QueryUpdate
from querynest.services import QueryStore


def test_upsert_falls_back_to_update_when_id_taken_concurrently(session_factory, monkeypatch):
    """Test an upsert that loses the insert race merges into the winner"""

    winner = session_factory()
    winner.add(Query(id=7, user_email="alice@example.com", product_name="P1", recommendation_count=2))
    winner.commit()
    winner.close()

    db = session_factory()
    store = QueryStore(db)
    lookup = store.get_by_id
    calls = []

    def get_by_id_before_insert(query_id):
        calls.append(query_id)
        # The first lookup runs before the other writer commits
        return None if len(calls) == 1 else lookup(query_id)

    monkeypatch.setattr(store, "get_by_id", get_by_id_before_insert)

    result = store.update(7, QueryUpdate(product_name="P1 v2"))

    assert result.matched_count == 1
    assert result.modified_count == 1
    assert result.upserted_count == 0

    query = db.get(Query, 7)
    assert query.product_name == "P1 v2"
    assert query.user_email == "alice@example.com"
    assert query.recommendation_count == 2

    db.close()


def test_upsert_inserts_missing_id(db_session):
    """Test an upsert on a free id creates the query"""

    result = QueryStore(db_session).update(8, QueryUpdate(user_email="bob@example.com"))

    assert result.upserted_id == 8
    assert db_session.get(Query, 8).recommendation_count == 0
