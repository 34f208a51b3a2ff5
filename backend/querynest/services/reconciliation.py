"""Recommendation counter reconciliation"""

from typing import Dict, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models import Query, Recommendation
from ..utils.logging import get_logger
from ..utils.metrics import record_counter_repairs

logger = get_logger(__name__)


def reconcile_recommendation_counts(db: Session) -> Dict[int, Tuple[int, int]]:
    """
    Recount recommendations per query and repair drifted counters

    Recommendations pointing at a query that no longer exists are ignored.
    All repairs are committed together.

    Args:
        db: Database session

    Returns:
        Mapping of query id to (stored count, actual count) for every
        counter that was rewritten
    """

    actual_counts = dict(
        db.query(Recommendation.query_id, func.count(Recommendation.id))
        .group_by(Recommendation.query_id)
        .all()
    )

    repairs = {}
    for query in db.query(Query).all():
        actual = actual_counts.get(query.id, 0)
        if query.recommendation_count != actual:
            repairs[query.id] = (query.recommendation_count, actual)
            query.recommendation_count = actual

    if repairs:
        db.commit()
        record_counter_repairs(len(repairs))
        logger.warning("Recommendation counters repaired", repaired=len(repairs), query_ids=sorted(repairs))
    else:
        logger.info("Recommendation counters consistent")

    return repairs
