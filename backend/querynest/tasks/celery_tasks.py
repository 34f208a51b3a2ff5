"""Background task definitions"""

from datetime import datetime
from functools import lru_cache
from sqlalchemy.orm import sessionmaker

from .celery_config import celery_app
from ..config import settings
from ..services.reconciliation import reconcile_recommendation_counts
from ..utils.database import create_db_engine, create_session_factory
from ..utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    """Session factory for tasks, created on first use in the worker"""
    return create_session_factory(create_db_engine(settings.SQLALCHEMY_DATABASE_URL))


@celery_app.task(name="querynest.tasks.celery_tasks.reconcile_recommendation_counts_task")
def reconcile_recommendation_counts_task():
    """
    Repair drifted recommendation counters

    Runs periodically; see ``reconcile_recommendation_counts``.
    """
    logger.info("Starting recommendation count reconciliation")
    db = get_session_factory()()

    try:
        repairs = reconcile_recommendation_counts(db)

        return {
            "status": "success",
            "timestamp": datetime.utcnow().isoformat(),
            "repaired": {str(query_id): list(counts) for query_id, counts in repairs.items()}
        }

    except Exception:
        logger.error("Error reconciling recommendation counts", exc_info=True)
        raise
    finally:
        db.close()
