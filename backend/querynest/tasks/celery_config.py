"""Celery configuration and beat schedule"""

from celery import Celery
from datetime import timedelta

from ..config import settings

# Initialize Celery
celery_app = Celery(
    "querynest_tasks",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND
)

# Celery configuration
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=600,
    worker_prefetch_multiplier=1,
)

# Periodic tasks schedule
celery_app.conf.beat_schedule = {
    'reconcile-recommendation-counts': {
        'task': 'querynest.tasks.celery_tasks.reconcile_recommendation_counts_task',
        'schedule': timedelta(minutes=settings.RECONCILE_INTERVAL_MINUTES),
    },
}
