"""Prometheus metrics configuration"""

from prometheus_client import Counter, Info
from prometheus_fastapi_instrumentator import Instrumentator

from ..config import settings

# Application info
app_info = Info('querynest', 'Query Nest Information')
app_info.info({
    'version': settings.VERSION,
    'service': 'query-nest-backend'
})

# Cascade metrics
cascade_updates_total = Counter(
    'querynest_cascade_updates_total',
    'Recommendation counter adjustments on parent queries',
    ['operation', 'outcome']
)

counter_repairs_total = Counter(
    'querynest_counter_repairs_total',
    'Recommendation counters rewritten by reconciliation'
)


def setup_metrics(app):
    """
    Setup Prometheus metrics for FastAPI app

    Args:
        app: FastAPI application instance
    """
    instrumentator = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics"],
        env_var_name="ENABLE_METRICS",
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True
    )

    instrumentator.instrument(app).expose(app, endpoint="/metrics")

    return instrumentator


def record_cascade(operation: str, matched: int):
    """Record a counter adjustment; ``matched`` is 0 when the parent is missing"""
    outcome = "applied" if matched else "missing_parent"
    cascade_updates_total.labels(operation=operation, outcome=outcome).inc()


def record_counter_repairs(count: int):
    """Record counters rewritten by a reconciliation pass"""
    counter_repairs_total.inc(count)
