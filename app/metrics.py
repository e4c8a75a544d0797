"""Shop metrics on the default prometheus_client registry.

``/metrics`` itself is served by prometheus-flask-exporter; the series
here cover what it does not see: time spent in the store per statement
kind, rejected or failed requests, and checkout outcomes.
"""

import time

from flask import request
from prometheus_client import Counter, Histogram
from sqlalchemy import event

from models import db

STORE_STATEMENT_SECONDS = Histogram(
    "db_query_duration_seconds",
    "Time spent executing SQL statements, by statement kind",
    ["statement"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)

REJECTED_RESPONSES = Counter(
    "flask_error_total",
    "Responses answered with status >= 400",
    ["endpoint", "method", "code"],
)

CHECKOUT_COUNTER = Counter(
    "shop_checkout_total",
    "Checkout attempts by outcome (success or the error class name)",
    ["outcome"],
)

_STATEMENT_KINDS = ("select", "insert", "update", "delete")


def statement_kind(statement):
    verb = (statement or "").lstrip().split(" ", 1)[0].lower()
    return verb if verb in _STATEMENT_KINDS else "other"


def _watch_engine(engine):
    @event.listens_for(engine, "before_cursor_execute")
    def _started(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("shop_statement_started", []).append(time.perf_counter())

    @event.listens_for(engine, "after_cursor_execute")
    def _finished(conn, cursor, statement, parameters, context, executemany):
        started = conn.info["shop_statement_started"].pop()
        STORE_STATEMENT_SECONDS.labels(statement_kind(statement)).observe(time.perf_counter() - started)


def init_app(app):
    with app.app_context():
        _watch_engine(db.engine)

    @app.after_request
    def _count_rejections(resp):
        if resp.status_code >= 400:
            REJECTED_RESPONSES.labels(request.endpoint or "unknown", request.method, resp.status_code).inc()
        return resp
