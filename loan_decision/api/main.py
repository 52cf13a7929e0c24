"""FastAPI application factory for the loan decision service"""

import logging
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_decision.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_decision.api.v1 import decision
from loan_decision.infrastructure.observability.logging import setup_logging
from loan_decision.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Build the app, failing fast if the configured loan limits are inconsistent"""
    limits = settings.loan_limits()

    app = FastAPI(
        title="Loan Decision Engine",
        description="Approves loan amount and period from an Estonian personal code",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first, so every request has an ID before it is timed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "loan_amount_range": [limits.min_loan_amount, limits.max_loan_amount],
            "loan_period_range": [limits.min_loan_period, limits.max_loan_period],
        }

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    logging.info(
        "Loan decision service configured",
        extra={
            "loan_amount_range": [limits.min_loan_amount, limits.max_loan_amount],
            "loan_period_range": [limits.min_loan_period, limits.max_loan_period],
        },
    )

    return app


app = create_app()
