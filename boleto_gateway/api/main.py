"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from boleto_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from boleto_gateway.api.v1 import boleto
from boleto_gateway.config import Settings, settings
from boleto_gateway.infrastructure.observability.logging import setup_logging


def _add_operational_routes(app: FastAPI, app_settings: Settings) -> None:
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the boleto service: JSON logging, request tracing, encode/decode routes"""
    setup_logging(app_settings.log_level, app_settings.service_name)

    app = FastAPI(
        title="Boleto Gateway",
        description="Barcode and typeable line encoding for Caixa boletos",
        version="0.1.0",
    )

    # RequestIDMiddleware wraps MetricsMiddleware, so latency includes ID handling
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    _add_operational_routes(app, app_settings)
    app.include_router(boleto.router, prefix="/v1", tags=["boletos"])

    return app


app = create_app()
