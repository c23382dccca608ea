"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Depends, Response
from prometheus_client import CollectorRegistry

from podprobe.api.deps import get_metrics_registry
from podprobe.services.metrics import CONTENT_TYPE, render

router = APIRouter()


@router.get("/metrics")
def metrics(registry: CollectorRegistry = Depends(get_metrics_registry)) -> Response:
    return Response(content=render(registry), media_type=CONTENT_TYPE)
