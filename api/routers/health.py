# WORKFLOW: Health check endpoints for monitoring and operational status.
# Used by: Load balancers, monitoring systems, operational dashboards
# Endpoints:
# 1. /healthz - Basic health check (always returns healthy)
# 2. /readyz - Readiness check (registry and catalogs loaded)
#
# Health flow: Health check request -> Service status check -> Health response
# Readiness flow: Readiness check -> Registry/catalog load -> Ready/Not ready

from fastapi import APIRouter
import logging
from datetime import datetime, timezone

from catalogs.country_catalog import get_country_catalog
from catalogs.uom_catalog import get_uom_catalog
from core.config import settings
from registry.document_registry import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Health status of the API
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "environment": settings.environment
    }


@router.get("/readyz")
async def readiness_check():
    """
    Readiness check endpoint.

    The service is ready once the document registry and both catalogs load.
    """
    checks = {
        "registry": False,
        "country_catalog": False,
        "uom_catalog": False
    }

    try:
        checks["registry"] = len(get_registry().doc_types()) > 0
    except Exception as e:
        logger.error(f"Registry health check failed: {e}")

    try:
        checks["country_catalog"] = len(get_country_catalog()) > 0
    except Exception as e:
        logger.error(f"Country catalog health check failed: {e}")

    try:
        checks["uom_catalog"] = len(get_uom_catalog()) > 0
    except Exception as e:
        logger.error(f"UOM catalog health check failed: {e}")

    is_ready = all(checks.values())

    return {
        "status": "ready" if is_ready else "not_ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
        "version": settings.version
    }
