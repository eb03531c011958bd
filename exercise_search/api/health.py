"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the exercise search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the exercise search service.
    
    An empty catalog is reported as degraded: the service answers, but
    every search comes back empty.
    """
    try:
        uptime = time.time() - app_start_time
        catalog_size = len(search_engine.catalog)
        
        dependencies = {
            "search_engine": "healthy",
            "catalog": "healthy" if catalog_size > 0 else "degraded"
        }
        
        # Exercise the ranking path end to end
        try:
            search_engine.search("", max_results=1, include_suggestions=False)
        except Exception:
            dependencies["search_engine"] = "unhealthy"
        
        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            catalog_size=catalog_size,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept requests.
    
    Ready means a catalog has been loaded.
    """
    catalog_size = len(search_engine.catalog)
    
    if catalog_size == 0:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": "Exercise catalog is empty",
                "timestamp": datetime.utcnow().isoformat()
            }
        )
    
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "catalog_size": catalog_size
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """
    Check if the service is alive and responding.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """
    Get detailed status information about the service.
    
    Includes engine statistics and the active search configuration.
    """
    try:
        stats = search_engine.get_stats()
        
        config_info = {
            "catalog_path": str(settings.catalog_path),
            "max_results": settings.max_results,
            "max_query_length": settings.max_query_length,
            "suggestion_cutoff": settings.suggestion_cutoff,
            "debug": settings.debug
        }
        
        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": datetime.utcnow().isoformat()
            }
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
