# routes/health.py
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from ..config import settings

router = APIRouter()

@router.get("/")
def root():
    """Service identification"""
    return {"ok": True, "service": settings.service_name}

@router.get("/health")
def health(request: Request):
    """Health check endpoint for container probes"""
    if request.app.state.database.ping():
        return {"status": "healthy", "database": "connected"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "disconnected"},
    )
