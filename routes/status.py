"""
Player Data Manager - Status Endpoints

This module contains the health check endpoint.
"""

from fastapi import APIRouter


# Create router instance
router = APIRouter()


# ==================== Health Check Endpoint ====================

@router.get("/health", tags=["Status"])
async def health_check():
    """
    Health check endpoint to verify server is running

    Returns:
        dict: {"ok": True}
    """
    return {"ok": True}
