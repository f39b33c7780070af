"""
Health Check Router
Simple endpoint to verify API is running
"""
from fastapi import APIRouter

from core.config import Config

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": Config.SERVICE_NAME,
        "version": Config.VERSION
    }
