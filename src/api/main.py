"""
Coaching Program FastAPI Backend
Main application entry point for client and program APIs
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import clients, programs, health
from core.config import Config, configure_logging
from db.database import init_db

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=Config.SERVICE_NAME,
    description="API for managing coaching clients and generating templated workout programs",
    version=Config.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(clients.router, prefix="/api/clients", tags=["clients"])
app.include_router(programs.router, prefix="/api", tags=["programs"])


@app.on_event("startup")
async def startup_event():
    """Run on application startup"""
    init_db()
    print("\n" + "="*80)
    print("🚀 Coaching Program Backend Starting...")
    print("="*80)
    print("📚 API Docs: http://localhost:8000/docs")
    print("💚 Health Check: http://localhost:8000/api/health")
    print("="*80 + "\n")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    logger.info("Coaching Program Backend shutting down")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": Config.SERVICE_NAME,
        "version": Config.VERSION,
        "docs": "/docs",
        "health": "/api/health"
    }
