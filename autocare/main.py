"""
Main FastAPI application entry point.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autocare.config import get_settings
from autocare.database import init_db
from autocare.logging_setup import setup_logging
from autocare.routers import customers, images, notifications, progress, reminders

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    setup_logging(settings.log_level, settings.log_file)
    print("🚀 Starting AutoCare Service Tracker...")
    print("📊 Initializing database...")
    init_db()
    print("✅ Database initialized successfully")
    print(f"🌐 API available at: {settings.api_v1_prefix}")
    print("📖 Interactive docs: http://localhost:8000/docs")

    yield

    # Shutdown
    print("👋 Shutting down AutoCare Service Tracker...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## 🔧 AutoCare Service Tracker API

    Service progress tracking for car-service appointments.

    ### Features:
    * **Progress**: Per-task status with a derived completion percentage
    * **Images**: Service photos matched to tasks by title and category
    * **Notifications**: Customers are told about every status change
    * **Reminders**: Staff send due-service reminders to customers

    ### Entities:
    * **Customers**: Vehicles, appointments, notifications and progress
    * **Images**: Shared service image library
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(customers.router, prefix=settings.api_v1_prefix)
app.include_router(progress.router, prefix=settings.api_v1_prefix)
app.include_router(images.router, prefix=settings.api_v1_prefix)
app.include_router(notifications.router, prefix=settings.api_v1_prefix)
app.include_router(reminders.router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to AutoCare Service Tracker API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "autocare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
