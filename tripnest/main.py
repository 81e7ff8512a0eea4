from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn

from . import routers
from .database import ALLOWED_ORIGINS, init_db, check_db_connection

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="TripNest API",
    description="Shared trip planning for two-person households",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create tables on first start"""
    logger.info("🚀 Starting TripNest API...")
    init_db()


# Include routers
app.include_router(routers.auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(
    routers.households.router, prefix="/api/households", tags=["households"]
)
app.include_router(routers.trips.router, prefix="/api/trips", tags=["trips"])
app.include_router(routers.expenses.router, prefix="/api/expenses", tags=["expenses"])
app.include_router(
    routers.checklists.router, prefix="/api/checklists", tags=["checklists"]
)
app.include_router(routers.calendar.router, prefix="/api/calendar", tags=["calendar"])


@app.get("/")
async def root():
    return {"message": "Welcome to TripNest API", "status": "running"}


@app.get("/health")
async def health_check():
    connections = check_db_connection()
    return {
        "status": "healthy" if connections["sqlalchemy"] else "degraded",
        "service": "tripnest-api",
        "version": "1.0.0",
        "connections": connections,
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
