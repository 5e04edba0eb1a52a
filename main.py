import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.routes import report, simulation, zones
from config.settings import settings

logging.basicConfig(level=settings.log_level(), format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

for warning in settings.validate_config():
    logger.warning(warning)

settings.create_directories()

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(zones.router)
app.include_router(simulation.router)
app.include_router(report.router)

@app.get("/")
def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "endpoints": {
            "zones": "/api/v1/zones",
            "interventions": "/api/v1/interventions",
            "simulate": "/api/v1/simulate",
            "zone_simulate": "/api/v1/zones/{zone_id}/simulate",
            "ranking": "/api/v1/zones/{zone_id}/ranking",
            "scenarios": "/api/v1/zones/{zone_id}/scenarios",
            "report": "/api/v1/report",
            "docs": "/docs"
        }
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
