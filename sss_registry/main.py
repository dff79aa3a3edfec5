"""Main FastAPI application for the SSS online form applicant registry"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse
from sss_registry.api.endpoints import crud, applicants
from sss_registry.config import get_settings
from sss_registry.database import init_db
from pathlib import Path
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Create FastAPI app
app = FastAPI(
    title=settings.app_title,
    description="Applicant registry for the SSS online form: intake form submissions and a CRUD table",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers with /api prefix
app.include_router(crud.router, prefix="/api", tags=["Table"])
app.include_router(applicants.router, prefix="/api", tags=["Intake Form"])


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    logger.info("Initializing database...")
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the applicant table page"""
    html_path = STATIC_DIR / "index.html"
    if html_path.exists():
        return html_path.read_text(encoding="utf-8")
    return """
    <html>
        <body>
            <h1>SSS Online Form Registry</h1>
            <p>Frontend not found. Please check sss_registry/static/index.html</p>
        </body>
    </html>
    """


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.get("/init-db")
def initialize_database():
    """Manually initialize database tables - for troubleshooting"""
    try:
        init_db()
        return {"status": "success", "message": "Database tables created"}
    except Exception as e:
        logger.error(f"Manual database initialization failed: {e}")
        return {"status": "error", "message": str(e)}


def run():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
