"""
Job Board API
=============
Backend for a job board where employers post jobs and workers apply

Flow:
1. Employer registers a company and posts jobs with a number of positions
2. Workers browse jobs, bookmark them and apply
3. Employer reviews applicants and accepts, rejects or waitlists them
4. Accepting is refused once every position of the job is taken
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.api import api_router
from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.exceptions import JobBoardError
from jobboard.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    logger.info("Starting %s", settings.APP_NAME)
    init_db()
    logger.info("Database initialized")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="""
## Job Board API

### Features:
- **Jobs**: Post jobs and browse them with the number of open positions
- **Applications**: Apply, list your applications, review applicants
- **Status updates**: Accept, reject or waitlist applicants within capacity
- **Saved jobs**: Bookmark jobs to apply later
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============== ERROR HANDLERS ==============

@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "success": False}
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "success": False},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Something is missing or malformed.", "success": False, "errors": errors}
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"message": "Internal server error", "success": False}
    if settings.DEBUG:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": settings.APP_NAME, "success": True}


@app.get("/")
def root():
    """Root endpoint with API info"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "jobs": f"{settings.API_PREFIX}/jobs",
            "applications": f"{settings.API_PREFIX}/applications",
            "users": f"{settings.API_PREFIX}/users",
            "companies": f"{settings.API_PREFIX}/companies"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("jobboard.main:app", host="0.0.0.0", port=8000, reload=True)
