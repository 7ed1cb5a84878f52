from fastapi import APIRouter
from jobboard.api.routes import jobs, applications, users, companies

api_router = APIRouter()

# Include all route modules
api_router.include_router(jobs.router)
api_router.include_router(applications.router)
api_router.include_router(users.router)
api_router.include_router(companies.router)
