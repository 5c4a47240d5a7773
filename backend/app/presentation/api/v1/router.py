"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.auth import router as auth_router
from app.presentation.api.v1.endpoints.clients import router as clients_router
from app.presentation.api.v1.endpoints.projects import router as projects_router
from app.presentation.api.v1.endpoints.codebases import router as codebases_router
from app.presentation.api.v1.endpoints.links import router as links_router
from app.presentation.api.v1.endpoints.files import router as files_router
from app.presentation.api.v1.endpoints.stats import router as stats_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(codebases_router)
router.include_router(links_router)
router.include_router(files_router)
router.include_router(stats_router)
