from fastapi import APIRouter

from lesson_planner.api.v1.endpoints import health, lesson_plans, options

api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

api_router.include_router(
    lesson_plans.router,
    prefix="/lesson-plans",
    tags=["lesson-plans"],
)

api_router.include_router(
    options.router,
    prefix="/options",
    tags=["options"],
)
