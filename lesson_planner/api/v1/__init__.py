from lesson_planner.api.v1.router import api_router

__all__ = ["api_router"]
