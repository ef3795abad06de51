from lesson_planner.db.base import Base
from lesson_planner.db.session import async_session_factory, engine

__all__ = ["Base", "engine", "async_session_factory"]
