from fastapi import APIRouter

from lesson_planner.models import Grade, Semester, Subject

router = APIRouter()


@router.get("/subjects", response_model=list[Subject])
async def get_subjects() -> list[Subject]:
    """Subjects available for lesson plans."""
    return list(Subject)


@router.get("/grades", response_model=list[Grade])
async def get_grades() -> list[Grade]:
    """Grade levels, from 1 SD to 12 SMK."""
    return list(Grade)


@router.get("/semesters", response_model=list[Semester])
async def get_semesters() -> list[Semester]:
    """Semesters of the school year, "1" and "2"."""
    return list(Semester)
