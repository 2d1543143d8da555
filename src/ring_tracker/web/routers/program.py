"""Static program catalog route (no authentication)."""

from fastapi import APIRouter

from ...data.program_data import program_to_dict

router = APIRouter(prefix="/api/program", tags=["program"])


@router.get("")
async def get_program():
    """Phases, exercise library and weekly schedule."""
    return {"success": True, "data": program_to_dict()}
