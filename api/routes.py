"""REST API routes for users, exercises and logs."""

import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request

from schemas import ExerciseResponse, LogResponse, UserResponse, UserSummary
from services.exercise_service import ExerciseService
from services.store import ExerciseStore
from utils.exceptions import InvalidInputError
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_store(request: Request) -> ExerciseStore:
    """Store opened by the application lifespan."""
    return request.app.state.store


def get_exercise_service(store: ExerciseStore = Depends(get_store)) -> ExerciseService:
    """Exercise service bound to the application store."""
    return ExerciseService(store)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a JSON or urlencoded request body into a dict.

    Missing or non-object bodies give an empty dict, so field validation
    reports what is missing.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items()}

    body = await request.body()
    if not body.strip():
        return {}

    try:
        data = json.loads(body)
    except ValueError:
        logger.info(f"Invalid JSON body on {request.url.path}")
        raise InvalidInputError("Invalid JSON body")

    return data if isinstance(data, dict) else {}


@router.post("/users", response_model=UserResponse)
async def create_user(
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
):
    """Register a new user."""
    payload = await read_payload(request)
    logger.info(f"POST /api/users payload: {payload}")
    return await service.register_user(payload.get("username"))


@router.get("/users", response_model=List[UserSummary])
async def list_users(service: ExerciseService = Depends(get_exercise_service)):
    """List all users."""
    users = await service.list_users()
    logger.info(f"Users found: {len(users)}")
    return users


@router.post("/users/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
):
    """Add an exercise to a user's log."""
    payload = await read_payload(request)
    logger.info(f"POST /api/users/{user_id}/exercises payload: {payload}")
    return await service.add_exercise(
        user_id,
        description=payload.get("description"),
        duration=payload.get("duration"),
        date=payload.get("date"),
    )


@router.get("/users/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Get a user's exercise log, optionally filtered."""
    logger.info(f"GET /api/users/{user_id}/logs from={date_from} to={date_to} limit={limit}")
    return await service.get_log(user_id, date_from, date_to, limit)
