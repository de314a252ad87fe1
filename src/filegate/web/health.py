"""Liveness endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

HEALTH_MESSAGE = "Hello World! I am alive, this does nothing"

router = APIRouter(tags=["health"])


class HealthMessage(BaseModel):
    message: str = Field(examples=[HEALTH_MESSAGE])


class HealthResponse(BaseModel):
    body: HealthMessage


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check that the server is alive and running.

    Deliberately returns nothing useful to scrapers.
    """
    return HealthResponse(body=HealthMessage(message=HEALTH_MESSAGE))
