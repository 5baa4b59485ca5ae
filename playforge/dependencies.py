"""FastAPI dependency providers for the collaborators stored on ``app.state``."""

from fastapi import Request

from playforge.config import Settings
from playforge.services.model_client import ModelClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_model_client(request: Request) -> ModelClient:
    return request.app.state.model_client
