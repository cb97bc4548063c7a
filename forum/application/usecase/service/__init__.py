"""Service maintenance use cases."""

from .clear_service import ClearServiceUseCase
from .get_status import GetStatusResponse, GetStatusUseCase

__all__ = [
    "ClearServiceUseCase",
    "GetStatusResponse",
    "GetStatusUseCase",
]
