"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service
from .credentials import CredentialVerifier

router = APIRouter()


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    verifier: CredentialVerifier = Depends(dependencies.get_verifier),
) -> dict:
    return await service.login(payload, verifier)
