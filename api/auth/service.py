"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from starlette.concurrency import run_in_threadpool

from . import schemas
from .credentials import CredentialStoreError, CredentialVerifier

logger = logging.getLogger(__name__)


async def login(payload: schemas.LoginRequest, verifier: CredentialVerifier) -> dict:
    try:
        # The store is read from disk on every attempt.
        is_valid = await run_in_threadpool(verifier.verify, payload.username, payload.password)
    except CredentialStoreError as exc:
        logger.error("credential_store_unavailable error=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Credential store unavailable",
        ) from exc

    if not is_valid:
        logger.warning("login_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return {"status": "success", "message": "Login successful"}
