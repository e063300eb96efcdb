"""
Auth dependencies.
"""

from __future__ import annotations

from fastapi import Request

from .credentials import CredentialVerifier


def get_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.verifier
