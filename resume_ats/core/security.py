from __future__ import annotations

import secrets

from fastapi import HTTPException, status

from resume_ats.core.config import settings

AUTH_ERROR_MESSAGE = "Please provide a valid API key to use the resume analyzer."


def check_api_key(x_api_key: str | None) -> None:
    expected = settings.api_key
    if not expected:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=AUTH_ERROR_MESSAGE)
