from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    settings = request.app.state.settings
    return {
        "status": "ok",
        "sentiment_provider": settings.SENTIMENT_PROVIDER,
        "summary_provider": settings.SUMMARY_PROVIDER,
        "storage": settings.STORAGE,
    }
