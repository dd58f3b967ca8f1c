from fastapi import APIRouter, Request
from datetime import datetime, timezone

router = APIRouter()


@router.get("")
def health(request: Request):
    return {
        "status": "ok",
        "version": request.app.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
