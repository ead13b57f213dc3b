from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from .health_checks.rewards_healthcheck import rewards_healthcheck
from .repositories.transaction_repository import TransactionLookup
from .rewards import get_lookup


router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_root():
    return {"ok": True}


@router.get("/rewards")
def health_rewards(lookup: TransactionLookup = Depends(get_lookup)):
    res = rewards_healthcheck(lookup)
    return JSONResponse(content=res, status_code=200 if res.get("ok") else 503)
