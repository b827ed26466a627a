# mailsift_api/routers/validate.py
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mailsift import validate_one_async, validate_many_async
from mailsift.config import settings

router = APIRouter()


# The engine does its own type checking, so the bodies accept any JSON value.
class ValidateRequest(BaseModel):
    email: Any = None


class BatchValidateRequest(BaseModel):
    emails: Any = None


@router.post("")
async def validate_email(body: ValidateRequest):
    result = await validate_one_async(body.email)
    return result.to_dict()


@router.post("/batch")
async def validate_batch(body: BatchValidateRequest):
    if isinstance(body.emails, list) and len(body.emails) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds maximum of {settings.MAX_BATCH_SIZE} emails",
        )
    results = await validate_many_async(body.emails)
    return {"results": [r.to_dict() for r in results]}
