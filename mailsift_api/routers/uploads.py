# mailsift_api/routers/uploads.py
import csv
import io

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from mailsift import validate_many_async
from mailsift.config import settings
from ..utils.parser import SUPPORTED_EXTENSIONS, UploadParseError, parse_upload

router = APIRouter()

REPORT_HEADERS = ["email", "is_valid", "local_part", "domain", "domain_score", "error_message"]


def _report_rows(emails, results):
    for email, r in zip(emails, results):
        yield [
            email,
            r.is_valid,
            r.local_part or "",
            r.domain or "",
            "" if r.domain_score is None else r.domain_score,
            r.error_message or "",
        ]


# ---------------------------------------------------
# Validate an uploaded list
# ---------------------------------------------------
@router.post("/validate", response_model=None)
async def validate_upload(
    file: UploadFile = File(...),
    file_format: str = Query("json", pattern="^(json|csv|txt)$"),
):
    fname = (file.filename or "").lower()
    if not fname.endswith(SUPPORTED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only CSV, TXT, XLSX, XLS allowed")

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.MAX_UPLOAD_SIZE_MB} MB",
        )

    try:
        emails = parse_upload(fname, content)
    except UploadParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    results = await validate_many_async(emails)

    if file_format == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(REPORT_HEADERS)
        writer.writerows(_report_rows(emails, results))
        payload = ("\ufeff" + buf.getvalue()).encode("utf-8")
        return Response(
            payload,
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="results.csv"'},
        )

    if file_format == "txt":
        buf = io.StringIO()
        buf.write("\t".join(REPORT_HEADERS) + "\n")
        for row in _report_rows(emails, results):
            buf.write("\t".join(str(v) for v in row) + "\n")
        return Response(
            buf.getvalue().encode("utf-8"),
            media_type="text/plain",
            headers={"Content-Disposition": 'attachment; filename="results.txt"'},
        )

    valid = sum(1 for r in results if r.is_valid)
    return {
        "total": len(results),
        "valid": valid,
        "invalid": len(results) - valid,
        "results": [{"email": e, **r.to_dict()} for e, r in zip(emails, results)],
    }
