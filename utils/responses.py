from datetime import datetime, timezone
from typing import Optional

from fastapi.responses import JSONResponse

from constants.pipeline_status import STATUS, SUCCESS
from models.call_data import ApiError


def error_response(message: str, status_code: int = 400, code: Optional[str] = None):
    """
    Standard error response: {"success": false, "message": ..., "code"?: ...}
    """
    body = ApiError(message=message, code=code)
    return JSONResponse(content=body.model_dump(exclude_none=True), status_code=status_code)


def health_payload() -> dict:
    return {
        "message": SUCCESS["STAGE1_RUNNING"],
        "status": STATUS["HEALTHY"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
