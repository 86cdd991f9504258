from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import logging

from constants.pipeline_status import CODES, ERRORS
from models.call_data import CallIdFetchResponse, DateRange
from provider import get_pipeline_service
from services.pipeline_service import CallPipelineService
from utils.dateparse import parse_date
from utils.errors import PipelineError, UnknownError, ValidationError
from utils.responses import error_response, health_payload

router = APIRouter()
logger = logging.getLogger("pipeline")


def validate_date_range(body) -> tuple:
    """Check the posted dates, returning (start, end) as calendar dates."""
    start_date = body.get("start_date") if isinstance(body, dict) else None
    end_date = body.get("end_date") if isinstance(body, dict) else None

    if not start_date or not end_date:
        raise ValidationError(ERRORS["MISSING_DATES"]["detail"])

    try:
        start = parse_date(str(start_date))
        end = parse_date(str(end_date))
    except ValueError:
        raise ValidationError(ERRORS["INVALID_DATE_FORMAT"]["detail"])

    if start >= end:
        raise ValidationError(ERRORS["START_NOT_BEFORE_END"]["detail"])

    return start, end


# ---------------- STAGE 1 ---------------- #
@router.post("/api/pipeline/stage1", response_model=CallIdFetchResponse)
async def run_stage1(request: Request, pipeline: CallPipelineService = Depends(get_pipeline_service)):
    try:
        body = await request.json()
        try:
            start, end = validate_date_range(body)
        except ValidationError as e:
            logger.warning("Rejected stage 1 request: %s", e.message)
            return error_response(e.message, status_code=e.status_code)

        logger.info("Starting Stage 1: Get Call IDs", extra={"start_date": body["start_date"], "end_date": body["end_date"]})
        result = await pipeline.run(start, end)

        response = CallIdFetchResponse(
            success=True,
            total_calls=result.total_calls,
            processed_calls=len(result.calls),
            calls=result.calls,
            date_range=DateRange(start_date=str(body["start_date"]), end_date=str(body["end_date"])),
            errors=result.errors or None,
        )
        if result.errors:
            logger.warning("Errors encountered: %s", len(result.errors))
        return JSONResponse(content=response.model_dump(exclude_none=True))
    except Exception as e:
        logger.exception("Stage 1 failed")
        err = e if isinstance(e, PipelineError) else UnknownError(str(e) or ERRORS["STAGE1_FAILED"]["detail"])
        return error_response(
            err.message,
            status_code=ERRORS["STAGE1_FAILED"]["status_code"],
            code=CODES["STAGE1_ERROR"],
        )


@router.get("/api/pipeline/stage1")
async def stage1_status():
    return health_payload()
