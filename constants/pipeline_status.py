# constants/pipeline_status.py
from fastapi import status

STATUS = {
    "HEALTHY": "healthy",
}

CODES = {
    "STAGE1_ERROR": "STAGE1_ERROR",
}

ERRORS = {
    "MISSING_DATES": {
        "status_code": status.HTTP_400_BAD_REQUEST,
        "detail": "start_date and end_date are required",
    },
    "INVALID_DATE_FORMAT": {
        "status_code": status.HTTP_400_BAD_REQUEST,
        "detail": "Invalid date format. Use YYYY-MM-DD format",
    },
    "START_NOT_BEFORE_END": {
        "status_code": status.HTTP_400_BAD_REQUEST,
        "detail": "start_date must be before end_date",
    },
    "STAGE1_FAILED": {
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "detail": "Unknown error occurred",
    },
}

SUCCESS = {
    "STAGE1_RUNNING": "Stage 1 API endpoint is running",
}
