from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union


# -----------------------------
# Net2Phone API payloads
# -----------------------------
class Net2PhoneTokenResponse(BaseModel):
    access_token: str
    token_type: Optional[str] = None
    expires_in: int
    scope: Optional[str] = None


class Net2PhoneApiResponse(BaseModel):
    # raw CDR entries, shape varies per call so they stay as dicts
    result: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None


class CallIdFetchRequest(BaseModel):
    start_date: str  # ISO instant
    end_date: str
    page_size: Optional[int] = None
    min_duration: Optional[int] = None


# -----------------------------
# Processed data
# -----------------------------
class ProcessedCallData(BaseModel):
    call_id: str = ""
    from_number: str = ""
    to_number: str = ""
    from_username: str = ""
    from_name: str = ""
    start_time: str = ""
    duration: Union[int, float] = 0  # seconds
    recording_url: str = ""
    broker_id: str = ""
    date: str = ""


class DateRange(BaseModel):
    start_date: str
    end_date: str


class PipelineResult(BaseModel):
    total_calls: int = 0
    calls: List[ProcessedCallData] = []
    errors: List[str] = []


# -----------------------------
# Responses
# -----------------------------
class CallIdFetchResponse(BaseModel):
    success: bool
    total_calls: int
    processed_calls: int
    calls: List[ProcessedCallData]
    date_range: DateRange
    errors: Optional[List[str]] = None


class ApiError(BaseModel):
    success: bool = False
    message: str
    code: Optional[str] = None
