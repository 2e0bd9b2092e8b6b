from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel


class DecodeRequest(BaseModel):
    line1: str
    line2: str


class MrzRecordData(BaseModel):
    document_type: str
    issuing_country: str
    family_name: str
    given_names: str = ""
    document_number: str
    nationality: str
    date_of_birth: date
    sex: str
    expiration_date: date
    personal_number: str = ""
    is_valid: bool
    raw_line_1: str
    raw_line_2: str


class CheckDigitReport(BaseModel):
    document_number: bool
    date_of_birth: bool
    expiration_date: bool
    personal_number: bool
    composite: bool


class DecodeResponse(BaseModel):
    record: MrzRecordData
    checks: Optional[CheckDigitReport] = None


class CheckDigitRequest(BaseModel):
    data: str = ""
    claimed: Optional[str] = None


class CheckDigitResponse(BaseModel):
    data: str
    check_digit: int
    valid: Optional[bool] = None


class ErrorResponse(BaseModel):
    error: str
    message: str
