from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CONFIG
from .pipeline.check_digit import calculate_check_digit, validate_check_digit
from .pipeline.td3 import MalformedInput, decode_td3
from .schemas import (
    CheckDigitReport,
    CheckDigitRequest,
    CheckDigitResponse,
    DecodeRequest,
    DecodeResponse,
    ErrorResponse,
    MrzRecordData,
)

logging.basicConfig(level=CONFIG.log_level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
LOGGER = logging.getLogger("mrz_reader")

app = FastAPI(title="MRZ Reader")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(CONFIG.server.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MalformedInput)
async def malformed_input_handler(_request: Request, exc: MalformedInput) -> JSONResponse:
    LOGGER.warning("Rejected MRZ input: %s", exc)
    body = ErrorResponse(error="malformed_input", message=str(exc))
    return JSONResponse(body.model_dump(), status_code=422)


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/decode", response_model=DecodeResponse, response_model_exclude_none=True)
async def decode(payload: DecodeRequest) -> DecodeResponse:
    record = decode_td3(payload.line1, payload.line2)
    response = DecodeResponse(record=MrzRecordData(**record.to_dict()))
    if CONFIG.decode.expose_checks:
        response.checks = CheckDigitReport(**record.checks_dict())
    return response


@app.post("/check_digit", response_model=CheckDigitResponse)
async def check_digit(payload: CheckDigitRequest) -> CheckDigitResponse:
    valid = None
    if payload.claimed is not None:
        valid = validate_check_digit(payload.data, payload.claimed)
    return CheckDigitResponse(
        data=payload.data,
        check_digit=calculate_check_digit(payload.data),
        valid=valid,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=CONFIG.server.host, port=CONFIG.server.port)
