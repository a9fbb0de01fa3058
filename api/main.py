from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from norwegian_tin import (
    NorwegianTinError,
    PersonCategory,
    ScanResult,
    TinKind,
    TinScanner,
    parse,
)

logger = logging.getLogger(__name__)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled — no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models ──────────────────────────────────────────────────────────


class ValidateRequest(BaseModel):
    value: str


class ValidateResponse(BaseModel):
    valid: bool
    kind: TinKind | None = None
    category: PersonCategory | None = None
    masked: str | None = None
    is_test_id: bool | None = None
    error: str | None = None


class ScanRequest(BaseModel):
    text: str
    kinds: list[TinKind] | None = None
    include_test_ids: bool = True


class FindingOut(BaseModel):
    start: int
    end: int
    text: str
    kind: str
    category: str
    masked: str
    confidence: float


class ScanResponse(BaseModel):
    masked_text: str
    findings: list[FindingOut]


# ── App ──────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    yield


def _get_scanner(kinds: list[TinKind] | None, include_test_ids: bool) -> TinScanner:
    scanner = TinScanner(include_test_ids=include_test_ids)
    if kinds is not None:
        for kind in set(TinKind) - set(kinds):
            scanner.disable_kind(kind)
    return scanner


app = FastAPI(title="norwegian-tin", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post(
    "/validate",
    response_model=ValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def validate(request: ValidateRequest) -> ValidateResponse:
    try:
        tin = parse(request.value)
    except NorwegianTinError as exc:
        # Never log the raw value, it may be a real personal number.
        logger.debug("Rejected identifier: %s", exc)
        return ValidateResponse(valid=False, error=str(exc))
    return ValidateResponse(
        valid=True,
        kind=tin.kind,
        category=tin.category,
        masked=tin.masked(),
        is_test_id=tin.is_test_id,
    )


@app.post("/scan", response_model=ScanResponse, dependencies=[Depends(verify_api_key)])
async def scan(request: ScanRequest) -> ScanResponse:
    result: ScanResult = _get_scanner(request.kinds, request.include_test_ids).scan(
        request.text
    )
    findings = [
        FindingOut(
            start=f.start,
            end=f.end,
            text=f.text,
            kind=f.kind.value,
            category=f.category.value,
            masked=f.masked,
            confidence=f.confidence,
        )
        for f in result.findings
    ]
    return ScanResponse(masked_text=result.masked_text, findings=findings)
