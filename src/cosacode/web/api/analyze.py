"""REST API for on-demand analysis of submitted code."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cosacode import __version__
from cosacode.analyzer.engine import analyze
from cosacode.analyzer.report import format_report
from cosacode.analyzer.scoring import health_score

router = APIRouter(tags=["analysis"])


class CodeSubmission(BaseModel):
    code: str


def _too_large(body: CodeSubmission, request: Request) -> JSONResponse | None:
    limit = request.app.state.config.max_file_size
    if len(body.code.encode("utf-8")) > limit:
        return JSONResponse(
            status_code=413,
            content={"detail": f"Code exceeds {limit} bytes"},
        )
    return None


@router.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@router.post("/analyze")
def analyze_code(body: CodeSubmission, request: Request):
    rejected = _too_large(body, request)
    if rejected is not None:
        return rejected
    findings = analyze(body.code)
    return {
        "findings": [f.to_dict() for f in findings],
        "count": len(findings),
        "score": health_score(findings),
    }


@router.post("/report")
def report(body: CodeSubmission, request: Request):
    rejected = _too_large(body, request)
    if rejected is not None:
        return rejected
    return {"report": format_report(analyze(body.code))}
