import base64
import hashlib

from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from .cases import InvalidName, all_cases, detect, render, transform_text, validate_name
from .models import (
    CaseRendering,
    CasesResponse,
    DetectRequest,
    DetectResponse,
    HealthResponse,
    TransformedFile,
    TransformRequest,
    TransformResponse,
)
from .rename import decode_content

app = FastAPI(
    title="project-renamer",
    description="Case-preserving project renaming for files and text",
    version="0.1.0",
)


def _normalized(name: str):
    try:
        _, normalized = detect(name)
        validate_name(normalized)
    except InvalidName as e:
        raise HTTPException(status_code=422, detail=str(e))
    return normalized


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/detect", response_model=DetectResponse)
def detect_name(req: DetectRequest):
    try:
        case_info, normalized = detect(req.name)
    except InvalidName as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"separator": case_info.separator, "style": case_info.style, "parts": list(normalized.parts)}


@app.get("/cases", response_model=CasesResponse)
def cases(name: str):
    normalized = _normalized(name)
    return CasesResponse(
        parts=list(normalized.parts),
        cases=[
            CaseRendering(separator=c.separator, style=c.style, value=render(c, normalized))
            for c in all_cases()
        ],
    )


@app.post("/transform", response_model=TransformResponse)
def transform(req: TransformRequest):
    old = _normalized(req.old_name)
    new = _normalized(req.new_name)
    out = transform_text(req.text, old, new)
    return {"text": out, "changed": out != req.text}


@app.post("/transform/file", response_model=TransformedFile)
async def transform_file(
    file: UploadFile = File(...),
    old_name: str = Form(...),
    new_name: str = Form(...),
):
    old = _normalized(old_name)
    new = _normalized(new_name)

    raw = await file.read()
    text, encoding = decode_content(raw)
    out = raw if text is None else transform_text(text, old, new).encode(encoding)

    return {
        "filename": transform_text(file.filename or "", old, new),
        "sha256": hashlib.sha256(out).hexdigest(),
        "content_b64": base64.b64encode(out).decode("ascii"),
        "rewritten": out != raw,
    }
