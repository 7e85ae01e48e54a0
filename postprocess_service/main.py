from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request

from common.config import PostProcessSettings
from common.schemas import ScriptResponse
from turn_engine.formatter import render_script
from turn_engine.pipeline import build_document

logger = logging.getLogger(__name__)

settings = PostProcessSettings()
app = FastAPI(title="Transcript Post-Processing Service")


@app.get("/health")
async def health():
    return {"status": "ok"}


async def _read_raw_result(request: Request) -> Any:
    raw = await request.body()
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Request body is not valid JSON (%d bytes)", len(raw))
        raise HTTPException(status_code=400, detail="Request body must be a JSON ASR result")


def _timestamps_requested(include_timestamps: Optional[bool]) -> bool:
    if include_timestamps is None:
        return settings.include_timestamps
    return include_timestamps


@app.post("/postprocess")
async def postprocess(request: Request, include_timestamps: Optional[bool] = None):
    data = await _read_raw_result(request)
    document = build_document(data, include_timestamps=_timestamps_requested(include_timestamps))
    logger.info("Post-processed transcript: %d turns", len(document.results))
    return document.to_wire()


@app.post("/postprocess/script", response_model=ScriptResponse)
async def postprocess_script(request: Request, include_timestamps: Optional[bool] = None):
    data = await _read_raw_result(request)
    document = build_document(data, include_timestamps=_timestamps_requested(include_timestamps))
    logger.info("Rendered transcript script: %d turns", len(document.results))
    return ScriptResponse(script=render_script(document))


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(app, host=settings.host, port=settings.port)
