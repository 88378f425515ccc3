"""Translation endpoints: translate recognised speech, history, Telugu speech."""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from typing import Optional
import time
import logging

from app.core.dependencies import get_matcher, get_service_container, get_speech_proxy, get_store
from app.core.exceptions import InputValidationError, PersistenceError
from app.core.metrics_translation import record_translation_latency
from app.models.internal_models import TranslationRecord
from app.schemas.translation import TranslationCreate, TranslationRead, TranslationResponse
from app.services.lexical_matcher import LexicalMatcher
from app.services.speech_proxy import SpeechProxy
from app.services.translation_store import TranslationStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["translation"])


@router.post("/translate")
async def translate_text(
    request: TranslationCreate,
    matcher: LexicalMatcher = Depends(get_matcher),
    store: TranslationStore = Depends(get_store),
):
    """
    Translate recognised Banjara text into Telugu and English and record it.

    A failure to save the translation is logged and reported with
    ``saved: false``; the translation itself is still returned.
    """
    text = (request.banjara_text or "").strip()
    if not text:
        raise InputValidationError("Banjara text is required", details={"field": "banjaraText"})

    start = time.perf_counter()
    with record_translation_latency():
        result = await matcher.translate(text)
    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        f"Translation completed in {latency_ms:.2f}ms",
        extra={"used_fallback": result.used_fallback, "token_count": len(result.matches)},
    )

    record = TranslationRecord(
        source_text=text,
        target_text_a=result.target_text_a,
        target_text_b=result.target_text_b,
    )
    stored_id = None
    saved = True
    try:
        stored = await run_in_threadpool(store.append, record)
        stored_id = stored.id
    except PersistenceError as e:
        logger.error(f"Translation not saved to history: {e.message}", extra={"details": e.details})
        saved = False

    response = TranslationResponse(
        id=stored_id,
        banjara_text=text,
        telugu_text=result.target_text_a,
        english_text=result.target_text_b,
        used_fallback=result.used_fallback,
        saved=saved,
    )
    return {"status": "ok", "data": response.model_dump(by_alias=True), "error": None}


@router.get("/translations")
async def list_translations(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, le=100),
    store: TranslationStore = Depends(get_store),
):
    """Most recent translations first."""
    if limit is None:
        limit = get_service_container(request).settings.storage.history_limit
    records = await run_in_threadpool(store.list_recent, limit)
    items = [
        TranslationRead(
            id=r.id,
            banjara_text=r.source_text,
            telugu_text=r.target_text_a,
            english_text=r.target_text_b,
            timestamp=r.created_at,
        ).model_dump(by_alias=True, mode="json")
        for r in records
    ]
    return {"status": "ok", "data": items, "error": None}


@router.get("/tts")
async def text_to_speech(
    text: str = Query(""),
    lang: str = Query("te", min_length=2, max_length=8),
    proxy: Optional[SpeechProxy] = Depends(get_speech_proxy),
):
    """Proxy synthesized speech so the browser can play Telugu audio."""
    if proxy is None:
        raise HTTPException(status_code=503, detail="Text-to-speech is disabled")
    if not text.strip():
        raise InputValidationError("Text is required", details={"field": "text"})

    audio = await proxy.synthesize(text.strip(), language=lang)
    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Cache-Control": "public, max-age=86400"},
    )
