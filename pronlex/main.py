"""pronlex — pronunciation dictionary lookup server."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from pronlex.acoustic.units import UnitManager
from pronlex.config import settings
from pronlex.dictionary.full import DictionaryError, FullDictionary
from pronlex.middleware import SecurityMiddleware
from pronlex.models import (
    DictionaryStatusResponse,
    HealthResponse,
    MarkersResponse,
    WordListResponse,
    WordObject,
)

logging.basicConfig(
    level=getattr(logging, settings.os_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("pronlex")

__version__ = "0.1.0"

unit_manager = UnitManager()
dictionary = FullDictionary.from_settings(settings, unit_manager)


def _word_or_none(word) -> WordObject | None:
    return WordObject.from_word(word) if word is not None else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("pronlex v%s starting up", __version__)

    if not settings.os_api_key:
        logger.warning("No API key set — all endpoints are unauthenticated. Set OS_API_KEY for production use.")

    if settings.dict_preload and settings.dict_configured:
        try:
            dictionary.allocate()
        except Exception:
            logger.exception("Failed to preload dictionary %s", settings.dict_word_path)
    elif settings.dict_preload:
        logger.warning("DICT_WORD_PATH / DICT_FILLER_PATH not set — starting with no dictionary loaded")

    yield

    dictionary.deallocate()


app = FastAPI(
    title="pronlex",
    description="Pronunciation dictionary lookup server",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(HTTPException)
async def http_exception_handler(_request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(DictionaryError)
async def dictionary_exception_handler(_request: Request, exc: DictionaryError):
    return JSONResponse(status_code=409, content={"error": exc.to_dict()})


app.add_middleware(SecurityMiddleware)

cors_origins = [o.strip() for o in settings.os_cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Lookup endpoints ---


@app.get("/v1/words/{spelling:path}")
async def get_word(spelling: str):
    """Look up a word, applying the configured missing-word policy."""
    word = dictionary.get_word(spelling)
    if word is None:
        raise HTTPException(status_code=404, detail=f"Word {spelling} not found")
    return WordObject.from_word(word)


@app.get("/v1/fillers")
async def list_fillers():
    words = sorted(dictionary.get_filler_words(), key=lambda w: w.spelling)
    return WordListResponse(words=[WordObject.from_word(w) for w in words])


@app.get("/v1/markers")
async def get_markers():
    return MarkersResponse(
        sentence_start=_word_or_none(dictionary.get_sentence_start_word()),
        sentence_end=_word_or_none(dictionary.get_sentence_end_word()),
        silence=_word_or_none(dictionary.get_silence_word()),
    )


# --- Management endpoints ---


@app.get("/api/dictionary")
async def dictionary_status():
    return DictionaryStatusResponse(
        state=dictionary.state.value,
        word_dictionary=str(dictionary.word_dictionary_file),
        filler_dictionary=str(dictionary.filler_dictionary_file),
        addenda=dictionary.addenda_url_list,
        words=dictionary.word_count,
        fillers=dictionary.filler_count,
        load_seconds=dictionary.load_seconds,
    )


@app.post("/api/dictionary/load")
async def load_dictionary():
    """Load both dictionaries (no-op when already loaded)."""
    try:
        dictionary.allocate()
    except Exception as e:
        logger.exception("Failed to load dictionary %s", dictionary.word_dictionary_file)
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "loaded", "words": dictionary.word_count, "fillers": dictionary.filler_count}


@app.delete("/api/dictionary")
async def unload_dictionary():
    if not dictionary.is_allocated:
        raise HTTPException(status_code=404, detail="Dictionary is not loaded")
    dictionary.deallocate()
    return {"status": "unloaded"}


@app.get("/api/dictionary/dump", response_class=PlainTextResponse)
async def dump_dictionary():
    return PlainTextResponse(dictionary.dump_to_string())


@app.get("/health")
async def health():
    return HealthResponse(
        version=__version__,
        state=dictionary.state.value,
        words_loaded=dictionary.word_count,
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("Listening on http://%s:%d", settings.os_host, settings.os_port)
    uvicorn.run(app, host=settings.os_host, port=settings.os_port)
