"""
Item Specification API v1.0
FastAPI service exposing weight/dimension inference, the density check and
the feel-based weight estimate to the listing form.
"""
import logging
from dotenv import load_dotenv

# .env must be loaded before config reads the environment
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itemspec.config import CORS_ORIGINS, ENGINE_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL
from itemspec.services.logging_config import setup_logging
from itemspec.services.middleware import RequestTimingMiddleware
from itemspec.api.estimate_routes import router as estimate_router
from itemspec.api.template_routes import router as template_router

setup_logging(
    level=LOG_LEVEL,
    json_output=LOG_FORMAT != "text",
    engine_level=ENGINE_LOG_LEVEL or None,
)
logger = logging.getLogger("itemspec.api")

app = FastAPI(title="Item Specification API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "X-Requested-With", "X-Request-ID"],
)
# Request timing + X-Request-ID must be outermost so it wraps all other middleware
app.add_middleware(RequestTimingMiddleware)

app.include_router(estimate_router)
app.include_router(template_router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": "1.0.0"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("itemspec.main:app", host="0.0.0.0", port=8000)
