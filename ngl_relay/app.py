"""FastAPI Application for NGL Relay"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_settings
from .relay import RelayHandler
from .results import to_body

settings = get_settings()

# Setup logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(
    title="NGL Relay",
    version=__version__,
    description="Relays an anonymous message to an NGL profile"
)

relay_handler = RelayHandler(settings)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach the permissive CORS headers to every response"""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "NGL Relay",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "upstream": relay_handler.settings.submit_url
    }


@app.options("/api/relay")
async def relay_preflight():
    """CORS preflight"""
    return Response(status_code=200, headers={**CORS_HEADERS, "Content-Type": "application/json"})


@app.api_route("/api/relay", methods=["GET", "POST"])
async def relay(url: Optional[str] = None, message: Optional[str] = None):
    """
    Send one anonymous message to an NGL profile

    Both query parameters are checked by the relay handler so that a
    missing value gets the relay's own 400 envelope.
    """
    result = await relay_handler.handle(url, message)
    return JSONResponse(
        content=to_body(result),
        status_code=result.http_status,
        headers=CORS_HEADERS
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
