"""
FastAPI server for URL and domain decomposition.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from urlparts.api.models import DomainResponse, UrlPartsResponse
from urlparts.config import get_config
from urlparts.exceptions import InvalidUrlError
from urlparts.url import Url, get_default_parser

# Configure logging
logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Loads the Public Suffix List on startup.
    """
    logger.info("Starting up: loading Public Suffix List...")
    parser = get_default_parser()
    logger.info(f"Public Suffix List loaded ({len(parser.rule_set)} rules)")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="urlparts API",
    description="URL → parts and host → public suffix / registrable domain",
    version="0.1.0",
    lifespan=lifespan,
)


def _check_length(url: str) -> None:
    limit = get_config().api.max_url_length
    if len(url) > limit:
        raise HTTPException(status_code=400, detail=f"URL longer than {limit} characters")


def _to_response(url: Url) -> UrlPartsResponse:
    return UrlPartsResponse(
        url=url.to_string(), absolute=url.is_absolute(), **url.to_dict()
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "urlparts API is running"}


@app.get("/v1/parse", response_model=UrlPartsResponse)
async def parse_url(
    url: str = Query(..., min_length=1, description="URL to decompose"),
) -> UrlPartsResponse:
    """
    Decompose a URL into its parts.

    Raises:
        400: If the URL cannot be decomposed
    """
    _check_length(url)
    try:
        return _to_response(Url(url, get_default_parser()))
    except InvalidUrlError as e:
        logger.warning(f"Parse failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in parse_url: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/v1/domain/{host}", response_model=DomainResponse)
async def get_domain(host: str) -> DomainResponse:
    """
    Split a host into public suffix, registrable domain and subdomain.

    Hosts without a registrable domain (localhost, bare suffixes) return
    null fields rather than an error.
    """
    host = host.lower()
    domain = get_default_parser().matcher.match(host)
    return DomainResponse(
        host=host,
        public_suffix=domain.public_suffix,
        registrable_domain=domain.registrable_domain,
        subdomain=domain.subdomain,
    )


@app.get("/v1/join", response_model=UrlPartsResponse)
async def join_urls(
    base: str = Query(..., min_length=1, description="Base URL"),
    ref: str = Query(..., min_length=1, description="URL merged over the base"),
) -> UrlPartsResponse:
    """
    Merge ``ref`` over ``base``; parts defined by ``ref`` win.

    Raises:
        400: If either URL cannot be decomposed
    """
    _check_length(base)
    _check_length(ref)
    try:
        return _to_response(Url(base, get_default_parser()).join(ref))
    except InvalidUrlError as e:
        logger.warning(f"Join failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in join_urls: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler."""
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        app, host=config.api.host, port=config.api.port, log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
