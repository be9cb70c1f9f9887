from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from news_proxy.api.dependencies import HandlerDep, lifespan
from news_proxy.config import settings
from news_proxy.dto import HealthCheckResponse, NewsQueryParams

app = FastAPI(
    title="News Proxy API",
    description="Cached proxy for the GNews search and top-headlines API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "News Proxy API",
        "version": "0.1.0",
        "description": "Cached proxy for the GNews search and top-headlines API",
        "endpoints": {
            "news": "/api/news",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/api/news")
@app.get("/.netlify/functions/news", include_in_schema=False)
async def get_news(
    handler: HandlerDep,
    q: str = "",
    page_size: str | None = Query(None, alias="pageSize"),
    country: str | None = None,
    lang: str | None = None,
) -> Response:
    """
    Return top headlines for a category or search results for a term.

    Args:
        q: Category id, localized alias (e.g. "salud") or free-text term.
        page_size: Number of articles, default 12, at most 50.
        country: Country code for headlines, default "ar".
        lang: Language code, default "es".

    Returns:
        JSON response with an ``articles`` list or an error envelope.
    """
    params = NewsQueryParams(q=q, pageSize=page_size, country=country, lang=lang)
    return await handler.get_news(params)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "news_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
