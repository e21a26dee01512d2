import uvicorn
from fastapi import FastAPI

from org_chart.config import settings
from chart_api.routers import chart, health


app = FastAPI(
    title="Org Chart API",
    description="Renders directory reporting lines as Graphviz DOT.",
    version="0.1.0",
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(chart.router, prefix="/api/v1")


@app.get("/", tags=["root"])
def root() -> dict[str, str]:
    return {"message": "Org Chart API", "docs": "/docs"}


# ── Entrypoint ────────────────────────────────────────────────────────────────
def start() -> None:
    """CLI entrypoint used by the `start-api` script."""
    uvicorn.run(
        "chart_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    start()
