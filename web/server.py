"""FastAPI server exposing cycle time averages."""

import duckdb
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from settings import PORT
from web.api import cycletime
from web.api.cycletime.schemas import AverageItem, BreakdownResponse
from web.api.errors import ValidationError


def create_app(db_path: str | None = None) -> FastAPI:
    """Create the API app; db_path defaults to the configured database."""
    app = FastAPI(title="Cycle Time API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(duckdb.Error)
    async def db_error(_: Request, exc: duckdb.Error) -> JSONResponse:
        logger.error("Cycle time query failed: {}", exc)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch cycle time data."})

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Cycle time API is running"

    @app.get("/api/cycletime/avg", response_model=list[AverageItem])
    def cycletime_avg(window: str = Query("all")) -> list[AverageItem]:
        """Mean cycle time per list, largest first."""
        return cycletime.get_averages(window, db_path).items

    @app.get("/api/cycletime/report", response_model=BreakdownResponse)
    def cycletime_report(window: str = Query("all")) -> BreakdownResponse:
        """Mean cycle time per list with unit breakdown."""
        return cycletime.get_breakdown(window, db_path)

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", port: int = PORT, reload: bool = False) -> None:
    """Run the API server."""
    import uvicorn

    from settings.logging import setup_logging

    setup_logging(intercept_stdlib=True)
    uvicorn.run(app, host=host, port=port, reload=reload)


if __name__ == "__main__":
    run_server()
