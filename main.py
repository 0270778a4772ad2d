from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
from interfaces.api import router as task_router
from application.use_cases import TaskUseCases
from infrastructure.task_store import TaskStore
from config import Settings
import logging
import uvicorn

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

def create_app(settings: Settings | None = None) -> FastAPI:
    """Builds the app with its own empty task store."""
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="Task Manager")
    app.state.settings = settings
    app.state.use_cases = TaskUseCases(TaskStore())

    # Any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(task_router)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Serves the task page, pointed at the configured API URL."""
        return templates.TemplateResponse(
            request, "index.html", {"api_url": request.app.state.settings.api_url}
        )

    logger.debug(f"UI API URL: {settings.api_url}")
    return app

app = create_app()

def run():
    settings = app.state.settings
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
