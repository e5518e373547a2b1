import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.tasks import router as tasks_router

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "info").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def cors_settings() -> dict:
    """Opciones de CORSMiddleware leídas una sola vez del entorno."""
    return {
        "allow_origins": _split_csv(os.getenv("CORS_ORIGINS", "*")),
        "allow_credentials": os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        "allow_methods": _split_csv(os.getenv("CORS_ALLOW_METHODS", "*")),
        "allow_headers": _split_csv(os.getenv("CORS_ALLOW_HEADERS", "*")),
    }


app = FastAPI(title="Task Manager API")
app.add_middleware(CORSMiddleware, **cors_settings())

app.include_router(tasks_router)
app.include_router(health_router)
