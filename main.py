import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("task_manager")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = _as_bool(os.getenv("RELOAD", "false"))
    log_level = os.getenv("LOG_LEVEL", "info")

    logging.basicConfig(level=log_level.upper())
    logger.info(
        f"🚀 Servidor en http://{host}:{port} "
        f"(ORM={os.getenv('ORM', 'peewee')}, reload={reload})"
    )
    logger.info(f"   API:    http://{host}:{port}/api/tasks")
    logger.info(f"   Health: http://{host}:{port}/health")

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
