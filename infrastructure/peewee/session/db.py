import logging
import os

from playhouse.db_url import connect

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# sqlite:///, postgresql://, mysql:// ...
db = connect(DATABASE_URL)


def init_db() -> None:
    """Abre la conexión y crea las tablas que falten (sin migraciones)."""
    from infrastructure.peewee.model.models import TaskModel

    db.connect(reuse_if_open=True)
    db.create_tables([TaskModel], safe=True)
    logger.info(f"🚀 Peewee conectado ({type(db).__name__})")
