from __future__ import annotations

import logging

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from .db import Base, ConnectionPool
from .errors import SchemaError

# Importa os modelos para registrar as tabelas no metadata
from . import models  # noqa: F401

logger = logging.getLogger(__name__)


def ensure_schema(connection: Connection) -> None:
    """Cria as tabelas se não existirem (idempotente)."""
    try:
        Base.metadata.create_all(bind=connection, checkfirst=True)
    except SQLAlchemyError as e:
        raise SchemaError("Falha ao criar as tabelas de agendamento") from e


def init_db(pool: ConnectionPool) -> None:
    with pool.transaction() as conn:
        ensure_schema(conn)
    logger.info("schema.ready", extra={"tables": sorted(Base.metadata.tables), "db_path": str(pool.db_path)})
