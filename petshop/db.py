from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as SATimeoutError
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import QueuePool

from .errors import PoolError, PoolInitError, PoolTimeout

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base ORM para todas as tabelas."""
    pass


class ConnectionPool:
    """
    Conjunto limitado de conexões reutilizáveis ao arquivo SQLite.

    - criado uma vez na inicialização, descartado no desligamento
    - acquire() empresta uma conexão e a devolve ao sair do bloco
    - a fila livre é a do QueuePool (protegida por lock interno)
    """

    def __init__(
        self,
        db_path: str | Path,
        size: int = 5,
        timeout: float = 30.0,
        busy_timeout: float = 5.0,
        echo: bool = False,
    ) -> None:
        self.db_path = Path(db_path)
        self.size = size
        self.timeout = timeout

        self.engine = create_engine(
            f"sqlite:///{self.db_path}",
            echo=echo,
            poolclass=QueuePool,
            pool_size=size,
            max_overflow=0,
            pool_timeout=timeout,
            # conexões circulam entre as threads dos handlers
            connect_args={"check_same_thread": False, "timeout": busy_timeout},
        )

        # abre uma conexão já aqui: arquivo inacessível deve falhar no startup
        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            self.engine.dispose()
            raise PoolInitError(f"Não foi possível abrir o banco em {self.db_path}") from e

        logger.info("pool.ready", extra={"db_path": str(self.db_path), "size": size, "timeout": timeout})

    @property
    def url(self) -> str:
        return str(self.engine.url)

    @contextmanager
    def acquire(self) -> Iterator[Connection]:
        try:
            conn = self.engine.connect()
        except SATimeoutError as e:
            logger.warning("pool.timeout", extra={"timeout": self.timeout, "size": self.size})
            raise PoolTimeout(f"Nenhuma conexão livre após {self.timeout}s") from e
        except SQLAlchemyError as e:
            raise PoolError("Falha ao obter conexão do pool") from e

        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """
        Como acquire(), dentro de uma transação:
        - commit se tudo ok
        - rollback em exceções
        - devolve a conexão sempre
        """
        with self.acquire() as conn:
            trans = conn.begin()
            try:
                yield conn
                trans.commit()
            except Exception:
                trans.rollback()
                raise

    def checked_out(self) -> int:
        return self.engine.pool.checkedout()

    def status(self) -> str:
        return self.engine.pool.status()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("pool.disposed", extra={"db_path": str(self.db_path)})
