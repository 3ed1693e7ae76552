from __future__ import annotations

import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from .db import ConnectionPool
from .errors import ConnectionFailed, PoolError, WriteFailed
from .mapper import Appointment, ConsultationAppointment, GroomingAppointment
from .models import CONSULTATION_FIELDS, GROOMING_FIELDS, BanhoTosa, Consulta

logger = logging.getLogger(__name__)

_TARGETS = {
    GroomingAppointment: (BanhoTosa, GROOMING_FIELDS),
    ConsultationAppointment: (Consulta, CONSULTATION_FIELDS),
}


class BookingWriter:
    """
    Grava agendamentos usando uma conexão emprestada do pool.

    Cada save() é um único INSERT atômico; chamadas concorrentes não são
    coordenadas entre si (não há verificação de horário duplicado).
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self.pool = pool

    def save(self, record: Appointment) -> int:
        model, columns = _TARGETS[type(record)]
        table = model.__tablename__
        params = dict(zip(columns, record.values()))

        try:
            with self.pool.transaction() as conn:
                result = conn.execute(insert(model), params)
                record_id = result.inserted_primary_key[0]
        except PoolError as e:
            logger.warning("booking.no_connection", extra={"table": table, "error": type(e).__name__})
            raise ConnectionFailed(f"Sem conexão disponível para gravar em {table}") from e
        except SQLAlchemyError as e:
            logger.error("booking.write_failed", extra={"table": table}, exc_info=True)
            raise WriteFailed(f"Falha ao gravar em {table}") from e

        logger.info("booking.saved", extra={"table": table, "id": record_id})
        return record_id
