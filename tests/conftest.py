import pytest
from sqlalchemy import func, select

from petshop.db import ConnectionPool
from petshop.schema import init_db
from petshop.services import BookingWriter

GROOMING_FORM = {
    "nome": "Ana",
    "cpf": "111",
    "celular": "999",
    "nome_pet": "Rex",
    "motivo": "bath",
    "data": "2024-05-01",
    "horario": "10:00",
}

CONSULTATION_FORM = {
    "nome": "Bruno",
    "cpf": "222",
    "celular": "888",
    "pet": "Mel",
    "motivo": "vacina",
    "data": "2024-06-10",
    "horario": "14:30",
}


def count_rows(pool, model):
    with pool.acquire() as conn:
        return conn.execute(select(func.count()).select_from(model)).scalar_one()


def fetch_row(pool, model, record_id):
    with pool.acquire() as conn:
        return conn.execute(select(model.__table__).where(model.id == record_id)).mappings().one()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "petshop_test.db"


@pytest.fixture
def pool(db_path):
    p = ConnectionPool(db_path, size=5, timeout=5.0)
    init_db(p)
    yield p
    p.dispose()


@pytest.fixture
def writer(pool):
    return BookingWriter(pool)
