import pytest
from fastapi.testclient import TestClient

from petshop.api_main import create_app
from petshop.models import GROOMING_FIELDS, BanhoTosa, Consulta

from .conftest import CONSULTATION_FORM, GROOMING_FORM, count_rows, fetch_row


@pytest.fixture
def client(pool):
    with TestClient(create_app(pool)) as c:
        yield c


@pytest.mark.parametrize(
    "path, marker",
    [
        ("/", "Pet Shop"),
        ("/login", 'name="senha"'),
        ("/banho_tosa", 'name="nome_pet"'),
        ("/consulta", 'name="pet"'),
    ],
)
def test_form_pages(client, path, marker):
    response = client.get(path)
    assert response.status_code == 200
    assert marker in response.text


def test_static_files_are_served(client):
    response = client.get("/static/style.css")
    assert response.status_code == 200


def test_submit_grooming(client, pool):
    response = client.post("/banho_tosa", data=GROOMING_FORM)

    assert response.status_code == 200
    assert "salvo com sucesso" in response.text
    for value in GROOMING_FORM.values():
        assert value in response.text

    row = fetch_row(pool, BanhoTosa, 1)
    assert {k: row[k] for k in GROOMING_FIELDS} == GROOMING_FORM


def test_submit_consultation(client, pool):
    response = client.post("/consulta", data=CONSULTATION_FORM)

    assert response.status_code == 200
    assert "Consulta" in response.text
    assert "Mel" in response.text
    assert count_rows(pool, Consulta) == 1


def test_submit_consultation_without_pet(client, pool):
    data = {k: v for k, v in CONSULTATION_FORM.items() if k != "pet"}
    response = client.post("/consulta", data=data)

    assert response.status_code == 400
    assert "Erro ao salvar" in response.text
    assert 'href="/consulta"' in response.text
    assert count_rows(pool, Consulta) == 0


def test_submitted_values_are_escaped(client):
    response = client.post("/banho_tosa", data={**GROOMING_FORM, "nome_pet": "<script>x</script>"})

    assert response.status_code == 200
    assert "<script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_write_failure_renders_generic_page(client, pool):
    with pool.transaction() as conn:
        conn.exec_driver_sql("DROP TABLE banho_tosa")

    response = client.post("/banho_tosa", data=GROOMING_FORM)

    assert response.status_code == 500
    assert "Erro ao salvar" in response.text
    # sem detalhes do driver
    assert "no such table" not in response.text


def test_login_is_only_acknowledged(client, pool):
    response = client.post("/login", data={"email": "ana@example.com", "senha": "x"})

    assert response.status_code == 200
    assert "Login recebido" in response.text
    assert count_rows(pool, BanhoTosa) == 0
