from __future__ import annotations

import html
import logging
import os
from typing import Callable, Mapping

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from . import config
from .db import ConnectionPool
from .errors import BookingError, MissingField
from .logging_config import configure_logging
from .mapper import Appointment, map_consultation, map_grooming
from .schema import init_db
from .services import BookingWriter

configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)


# Rótulos exibidos na página de confirmação, na ordem das colunas
GROOMING_LABELS = (
    ("nome", "Nome"),
    ("cpf", "CPF"),
    ("celular", "Celular"),
    ("nome_pet", "Nome Pet"),
    ("motivo", "Motivo"),
    ("data", "Data"),
    ("horario", "Horário"),
)

CONSULTATION_LABELS = (
    ("nome", "Nome"),
    ("cpf", "CPF"),
    ("celular", "Celular"),
    ("pet", "Pet"),
    ("motivo", "Motivo"),
    ("data", "Data"),
    ("horario", "Horário"),
)

BACK_LINK = '<p><a href="/">Voltar</a></p>'


def render_template(name: str) -> str:
    path = config.TEMPLATES_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        logger.error("template.missing", extra={"template": name})
        return f"<h1>Erro ao carregar {html.escape(name)}</h1>"


def render_success(title: str, labels: tuple[tuple[str, str], ...], fields: Mapping[str, str]) -> str:
    rows = "\n".join(
        f"<p><strong>{label}:</strong> {html.escape(str(fields[key]))}</p>" for key, label in labels
    )
    return f"<h1>Agendamento de {title} salvo com sucesso!</h1>\n{rows}\n{BACK_LINK}"


def render_failure(title: str, form_path: str) -> str:
    return (
        f"<h1>Erro ao salvar agendamento de {title}.</h1>"
        f'<p>Não foi possível salvar o agendamento. <a href="{form_path}">Tentar novamente</a></p>'
        f"{BACK_LINK}"
    )


# Dependências

def get_pool(request: Request) -> ConnectionPool:
    return request.app.state.pool


def get_writer(pool: ConnectionPool = Depends(get_pool)) -> BookingWriter:
    return BookingWriter(pool)


async def submit_booking(
    request: Request,
    writer: BookingWriter,
    mapper: Callable[[Mapping[str, str]], Appointment],
    title: str,
    labels: tuple[tuple[str, str], ...],
) -> HTMLResponse:
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    form_path = request.url.path

    try:
        record = mapper(fields)
        # acquire + INSERT são bloqueantes: rodam fora do event loop
        record_id = await run_in_threadpool(writer.save, record)
    except MissingField as e:
        logger.warning("booking.missing_field", extra={"path": form_path, "field": e.field})
        return HTMLResponse(render_failure(title, form_path), status_code=400)
    except BookingError as e:
        logger.error("booking.failed", extra={"path": form_path, "error": type(e).__name__})
        return HTMLResponse(render_failure(title, form_path), status_code=500)

    logger.info("booking.accepted", extra={"path": form_path, "id": record_id})
    return HTMLResponse(render_success(title, labels, fields))


def create_app(pool: ConnectionPool | None = None) -> FastAPI:
    app = FastAPI(title="Pet Shop Agendamentos", version="0.1.0")
    app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")

    # Startup

    @app.on_event("startup")
    def startup() -> None:
        logger.info("app.starting", extra={"cwd": os.getcwd()})
        app.state.pool = pool or ConnectionPool(
            config.DB_PATH,
            size=config.POOL_SIZE,
            timeout=config.POOL_TIMEOUT,
            busy_timeout=config.BUSY_TIMEOUT,
            echo=config.DB_ECHO,
        )
        # Cria tabelas (idempotente); erro aqui impede o servidor de subir
        init_db(app.state.pool)

    @app.on_event("shutdown")
    def shutdown() -> None:
        app.state.pool.dispose()

    # Páginas

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return render_template("index.html")

    @app.get("/login", response_class=HTMLResponse)
    def login_form() -> str:
        return render_template("login.html")

    @app.get("/banho_tosa", response_class=HTMLResponse)
    def banho_tosa_form() -> str:
        return render_template("banho_tosa.html")

    @app.get("/consulta", response_class=HTMLResponse)
    def consulta_form() -> str:
        return render_template("consulta.html")

    # Envio dos formulários

    @app.post("/login", response_class=HTMLResponse)
    async def login_submit(request: Request) -> str:
        # Não há autenticação: o login só confirma o recebimento
        form = await request.form()
        logger.info("login.received", extra={"email": form.get("email"), "remember": form.get("lembrar") is not None})
        return f"<h1>Login recebido com sucesso!</h1>{BACK_LINK}"

    @app.post("/banho_tosa", response_class=HTMLResponse)
    async def banho_tosa_submit(request: Request, writer: BookingWriter = Depends(get_writer)) -> HTMLResponse:
        return await submit_booking(request, writer, map_grooming, "Banho e Tosa", GROOMING_LABELS)

    @app.post("/consulta", response_class=HTMLResponse)
    async def consulta_submit(request: Request, writer: BookingWriter = Depends(get_writer)) -> HTMLResponse:
        return await submit_booking(request, writer, map_consultation, "Consulta", CONSULTATION_LABELS)

    logger.info("app.initialized")
    return app


app = create_app()
