from __future__ import annotations

import argparse
from pathlib import Path

from sqlalchemy import func, select

from . import config
from .db import ConnectionPool
from .errors import BookingError
from .logging_config import configure_logging
from .mapper import map_consultation, map_grooming
from .models import BanhoTosa, Consulta
from .schema import init_db
from .services import BookingWriter


def open_pool(args: argparse.Namespace) -> ConnectionPool:
    pool = ConnectionPool(
        args.db,
        size=config.POOL_SIZE,
        timeout=config.POOL_TIMEOUT,
        busy_timeout=config.BUSY_TIMEOUT,
        echo=config.DB_ECHO,
    )
    init_db(pool)  # garante tabelas
    return pool


def cmd_init(args: argparse.Namespace, pool: ConnectionPool) -> int:
    print(f"DB inicializado em {pool.db_path}.")
    return 0


def cmd_info(args: argparse.Namespace, pool: ConnectionPool) -> int:
    print("ENGINE URL:", pool.url)
    print("DB FILE   :", pool.db_path.resolve())
    print("POOL      :", pool.status())
    with pool.acquire() as conn:
        for model in (BanhoTosa, Consulta):
            total = conn.execute(select(func.count()).select_from(model)).scalar_one()
            print(f"{model.__tablename__:<10}: {total} registro(s)")
    return 0


def _book(args: argparse.Namespace, pool: ConnectionPool, mapper, title: str) -> int:
    fields = {
        key: getattr(args, key)
        for key in ("nome", "cpf", "celular", "nome_pet", "pet", "motivo", "data", "horario")
        if getattr(args, key, None) is not None
    }
    try:
        record_id = BookingWriter(pool).save(mapper(fields))
    except BookingError as e:
        print(f"Erro ao salvar {title}: {e}")
        return 1
    print(f"{title} agendado. ID: {record_id}")
    return 0


def cmd_book_grooming(args: argparse.Namespace, pool: ConnectionPool) -> int:
    return _book(args, pool, map_grooming, "Banho e Tosa")


def cmd_book_consultation(args: argparse.Namespace, pool: ConnectionPool) -> int:
    return _book(args, pool, map_consultation, "Consulta")


def cmd_serve(args: argparse.Namespace, pool: ConnectionPool) -> int:
    import uvicorn

    from .api_main import create_app

    # log_config=None: mantém a configuração de logging do projeto
    uvicorn.run(create_app(pool), host=args.host, port=args.port, log_config=None)
    return 0


def _add_booking_args(p: argparse.ArgumentParser, pet_arg: str) -> None:
    p.add_argument("--nome", required=True)
    p.add_argument("--cpf", required=True)
    p.add_argument("--celular", required=True)
    p.add_argument(f"--{pet_arg.replace('_', '-')}", dest=pet_arg, required=True)
    p.add_argument("--motivo", required=True)
    p.add_argument("--data", required=True, help="ex: 2024-05-01")
    p.add_argument("--horario", required=True, help="ex: 10:00")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="petshop", description="CLI Pet Shop (agendamentos)")
    p.add_argument("--db", type=Path, default=config.DB_PATH, help="Arquivo SQLite (padrão: %(default)s)")
    sub = p.add_subparsers(required=True)

    p_init = sub.add_parser("init", help="Cria o DB e as tabelas")
    p_init.set_defaults(func=cmd_init)

    p_info = sub.add_parser("info", help="Mostra caminho do DB, estado do pool e totais por tabela")
    p_info.set_defaults(func=cmd_info)

    p_groom = sub.add_parser("book-grooming", help="Agenda banho e tosa")
    _add_booking_args(p_groom, "nome_pet")
    p_groom.set_defaults(func=cmd_book_grooming)

    p_cons = sub.add_parser("book-consultation", help="Agenda consulta veterinária")
    _add_booking_args(p_cons, "pet")
    p_cons.set_defaults(func=cmd_book_consultation)

    p_serve = sub.add_parser("serve", help="Sobe o servidor HTTP")
    p_serve.add_argument("--host", default=config.HOST)
    p_serve.add_argument("--port", type=int, default=config.PORT)
    p_serve.set_defaults(func=cmd_serve)

    return p


def main(argv: list[str] | None = None) -> int:
    configure_logging(config.LOG_LEVEL)
    parser = build_parser()
    args = parser.parse_args(argv)

    pool = open_pool(args)
    try:
        return args.func(args, pool)
    finally:
        pool.dispose()


if __name__ == "__main__":
    raise SystemExit(main())
