from __future__ import annotations


class BookingError(Exception):
    """Base de todos os erros do subsistema de agendamentos."""


# Pool

class PoolError(BookingError):
    pass


class PoolInitError(PoolError):
    """O arquivo do banco não pôde ser aberto na inicialização (fatal)."""


class PoolExhausted(PoolError):
    """Nenhuma conexão livre no pool."""


class PoolTimeout(PoolExhausted):
    """Nenhuma conexão foi liberada dentro do tempo de espera configurado."""


# Armazenamento

class StorageError(BookingError):
    pass


class SchemaError(StorageError):
    """Falha de DDL ao criar as tabelas (fatal na inicialização)."""


class ConnectionFailed(StorageError):
    pass


class WriteFailed(StorageError):
    pass


# Validação

class ValidationError(BookingError):
    pass


class MissingField(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Campo obrigatório ausente: {field}")
        self.field = field
