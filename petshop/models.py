from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base

# Ordem das colunas usada pelo mapper e pelo INSERT (id fica de fora)
GROOMING_FIELDS: tuple[str, ...] = ("nome", "cpf", "celular", "nome_pet", "motivo", "data", "horario")
CONSULTATION_FIELDS: tuple[str, ...] = ("nome", "cpf", "celular", "pet", "motivo", "data", "horario")


class BanhoTosa(Base):
    __tablename__ = "banho_tosa"
    # AUTOINCREMENT: ids nunca são reutilizados
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(Text, nullable=False)
    cpf: Mapped[str] = mapped_column(Text, nullable=False)
    celular: Mapped[str] = mapped_column(Text, nullable=False)
    nome_pet: Mapped[str] = mapped_column(Text, nullable=False)
    motivo: Mapped[str] = mapped_column(Text, nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    horario: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"BanhoTosa({self.id}, {self.nome_pet} em {self.data} {self.horario})"


class Consulta(Base):
    __tablename__ = "consulta"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(Text, nullable=False)
    cpf: Mapped[str] = mapped_column(Text, nullable=False)
    celular: Mapped[str] = mapped_column(Text, nullable=False)
    pet: Mapped[str] = mapped_column(Text, nullable=False)
    motivo: Mapped[str] = mapped_column(Text, nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    horario: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Consulta({self.id}, {self.pet} em {self.data} {self.horario})"
