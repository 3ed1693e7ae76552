from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Mapping, TypeVar

from .errors import MissingField
from .models import CONSULTATION_FIELDS, GROOMING_FIELDS


@dataclass(frozen=True)
class GroomingAppointment:
    nome: str
    cpf: str
    celular: str
    nome_pet: str
    motivo: str
    data: str
    horario: str

    def values(self) -> tuple[str, ...]:
        return astuple(self)


@dataclass(frozen=True)
class ConsultationAppointment:
    nome: str
    cpf: str
    celular: str
    pet: str
    motivo: str
    data: str
    horario: str

    def values(self) -> tuple[str, ...]:
        return astuple(self)


Appointment = GroomingAppointment | ConsultationAppointment

_R = TypeVar("_R", GroomingAppointment, ConsultationAppointment)


def _map(fields: Mapping[str, str], required: tuple[str, ...], record_cls: type[_R]) -> _R:
    # Só verifica presença: os valores passam como vieram (sem trim, sem validar data/hora)
    for name in required:
        if name not in fields:
            raise MissingField(name)
    return record_cls(*(fields[name] for name in required))


def map_grooming(fields: Mapping[str, str]) -> GroomingAppointment:
    return _map(fields, GROOMING_FIELDS, GroomingAppointment)


def map_consultation(fields: Mapping[str, str]) -> ConsultationAppointment:
    return _map(fields, CONSULTATION_FIELDS, ConsultationAppointment)
