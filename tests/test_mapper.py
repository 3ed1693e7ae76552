from dataclasses import fields

import pytest

from petshop.errors import MissingField, ValidationError
from petshop.mapper import (
    ConsultationAppointment,
    GroomingAppointment,
    map_consultation,
    map_grooming,
)
from petshop.models import CONSULTATION_FIELDS, GROOMING_FIELDS, BanhoTosa, Consulta

from .conftest import CONSULTATION_FORM, GROOMING_FORM


def test_field_order_matches_table_columns():
    assert [c.name for c in BanhoTosa.__table__.columns] == ["id", *GROOMING_FIELDS]
    assert [c.name for c in Consulta.__table__.columns] == ["id", *CONSULTATION_FIELDS]


def test_record_attributes_follow_field_order():
    assert tuple(f.name for f in fields(GroomingAppointment)) == GROOMING_FIELDS
    assert tuple(f.name for f in fields(ConsultationAppointment)) == CONSULTATION_FIELDS


def test_map_grooming_keeps_values_verbatim():
    record = map_grooming(GROOMING_FORM)
    assert isinstance(record, GroomingAppointment)
    assert record.values() == tuple(GROOMING_FORM[k] for k in GROOMING_FIELDS)


def test_map_consultation_keeps_values_verbatim():
    record = map_consultation(CONSULTATION_FORM)
    assert isinstance(record, ConsultationAppointment)
    assert record.pet == "Mel"
    assert record.values() == tuple(CONSULTATION_FORM[k] for k in CONSULTATION_FIELDS)


def test_no_trimming_or_date_checks():
    data = {**GROOMING_FORM, "nome": "  Ana  ", "data": "amanhã", "horario": "25:99", "motivo": ""}
    record = map_grooming(data)
    assert record.nome == "  Ana  "
    assert record.data == "amanhã"
    assert record.horario == "25:99"
    assert record.motivo == ""


def test_extra_keys_are_ignored():
    record = map_grooming({**GROOMING_FORM, "lembrar": "on"})
    assert record == map_grooming(GROOMING_FORM)


@pytest.mark.parametrize("missing", GROOMING_FIELDS)
def test_map_grooming_missing_field(missing):
    data = {k: v for k, v in GROOMING_FORM.items() if k != missing}
    with pytest.raises(MissingField) as exc:
        map_grooming(data)
    assert exc.value.field == missing


@pytest.mark.parametrize("missing", CONSULTATION_FIELDS)
def test_map_consultation_missing_field(missing):
    data = {k: v for k, v in CONSULTATION_FORM.items() if k != missing}
    with pytest.raises(MissingField) as exc:
        map_consultation(data)
    assert exc.value.field == missing
    assert isinstance(exc.value, ValidationError)


def test_grooming_form_is_not_a_consultation():
    # banho_tosa usa nome_pet, consulta usa pet
    with pytest.raises(MissingField) as exc:
        map_consultation(GROOMING_FORM)
    assert exc.value.field == "pet"
