from datetime import date, datetime
from decimal import Decimal

import pytest

from formatacao import formatar_data, formatar_data_hora, formatar_moeda, formatar_validade_cnh


@pytest.mark.parametrize("valor, esperado", [
    (Decimal("2500.00"), "R$ 2.500,00"),
    (2500, "R$ 2.500,00"),
    (Decimal("1850.5"), "R$ 1.850,50"),
    (1234567.891, "R$ 1.234.567,89"),
    (0, "R$ 0,00"),
    (Decimal("-1"), "-R$ 1,00"),
    (None, ""),
])
def test_formatar_moeda(valor, esperado):
    assert formatar_moeda(valor) == esperado


def test_formatar_datas():
    assert formatar_data(date(2025, 12, 31)) == "31/12/2025"
    assert formatar_data_hora(datetime(2024, 3, 20, 8, 0)) == "20/03/2024 08:00"
    assert formatar_data(None) == ""
    assert formatar_data_hora(None) == ""


def test_formatar_validade_cnh():
    hoje = date(2025, 1, 1)
    assert formatar_validade_cnh(date(2024, 6, 30), hoje) == "30/06/2024 (vencida)"
    assert formatar_validade_cnh(date(2025, 1, 1), hoje) == "01/01/2025"
