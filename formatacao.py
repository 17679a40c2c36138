from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

# Formatos pt-BR usados nas tabelas e no dashboard.

def formatar_moeda(valor) -> str:
    """2500 -> 'R$ 2.500,00'."""
    if valor is None:
        return ""
    valor = Decimal(str(valor)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sinal = "-" if valor < 0 else ""
    # "2,500.00" -> "2.500,00"
    texto = f"{abs(valor):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sinal}R$ {texto}"

def formatar_data(valor: date | None) -> str:
    if valor is None:
        return ""
    return valor.strftime("%d/%m/%Y")

def formatar_data_hora(valor: datetime | None) -> str:
    if valor is None:
        return ""
    return valor.strftime("%d/%m/%Y %H:%M")

def formatar_validade_cnh(valor: date | None, hoje: date | None = None) -> str:
    texto = formatar_data(valor)
    if valor is not None and valor < (hoje or date.today()):
        texto += " (vencida)"
    return texto
