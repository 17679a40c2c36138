# data.py

import logging
from datetime import date, datetime
from decimal import Decimal

from models import (
    db,
    Motorista,
    StatusMotorista,
    StatusVeiculo,
    StatusViagem,
    Veiculo,
    Viagem,
)

logger = logging.getLogger(__name__)

VEICULOS = [
    {"id": 1, "placa": "ABC1234", "modelo": "Sprinter", "marca": "Mercedes-Benz", "ano": 2022, "tipo": "Van", "capacidade": 15, "status": StatusVeiculo.DISPONIVEL},
    {"id": 2, "placa": "DEF5678", "modelo": "Volvo B340R", "marca": "Volvo", "ano": 2021, "tipo": "Ônibus", "capacidade": 44, "status": StatusVeiculo.EM_USO},
    {"id": 3, "placa": "GHI9012", "modelo": "Volare W9", "marca": "Marcopolo", "ano": 2020, "tipo": "Micro-ônibus", "capacidade": 28, "status": StatusVeiculo.DISPONIVEL},
    {"id": 4, "placa": "JKL3456", "modelo": "Master Minibus", "marca": "Renault", "ano": 2023, "tipo": "Van", "capacidade": 16, "status": StatusVeiculo.EM_USO},
    {"id": 5, "placa": "MNO7890", "modelo": "Corolla", "marca": "Toyota", "ano": 2024, "tipo": "Carro Executivo", "capacidade": 4, "status": StatusVeiculo.DISPONIVEL},
]

MOTORISTAS = [
    {"id": 1, "nome": "João Silva", "cpf": "123.456.789-00", "cnh": "12345678900", "categoria_cnh": "D", "validade_cnh": date(2027, 12, 31), "status": StatusMotorista.DISPONIVEL},
    {"id": 2, "nome": "Maria Santos", "cpf": "987.654.321-00", "cnh": "98765432100", "categoria_cnh": "E", "validade_cnh": date(2024, 6, 30), "status": StatusMotorista.EM_VIAGEM},
    {"id": 3, "nome": "Carlos Pereira", "cpf": "456.789.123-11", "cnh": "45678912311", "categoria_cnh": "D", "validade_cnh": date(2028, 3, 15), "status": StatusMotorista.EM_VIAGEM},
    {"id": 4, "nome": "Ana Oliveira", "cpf": "321.654.987-22", "cnh": "32165498722", "categoria_cnh": "B", "validade_cnh": date(2029, 8, 1), "status": StatusMotorista.DISPONIVEL},
]

VIAGENS = [
    {"id": 1, "origem": "São Paulo", "destino": "Rio de Janeiro", "data_inicio": datetime(2024, 3, 20, 8, 0), "data_fim": datetime(2024, 3, 21, 18, 0), "motorista": "João Silva", "veiculo": "ABC1234", "cliente": "Empresa XYZ", "valor": Decimal("2500.00"), "status": StatusViagem.AGENDADA},
    {"id": 2, "origem": "Belo Horizonte", "destino": "Brasília", "data_inicio": datetime(2024, 3, 22, 7, 0), "data_fim": datetime(2024, 3, 23, 17, 0), "motorista": "Maria Santos", "veiculo": "DEF5678", "cliente": "Empresa ABC", "valor": Decimal("3200.00"), "status": StatusViagem.EM_ANDAMENTO},
    {"id": 3, "origem": "Curitiba", "destino": "Florianópolis", "data_inicio": datetime(2024, 2, 10, 6, 30), "data_fim": datetime(2024, 2, 10, 12, 0), "motorista": "Carlos Pereira", "veiculo": "GHI9012", "cliente": "Colégio Horizonte", "valor": Decimal("1850.50"), "status": StatusViagem.CONCLUIDA},
    {"id": 4, "origem": "Campinas", "destino": "Santos", "data_inicio": datetime(2024, 2, 15, 9, 0), "data_fim": datetime(2024, 2, 15, 19, 0), "motorista": "Ana Oliveira", "veiculo": "MNO7890", "cliente": "Turismo Litoral", "valor": Decimal("780.00"), "status": StatusViagem.CANCELADA},
]


class DadosInvalidosError(ValueError):
    """Dados de carga que não passam na validação dos modelos."""

    def __init__(self, erros):
        self.erros = erros
        super().__init__("; ".join(f"{ref}: {', '.join(msgs)}" for ref, msgs in erros))


def seed_database(veiculos=VEICULOS, motoristas=MOTORISTAS, viagens=VIAGENS):
    """Carrega os dados fixos no banco. Valida tudo antes de gravar."""
    registros = (
        [Veiculo(**v) for v in veiculos]
        + [Motorista(**m) for m in motoristas]
        + [Viagem(**v) for v in viagens]
    )

    erros = []
    for r in registros:
        msgs = r.validar()
        if msgs:
            erros.append((f"{type(r).__name__} #{r.id}", msgs))
    if erros:
        raise DadosInvalidosError(erros)

    db.session.add_all(registros)
    db.session.commit()
    logger.info(
        "Carga inicial: %d veículos, %d motoristas, %d viagens",
        len(veiculos), len(motoristas), len(viagens),
    )
