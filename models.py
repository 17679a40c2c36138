from __future__ import annotations

import enum
import logging
from datetime import date
from decimal import Decimal

from flask_sqlalchemy import SQLAlchemy

from config import CATEGORIAS_CNH, TIPOS_VEICULO

db = SQLAlchemy()

logger = logging.getLogger(__name__)


class StatusVeiculo(enum.Enum):
    DISPONIVEL = "Disponível"
    EM_USO = "Em Uso"

class StatusMotorista(enum.Enum):
    DISPONIVEL = "Disponível"
    EM_VIAGEM = "Em Viagem"

class StatusViagem(enum.Enum):
    AGENDADA = "Agendada"
    EM_ANDAMENTO = "Em Andamento"
    CONCLUIDA = "Concluída"
    CANCELADA = "Cancelada"


# ---------------- Badges de status ----------------

# Classes CSS: ok = verde, warn = amarelo, bad = vermelho, info = azul
STATUS_BADGES = {
    StatusVeiculo.DISPONIVEL: "ok",
    StatusVeiculo.EM_USO: "warn",
    StatusMotorista.DISPONIVEL: "ok",
    StatusMotorista.EM_VIAGEM: "warn",
    StatusViagem.AGENDADA: "info",
    StatusViagem.EM_ANDAMENTO: "warn",
    StatusViagem.CONCLUIDA: "info",
    StatusViagem.CANCELADA: "bad",
}

STATUS_ENUMS = (StatusVeiculo, StatusMotorista, StatusViagem)


class StatusDesconhecido(LookupError):
    """Status sem classe de badge cadastrada."""


def verificar_badges(badges=None, enums=STATUS_ENUMS) -> None:
    """Garante que todo membro dos enums de status tem um badge.

    Chamado na criação da app; falha na inicialização em vez de renderizar
    um badge em branco.
    """
    badges = STATUS_BADGES if badges is None else badges
    faltando = [f"{e.__name__}.{m.name}" for e in enums for m in e if m not in badges]
    if faltando:
        raise RuntimeError("Status sem badge: " + ", ".join(faltando))


def badge_para(status, estrito: bool = False, badges=None) -> str:
    badges = STATUS_BADGES if badges is None else badges
    if status in badges:
        return badges[status]

    logger.warning("Status sem badge cadastrado: %r", status)
    if estrito:
        raise StatusDesconhecido(status)
    return "unknown"


# ---------------- Modelos ----------------

class Veiculo(db.Model):
    __tablename__ = "veiculos"
    id = db.Column(db.Integer, primary_key=True)
    placa = db.Column(db.String(10), unique=True, nullable=False)
    modelo = db.Column(db.String(120), nullable=False)
    marca = db.Column(db.String(60), nullable=False)
    ano = db.Column(db.Integer, nullable=False)
    tipo = db.Column(db.String(60), nullable=False)
    capacidade = db.Column(db.Integer, nullable=False)  # lugares
    status = db.Column(db.Enum(StatusVeiculo), nullable=False, default=StatusVeiculo.DISPONIVEL)

    def validar(self) -> list[str]:
        erros = []
        if not self.placa:
            erros.append("placa é obrigatória")
        if not self.modelo or not self.marca:
            erros.append("modelo e marca são obrigatórios")
        if self.ano is None or not 1950 <= self.ano <= date.today().year + 1:
            erros.append("ano inválido")
        if self.tipo not in TIPOS_VEICULO:
            erros.append(f"tipo desconhecido: {self.tipo}")
        if not self.capacidade or self.capacidade <= 0:
            erros.append("capacidade deve ser maior que zero")
        return erros

class Motorista(db.Model):
    __tablename__ = "motoristas"
    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(120), nullable=False)
    cpf = db.Column(db.String(14), unique=True, nullable=False)
    cnh = db.Column(db.String(20), unique=True, nullable=False)
    categoria_cnh = db.Column(db.String(2), nullable=False)
    validade_cnh = db.Column(db.Date, nullable=False)
    status = db.Column(db.Enum(StatusMotorista), nullable=False, default=StatusMotorista.DISPONIVEL)

    def validar(self) -> list[str]:
        erros = []
        if not self.nome:
            erros.append("nome é obrigatório")
        if not self.cpf:
            erros.append("CPF é obrigatório")
        if not self.cnh:
            erros.append("CNH é obrigatória")
        if self.categoria_cnh not in CATEGORIAS_CNH:
            erros.append(f"categoria de CNH inválida: {self.categoria_cnh}")
        return erros

    def cnh_vencida(self, hoje: date | None = None) -> bool:
        return self.validade_cnh < (hoje or date.today())

class Viagem(db.Model):
    __tablename__ = "viagens"
    id = db.Column(db.Integer, primary_key=True)
    origem = db.Column(db.String(120), nullable=False)
    destino = db.Column(db.String(120), nullable=False)
    data_inicio = db.Column(db.DateTime, nullable=False)
    data_fim = db.Column(db.DateTime, nullable=False)
    # Referências por nome/placa, sem chave estrangeira.
    motorista = db.Column(db.String(120), nullable=False)
    veiculo = db.Column(db.String(10), nullable=False)
    cliente = db.Column(db.String(120), nullable=False)
    valor = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.Enum(StatusViagem), nullable=False, default=StatusViagem.AGENDADA)

    def validar(self) -> list[str]:
        erros = []
        if not self.origem or not self.destino:
            erros.append("origem e destino são obrigatórios")
        if self.valor is None or Decimal(self.valor) <= 0:
            erros.append("valor deve ser maior que zero")
        if self.data_inicio and self.data_fim and self.data_inicio > self.data_fim:
            erros.append("data de início não pode ser maior que data de fim")
        return erros
