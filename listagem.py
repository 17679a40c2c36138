"""Listagem genérica com busca: a tabela usada por veículos, motoristas e viagens.

Cada página só declara suas colunas; filtro, estado vazio, badges de status e
ação de linha ficam aqui.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Generic, Iterable, NamedTuple, Optional, Sequence, TypeVar

from sqlalchemy import inspect as sa_inspect

from models import badge_para

T = TypeVar("T")

MSG_SEM_REGISTROS = "Nenhum registro cadastrado."
MSG_SEM_RESULTADOS = 'Nenhum resultado para "{termo}".'


class RegistroNaoEncontrado(LookupError):
    """Ação pedida para um id que não está na coleção."""


# ---------------- Filtro ----------------

def texto_do_campo(valor: Any) -> str:
    if valor is None:
        return ""
    if isinstance(valor, enum.Enum):
        return str(valor.value)
    if isinstance(valor, (date, datetime)):
        return valor.isoformat()
    return str(valor)


def campos_do_registro(registro: Any) -> list[Any]:
    """Valores de todos os campos de um registro (dict ou modelo SQLAlchemy)."""
    if isinstance(registro, Mapping):
        return list(registro.values())
    mapper = sa_inspect(type(registro))
    return [getattr(registro, attr.key) for attr in mapper.column_attrs]


def filtrar_registros(
    registros: Iterable[T],
    termo: str,
    campos: Callable[[T], Iterable[Any]] = campos_do_registro,
) -> list[T]:
    """Registros em que algum campo contém `termo`, sem diferenciar maiúsculas.

    Termo vazio devolve tudo. A ordem original é mantida e a entrada não é
    alterada.
    """
    if not termo:
        return list(registros)

    alvo = termo.casefold()
    return [
        r for r in registros
        if any(alvo in texto_do_campo(v).casefold() for v in campos(r))
    ]


# ---------------- Colunas ----------------

@dataclass(frozen=True)
class Coluna(Generic[T]):
    rotulo: str
    acessor: Callable[[T], Any]
    formatador: Optional[Callable[[Any], str]] = None
    badge: bool = False


class Celula(NamedTuple):
    texto: str
    badge: Optional[str] = None


class Linha(NamedTuple):
    registro: Any
    celulas: list


def _sem_acao(registro):
    return None


# ---------------- View ----------------

class RecordListView(Generic[T]):
    def __init__(
        self,
        registros: Sequence[T],
        colunas: Sequence[Coluna[T]],
        termo: str = "",
        on_row_action: Callable[[T], Any] = _sem_acao,
        rotulo_acao: str = "Editar",
        campos: Callable[[T], Iterable[Any]] = campos_do_registro,
        badge_estrito: bool = False,
    ):
        self._registros = tuple(registros)
        self._termo = termo or ""
        self._cache: Optional[list[T]] = None
        self.colunas = list(colunas)
        self.on_row_action = on_row_action
        self.rotulo_acao = rotulo_acao
        self.campos = campos
        self.badge_estrito = badge_estrito

    @property
    def registros(self) -> tuple:
        return self._registros

    @registros.setter
    def registros(self, valor: Sequence[T]) -> None:
        self._registros = tuple(valor)
        self._cache = None

    @property
    def termo(self) -> str:
        return self._termo

    @termo.setter
    def termo(self, valor: str) -> None:
        valor = valor or ""
        if valor != self._termo:
            self._termo = valor
            self._cache = None

    @property
    def filtrados(self) -> list[T]:
        if self._cache is None:
            self._cache = filtrar_registros(self._registros, self._termo, self.campos)
        return list(self._cache)

    # ---------- Estado vazio ----------
    @property
    def sem_registros(self) -> bool:
        return not self._registros

    @property
    def vazio(self) -> bool:
        return not self.filtrados

    @property
    def mensagem_vazia(self) -> Optional[str]:
        if self.sem_registros:
            return MSG_SEM_REGISTROS
        if self.vazio:
            return MSG_SEM_RESULTADOS.format(termo=self._termo)
        return None

    # ---------- Renderização ----------
    def celula(self, coluna: Coluna[T], registro: T) -> Celula:
        valor = coluna.acessor(registro)
        texto = coluna.formatador(valor) if coluna.formatador else texto_do_campo(valor)
        badge = badge_para(valor, estrito=self.badge_estrito) if coluna.badge else None
        return Celula(texto, badge)

    def linhas(self) -> list[Linha]:
        return [
            Linha(r, [self.celula(c, r) for c in self.colunas])
            for r in self.filtrados
        ]

    # ---------- Ação de linha ----------
    def acionar(self, registro_id):
        for r in self._registros:
            if _id_de(r) == registro_id:
                return self.on_row_action(r)
        raise RegistroNaoEncontrado(registro_id)


def _id_de(registro):
    if isinstance(registro, Mapping):
        return registro.get("id")
    return getattr(registro, "id", None)
