"""Tests for the searchable record list."""

from datetime import date

import pytest

from data import VEICULOS
from listagem import (
    MSG_SEM_REGISTROS,
    Coluna,
    RecordListView,
    RegistroNaoEncontrado,
    campos_do_registro,
    filtrar_registros,
    texto_do_campo,
)
from models import StatusVeiculo, StatusViagem, Veiculo


COLUNAS = [
    Coluna("Placa", lambda v: v["placa"]),
    Coluna("Status", lambda v: v["status"], lambda s: s.value, badge=True),
]


def _casa(registro, termo):
    return any(termo.lower() in texto_do_campo(v).lower() for v in registro.values())


def test_busca_por_placa(veiculos):
    resultado = filtrar_registros(veiculos[:2], "abc")
    assert [v["placa"] for v in resultado] == ["ABC1234"]


def test_termo_vazio_devolve_tudo_em_ordem(veiculos):
    assert filtrar_registros(veiculos, "") == veiculos


def test_termo_sem_correspondencia():
    assert filtrar_registros(VEICULOS, "viagem") == []


@pytest.mark.parametrize("termo", ["sprinter", "SPRINTER", "em uso", "1", "a", "zzz", "disponível"])
def test_registro_aparece_sse_algum_campo_contem_termo(veiculos, termo):
    resultado = filtrar_registros(veiculos, termo)
    assert resultado == [v for v in veiculos if _casa(v, termo)]


@pytest.mark.parametrize("termo", ["sprinter", "d", "abc", ""])
def test_filtro_idempotente(veiculos, termo):
    uma_vez = filtrar_registros(veiculos, termo)
    assert filtrar_registros(uma_vez, termo) == uma_vez


def test_preserva_ordem_original(veiculos):
    resultado = filtrar_registros(veiculos, "sprinter")
    assert [v["id"] for v in resultado] == [1, 3]


def test_nao_altera_entrada(veiculos):
    copia = list(veiculos)
    filtrar_registros(veiculos, "abc")
    assert veiculos == copia


def test_texto_do_campo():
    assert texto_do_campo(None) == ""
    assert texto_do_campo(StatusViagem.EM_ANDAMENTO) == "Em Andamento"
    assert texto_do_campo(date(2025, 12, 31)) == "2025-12-31"
    assert texto_do_campo(15) == "15"


def test_campos_de_modelo_sqlalchemy():
    v = Veiculo(id=7, placa="QWE1A23", modelo="Sprinter", marca="Mercedes-Benz",
                ano=2022, tipo="Van", capacidade=15, status=StatusVeiculo.EM_USO)
    campos = campos_do_registro(v)
    assert "QWE1A23" in campos
    assert StatusVeiculo.EM_USO in campos
    assert filtrar_registros([v], "em uso") == [v]
    assert filtrar_registros([v], "mercedes") == [v]


# ---------------- RecordListView ----------------

def test_estado_vazio_sem_registros():
    view = RecordListView([], COLUNAS)
    assert view.vazio
    assert view.sem_registros
    assert view.mensagem_vazia == MSG_SEM_REGISTROS


def test_estado_vazio_sem_resultados(veiculos):
    view = RecordListView(veiculos, COLUNAS, termo="viagem")
    assert view.vazio
    assert not view.sem_registros
    assert view.mensagem_vazia == 'Nenhum resultado para "viagem".'


def test_sem_mensagem_quando_ha_linhas(veiculos):
    view = RecordListView(veiculos, COLUNAS, termo="abc")
    assert view.mensagem_vazia is None


def test_linhas_com_badges(veiculos):
    view = RecordListView(veiculos, COLUNAS)
    linhas = view.linhas()
    assert len(linhas) == 3
    assert linhas[0].celulas[0].texto == "ABC1234"
    assert linhas[0].celulas[0].badge is None
    assert linhas[0].celulas[1].texto == "Disponível"
    assert linhas[0].celulas[1].badge == "ok"
    assert linhas[1].celulas[1].badge == "warn"


def test_filtro_memorizado_ate_mudar_termo_ou_registros(veiculos):
    chamadas = []

    def campos(r):
        chamadas.append(r["id"])
        return r.values()

    view = RecordListView(veiculos, COLUNAS, termo="sprinter", campos=campos)
    view.filtrados
    view.filtrados
    view.linhas()
    assert len(chamadas) == 3

    view.termo = "sprinter"
    view.filtrados
    assert len(chamadas) == 3

    view.termo = "abc"
    assert [v["id"] for v in view.filtrados] == [1]
    assert len(chamadas) == 6

    view.registros = veiculos[:1]
    assert [v["id"] for v in view.filtrados] == [1]
    assert len(chamadas) == 7


def test_acionar_chama_acao_com_registro(veiculos):
    recebidos = []
    view = RecordListView(veiculos, COLUNAS, termo="abc",
                          on_row_action=lambda r: recebidos.append(r) or "ok")
    # A ação vale para a coleção inteira, não só para as linhas filtradas.
    assert view.acionar(2) == "ok"
    assert recebidos == [veiculos[1]]


def test_acao_padrao_nao_faz_nada(veiculos):
    view = RecordListView(veiculos, COLUNAS)
    assert view.acionar(1) is None


def test_acionar_id_inexistente(veiculos):
    view = RecordListView(veiculos, COLUNAS)
    with pytest.raises(RegistroNaoEncontrado):
        view.acionar(999)
