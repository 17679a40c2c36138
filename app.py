from __future__ import annotations

from decimal import Decimal
import enum
import logging
from datetime import date, datetime

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for
from sqlalchemy import inspect as sa_inspect

from config import APP_NOME, Config
from data import seed_database
from formatacao import formatar_data_hora, formatar_moeda, formatar_validade_cnh
from listagem import Coluna, RecordListView, RegistroNaoEncontrado
from models import (
    db,
    Motorista,
    StatusMotorista,
    StatusVeiculo,
    StatusViagem,
    Veiculo,
    Viagem,
    verificar_badges,
)
from preferencias import UiPreferences

# ---------------- Utils ----------------

def norm(s: str | None) -> str:
    return (s or "").strip()

def local_path(s: str | None) -> str:
    """Só aceita caminhos internos para redirecionar de volta."""
    s = norm(s)
    if s.startswith("/") and not s.startswith("//"):
        return s
    return "/"

def json_value(v):
    if isinstance(v, enum.Enum):
        return v.value
    if isinstance(v, (date, datetime)):
        return v.isoformat()
    if isinstance(v, Decimal):
        return str(v)
    return v

def serializar(registro) -> dict:
    mapper = sa_inspect(type(registro))
    return {attr.key: json_value(getattr(registro, attr.key)) for attr in mapper.column_attrs}


# ---------------- Listagens ----------------

COLUNAS_VEICULOS = [
    Coluna("Placa", lambda v: v.placa),
    Coluna("Modelo", lambda v: v.modelo),
    Coluna("Marca", lambda v: v.marca),
    Coluna("Ano", lambda v: v.ano),
    Coluna("Tipo", lambda v: v.tipo),
    Coluna("Capacidade", lambda v: v.capacidade, lambda c: f"{c} lugares"),
    Coluna("Status", lambda v: v.status, lambda s: s.value, badge=True),
]

COLUNAS_MOTORISTAS = [
    Coluna("Nome", lambda m: m.nome),
    Coluna("CPF", lambda m: m.cpf),
    Coluna("CNH", lambda m: m.cnh),
    Coluna("Categoria", lambda m: m.categoria_cnh),
    Coluna("Validade CNH", lambda m: m.validade_cnh, formatar_validade_cnh),
    Coluna("Status", lambda m: m.status, lambda s: s.value, badge=True),
]

COLUNAS_VIAGENS = [
    Coluna("Origem/Destino", lambda v: f"{v.origem} → {v.destino}"),
    Coluna("Início", lambda v: v.data_inicio, formatar_data_hora),
    Coluna("Fim", lambda v: v.data_fim, formatar_data_hora),
    Coluna("Motorista", lambda v: v.motorista),
    Coluna("Veículo", lambda v: v.veiculo),
    Coluna("Cliente", lambda v: v.cliente),
    Coluna("Valor", lambda v: v.valor, formatar_moeda),
    Coluna("Status", lambda v: v.status, lambda s: s.value, badge=True),
]

# tipo -> (modelo, colunas, título, descrição, rótulo da ação)
LISTAGENS = {
    "veiculos": (Veiculo, COLUNAS_VEICULOS, "Veículos",
                 "Lista de todos os veículos cadastrados no sistema.", "Editar"),
    "motoristas": (Motorista, COLUNAS_MOTORISTAS, "Motoristas",
                   "Lista de todos os motoristas cadastrados no sistema.", "Editar"),
    "viagens": (Viagem, COLUNAS_VIAGENS, "Viagens",
                "Lista de todas as viagens agendadas e em andamento.", "Detalhes"),
}

NAV_ITEMS = [
    ("Dashboard", "/"),
    ("Veículos", "/veiculos"),
    ("Motoristas", "/motoristas"),
    ("Viagens", "/viagens"),
]


def carregar(modelo):
    return modelo.query.order_by(modelo.id.asc()).all()


def resumo_dashboard() -> dict:
    veics = carregar(Veiculo)
    mots = carregar(Motorista)
    viags = carregar(Viagem)

    faturamento = sum(
        (v.valor for v in viags if v.status != StatusViagem.CANCELADA),
        Decimal("0"),
    )
    cards = [
        {"nome": "Viagens em Andamento",
         "valor": str(sum(1 for v in viags if v.status == StatusViagem.EM_ANDAMENTO))},
        {"nome": "Veículos Disponíveis",
         "valor": str(sum(1 for v in veics if v.status == StatusVeiculo.DISPONIVEL))},
        {"nome": "Motoristas Disponíveis",
         "valor": str(sum(1 for m in mots if m.status == StatusMotorista.DISPONIVEL))},
        {"nome": "Faturamento Previsto", "valor": formatar_moeda(faturamento)},
    ]
    frota = [
        {"status": st, "total": sum(1 for v in veics if v.status == st)}
        for st in StatusVeiculo
    ]
    return {"cards": cards, "frota": frota}


# ---------------- App Factory ----------------

def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    verificar_badges()

    db.init_app(app)

    with app.app_context():
        db.create_all()
        if db.session.query(Veiculo.id).first() is None:
            seed_database()

    @app.context_processor
    def layout_context():
        return {
            "app_nome": APP_NOME,
            "nav_items": NAV_ITEMS,
            "prefs": UiPreferences.from_session(session),
        }

    def montar_view(tipo: str, termo: str = "", on_row_action=None) -> RecordListView:
        modelo, colunas, _, _, rotulo = LISTAGENS[tipo]
        kwargs = {"on_row_action": on_row_action} if on_row_action else {}
        return RecordListView(
            carregar(modelo),
            colunas,
            termo=termo,
            rotulo_acao=rotulo,
            badge_estrito=app.debug,
            **kwargs,
        )

    def listagem(tipo: str):
        _, _, titulo, descricao, _ = LISTAGENS[tipo]
        termo = norm(request.args.get("q"))
        view = montar_view(tipo, termo)
        return render_template(
            "listagem.html",
            tipo=tipo,
            titulo=titulo,
            descricao=descricao,
            view=view,
        )

    def detalhe(tipo: str, registro_id: int):
        _, _, titulo, _, _ = LISTAGENS[tipo]

        def abrir(registro):
            return render_template(
                "detalhe.html",
                tipo=tipo,
                titulo=titulo,
                registro=registro,
                celulas=[(c.rotulo, view.celula(c, registro)) for c in view.colunas],
            )

        view = montar_view(tipo, on_row_action=abrir)
        try:
            return view.acionar(registro_id)
        except RegistroNaoEncontrado:
            app.logger.info("Registro %s #%s não encontrado", tipo, registro_id)
            flash("Registro não encontrado.", "err")
            return redirect(url_for(tipo))

    # ---------- Navegação ----------
    @app.get("/")
    def index():
        return render_template("dashboard.html", **resumo_dashboard())

    @app.errorhandler(404)
    def nao_encontrado(e):
        return redirect(url_for("index"))

    # ---------- Cadastros ----------
    @app.get("/veiculos")
    def veiculos():
        return listagem("veiculos")

    @app.get("/veiculos/<int:registro_id>")
    def veiculo_detalhe(registro_id):
        return detalhe("veiculos", registro_id)

    @app.get("/motoristas")
    def motoristas():
        return listagem("motoristas")

    @app.get("/motoristas/<int:registro_id>")
    def motorista_detalhe(registro_id):
        return detalhe("motoristas", registro_id)

    @app.get("/viagens")
    def viagens():
        return listagem("viagens")

    @app.get("/viagens/<int:registro_id>")
    def viagem_detalhe(registro_id):
        return detalhe("viagens", registro_id)

    # ---------- API (somente leitura) ----------
    @app.get("/api/<tipo>")
    def api_listagem(tipo):
        if tipo not in LISTAGENS:
            return jsonify({"erro": f"tipo desconhecido: {tipo}"}), 404

        seq_txt = norm(request.args.get("seq"))
        try:
            seq = int(seq_txt) if seq_txt else None
        except ValueError:
            return jsonify({"erro": "seq deve ser um número inteiro"}), 400

        termo = norm(request.args.get("q"))
        itens = montar_view(tipo, termo).filtrados
        return jsonify(
            {
                "seq": seq,
                "q": termo,
                "total": len(itens),
                "itens": [serializar(r) for r in itens],
            }
        )

    # ---------- Preferências ----------
    @app.post("/preferencias/tema")
    def alternar_tema():
        UiPreferences.from_session(session).alternar_tema().save(session)
        return redirect(local_path(request.form.get("next")))

    @app.post("/preferencias/menu")
    def alternar_menu():
        UiPreferences.from_session(session).alternar_menu().save(session)
        return redirect(local_path(request.form.get("next")))

    return app


# Para rodar local: python app.py
if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
