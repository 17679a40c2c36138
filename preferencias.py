from __future__ import annotations

from dataclasses import asdict, dataclass, replace

SESSION_KEY = "ui"


@dataclass(frozen=True)
class UiPreferences:
    """Preferências visuais do layout: tema e menu lateral.

    Padrão: tema claro, menu fechado (telas pequenas).
    """
    tema_escuro: bool = False
    menu_aberto: bool = False

    @classmethod
    def from_session(cls, session) -> "UiPreferences":
        salvo = session.get(SESSION_KEY) or {}
        return cls(
            tema_escuro=bool(salvo.get("tema_escuro", False)),
            menu_aberto=bool(salvo.get("menu_aberto", False)),
        )

    def save(self, session) -> None:
        session[SESSION_KEY] = asdict(self)

    def alternar_tema(self) -> "UiPreferences":
        return replace(self, tema_escuro=not self.tema_escuro)

    def alternar_menu(self) -> "UiPreferences":
        return replace(self, menu_aberto=not self.menu_aberto)
