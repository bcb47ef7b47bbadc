# api/domain/empreendimento/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Empreendimento:
    """Parceiro ao qual pontos de captacao se referem por id (sem cascata)."""

    id: str
    nome: str
    responsavel: str = ""
    observacoes: str = ""
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        stripped = self.nome.strip()
        if not stripped:
            raise ValueError("Nome do empreendimento nao pode ser vazio")
        object.__setattr__(self, "nome", stripped)
