# api/domain/ponto/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

TEMPO_CONTRATO_PADRAO = 12


def como_decimal(valor: Decimal | int | float | str) -> Decimal:
    """Converte para Decimal. float passa por str() para nao herdar ruido binario."""
    if isinstance(valor, Decimal):
        return valor
    if isinstance(valor, float):
        return Decimal(str(valor))
    return Decimal(valor)


@dataclass(frozen=True)
class TermosContrato:
    """Entradas digitadas no formulario. Unica fonte dos campos derivados."""

    valor_fechado: Decimal
    percentual: Decimal
    data_inicio: date
    tempo_contrato: int  # meses

    def __post_init__(self) -> None:
        if isinstance(self.tempo_contrato, bool) or not isinstance(self.tempo_contrato, int):
            raise ValueError("Tempo de contrato deve ser um numero inteiro de meses")
        object.__setattr__(self, "valor_fechado", como_decimal(self.valor_fechado))
        object.__setattr__(self, "percentual", como_decimal(self.percentual))

    @classmethod
    def padrao(cls, hoje: date) -> TermosContrato:
        """Valores iniciais de um ponto novo: hoje, 12 meses, valores zerados."""
        return cls(
            valor_fechado=Decimal("0"),
            percentual=Decimal("0"),
            data_inicio=hoje,
            tempo_contrato=TEMPO_CONTRATO_PADRAO,
        )


@dataclass(frozen=True)
class CamposDerivados:
    valor_repassado: Decimal
    margem_lucro: Decimal
    data_termino: date
