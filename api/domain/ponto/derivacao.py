# api/domain/ponto/derivacao.py
#
# Functional core: campos derivados de um ponto de captacao.
#
# Todas as funcoes sao puras e totais. valor_repassado, margem_lucro e
# data_termino NUNCA sao editados diretamente: sempre saem de derivar_campos.
from __future__ import annotations

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from .value_objects import CamposDerivados, TermosContrato, como_decimal

_CEM = Decimal("100")


def calcular_data_termino(data_inicio: date, meses: int) -> date:
    """Soma meses de calendario, ajustando para o ultimo dia valido do mes.

    31/01 + 1 mes -> 28/02 (ou 29/02 em ano bissexto). meses == 0 devolve a
    propria data; meses negativos andam para tras com o mesmo ajuste.
    """
    return data_inicio + relativedelta(months=meses)


def calcular_valor_repassado(valor_fechado: Decimal | int | float, percentual: Decimal | int | float) -> Decimal:
    """valor_fechado * percentual / 100. Sem clamp: percentual fora de [0, 100] e aceito."""
    return como_decimal(valor_fechado) * como_decimal(percentual) / _CEM


def calcular_margem_lucro(valor_fechado: Decimal | int | float, valor_repassado: Decimal | int | float) -> Decimal:
    """Pode ser negativa (prejuizo) quando o repasse supera o valor fechado."""
    return como_decimal(valor_fechado) - como_decimal(valor_repassado)


def derivar_campos(termos: TermosContrato) -> CamposDerivados:
    repassado = calcular_valor_repassado(termos.valor_fechado, termos.percentual)
    return CamposDerivados(
        valor_repassado=repassado,
        margem_lucro=calcular_margem_lucro(termos.valor_fechado, repassado),
        data_termino=calcular_data_termino(termos.data_inicio, termos.tempo_contrato),
    )
