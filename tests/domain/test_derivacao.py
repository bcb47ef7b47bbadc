from datetime import date
from decimal import Decimal

import pytest

from api.domain.ponto.derivacao import (
    calcular_data_termino,
    calcular_margem_lucro,
    calcular_valor_repassado,
    derivar_campos,
)
from api.domain.ponto.value_objects import TermosContrato

# ---------- calcular_data_termino ----------


def test_data_termino_soma_meses_de_calendario():
    assert calcular_data_termino(date(2025, 3, 5), 12) == date(2026, 3, 5)


def test_data_termino_zero_meses_devolve_mesma_data():
    d = date(2025, 3, 5)
    assert calcular_data_termino(d, 0) == d


def test_data_termino_ajusta_fim_de_mes_ano_bissexto():
    assert calcular_data_termino(date(2024, 1, 31), 1) == date(2024, 2, 29)


def test_data_termino_ajusta_fim_de_mes_ano_comum():
    assert calcular_data_termino(date(2023, 1, 31), 1) == date(2023, 2, 28)


def test_data_termino_31_para_mes_de_30_dias():
    assert calcular_data_termino(date(2025, 3, 31), 1) == date(2025, 4, 30)


def test_data_termino_vira_o_ano():
    assert calcular_data_termino(date(2025, 11, 15), 3) == date(2026, 2, 15)


def test_data_termino_meses_negativos_andam_para_tras():
    assert calcular_data_termino(date(2025, 3, 31), -1) == date(2025, 2, 28)
    assert calcular_data_termino(date(2025, 1, 10), -2) == date(2024, 11, 10)


def test_data_termino_idempotente():
    d = date(2024, 1, 31)
    assert calcular_data_termino(d, 13) == calcular_data_termino(d, 13)


# ---------- calcular_valor_repassado ----------


def test_valor_repassado_percentual_simples():
    assert calcular_valor_repassado(Decimal("1000"), Decimal("10")) == Decimal("100")


def test_valor_repassado_aceita_int_e_float():
    assert calcular_valor_repassado(200, 12.5) == Decimal("25")


def test_valor_repassado_percentual_acima_de_100_nao_e_limitado():
    assert calcular_valor_repassado(Decimal("100"), Decimal("150")) == Decimal("150")


def test_valor_repassado_percentual_negativo_propaga():
    assert calcular_valor_repassado(Decimal("100"), Decimal("-10")) == Decimal("-10")


def test_valor_repassado_zero():
    assert calcular_valor_repassado(Decimal("0"), Decimal("35")) == Decimal("0")


# ---------- calcular_margem_lucro ----------


def test_margem_lucro_pode_ser_negativa():
    assert calcular_margem_lucro(100, 150) == -50


def test_margem_lucro_simples():
    assert calcular_margem_lucro(Decimal("1000.00"), Decimal("250.50")) == Decimal("749.50")


@pytest.mark.parametrize(
    ("valor_fechado", "percentual"),
    [
        (Decimal("0"), Decimal("0")),
        (Decimal("1234.56"), Decimal("17.5")),
        (Decimal("99999.99"), Decimal("100")),
        (Decimal("10"), Decimal("33.3333")),
        (Decimal("500"), Decimal("250")),
    ],
)
def test_repassado_mais_margem_igual_valor_fechado(valor_fechado: Decimal, percentual: Decimal):
    repassado = calcular_valor_repassado(valor_fechado, percentual)
    assert repassado + calcular_margem_lucro(valor_fechado, repassado) == valor_fechado


# ---------- derivar_campos ----------


def test_derivar_campos_calcula_os_tres_derivados():
    termos = TermosContrato(
        valor_fechado=Decimal("5000"),
        percentual=Decimal("20"),
        data_inicio=date(2024, 1, 31),
        tempo_contrato=1,
    )
    derivados = derivar_campos(termos)
    assert derivados.valor_repassado == Decimal("1000")
    assert derivados.margem_lucro == Decimal("4000")
    assert derivados.data_termino == date(2024, 2, 29)


def test_termos_padrao_de_ponto_novo():
    termos = TermosContrato.padrao(date(2025, 3, 5))
    assert termos.valor_fechado == Decimal("0")
    assert termos.percentual == Decimal("0")
    assert termos.tempo_contrato == 12
    assert derivar_campos(termos).data_termino == date(2026, 3, 5)


def test_termos_convertem_float_para_decimal():
    termos = TermosContrato(valor_fechado=0.1, percentual=50, data_inicio=date(2025, 1, 1), tempo_contrato=1)  # type: ignore[arg-type]
    assert termos.valor_fechado == Decimal("0.1")
    assert termos.percentual == Decimal("50")


def test_termos_rejeitam_tempo_contrato_nao_inteiro():
    with pytest.raises(ValueError, match="inteiro"):
        TermosContrato(Decimal("1"), Decimal("1"), date(2025, 1, 1), 1.5)  # type: ignore[arg-type]
