import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from api.domain.empreendimento.entities import Empreendimento
from api.domain.ponto.entities import PontoCaptacao
from api.domain.ponto.enums import StatusPonto
from api.domain.ponto.value_objects import TermosContrato


def _ponto(**termos: object) -> PontoCaptacao:
    base = {
        "valor_fechado": Decimal("10000"),
        "percentual": Decimal("30"),
        "data_inicio": date(2025, 1, 31),
        "tempo_contrato": 12,
    }
    base.update(termos)
    return PontoCaptacao(
        id="p1",
        nome_ponto="  Shopping Centro  ",
        cnpj="12345678000195",
        termos=TermosContrato(**base),  # type: ignore[arg-type]
    )


def test_ponto_deriva_campos_na_construcao():
    p = _ponto()
    assert p.valor_repassado == Decimal("3000")
    assert p.margem_lucro == Decimal("7000")
    assert p.data_termino == date(2026, 1, 31)


def test_ponto_normaliza_nome_e_cnpj():
    p = _ponto()
    assert p.nome_ponto == "Shopping Centro"
    assert p.cnpj == "12.345.678/0001-95"


def test_ponto_nome_vazio_invalido():
    with pytest.raises(ValueError, match="vazio"):
        PontoCaptacao(id="p1", nome_ponto="   ", cnpj="", termos=TermosContrato.padrao(date(2025, 1, 1)))


def test_ponto_imutavel():
    p = _ponto()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.nome_ponto = "outro"  # type: ignore[misc]


def test_derivados_nao_sao_aceitos_no_construtor():
    with pytest.raises(TypeError):
        PontoCaptacao(  # type: ignore[call-arg]
            id="p1",
            nome_ponto="X",
            cnpj="",
            termos=TermosContrato.padrao(date(2025, 1, 1)),
            derivados=None,
        )


def test_com_termos_recalcula_todos_os_derivados():
    p = _ponto()
    editado = p.com_termos(valor_fechado=Decimal("2000"))
    assert editado.valor_repassado == Decimal("600")
    assert editado.margem_lucro == Decimal("1400")
    assert editado.percentual == Decimal("30")
    # original intacto
    assert p.valor_repassado == Decimal("3000")


def test_com_termos_data_e_duracao():
    p = _ponto().com_termos(tempo_contrato=1)
    assert p.data_termino == date(2025, 2, 28)
    p = p.com_termos(data_inicio=date(2024, 1, 31))
    assert p.data_termino == date(2024, 2, 29)


def test_margem_sempre_igual_fechado_menos_repassado_apos_edicoes():
    p = _ponto()
    for kwargs in ({"percentual": Decimal("150")}, {"valor_fechado": Decimal("0.01")}, {"percentual": Decimal("0")}):
        p = p.com_termos(**kwargs)  # type: ignore[arg-type]
        assert p.margem_lucro == p.valor_fechado - p.valor_repassado


def test_ponto_novo_usa_termos_padrao():
    p = PontoCaptacao.novo(id="n1", nome_ponto="Novo", cnpj="", hoje=date(2025, 3, 5))
    assert p.valor_fechado == Decimal("0")
    assert p.tempo_contrato == 12
    assert p.data_termino == date(2026, 3, 5)
    assert p.status is StatusPonto.ATIVO


def test_vence_em_janela_estrita():
    p = _ponto(data_inicio=date(2025, 1, 10), tempo_contrato=1)  # termina 10/02/2025
    assert p.vence_em(date(2025, 1, 20), 30)
    assert not p.vence_em(date(2025, 2, 10), 30)  # termina hoje
    assert not p.vence_em(date(2025, 1, 11), 30)  # exatamente 30 dias depois
    assert not p.vence_em(date(2025, 3, 1), 30)  # ja terminou


def test_empreendimento_nome_trimado():
    e = Empreendimento(id="e1", nome="  Grupo Alfa ")
    assert e.nome == "Grupo Alfa"


def test_empreendimento_nome_vazio_invalido():
    with pytest.raises(ValueError):
        Empreendimento(id="e1", nome=" ")
