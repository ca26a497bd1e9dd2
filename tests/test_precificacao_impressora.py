import pytest

from services.erros import PrecoIndefinidoError
from services.precificacao_impressora_service import (
    PERIODOS_LOCACAO,
    aliquota_saida,
    calcular_precificacao,
)


def test_aliquota_saida_por_regime():
    assert aliquota_saida("Simples Nacional", 18, 3.65) == 6.0
    assert aliquota_saida("Lucro Presumido", 18, 3.65) == pytest.approx(22.85)
    assert aliquota_saida("Lucro Real", 18, 3.65) == pytest.approx(24.15)


def test_cadeia_de_custos_simples_nacional():
    resultado = calcular_precificacao(1000)
    breakdown = resultado["breakdown"]

    assert breakdown["custoTotalEntrada"] == pytest.approx(1000 / 0.88)
    assert breakdown["custoComOperacionais"] == pytest.approx(1000 / 0.88 * 1.08)
    assert breakdown["custoComMargem"] == pytest.approx(1000 / 0.88 * 1.08 * 1.03 * 1.25)
    assert resultado["precificacao"].precoVendaSugerido == pytest.approx(
        breakdown["custoComMargem"] / 0.94
    )


def test_periodos_de_locacao():
    resultado = calcular_precificacao(1000, ipi_compra=5)
    preco = resultado["precificacao"].precoVendaSugerido
    periodos = resultado["precificacao"].periodosLocacao

    assert sorted(periodos) == sorted(PERIODOS_LOCACAO)
    assert periodos[12].valorTotal == pytest.approx(preco)
    assert periodos[36].valorTotal == pytest.approx(preco * 0.85)
    assert periodos[60].valorMensal == pytest.approx(preco * 0.75 / 60)


def test_dre_usa_prazo_de_36_meses():
    resultado = calcular_precificacao(1000, regime_tributario="Lucro Real")
    dre = resultado["dre"]
    receita = resultado["precificacao"].periodosLocacao[36].valorTotal

    assert dre["receitaBruta"] == pytest.approx(receita)
    assert dre["receitaLiquida"] == pytest.approx(receita - dre["impostos"])
    assert dre["lucroLiquido"] == dre["lucroOperacional"]


def test_icms_compra_cem_por_cento_levanta():
    with pytest.raises(PrecoIndefinidoError):
        calcular_precificacao(1000, icms_compra=100)
