import pytest

from models.entidades import CostsExpenses, ProductItem, TaxRegime
from services.erros import ConfiguracaoNaoCarregadaError, PrecoIndefinidoError
from services.motor_precificacao import (
    MotorPrecificacao,
    aliquota_interestadual,
    criar_motor_configurado,
)


def _item(total_cost=1000.0, **kwargs):
    return ProductItem(id="p1", unitCost=total_cost, totalCost=total_cost, **kwargs)


# ── Alíquotas ───────────────────────────────────────────────────────────────

def test_aliquota_venda_simples_nacional(motor):
    assert motor.aliquota_venda() == pytest.approx(3.19)


def test_aliquota_servico_simples_nacional(motor):
    assert motor.aliquota_servico() == pytest.approx(4.29)


def test_aliquota_interestadual_padrao_para_uf_desconhecida():
    assert aliquota_interestadual("SP") == 12
    assert aliquota_interestadual("mg") == 7
    assert aliquota_interestadual("XX") == 7


# ── Vendas ──────────────────────────────────────────────────────────────────

def test_venda_cenario_referencia(motor):
    calc = motor.calcular_preco_venda(8500, 1, 20)

    assert calc.strategy == "gross-up"
    assert calc.baseCost == 8500
    # valor de referência 11516,64; o seed do Simples (3,19%) dá 11516,05, R$ 0,59 abaixo
    assert calc.finalPrice == pytest.approx(11516.64, abs=1.0)
    assert calc.finalPrice == pytest.approx(8500 / (1 - (20 + 3 + 3.19) / 100))


def test_venda_componentes_somam_preco_final(motor):
    calc = motor.calcular_preco_venda(250, 4, 15)

    assert calc.baseCost == 1000
    assert calc.baseCost + calc.marginCommission + calc.taxes == pytest.approx(calc.finalPrice)
    assert calc.finalPrice > calc.baseCost


def test_venda_quantidade_zero_zera_tudo(motor):
    calc = motor.calcular_preco_venda(8500, 0, 20)

    assert calc.baseCost == 0
    assert calc.marginCommission == 0
    assert calc.taxes == 0
    assert calc.finalPrice == 0


def test_calculo_idempotente(motor):
    assert motor.calcular_preco_venda(99.9, 3, 20) == motor.calcular_preco_venda(99.9, 3, 20)
    assert motor.calcular_preco_locacao(5000, 2, 24, 20) == motor.calcular_preco_locacao(5000, 2, 24, 20)
    assert motor.calcular_preco_servico(120, 8, 20) == motor.calcular_preco_servico(120, 8, 20)


def test_denominador_zero_levanta_preco_indefinido():
    regime = TaxRegime(id="x", name="Isento", active=True)
    motor = MotorPrecificacao(regime, CostsExpenses(comissaoVenda=0))

    with pytest.raises(PrecoIndefinidoError):
        motor.calcular_preco_venda(100, 1, 100)


# ── DIFAL e ICMS-ST ─────────────────────────────────────────────────────────

def test_difal_sem_consumidor_final_contribuinte_e_zero(motor):
    assert motor.calcular_difal(_item(icmsSalePercent=18), "MG") == 0


def test_difal_consumidor_final(motor):
    item = _item(icmsSalePercent=18)

    assert motor.calcular_difal(item, "MG", is_final_consumer_contributor=True) == pytest.approx(110)
    assert motor.calcular_difal(item, "XX", is_final_consumer_contributor=True) == pytest.approx(110)


def test_difal_nunca_negativo(motor):
    item = _item(icmsSalePercent=7)
    assert motor.calcular_difal(item, "SP", is_final_consumer_contributor=True) == 0


def test_difal_tabela_personalizada(motor):
    item = _item(icmsSalePercent=18)
    difal = motor.calcular_difal(item, "MG", {"MG": 12}, is_final_consumer_contributor=True)
    assert difal == pytest.approx(60)


def test_icms_st_desligado_e_zero(motor):
    assert motor.calcular_icms_st(_item(icmsSalePercent=18), 18) == 0


def test_icms_st(motor):
    item = _item(icmsSalePercent=18, icmsST=True)
    # base ST 1300 × 18% - ICMS próprio 180
    assert motor.calcular_icms_st(item, 18) == pytest.approx(54)


# ── Locação ─────────────────────────────────────────────────────────────────

def test_locacao_amortiza_pelo_prazo(motor):
    calc = motor.calcular_preco_locacao(12000, 1, 12, 20)

    assert calc.strategy == "amortized-gross-up"
    assert calc.baseCost == pytest.approx(1000)
    assert calc.finalPrice == pytest.approx(1000 / (1 - (20 + 10 + 3.19) / 100))


def test_locacao_prazo_zero_levanta(motor):
    with pytest.raises(PrecoIndefinidoError):
        motor.calcular_preco_locacao(12000, 1, 0, 20)


def test_locacao_valor_zero_zera_tudo(motor):
    calc = motor.calcular_preco_locacao(0, 5, 0, 20)
    assert calc.finalPrice == 0


# ── Serviços ────────────────────────────────────────────────────────────────

def test_servico_aditivo(motor):
    calc = motor.calcular_preco_servico(100, 10, 20)

    assert calc.strategy == "additive"
    assert calc.baseCost == pytest.approx(1000)
    assert calc.marginCommission == pytest.approx(250)
    assert calc.finalPrice == pytest.approx(1250)
    assert calc.taxes == pytest.approx(1250 * 4.29 / 100)


def test_servico_sem_valor_hora_usa_mao_de_obra(motor, mao_de_obra):
    calc = motor.calcular_preco_servico(None, 10, 20)
    assert calc.baseCost == pytest.approx(mao_de_obra.valorVendaHora * 10)


# ── Configuração obrigatória ────────────────────────────────────────────────

def test_sem_regime_ativo_bloqueia():
    with pytest.raises(ConfiguracaoNaoCarregadaError) as exc:
        criar_motor_configurado(None, CostsExpenses())

    assert str(exc.value).startswith("Carregando Configurações...")
    assert "regime tributário" in str(exc.value)


def test_sem_custos_bloqueia(simples_nacional):
    with pytest.raises(ConfiguracaoNaoCarregadaError) as exc:
        criar_motor_configurado(simples_nacional, None)

    assert exc.value.faltando == ["Configurações de custos não encontradas."]
