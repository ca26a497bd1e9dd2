import pytest

from models.entidades import LaborCosts
from services.custos_mao_obra_service import calcular_custos_mao_obra
from services.erros import PrecoIndefinidoError


def test_cenario_referencia(mao_de_obra):
    assert mao_de_obra.totalEncargos == pytest.approx(51.14)
    assert mao_de_obra.totalBeneficios == 0
    assert mao_de_obra.custoHora == pytest.approx(3000 * 1.5114 / 176)
    assert mao_de_obra.valorVendaHora == pytest.approx(3000 * 1.5114 / 176 * 1.66)


def test_beneficios_entram_no_custo_hora():
    calculado = calcular_custos_mao_obra(LaborCosts(
        salarioBasePadrao=2000, valeTransporte=200, planoSaude=300, valeAlimentacao=500,
        diasUteisNoMes=20, horasPorDia=8,
    ))
    assert calculado.totalBeneficios == 1000
    assert calculado.custoHora == pytest.approx(3000 / 160)


def test_sem_horas_levanta():
    with pytest.raises(PrecoIndefinidoError):
        calcular_custos_mao_obra(LaborCosts(salarioBasePadrao=3000, diasUteisNoMes=0, horasPorDia=8))


def test_entradas_nao_sao_alteradas():
    entrada = LaborCosts(ferias=8.33, salarioBasePadrao=3000, diasUteisNoMes=22, horasPorDia=8)
    calculado = calcular_custos_mao_obra(entrada)

    assert entrada.custoHora == 0
    assert calculado.ferias == entrada.ferias
