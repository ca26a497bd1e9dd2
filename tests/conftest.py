import pytest
from fastapi.testclient import TestClient

from main import app
from models.entidades import CostsExpenses, LaborCosts, Printer, Suprimento, TaxRegime
from services.configuracao_service import ConfiguracaoStore, get_configuracao
from services.custos_mao_obra_service import calcular_custos_mao_obra
from services.motor_precificacao import MotorPrecificacao
from services.proposta_service import PropostaStore, get_propostas


@pytest.fixture
def simples_nacional():
    return TaxRegime(
        id="3", name="Simples Nacional", active=True,
        pis=0.28, cofins=1.28, csll=0.35, irpj=0.38, icms=0.90, iss=2.0,
        basePresuncaoVenda=100, basePresuncaoServico=100,
    )


@pytest.fixture
def mao_de_obra():
    return calcular_custos_mao_obra(LaborCosts(
        ferias=11.11, umTercoFerias=3.70, decimoTerceiro=8.33, inssBase=20, fgts=8,
        salarioBasePadrao=3000, diasUteisNoMes=22, horasPorDia=8,
    ))


@pytest.fixture
def motor(simples_nacional, mao_de_obra):
    return MotorPrecificacao(simples_nacional, CostsExpenses(), mao_de_obra)


@pytest.fixture
def impressora():
    return Printer(
        id="imp-1", marca="Brother", modelo="HL-L5102DW",
        custoAquisicao=1200, vidaUtilPaginas=100000,
        consumoEnergia=15, custoManutencaoMensal=25,
    )


@pytest.fixture
def suprimentos_pb():
    return [
        Suprimento(id="s1", printerId="imp-1", tipo="Toner P&B", custoUnitario=180, rendimentoPaginas=2300),
        Suprimento(id="s2", printerId="imp-1", tipo="Fotocondutor", custoUnitario=350, rendimentoPaginas=12000),
    ]


@pytest.fixture
def suprimentos_cor(suprimentos_pb):
    return suprimentos_pb + [
        Suprimento(id=f"c{i}", printerId="imp-1", tipo=tipo, custoUnitario=200, rendimentoPaginas=1500)
        for i, tipo in enumerate(["Toner Ciano", "Toner Magenta", "Toner Amarelo"])
    ]


@pytest.fixture
def configuracao():
    return ConfiguracaoStore()


@pytest.fixture
def propostas():
    return PropostaStore()


@pytest.fixture
def client(configuracao, propostas):
    app.dependency_overrides[get_configuracao] = lambda: configuracao
    app.dependency_overrides[get_propostas] = lambda: propostas
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
