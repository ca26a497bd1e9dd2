import pytest

from models.entidades import Printer, Suprimento
from services.custo_pagina_service import (
    calcular_contrato,
    calcular_custo_por_pagina,
    calcular_custos_impressoras,
    locacao_equipamento,
)

CUSTO_PB = 180 / 2300 + 350 / 12000 + 25 * 60 / 100000 + 15 * 0.65 / 2000 + 1200 / 100000


def test_cenario_referencia_pb(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)

    assert custo.custoTotalPB == pytest.approx(CUSTO_PB)
    assert round(custo.custoTotalPB, 4) == 0.1393
    assert custo.custoManutencao == pytest.approx(0.015)
    assert custo.custoEnergia == pytest.approx(0.004875)
    assert custo.custoDepreciacao == pytest.approx(0.012)
    assert custo.custoFusor == 0
    assert custo.custoTonerColor == 0


def test_colorida_nunca_menor_que_pb(impressora, suprimentos_cor):
    custo = calcular_custo_por_pagina(impressora, suprimentos_cor)

    assert custo.custoTonerColor == pytest.approx(3 * 200 / 1500)
    assert custo.custoTotalColor >= custo.custoTotalPB
    assert custo.custoTotalColor == pytest.approx(custo.custoTotalPB + custo.custoTonerColor)


def test_fusor_entra_no_pb(impressora, suprimentos_pb):
    fusor = Suprimento(id="f", printerId="imp-1", tipo="Fusor", custoUnitario=500, rendimentoPaginas=100000)
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb + [fusor])

    assert custo.custoTotalPB == pytest.approx(CUSTO_PB + 0.005)


def test_suprimento_de_outra_impressora_ignorado(impressora, suprimentos_pb):
    outro = Suprimento(id="x", printerId="imp-2", tipo="Toner Ciano", custoUnitario=999, rendimentoPaginas=1)
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb + [outro])

    assert custo.custoTonerColor == 0


def test_rendimento_zero_fica_indefinido(impressora):
    sem_rendimento = [Suprimento(id="s", printerId="imp-1", tipo="Toner P&B", custoUnitario=180)]
    custo = calcular_custo_por_pagina(impressora, sem_rendimento)

    assert custo.custoTonerPB is None
    assert custo.custoTotalPB is None
    assert custo.custoTotalColor is None
    assert custo.custoDepreciacao == pytest.approx(0.012)


def test_vida_util_zero_fica_indefinida(suprimentos_pb):
    impressora = Printer(id="imp-1", custoAquisicao=1200, vidaUtilPaginas=0)
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)

    assert custo.custoDepreciacao is None
    assert custo.custoManutencao == 0
    assert custo.custoTotalPB is None


def test_media_da_frota_ignora_inativas_e_indefinidas(impressora, suprimentos_pb):
    inativa = Printer(id="imp-2", custoAquisicao=99999, vidaUtilPaginas=1, ativo=False)
    indefinida = Printer(id="imp-3", custoAquisicao=1000, vidaUtilPaginas=0)

    frota = calcular_custos_impressoras([impressora, inativa, indefinida], suprimentos_pb)

    assert [c.printerId for c in frota["custos"]] == ["imp-1", "imp-3"]
    assert frota["mediaPB"] == pytest.approx(CUSTO_PB)


def test_contrato_franquia(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)
    contrato = calcular_contrato(custo, impressora, "franquia", 1000, 0, 36, margem=30)

    assert contrato.valorLocacaoMensal == 0
    assert contrato.custoMensal == pytest.approx(CUSTO_PB * 1000)
    assert contrato.valorMensal == pytest.approx(CUSTO_PB * 1000 * 1.3)
    assert contrato.valorTotalContrato == pytest.approx(contrato.valorMensal * 36)
    assert contrato.valorAnual == pytest.approx(contrato.valorMensal * 12)


def test_contrato_por_pagina_cobra_so_suprimentos(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)
    contrato = calcular_contrato(custo, impressora, "por_pagina", 1000, 0, 36)

    locacao = 1200 / 36 + 25 + 15 * 0.65
    assert locacao_equipamento(impressora, 36) == pytest.approx(locacao)
    assert contrato.valorLocacaoMensal == pytest.approx(locacao)
    assert contrato.custoPaginaPB == pytest.approx(180 / 2300 + 350 / 12000)
    assert contrato.custoMensal == pytest.approx(locacao + contrato.custoPaginaPB * 1000)


def test_contrato_por_pagina_com_locacao_informada(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)
    contrato = calcular_contrato(custo, impressora, "por_pagina", 0, 0, 12, valor_locacao_mensal=150)

    assert contrato.valorMensal == pytest.approx(150)


def test_contrato_modalidade_desconhecida(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)
    with pytest.raises(ValueError):
        calcular_contrato(custo, impressora, "mensalidade", 1000, 0, 12)


def test_contrato_por_pagina_prazo_zero_deixa_locacao_indefinida(impressora, suprimentos_pb):
    custo = calcular_custo_por_pagina(impressora, suprimentos_pb)
    contrato = calcular_contrato(custo, impressora, "por_pagina", 1000, 0, 0)

    assert contrato.valorLocacaoMensal is None
    assert contrato.custoMensal is None
    assert contrato.valorMensal is None
    assert contrato.valorTotalContrato is None
