from fastapi import APIRouter

from models.schemas import (
    CalculoResponse,
    ContratoInput,
    CustoPaginaInput,
    FrotaInput,
    PrecificacaoImpressoraInput,
)
from routers.comum import erro_http
from services.custo_pagina_service import (
    calcular_contrato,
    calcular_custo_por_pagina,
    calcular_custos_impressoras,
)
from services.formatacao import formatar_custo_pagina, formatar_moeda
from services.precificacao_impressora_service import calcular_precificacao

router = APIRouter(prefix="/api/impressoras", tags=["impressoras"])


@router.post("/custo-pagina", response_model=CalculoResponse)
async def custo_pagina(body: CustoPaginaInput):
    try:
        custo = calcular_custo_por_pagina(
            body.printer, body.suprimentos, body.tarifaEnergia, body.volumeEstimado
        )
        return CalculoResponse(
            success=True,
            data={
                **custo.model_dump(),
                "formatado": {
                    "custoTotalPB": formatar_custo_pagina(custo.custoTotalPB),
                    "custoTotalColor": formatar_custo_pagina(custo.custoTotalColor),
                },
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/frota", response_model=CalculoResponse)
async def custos_frota(body: FrotaInput):
    """Cost per page of every active printer plus fleet averages."""
    try:
        resultado = calcular_custos_impressoras(body.printers, body.suprimentos, body.tarifaEnergia)
        return CalculoResponse(
            success=True,
            data={
                "custos": [c.model_dump() for c in resultado["custos"]],
                "mediaPB": resultado["mediaPB"],
                "mediaColor": resultado["mediaColor"],
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/contrato", response_model=CalculoResponse)
async def contrato(body: ContratoInput):
    try:
        custo = calcular_custo_por_pagina(
            body.printer, body.suprimentos, body.tarifaEnergia, body.volumeEstimado
        )
        resultado = calcular_contrato(
            custo,
            body.printer,
            body.modalidade,
            body.volumeMensalPB,
            body.volumeMensalColor,
            body.prazoContrato,
            body.margem,
            body.valorLocacaoMensal,
            body.tarifaEnergia,
        )
        return CalculoResponse(
            success=True,
            data={
                **resultado.model_dump(),
                "formatado": {
                    "valorMensal": formatar_moeda(resultado.valorMensal),
                    "valorTotalContrato": formatar_moeda(resultado.valorTotalContrato),
                },
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/precificacao", response_model=CalculoResponse)
async def precificacao(body: PrecificacaoImpressoraInput):
    try:
        resultado = calcular_precificacao(
            custo_base=body.custoBase,
            margem_desejada=body.margemDesejada,
            regime_tributario=body.regimeTributario,
            icms_compra=body.icmsCompra,
            icms_venda=body.icmsVenda,
            ipi_compra=body.ipiCompra,
            pis_cofins_saida=body.pisCofinsSaida,
            comissao_venda=body.comissaoVenda,
            custos_operacionais=body.custosOperacionais,
        )
        return CalculoResponse(
            success=True,
            data={
                "precificacao": resultado["precificacao"].model_dump(),
                "breakdown": resultado["breakdown"],
                "dre": resultado["dre"],
            },
        )
    except Exception as e:
        raise erro_http(e)
