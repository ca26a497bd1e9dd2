from fastapi import APIRouter, Depends

from models.schemas import (
    AtualizarItemLocacaoInput,
    AtualizarItemServicoInput,
    AtualizarProdutoInput,
    CalculoLocacaoInput,
    CalculoResponse,
    CalculoServicoInput,
    CalculoVendaInput,
    DifalInput,
    IcmsStInput,
    ItensLocacaoInput,
    ItensServicoInput,
    ItensVendaInput,
)
from routers.comum import erro_http
from services.configuracao_service import ConfiguracaoStore, get_configuracao
from services.formatacao import formatar_moeda, formatar_percentual
from services.itens_service import (
    atualizar_item_locacao,
    atualizar_item_servico,
    atualizar_produto,
    recalcular_itens_locacao,
    recalcular_itens_servico,
    recalcular_produtos,
    totais_locacao,
    totais_servicos,
    totais_vendas,
)
from services.motor_precificacao import ICMS_INTERESTADUAL, NOMES_ESTADOS, aliquota_interestadual

router = APIRouter(prefix="/api", tags=["precificacao"])


def _formatado(totais: dict) -> dict:
    """Same keys as ``totais``, rendered as R$ strings for display."""
    return {k: formatar_moeda(v) for k, v in totais.items()}


# ── Vendas ──────────────────────────────────────────────────────────────────

@router.post("/vendas/calcular", response_model=CalculoResponse)
async def calcular_venda(
    body: CalculoVendaInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        motor = cfg.motor()
        calc = motor.calcular_preco_venda(body.unitCost, body.quantity, body.desiredMargin)
        return CalculoResponse(
            success=True,
            data={
                **calc.model_dump(),
                "aliquotaImpostos": motor.aliquota_venda(),
                "formatado": {
                    "finalPrice": formatar_moeda(calc.finalPrice),
                    "aliquotaImpostos": formatar_percentual(motor.aliquota_venda()),
                },
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/vendas/difal", response_model=CalculoResponse)
async def calcular_difal(body: DifalInput, cfg: ConfiguracaoStore = Depends(get_configuracao)):
    try:
        motor = cfg.motor()
        item = body.item.model_copy(update={"totalCost": body.item.quantity * body.item.unitCost})
        return CalculoResponse(
            success=True,
            data={
                "difal": motor.calcular_difal(item, body.destinationUF, None, body.isFinalConsumer),
                "aliquotaInterestadual": aliquota_interestadual(body.destinationUF),
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/vendas/icms-st", response_model=CalculoResponse)
async def calcular_icms_st(body: IcmsStInput, cfg: ConfiguracaoStore = Depends(get_configuracao)):
    try:
        motor = cfg.motor()
        item = body.item.model_copy(update={"totalCost": body.item.quantity * body.item.unitCost})
        percentual = body.icmsSalePercent if body.icmsSalePercent is not None else item.icmsSalePercent
        return CalculoResponse(success=True, data={"icmsST": motor.calcular_icms_st(item, percentual)})
    except Exception as e:
        raise erro_http(e)


@router.post("/vendas/itens/atualizar", response_model=CalculoResponse)
async def atualizar_item_venda(
    body: AtualizarProdutoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        item = atualizar_produto(cfg.motor(), body.item, body.field, body.value, body)
        return CalculoResponse(success=True, data=item.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/vendas/itens/recalcular", response_model=CalculoResponse)
async def recalcular_vendas(body: ItensVendaInput, cfg: ConfiguracaoStore = Depends(get_configuracao)):
    try:
        itens = recalcular_produtos(cfg.motor(), body.itens, body)
        totais = totais_vendas(itens)
        return CalculoResponse(
            success=True,
            data={
                "itens": [i.model_dump() for i in itens],
                "totais": totais,
                "formatado": _formatado(totais),
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/vendas/totais", response_model=CalculoResponse)
async def totais_de_vendas(body: ItensVendaInput):
    """Totals of already-calculated items, without recalculating them."""
    try:
        totais = totais_vendas(body.itens)
        return CalculoResponse(success=True, data={"totais": totais, "formatado": _formatado(totais)})
    except Exception as e:
        raise erro_http(e)


# ── Locação ─────────────────────────────────────────────────────────────────

@router.post("/locacao/calcular", response_model=CalculoResponse)
async def calcular_locacao(
    body: CalculoLocacaoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        calc = cfg.motor().calcular_preco_locacao(
            body.unitValue, body.quantity, body.contractPeriod, body.desiredMargin
        )
        return CalculoResponse(
            success=True,
            data={
                **calc.model_dump(),
                "formatado": {"finalPrice": formatar_moeda(calc.finalPrice)},
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/locacao/itens/atualizar", response_model=CalculoResponse)
async def atualizar_locacao(
    body: AtualizarItemLocacaoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        item = atualizar_item_locacao(
            cfg.motor(), body.item, body.field, body.value, body
        )
        return CalculoResponse(success=True, data=item.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/locacao/itens/recalcular", response_model=CalculoResponse)
async def recalcular_locacao(
    body: ItensLocacaoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    """Recalculates every item, e.g. after the contract period or the margin changed."""
    try:
        itens = recalcular_itens_locacao(cfg.motor(), body.itens, body)
        totais = totais_locacao(itens)
        return CalculoResponse(
            success=True,
            data={
                "itens": [i.model_dump() for i in itens],
                "totais": totais,
                "formatado": _formatado(totais),
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/locacao/totais", response_model=CalculoResponse)
async def totais_de_locacao(body: ItensLocacaoInput):
    try:
        totais = totais_locacao(body.itens)
        return CalculoResponse(success=True, data={"totais": totais, "formatado": _formatado(totais)})
    except Exception as e:
        raise erro_http(e)


# ── Serviços ────────────────────────────────────────────────────────────────

@router.post("/servicos/calcular", response_model=CalculoResponse)
async def calcular_servico(
    body: CalculoServicoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        motor = cfg.motor()
        calc = motor.calcular_preco_servico(body.hourlyRate, body.totalHours, body.desiredMargin)
        return CalculoResponse(
            success=True,
            data={
                **calc.model_dump(),
                "aliquotaImpostos": motor.aliquota_servico(),
                "formatado": {"finalPrice": formatar_moeda(calc.finalPrice)},
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/servicos/itens/atualizar", response_model=CalculoResponse)
async def atualizar_servico(
    body: AtualizarItemServicoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        item = atualizar_item_servico(
            cfg.motor(), body.item, body.field, body.value, body
        )
        return CalculoResponse(success=True, data=item.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/servicos/itens/recalcular", response_model=CalculoResponse)
async def recalcular_servicos(
    body: ItensServicoInput, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        itens = recalcular_itens_servico(cfg.motor(), body.itens, body)
        totais = totais_servicos(itens)
        return CalculoResponse(
            success=True,
            data={
                "itens": [i.model_dump() for i in itens],
                "totais": totais,
                "formatado": _formatado(totais),
            },
        )
    except Exception as e:
        raise erro_http(e)


@router.post("/servicos/totais", response_model=CalculoResponse)
async def totais_de_servicos(body: ItensServicoInput):
    try:
        totais = totais_servicos(body.itens)
        return CalculoResponse(success=True, data={"totais": totais, "formatado": _formatado(totais)})
    except Exception as e:
        raise erro_http(e)


# ── ICMS ────────────────────────────────────────────────────────────────────

@router.get("/icms/aliquotas")
async def aliquotas_icms():
    """Interstate ICMS rate per destination state."""
    return [
        {"uf": uf, "estado": NOMES_ESTADOS[uf], "aliquota": aliquota}
        for uf, aliquota in sorted(ICMS_INTERESTADUAL.items())
    ]
