from typing import Optional

from fastapi import APIRouter, Body, Depends

from models.entidades import ProposalInfo
from models.schemas import (
    CalculoResponse,
    ItensLocacaoInput,
    ItensServicoInput,
    ItensVendaInput,
    StatusInput,
)
from routers.comum import erro_http
from services.configuracao_service import ConfiguracaoStore, get_configuracao
from services.itens_service import (
    orcamento_de_locacao,
    orcamento_de_servicos,
    orcamento_de_vendas,
    recalcular_itens_locacao,
    recalcular_itens_servico,
    recalcular_produtos,
)
from services.proposta_service import PropostaStore, get_propostas

router = APIRouter(prefix="/api/propostas", tags=["propostas"])


@router.post("", response_model=CalculoResponse)
async def criar_proposta(dados: ProposalInfo, propostas: PropostaStore = Depends(get_propostas)):
    try:
        return CalculoResponse(success=True, data=propostas.criar_proposta(dados).model_dump())
    except Exception as e:
        raise erro_http(e)


@router.get("")
async def buscar_propostas(
    termo: str = "",
    status: Optional[str] = "all",
    propostas: PropostaStore = Depends(get_propostas),
):
    """Search by client name, project name or company; optional status filter."""
    return [p.model_dump() for p in propostas.buscar_propostas(termo, status)]


@router.get("/{proposta_id}", response_model=CalculoResponse)
async def obter_proposta(proposta_id: str, propostas: PropostaStore = Depends(get_propostas)):
    try:
        return CalculoResponse(success=True, data=propostas.obter(proposta_id).model_dump())
    except Exception as e:
        raise erro_http(e)


@router.patch("/{proposta_id}", response_model=CalculoResponse)
async def atualizar_proposta(
    proposta_id: str,
    dados: dict = Body(...),
    propostas: PropostaStore = Depends(get_propostas),
):
    try:
        return CalculoResponse(
            success=True, data=propostas.atualizar_proposta(proposta_id, dados).model_dump()
        )
    except Exception as e:
        raise erro_http(e)


@router.put("/{proposta_id}/status", response_model=CalculoResponse)
async def atualizar_status(
    proposta_id: str, body: StatusInput, propostas: PropostaStore = Depends(get_propostas)
):
    try:
        return CalculoResponse(
            success=True, data=propostas.atualizar_status(proposta_id, body.status).model_dump()
        )
    except Exception as e:
        raise erro_http(e)


# ── Orçamentos ──────────────────────────────────────────────────────────────
# Os itens são recalculados com a configuração vigente antes de virar orçamento.

@router.post("/{proposta_id}/orcamentos/vendas", response_model=CalculoResponse)
async def orcamento_vendas(
    proposta_id: str,
    body: ItensVendaInput,
    cfg: ConfiguracaoStore = Depends(get_configuracao),
    propostas: PropostaStore = Depends(get_propostas),
):
    try:
        itens = recalcular_produtos(cfg.motor(), body.itens, body)
        proposta = propostas.adicionar_orcamento(proposta_id, orcamento_de_vendas(proposta_id, itens))
        return CalculoResponse(success=True, data=proposta.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/{proposta_id}/orcamentos/locacao", response_model=CalculoResponse)
async def orcamento_locacao(
    proposta_id: str,
    body: ItensLocacaoInput,
    cfg: ConfiguracaoStore = Depends(get_configuracao),
    propostas: PropostaStore = Depends(get_propostas),
):
    try:
        itens = recalcular_itens_locacao(cfg.motor(), body.itens, body)
        proposta = propostas.adicionar_orcamento(proposta_id, orcamento_de_locacao(proposta_id, itens))
        return CalculoResponse(success=True, data=proposta.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/{proposta_id}/orcamentos/servicos", response_model=CalculoResponse)
async def orcamento_servicos(
    proposta_id: str,
    body: ItensServicoInput,
    cfg: ConfiguracaoStore = Depends(get_configuracao),
    propostas: PropostaStore = Depends(get_propostas),
):
    try:
        itens = recalcular_itens_servico(cfg.motor(), body.itens, body)
        proposta = propostas.adicionar_orcamento(proposta_id, orcamento_de_servicos(proposta_id, itens))
        return CalculoResponse(success=True, data=proposta.model_dump())
    except Exception as e:
        raise erro_http(e)
