from fastapi import APIRouter, Depends

from models.entidades import CostsExpenses, LaborCosts, TaxRegime
from models.schemas import CalculoResponse
from routers.comum import erro_http
from services.configuracao_service import ConfiguracaoStore, get_configuracao
from services.erros import ConfiguracaoNaoCarregadaError

router = APIRouter(prefix="/api/configuracoes", tags=["configuracoes"])


@router.get("/status")
async def status_configuracao(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    """Tells the frontend whether pricing can run or the gating message should be shown."""
    try:
        cfg.motor()
        return {"pronto": True, "mensagem": None}
    except ConfiguracaoNaoCarregadaError as e:
        return {"pronto": False, "mensagem": str(e)}


# ── Regimes tributários ─────────────────────────────────────────────────────

@router.get("/regimes")
async def listar_regimes(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    return [r.model_dump() for r in cfg.listar_regimes()]


@router.get("/regimes/ativo", response_model=CalculoResponse)
async def regime_ativo(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    regime = cfg.regime_ativo()
    if regime is None:
        return CalculoResponse(success=False, error="Nenhum regime tributário ativo encontrado.")
    return CalculoResponse(success=True, data=regime.model_dump())


@router.put("/regimes/{regime_id}", response_model=CalculoResponse)
async def salvar_regime(
    regime_id: str, regime: TaxRegime, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    try:
        salvo = cfg.salvar_regime(regime.model_copy(update={"id": regime_id}))
        return CalculoResponse(success=True, data=salvo.model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/regimes/{regime_id}/ativar", response_model=CalculoResponse)
async def ativar_regime(regime_id: str, cfg: ConfiguracaoStore = Depends(get_configuracao)):
    try:
        return CalculoResponse(success=True, data=cfg.ativar_regime(regime_id).model_dump())
    except Exception as e:
        raise erro_http(e)


@router.post("/regimes/desativar", response_model=CalculoResponse)
async def desativar_regimes(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    cfg.desativar_regimes()
    return CalculoResponse(success=True)


# ── Custos e despesas ───────────────────────────────────────────────────────

@router.get("/custos", response_model=CalculoResponse)
async def obter_custos(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    if cfg.custos is None:
        return CalculoResponse(success=False, error="Configurações de custos não encontradas.")
    return CalculoResponse(success=True, data=cfg.custos.model_dump())


@router.put("/custos", response_model=CalculoResponse)
async def salvar_custos(custos: CostsExpenses, cfg: ConfiguracaoStore = Depends(get_configuracao)):
    try:
        return CalculoResponse(success=True, data=cfg.definir_custos(custos).model_dump())
    except Exception as e:
        raise erro_http(e)


@router.delete("/custos", response_model=CalculoResponse)
async def remover_custos(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    cfg.definir_custos(None)
    return CalculoResponse(success=True)


# ── Mão de obra ─────────────────────────────────────────────────────────────

@router.get("/mao-de-obra", response_model=CalculoResponse)
async def obter_mao_de_obra(cfg: ConfiguracaoStore = Depends(get_configuracao)):
    return CalculoResponse(success=True, data=cfg.mao_de_obra.model_dump())


@router.put("/mao-de-obra", response_model=CalculoResponse)
async def salvar_mao_de_obra(
    mao_de_obra: LaborCosts, cfg: ConfiguracaoStore = Depends(get_configuracao)
):
    """Saves the inputs; the aggregates are recomputed here and only here."""
    try:
        return CalculoResponse(success=True, data=cfg.salvar_mao_de_obra(mao_de_obra).model_dump())
    except Exception as e:
        raise erro_http(e)
