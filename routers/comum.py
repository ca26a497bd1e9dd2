import logging

from fastapi import HTTPException

from services.erros import (
    ConfiguracaoNaoCarregadaError,
    PrecoIndefinidoError,
    PropostaNaoEncontradaError,
    RegimeNaoEncontradoError,
    TransicaoStatusInvalidaError,
)

logger = logging.getLogger(__name__)


def erro_http(e: Exception) -> HTTPException:
    """Maps a domain error raised by the services to the HTTP error returned to the client."""
    if isinstance(e, ConfiguracaoNaoCarregadaError):
        # o frontend exibe a mensagem "Carregando Configurações..." como está
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, (PropostaNaoEncontradaError, RegimeNaoEncontradoError)):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, TransicaoStatusInvalidaError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, PrecoIndefinidoError):
        return HTTPException(status_code=422, detail=f"Preço indefinido: {e}")
    if isinstance(e, ValueError):
        return HTTPException(status_code=422, detail=str(e))
    logger.exception("Erro inesperado na API")
    return HTTPException(status_code=500, detail=str(e))
