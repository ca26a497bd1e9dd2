"""Domain errors raised by the calculation and store services."""

MENSAGEM_CARREGANDO = "Carregando Configurações..."


class ConfiguracaoNaoCarregadaError(Exception):
    """Active tax regime or costs configuration is missing."""

    def __init__(self, faltando: list):
        self.faltando = faltando
        detalhes = " ".join(faltando)
        super().__init__(
            f"{MENSAGEM_CARREGANDO} {detalhes} "
            "Vá em Configurações para definir os parâmetros necessários."
        )


class PrecoIndefinidoError(ValueError):
    """A calculation would divide by zero."""


class PropostaNaoEncontradaError(LookupError):
    pass


class RegimeNaoEncontradoError(LookupError):
    pass


class TransicaoStatusInvalidaError(ValueError):
    def __init__(self, atual: str, novo: str):
        self.atual = atual
        self.novo = novo
        super().__init__(f"Transição de status inválida: {atual} → {novo}")
