from services.formatacao import formatar_custo_pagina, formatar_moeda, formatar_percentual


def test_formatar_moeda():
    assert formatar_moeda(1234.5) == "R$ 1.234,50"
    assert formatar_moeda(1234567.891) == "R$ 1.234.567,89"
    assert formatar_moeda(0) == "R$ 0,00"
    assert formatar_moeda(-10) == "-R$ 10,00"


def test_valor_indefinido():
    assert formatar_moeda(None) == "—"
    assert formatar_custo_pagina(None) == "—"


def test_formatar_custo_pagina():
    assert formatar_custo_pagina(0.1393026) == "R$ 0,1393"


def test_formatar_percentual():
    assert formatar_percentual(12.5) == "12,50%"
