"""
Configuration constants for the IT pricing service.

Business assumptions that used to live inline in the calculators are kept
here with their historical defaults. Each one can be overridden through an
environment variable of the same name.
"""

import os

# ── Servidor ────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
).split(",")

# ── Mão de obra (CLT) ───────────────────────────────────────────────────────
MULTIPLICADOR_VENDA_HORA = float(os.getenv("MULTIPLICADOR_VENDA_HORA", "1.66"))

# ── Outsourcing de impressão ────────────────────────────────────────────────
TARIFA_ENERGIA_KWH = float(os.getenv("TARIFA_ENERGIA_KWH", "0.65"))   # R$/kWh (média Brasil)
VOLUME_MENSAL_ESTIMADO = int(os.getenv("VOLUME_MENSAL_ESTIMADO", "2000"))  # páginas/mês
ANOS_VIDA_UTIL_MANUTENCAO = int(os.getenv("ANOS_VIDA_UTIL_MANUTENCAO", "5"))

# ── ICMS ────────────────────────────────────────────────────────────────────
ALIQUOTA_INTERESTADUAL_PADRAO = float(os.getenv("ALIQUOTA_INTERESTADUAL_PADRAO", "7"))
MVA_ICMS_ST = float(os.getenv("MVA_ICMS_ST", "30"))  # margem de valor agregado presumida (%)

# ── Formatação ──────────────────────────────────────────────────────────────
CASAS_MOEDA = 2
CASAS_CUSTO_PAGINA = 4
