"""Prompt templates for recommendation generation."""

import json
from datetime import datetime
from typing import Any

from wave_scanner.recommendations.schemas import (
    MAX_CONFIDENCE,
    MAX_RECOMMENDATIONS,
    MIN_CONFIDENCE,
    Priority,
    WaveType,
    iso_timestamp,
)

SYSTEM_PROMPT = (
    "Eres un sistema de IA especializado en detectar oportunidades Elliott Wave "
    "para trading. Respondes únicamente en formato JSON válido."
)

INSTRUMENT_UNIVERSE: dict[str, list[str]] = {
    "NASDAQ": ["TSLA", "NVDA", "AAPL", "MSFT", "AMZN", "GOOGL", "META"],
    "NYSE": ["JPM", "JNJ", "PG", "KO", "DIS", "V", "MA"],
    "BMV (México)": ["WALMEX.MX", "CEMEXCPO.MX", "FEMSA.MX", "AMXL.MX"],
    "Principales ETFs": ["SPY", "QQQ", "IWM"],
}

RECOMMENDATION_PROMPT = """Eres un sistema de IA especializado en detectar oportunidades de \
trading usando Elliott Wave Theory.

TAREA: Genera una lista de instrumentos financieros que cumplan ESTRICTAMENTE con \
estos criterios:

CRITERIOS DE FILTRADO:
- Instrumentos en Wave 3 de impulso alcista (preferentemente)
- Wave C alcistas con proyección atractiva
- Wave B alcistas con longitud significativa
- DEBE haber confirmación de ruptura de precio que valide la onda actual
- Coincidencia direccional en los dos escenarios principales
- Apropiado para day trading (máximo 1 trade diario por instrumento)
- Timeframe: {timeframe}
{criteria_section}
MERCADOS A ANALIZAR:
{universe}

FORMATO DE RESPUESTA (JSON):
{{
  "recommendations": [
    {{
      "symbol": "SÍMBOLO",
      "exchange": "BOLSA",
      "waveType": "{wave_types}",
      "priority": "{priorities}",
      "entryPrice": número,
      "targetPrice": número,
      "stopLoss": número,
      "confidence": número_entre_{min_confidence}_y_{max_confidence},
      "timeframe": "{timeframe}",
      "lastUpdate": "{generated_at}",
      "reasoning": "Explicación técnica específica de 1-2 líneas"
    }}
  ]
}}

INSTRUCCIONES CRÍTICAS:
1. Solo incluye instrumentos que REALMENTE cumplan los criterios
2. Máximo {max_recommendations} recomendaciones por timeframe
3. Precios deben ser realistas basados en cotizaciones actuales
4. Confidence mínimo {min_confidence}%
5. Reasoning debe ser específico y técnico
6. Prioriza Wave 3 de impulso sobre otros tipos
7. Si no hay suficientes oportunidades, retorna menos instrumentos
8. Responde solo con el objeto JSON, sin texto adicional

Genera las recomendaciones ahora:"""


def _format_universe(universe: dict[str, list[str]]) -> str:
    return "\n".join(f"- {market}: {', '.join(symbols)}" for market, symbols in universe.items())


def _format_criteria(criteria: Any) -> str:
    if criteria is None or criteria == "":
        return ""
    if isinstance(criteria, str):
        text = criteria
    else:
        text = json.dumps(criteria, ensure_ascii=False, default=str)
    return f"\nCRITERIOS ADICIONALES DEL USUARIO:\n- {text}\n"


def build_prompt(timeframe: str | None, criteria: Any, generated_at: datetime) -> str:
    """Render the recommendation prompt for one request."""
    return RECOMMENDATION_PROMPT.format(
        timeframe=timeframe,
        criteria_section=_format_criteria(criteria),
        universe=_format_universe(INSTRUMENT_UNIVERSE),
        wave_types="|".join(w.value for w in WaveType),
        priorities="|".join(p.value for p in Priority),
        min_confidence=MIN_CONFIDENCE,
        max_confidence=MAX_CONFIDENCE,
        generated_at=iso_timestamp(generated_at),
        max_recommendations=MAX_RECOMMENDATIONS,
    )
