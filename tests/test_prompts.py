"""
Tests for wave_scanner/recommendations/prompts.py.

Covers:
  - build_prompt(): timeframe, universe, output contract and generation
    instant are embedded; criteria rendering for strings, objects and None;
    missing timeframe does not raise; rendering is deterministic.
"""

from __future__ import annotations

from datetime import UTC, datetime

from wave_scanner.recommendations.prompts import (
    INSTRUMENT_UNIVERSE,
    SYSTEM_PROMPT,
    build_prompt,
)

_FIXED_DT = datetime(2026, 10, 18, 14, 30, 0, tzinfo=UTC)


class TestBuildPrompt:
    def test_embeds_timeframe(self):
        prompt = build_prompt("4h", None, _FIXED_DT)
        assert "- Timeframe: 4h" in prompt
        assert '"timeframe": "4h"' in prompt

    def test_lists_every_instrument_by_market(self):
        prompt = build_prompt("1d", None, _FIXED_DT)
        for market, symbols in INSTRUMENT_UNIVERSE.items():
            assert f"- {market}: {', '.join(symbols)}" in prompt

    def test_output_contract(self):
        prompt = build_prompt("1d", None, _FIXED_DT)
        assert '"waveType": "Wave3|WaveC|WaveB"' in prompt
        assert '"priority": "ALTA|MEDIA|BAJA"' in prompt
        assert "Máximo 10 recomendaciones" in prompt
        assert "Confidence mínimo 70%" in prompt
        assert "número_entre_70_y_95" in prompt

    def test_filter_rules(self):
        prompt = build_prompt("1d", None, _FIXED_DT)
        assert "Wave 3 de impulso alcista" in prompt
        assert "confirmación de ruptura" in prompt
        assert "Coincidencia direccional" in prompt
        assert "máximo 1 trade diario" in prompt

    def test_last_update_is_generation_instant(self):
        prompt = build_prompt("1h", None, _FIXED_DT)
        assert '"lastUpdate": "2026-10-18T14:30:00.000Z"' in prompt

    def test_string_criteria_verbatim(self):
        prompt = build_prompt("1h", "wave3-breakout", _FIXED_DT)
        assert "CRITERIOS ADICIONALES DEL USUARIO" in prompt
        assert "- wave3-breakout" in prompt

    def test_object_criteria_as_json(self):
        prompt = build_prompt("1h", {"market": "BMV", "minConfidence": 80}, _FIXED_DT)
        assert '{"market": "BMV", "minConfidence": 80}' in prompt

    def test_no_criteria_section_when_absent(self):
        assert "CRITERIOS ADICIONALES" not in build_prompt("1h", None, _FIXED_DT)
        assert "CRITERIOS ADICIONALES" not in build_prompt("1h", "", _FIXED_DT)

    def test_missing_timeframe_still_renders(self):
        prompt = build_prompt(None, None, _FIXED_DT)
        assert "- Timeframe: None" in prompt

    def test_deterministic(self):
        assert build_prompt("15m", "x", _FIXED_DT) == build_prompt("15m", "x", _FIXED_DT)

    def test_no_unrendered_placeholders(self):
        prompt = build_prompt("1wk", {"a": 1}, _FIXED_DT)
        assert "{timeframe}" not in prompt
        assert "{universe}" not in prompt


class TestSystemPrompt:
    def test_demands_json(self):
        assert "JSON" in SYSTEM_PROMPT
        assert "Elliott Wave" in SYSTEM_PROMPT
