# tests/test_smoke.py
"""
Teste de sanidade do namespace público do temporal-mcp.

Garante que o ponto de entrada usado pelo host é importável a partir do
pacote raiz e devolve uma configuração utilizável sem nenhuma fonte.
"""

from pathlib import Path

import temporal_mcp


def test_public_entry_point(tmp_path: Path):
    cfg = temporal_mcp.load_config(str(tmp_path / "config.yml"), env={})
    assert isinstance(cfg, temporal_mcp.Configuration)
    assert cfg.connection.address == "localhost:7233"
