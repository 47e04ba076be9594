# tests/conftest.py
"""
Fixtures compartilhados para testes do temporal-mcp.

As fixtures fornecem corpos YAML determinísticos e arquivos de
configuração em diretórios temporários. O ambiente é sempre injetado
como dicionário explícito; nenhuma fixture muta `os.environ`.

Invariantes:
    - YAML sintaticamente válido
    - Nenhuma fixture abre conexões de rede
"""

from pathlib import Path

import pytest


@pytest.fixture
def full_config_yaml() -> str:
    """
    YAML completo, com todos os campos de conexão preenchidos e dois workflows.

    Usado por:
        - Testes do loader (fonte inline e arquivo)
        - Testes de precedência de overrides sobre valores da config
    """
    return """\
connection:
  address: temporal.internal:7233
  namespace: tools
  environment: Production
  timeout: 10s
  defaultTaskQueue: default-queue
workflows:
  greet:
    purpose: Greets a user by name
    input:
      type: object
      fields:
        - name: string
        - locale: "string, optional"
      description: Who to greet
    output:
      type: string
      fields: []
    taskQueue: greetings
    workflowIDRecipe: "greet-{{ .name }}"
  report:
    purpose: Builds the weekly report
    input:
      type: object
      fields:
        - week: integer
    output:
      type: object
      fields:
        - url: string
      description: Where the report was stored
    taskQueue: reports
    workflowIDRecipe: "report-{{ .week }}"
"""


@pytest.fixture
def config_file(tmp_path: Path, full_config_yaml: str) -> Path:
    """Arquivo `config.yml` com o conteúdo de `full_config_yaml`."""
    path = tmp_path / "config.yml"
    path.write_text(full_config_yaml, encoding="utf-8")
    return path


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    """Caminho que não existe no filesystem."""
    return tmp_path / "does-not-exist.yml"
