# src/temporal_mcp/core/config/errors.py
"""
Exceções canônicas da camada de configuração do temporal-mcp.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a seleção de fonte, o parsing e a validação da configuração de conexão
com o Temporal e das definições de workflows.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha é devolvida imediatamente ao chamador
    - Mensagens de erro indicam como corrigir o problema

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - A causa original, quando existe, é preservada em `cause`

Limites explícitos:
    - Não realiza retry, fallback ou recovery
    - Não decide se o processo deve ser abortado (responsabilidade do host)
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do temporal-mcp.

    Permite captura genérica de qualquer falha de resolução de
    configuração pelo host da aplicação.
    """


class ConfigReadError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração existe (ou não pôde
    ser verificado) mas sua leitura falhou.

    Exemplos: permissão negada, caminho é um diretório, erro de I/O,
    conteúdo que não é UTF-8.

    Decisões arquiteturais:
        - Apenas a ausência do arquivo tem fallback (configuração vazia)
        - Qualquer outra falha de leitura é fatal

    Atributos:
        path: caminho efetivo que se tentou ler.
        cause: exceção original do sistema operacional.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read config file {path}: {cause}")


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando um payload não vazio não pode ser
    materializado como configuração.

    Cobre tanto YAML sintaticamente inválido quanto estruturas com tipos
    incompatíveis (ex.: `workflows` como lista).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(f"failed to parse config YAML: {message}")


class MissingRequiredFieldError(ConfigError):
    """Campo obrigatório vazio após a aplicação de overrides e defaults."""

    def __init__(self, field: str, config_key: str, env_var: str) -> None:
        self.field = field
        self.config_key = config_key
        self.env_var = env_var
        super().__init__(
            f"connection {field} is required "
            f"(set via config key '{config_key}' or {env_var} env var)"
        )
