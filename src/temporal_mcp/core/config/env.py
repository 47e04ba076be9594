# src/temporal_mcp/core/config/env.py
"""
Variáveis de ambiente e pass de defaults da conexão.

O ambiente é sempre recebido como um mapa somente-leitura injetado
(`Mapping[str, str]`), nunca lido implicitamente deste módulo. Isso
permite testes determinísticos sem mutar `os.environ`.

Precedência por campo da conexão:
    override de ambiente (não vazio) > valor da config (não vazio) > default

Observação:
    `environment` vindo do override é normalizado para minúsculas; o valor
    vindo da config é preservado como está.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Mapping, Optional, Tuple

from .schema import Connection


# Fontes da configuração
CONFIG_INLINE = "TEMPORAL_MCP_CONFIG"
CONFIG_FILE_PATH = "TEMPORAL_MCP_CONFIG_FILE"

# Overrides por campo
HOST_PORT_OVERRIDE = "TEMPORAL_HOST_PORT"
NAMESPACE_OVERRIDE = "TEMPORAL_NAMESPACE"
ENVIRONMENT_OVERRIDE = "TEMPORAL_ENVIRONMENT"
TIMEOUT_OVERRIDE = "TEMPORAL_TIMEOUT"
DEFAULT_TASK_QUEUE_OVERRIDE = "TEMPORAL_DEFAULT_TASK_QUEUE"

DEFAULT_ADDRESS = "localhost:7233"
DEFAULT_NAMESPACE = "default"
DEFAULT_ENVIRONMENT = "local"
DEFAULT_TIMEOUT = "5s"

# campo -> (variável de override, default)
_FIELD_RULES: Tuple[Tuple[str, str, Optional[str]], ...] = (
    ("address", HOST_PORT_OVERRIDE, DEFAULT_ADDRESS),
    ("namespace", NAMESPACE_OVERRIDE, DEFAULT_NAMESPACE),
    ("environment", ENVIRONMENT_OVERRIDE, DEFAULT_ENVIRONMENT),
    ("timeout", TIMEOUT_OVERRIDE, DEFAULT_TIMEOUT),
    ("default_task_queue", DEFAULT_TASK_QUEUE_OVERRIDE, None),
)

ORIGIN_ENV = "env"
ORIGIN_CONFIG = "config"
ORIGIN_DEFAULT = "default"
ORIGIN_UNSET = "unset"


def get_env(env: Mapping[str, str], name: str) -> str:
    """Lê uma variável; ausente e vazia são equivalentes (string vazia)."""
    return env.get(name) or ""


def override_var_for(field_name: str) -> str:
    for name, var, _ in _FIELD_RULES:
        if name == field_name:
            return var
    raise KeyError(field_name)


def apply_env_overrides(
    connection: Connection,
    env: Mapping[str, str],
) -> Tuple[Connection, Dict[str, str]]:
    """
    Aplica overrides de ambiente e defaults sobre a conexão parseada.

    Args:
        connection: conexão materializada a partir da config (pode ser o valor zero).
        env: ambiente somente-leitura.

    Returns:
        Tupla `(conexão resolvida, origem por campo)`, onde a origem é
        `env`, `config`, `default` ou `unset`.
    """
    changes: Dict[str, str] = {}
    origins: Dict[str, str] = {}

    for name, var, default in _FIELD_RULES:
        override = get_env(env, var)
        current = getattr(connection, name)

        if override:
            changes[name] = override.lower() if var == ENVIRONMENT_OVERRIDE else override
            origins[name] = ORIGIN_ENV
        elif current:
            origins[name] = ORIGIN_CONFIG
        elif default is not None:
            changes[name] = default
            origins[name] = ORIGIN_DEFAULT
        else:
            origins[name] = ORIGIN_UNSET

    return replace(connection, **changes), origins
