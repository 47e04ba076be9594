# src/temporal_mcp/core/config/loader.py
"""
Loader canônico de configuração do temporal-mcp.

Este módulo resolve a configuração efetiva (conexão com o Temporal e
workflows expostos como tools) a partir de fontes em camadas, em um
pipeline linear sem retry:

    seleção de fonte -> parse -> defaults/overrides -> validação

Seleção de fonte (a primeira que se aplica vence):
    1. `TEMPORAL_MCP_CONFIG` não vazio: o valor é o corpo YAML; nenhum
       arquivo é lido
    2. Caso contrário, lê o arquivo em `TEMPORAL_MCP_CONFIG_FILE` (se não
       vazio) ou no caminho default recebido
        - arquivo inexistente: segue com `Configuration.empty()`
        - qualquer outra falha de leitura: `ConfigReadError`

Princípios fundamentais:
    - O ambiente é injetado (mapa somente-leitura); `os.environ` só é
      usado quando nada é informado
    - Nenhum estado global é mantido ou mutado
    - A mesma entrada sempre produz a mesma configuração

Invariantes:
    - `connection.address` nunca é vazio em uma configuração retornada
    - O payload inline nunca aparece no log de eventos

Limites explícitos:
    - Não valida schemas de workflow além da estrutura
    - Não abre conexão com o Temporal
    - Não encerra o processo em caso de erro (responsabilidade do host)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml  # PyYAML

from .env import (
    CONFIG_FILE_PATH,
    CONFIG_INLINE,
    ORIGIN_CONFIG,
    ORIGIN_UNSET,
    apply_env_overrides,
    get_env,
    override_var_for,
)
from .errors import ConfigParseError, ConfigReadError, MissingRequiredFieldError
from .hashing import compute_config_hash
from .schema import ADDRESS_KEY, CONNECTION_KEY, Configuration, config_from_dict


SOURCE_INLINE = "inline"
SOURCE_FILE = "file"
SOURCE_EMPTY = "empty"


@dataclass(frozen=True)
class ConfigResolution:
    """
    Resultado de uma resolução com proveniência.

    Campos:
    - config: configuração efetiva
    - source: `inline`, `file` ou `empty`
    - path: caminho efetivo do arquivo (None quando a fonte é inline)
    - config_hash: SHA-256 da configuração (ver `compute_config_hash`)
    - events: log estruturado da resolução, em ordem
    """

    config: Configuration
    source: str
    path: Optional[str]
    config_hash: str
    events: List[Dict[str, Any]] = field(default_factory=list)


_SCALAR_TAGS = (
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
)
_MERGE_TAG = "tag:yaml.org,2002:merge"


class ConfigYamlLoader(yaml.SafeLoader):
    """
    SafeLoader para o corpo da configuração.

    Diferenças em relação ao `yaml.SafeLoader`:
        - escalares implícitos (bool, int, float, timestamp) mantêm o texto
          literal (`yes`, `0755`, `1:30`, `1.50` continuam strings)
        - chaves duplicadas em um mesmo mapa são rejeitadas
        - `null` continua sendo None (campo ausente)
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if not isinstance(key_node, yaml.ScalarNode) or key_node.tag == _MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _construct_scalar_text(loader: ConfigYamlLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


for _tag in _SCALAR_TAGS:
    ConfigYamlLoader.add_constructor(_tag, _construct_scalar_text)


class _EventLog:
    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)


def _read_file(path: str) -> Optional[str]:
    """Lê o arquivo; retorna None apenas quando ele não existe."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e) from e


def _parse(payload: str) -> Configuration:
    try:
        data = yaml.load(payload, Loader=ConfigYamlLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e) or "invalid YAML", cause=e) from e
    return config_from_dict(data)


def resolve_config(
    default_path: Union[str, "os.PathLike[str]"],
    *,
    env: Optional[Mapping[str, str]] = None,
) -> ConfigResolution:
    """
    Resolve a configuração efetiva e registra a proveniência de cada etapa.

    Args:
        default_path: caminho usado quando `TEMPORAL_MCP_CONFIG_FILE` não é informado.
        env: ambiente somente-leitura; `os.environ` quando None.

    Returns:
        ConfigResolution com a configuração, a fonte escolhida, o hash e os eventos.

    Raises:
        ConfigReadError: se o arquivo existir mas não puder ser lido.
        ConfigParseError: se o payload não vazio for inválido.
        MissingRequiredFieldError: se `address` continuar vazio após os defaults.
    """
    if env is None:
        env = os.environ

    trail = _EventLog()
    config = Configuration.empty()
    path: Optional[str] = None

    inline = get_env(env, CONFIG_INLINE)
    if inline:
        source = SOURCE_INLINE
        payload: Optional[str] = inline
        trail.log(level="info", message="config source selected", source=source, env_var=CONFIG_INLINE)
    else:
        path = get_env(env, CONFIG_FILE_PATH) or os.fspath(default_path)
        payload = _read_file(path)
        if payload is None:
            source = SOURCE_EMPTY
            trail.log(level="warning", message="config file not found, using empty config", path=path)
        else:
            source = SOURCE_FILE
            trail.log(level="info", message="config source selected", source=source, path=path)

    if payload:
        config = _parse(payload)

    connection, origins = apply_env_overrides(config.connection, env)
    for name, origin in origins.items():
        if origin in (ORIGIN_CONFIG, ORIGIN_UNSET):
            continue
        trail.log(
            level="debug",
            message="connection field resolved",
            field=name,
            origin=origin,
            value=getattr(connection, name),
            env_var=override_var_for(name),
        )

    if not connection.address:
        raise MissingRequiredFieldError(
            ADDRESS_KEY,
            f"{CONNECTION_KEY}.{ADDRESS_KEY}",
            override_var_for(ADDRESS_KEY),
        )

    config = replace(config, connection=connection)
    config_hash = compute_config_hash(config)
    trail.log(
        level="info",
        message="config resolved",
        source=source,
        workflows=len(config.workflows),
        config_hash=config_hash,
    )

    return ConfigResolution(
        config=config,
        source=source,
        path=path,
        config_hash=config_hash,
        events=trail.events,
    )


def load_config(
    default_path: Union[str, "os.PathLike[str]"],
    *,
    env: Optional[Mapping[str, str]] = None,
) -> Configuration:
    """
    Carrega a configuração efetiva do temporal-mcp.

    Ponto de entrada chamado uma vez pelo host na inicialização. Equivale a
    `resolve_config(...).config`.
    """
    return resolve_config(default_path, env=env).config
