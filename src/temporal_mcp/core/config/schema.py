# src/temporal_mcp/core/config/schema.py
"""
Schema canônico da configuração do temporal-mcp.

Define as estruturas imutáveis que representam a configuração resolvida
(conexão com o Temporal + workflows expostos como tools) e a materialização
a partir do mapa produzido pelo parser YAML.

Chaves serializadas:
    - canônicas: `connection`, `address`, `namespace`, `environment`,
      `timeout`, `defaultTaskQueue`, `workflows`, `purpose`, `input`,
      `output`, `taskQueue`, `workflowIDRecipe`, `type`, `fields`,
      `description`
    - aliases aceitos na leitura: `temporal` (para `connection`) e
      `hostPort` (para `address`); a chave canônica tem prioridade

Esta implementação usa dataclasses simples, sem dependências externas
de validação.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigParseError


CONNECTION_KEY = "connection"
CONNECTION_ALIAS = "temporal"
ADDRESS_KEY = "address"
ADDRESS_ALIAS = "hostPort"


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigParseError(msg)


def _pick(data: Dict[str, Any], key: str, alias: Optional[str] = None) -> Any:
    if key in data:
        return data[key]
    if alias is not None and alias in data:
        return data[alias]
    return None


def _as_str(value: Any, where: str) -> str:
    """Escalares chegam como texto literal do YAML; `null` vira string vazia."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ConfigParseError(f"{where} must be a string, got {type(value).__name__}")


def _as_mapping(value: Any, where: str) -> Dict[str, Any]:
    if value is None:
        return {}
    _expect(isinstance(value, dict), f"{where} must be a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ParameterSchema:
    """Schema de entrada ou saída de um workflow."""

    type: str = ""
    fields: List[Dict[str, str]] = field(default_factory=list)
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "fields": [dict(f) for f in self.fields],
        }
        if self.description:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class WorkflowDefinition:
    """Metadados de um workflow invocável: propósito, schemas e roteamento."""

    purpose: str = ""
    input: ParameterSchema = field(default_factory=ParameterSchema)
    output: ParameterSchema = field(default_factory=ParameterSchema)
    task_queue: str = ""
    workflow_id_recipe: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "purpose": self.purpose,
            "input": self.input.to_dict(),
            "output": self.output.to_dict(),
            "taskQueue": self.task_queue,
            "workflowIDRecipe": self.workflow_id_recipe,
        }


@dataclass(frozen=True)
class Connection:
    """
    Parâmetros de conexão com o serviço Temporal.

    O valor zero (todas as strings vazias) representa "nada informado";
    defaults e overrides são aplicados por `env.apply_env_overrides`.
    """

    address: str = ""
    namespace: str = ""
    environment: str = ""
    timeout: str = ""
    default_task_queue: str = ""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "address": self.address,
            "namespace": self.namespace,
            "environment": self.environment,
        }
        if self.timeout:
            out["timeout"] = self.timeout
        if self.default_task_queue:
            out["defaultTaskQueue"] = self.default_task_queue
        return out


@dataclass(frozen=True)
class Configuration:
    """
    Configuração raiz: conexão + mapa nome -> definição de workflow.

    Invariantes:
        - Nomes de workflow são únicos (chaves do dicionário)
        - A instância não é mutada após a resolução
    """

    connection: Connection = field(default_factory=Connection)
    workflows: Dict[str, WorkflowDefinition] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Configuration":
        """Configuração usada quando nenhuma fonte foi fornecida."""
        return cls(connection=Connection(), workflows={})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "connection": self.connection.to_dict(),
            "workflows": {name: wf.to_dict() for name, wf in self.workflows.items()},
        }


def _parameter_schema_from_dict(value: Any, where: str) -> ParameterSchema:
    data = _as_mapping(value, where)

    raw_fields = data.get("fields")
    if raw_fields is None:
        raw_fields = []
    _expect(isinstance(raw_fields, list), f"{where}.fields must be a list")

    fields: List[Dict[str, str]] = []
    for i, item in enumerate(raw_fields):
        item_where = f"{where}.fields[{i}]"
        _expect(isinstance(item, dict), f"{item_where} must be a mapping")
        fields.append(
            {_as_str(k, f"{item_where} key"): _as_str(v, f"{item_where}.{k}") for k, v in item.items()}
        )

    return ParameterSchema(
        type=_as_str(data.get("type"), f"{where}.type"),
        fields=fields,
        description=_as_str(data.get("description"), f"{where}.description"),
    )


def _workflow_from_dict(name: str, value: Any) -> WorkflowDefinition:
    where = f"workflows.{name}"
    data = _as_mapping(value, where)
    return WorkflowDefinition(
        purpose=_as_str(data.get("purpose"), f"{where}.purpose"),
        input=_parameter_schema_from_dict(data.get("input"), f"{where}.input"),
        output=_parameter_schema_from_dict(data.get("output"), f"{where}.output"),
        task_queue=_as_str(data.get("taskQueue"), f"{where}.taskQueue"),
        workflow_id_recipe=_as_str(data.get("workflowIDRecipe"), f"{where}.workflowIDRecipe"),
    )


def _connection_from_dict(value: Any) -> Connection:
    data = _as_mapping(value, CONNECTION_KEY)
    return Connection(
        address=_as_str(_pick(data, ADDRESS_KEY, ADDRESS_ALIAS), f"{CONNECTION_KEY}.{ADDRESS_KEY}"),
        namespace=_as_str(data.get("namespace"), f"{CONNECTION_KEY}.namespace"),
        environment=_as_str(data.get("environment"), f"{CONNECTION_KEY}.environment"),
        timeout=_as_str(data.get("timeout"), f"{CONNECTION_KEY}.timeout"),
        default_task_queue=_as_str(data.get("defaultTaskQueue"), f"{CONNECTION_KEY}.defaultTaskQueue"),
    )


def config_from_dict(data: Any) -> Configuration:
    """
    Materializa uma `Configuration` a partir do mapa produzido pelo parser.

    Chaves desconhecidas são ignoradas; valores `null` equivalem a ausentes.

    Raises:
        ConfigParseError: se a raiz ou alguma seção tiver tipo incompatível.
    """
    if data is None:
        return Configuration.empty()

    _expect(isinstance(data, dict), f"config root must be a mapping, got {type(data).__name__}")

    workflows_raw = _as_mapping(data.get("workflows"), "workflows")
    workflows = {
        _as_str(name, "workflows key"): _workflow_from_dict(str(name), wf)
        for name, wf in workflows_raw.items()
    }

    return Configuration(
        connection=_connection_from_dict(_pick(data, CONNECTION_KEY, CONNECTION_ALIAS)),
        workflows=workflows,
    )
