# tests/core/config/test_env.py
"""
Testes da precedência de overrides de ambiente sobre a conexão.

Regra por campo:
    override não vazio > valor da config não vazio > default
"""

from pathlib import Path

import pytest

from temporal_mcp.core.config.env import apply_env_overrides
from temporal_mcp.core.config.loader import load_config
from temporal_mcp.core.config.schema import Connection


# campo, variável de override, valor na config, default
_FIELDS = [
    ("address", "TEMPORAL_HOST_PORT", "file-host:7233", "localhost:7233"),
    ("namespace", "TEMPORAL_NAMESPACE", "file-ns", "default"),
    ("environment", "TEMPORAL_ENVIRONMENT", "file-env", "local"),
    ("timeout", "TEMPORAL_TIMEOUT", "9s", "5s"),
    ("default_task_queue", "TEMPORAL_DEFAULT_TASK_QUEUE", "file-queue", ""),
]

_FILE_YAML = """\
connection:
  address: file-host:7233
  namespace: file-ns
  environment: file-env
  timeout: 9s
  defaultTaskQueue: file-queue
"""


def _expected(file_value: str, default: str, override: str, *, lower: bool) -> str:
    if override:
        return override.lower() if lower else override
    if file_value:
        return file_value
    return default


@pytest.mark.parametrize("inline", [True, False], ids=["inline", "no-inline"])
@pytest.mark.parametrize("file_exists", [True, False], ids=["file", "no-file"])
@pytest.mark.parametrize("override", [None, "", "Override-Value"], ids=["unset", "empty", "set"])
@pytest.mark.parametrize("field_name,var,file_value,default", _FIELDS, ids=[f[0] for f in _FIELDS])
def test_precedence_matrix(tmp_path: Path, inline, file_exists, override, field_name, var, file_value, default):
    path = tmp_path / "config.yml"
    if file_exists:
        path.write_text(_FILE_YAML, encoding="utf-8")

    env = {}
    if inline:
        env["TEMPORAL_MCP_CONFIG"] = _FILE_YAML
    if override is not None:
        env[var] = override

    cfg = load_config(str(path), env=env)

    source_value = file_value if (inline or file_exists) else ""
    expected = _expected(source_value, default, override or "", lower=field_name == "environment")
    assert getattr(cfg.connection, field_name) == expected


def test_environment_override_is_lowercased():
    conn, origins = apply_env_overrides(Connection(), {"TEMPORAL_ENVIRONMENT": "Production"})
    assert conn.environment == "production"
    assert origins["environment"] == "env"


def test_environment_from_config_is_kept_verbatim():
    conn, origins = apply_env_overrides(Connection(environment="Production"), {})
    assert conn.environment == "Production"
    assert origins["environment"] == "config"


def test_empty_host_port_override_does_not_clobber_config():
    conn, _ = apply_env_overrides(Connection(address="file-host:7233"), {"TEMPORAL_HOST_PORT": ""})
    assert conn.address == "file-host:7233"


def test_empty_connection_gets_all_defaults():
    conn, origins = apply_env_overrides(Connection(), {})

    assert conn == Connection(
        address="localhost:7233",
        namespace="default",
        environment="local",
        timeout="5s",
        default_task_queue="",
    )
    assert origins == {
        "address": "default",
        "namespace": "default",
        "environment": "default",
        "timeout": "default",
        "default_task_queue": "unset",
    }


def test_inline_empty_connection_section_gets_defaults():
    cfg = load_config("unused.yml", env={"TEMPORAL_MCP_CONFIG": "connection: {}\n"})

    assert cfg.connection.address == "localhost:7233"
    assert cfg.connection.namespace == "default"
    assert cfg.connection.environment == "local"
    assert cfg.connection.timeout == "5s"
    assert cfg.connection.default_task_queue == ""


def test_overrides_do_not_mutate_input():
    original = Connection(namespace="ns")
    apply_env_overrides(original, {"TEMPORAL_NAMESPACE": "other"})
    assert original.namespace == "ns"
