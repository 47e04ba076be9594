# src/temporal_mcp/__init__.py
"""
temporal-mcp — exposição de workflows Temporal como tools.

Este pacote raiz define o namespace público do temporal-mcp. O conteúdo
atual é a camada de configuração: resolução da conexão com o serviço
Temporal e das definições de workflows a partir de variáveis de ambiente
e arquivos YAML.

Arquitetura em alto nível:
    - core.config → seleção de fonte, parse, defaults, validação e hashing

Limites explícitos:
    - Não define nem executa workflows
    - Não abre conexões de rede
"""
# src/temporal_mcp/__init__.py
from .core.config.loader import load_config, resolve_config
from .core.config.schema import Configuration

__all__ = ["load_config", "resolve_config", "Configuration"]
