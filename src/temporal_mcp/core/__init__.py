# src/temporal_mcp/core/__init__.py
"""
Core do temporal-mcp.

Componentes:
    - config → resolução de configuração (fontes, overrides, validação, hashing)

O core não depende do host da aplicação nem de clientes de rede.
"""
