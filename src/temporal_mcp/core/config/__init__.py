# src/temporal_mcp/core/config/__init__.py
"""
Camada de configuração do temporal-mcp.

Este pacote resolve a configuração efetiva usada pelo host na
inicialização: parâmetros de conexão com o Temporal e o mapa de
workflows expostos como tools.

A configuração no temporal-mcp é:
    - declarativa (YAML inline ou em arquivo)
    - determinística para o mesmo ambiente e arquivo
    - imutável após a resolução

Responsabilidades do pacote:
    - Seleção de fonte (env inline > arquivo de override > arquivo default)
    - Materialização estrutural em dataclasses
    - Aplicação de overrides de ambiente e defaults
    - Validação do único campo obrigatório (`connection.address`)
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não valida semântica dos workflows
    - Não conecta ao Temporal
"""
