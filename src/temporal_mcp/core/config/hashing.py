# src/temporal_mcp/core/config/hashing.py
"""
Identidade determinística da configuração resolvida.

O hash identifica a configuração efetiva usada ao iniciar o processo e é
registrado no evento final da resolução.

Política (v1):
    - entrada: `Configuration.to_dict()` (chaves canônicas, opcionais vazios omitidos)
    - JSON canônico: chaves ordenadas, separadores compactos, UTF-8
    - SHA-256 em hexadecimal (64 caracteres)
"""

import hashlib
import json

from .schema import Configuration


def compute_config_hash(config: Configuration) -> str:
    """
    Calcula a identidade de uma `Configuration`.

    A ordem de inserção dos workflows e das chaves não altera o resultado;
    a ordem de `fields` dentro de um schema altera.

    Raises:
        TypeError: se `config` não for uma `Configuration`.
    """
    if not isinstance(config, Configuration):
        raise TypeError(f"expected a Configuration, got {type(config).__name__}")

    payload = json.dumps(config.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
