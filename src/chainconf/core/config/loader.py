# src/chainconf/core/config/loader.py
"""
Loader canônico de configurações compostas.

Este módulo carrega declarações de configuração a partir de arquivos
YAML/JSON e as constrói em um `Configuration`, aplicando todas as
verificações do motor de composição (unicidade, compatibilidade, domínio).

A declaração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional; ausência não é erro)

Formato da declaração:

    domain: search
    elements:
      max_error:
        substitution: 1
        insertion: 2
      mode: all_best

Princípios fundamentais:
    - A declaração é apenas outra forma de escrever `e1 | e2 | ...`
    - Elementos são construídos na ordem dos ids de kind do domínio,
      tornando o resultado independente da ordem das chaves no arquivo
    - Erros de composição propagam como `CompositionError`, sem reembalagem

Limites explícitos:
    - Não valida semântica de algoritmo
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from chainconf.core.composite import Configuration, compose_all
from chainconf.core.context import BuildContext
from chainconf.core.registry import DomainRegistry, default_registry

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnknownElementError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_configuration_hash
from .merge import merge_declarations, normalize_declaration


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de declaração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_declaration(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Carrega defaults + override local opcional e devolve a declaração resolvida."""
    declaration = normalize_declaration(_load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            declaration = merge_declarations(declaration, _load_file(local_file))

    return declaration


def build_configuration(
    declaration: Dict[str, Any],
    *,
    registry: Optional[DomainRegistry] = None,
    ctx: Optional[BuildContext] = None,
) -> Configuration:
    """
    Constrói um `Configuration` a partir de uma declaração já resolvida.

    Args:
        declaration (Dict[str, Any]): `{"domain": ..., "elements": {...}}`.
        registry (Optional[DomainRegistry]): Registry de domínios; padrão `default_registry`.
        ctx (Optional[BuildContext]): Contexto para o log de eventos de construção.

    Returns:
        Configuration: Composite validado.

    Raises:
        InvalidConfigRootTypeError: Se `domain` ou `elements` tiverem forma inválida.
        UnknownDomainError: Se o domínio não estiver registrado.
        UnknownElementError: Se algum kind declarado não tiver elemento registrado.
        CompositionError: Em qualquer violação de composição ou valor de elemento.
    """
    registry = registry if registry is not None else default_registry

    if not isinstance(declaration, dict):
        raise InvalidConfigRootTypeError(
            f"Declaração deve ser dict, recebido: {type(declaration).__name__}"
        )

    domain_name = declaration.get("domain")
    if not isinstance(domain_name, str) or not domain_name.strip():
        raise InvalidConfigRootTypeError("'domain' deve ser uma string não vazia")

    elements = declaration.get("elements") or {}
    if not isinstance(elements, dict):
        raise InvalidConfigRootTypeError(
            f"'elements' deve ser dict, recebido: {type(elements).__name__}"
        )

    entry = registry.get(domain_name)

    unknown = sorted(name for name in elements if entry.element_for(str(name)) is None)
    if unknown:
        raise UnknownElementError(
            f"Elementos desconhecidos no domínio '{domain_name}': {unknown}"
        )

    ordered = sorted(elements, key=lambda name: int(entry.domain.kind(str(name))))
    built = [entry.element_for(name).from_spec(elements[name]) for name in ordered]

    configuration = compose_all(built, domain=entry.domain, ctx=ctx)

    if ctx is not None:
        ctx.meta["configuration_hash"] = compute_configuration_hash(configuration)

    return configuration


def load_configuration(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    registry: Optional[DomainRegistry] = None,
    ctx: Optional[BuildContext] = None,
) -> Configuration:
    """
    Carrega, resolve e compõe a configuração declarada em arquivo.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; quando presente, seus kinds substituem
          os da base (ver `merge_declarations`)
        - A declaração resolvida é construída por `build_configuration`
    """
    declaration = load_declaration(defaults_path=defaults_path, local_path=local_path)

    if ctx is not None:
        ctx.meta["defaults_path"] = str(defaults_path)
        if local_path is not None:
            ctx.meta["local_path"] = str(local_path)

    return build_configuration(declaration, registry=registry, ctx=ctx)
