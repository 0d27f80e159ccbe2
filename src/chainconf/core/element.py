# src/chainconf/core/element.py
"""
Contrato canônico de elemento de configuração.

Um elemento de configuração é a unidade de composição: um valor tipado e
imutável (ex.: limite de erros, esquema de pontuação) marcado com o kind ao
qual pertence dentro de um domínio.

Princípios fundamentais:
    - O kind é metadado de classe (`ClassVar`), não um campo de instância
    - O payload é acessado apenas por `get()`; não há conversão entre kinds
    - A construção é pura e sem efeitos colaterais
    - Elementos são valores: igualdade e hash por conteúdo

Invariantes:
    - Toda subclasse concreta declara `domain` e `kind`
    - `kind` pertence ao enum de kinds de `domain`
    - O payload nunca é alterado após a construção

Limites explícitos:
    - Não valida coexistência com outros elementos (responsabilidade do composite)
    - Não conhece algoritmos consumidores

Este módulo existe para dar a cada opção uma identidade estática e
um payload imutável, prontos para serem compostos.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, ClassVar, Dict

from .domain import ConfigDomain
from .errors import invalid_element_value
from .exceptions import InvalidElementValueError

if TYPE_CHECKING:  # pragma: no cover
    from .composite import Configuration


def to_plain(value: Any) -> Any:
    """Converte payloads (dataclasses, enums, tuplas) em estruturas JSON puras."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class ConfigElement:
    """
    Elemento de configuração tipado.

    Subclasses concretas declaram:
        - domain: o `ConfigDomain` ao qual o elemento pertence
        - kind: o membro do enum de kinds que identifica o elemento

    e opcionalmente redefinem `value` com tipo e default próprios,
    `validate()` para checar o payload, e `from_spec`/`to_spec` para a
    forma declarativa usada pelo loader.

    O operador `|` inicia (ou continua) uma composição:
    `MaxError(Total(1)) | Mode(SearchMode.ALL)` produz um `Configuration`.
    """

    domain: ClassVar[ConfigDomain]
    kind: ClassVar[IntEnum]

    value: Any = None

    def __post_init__(self) -> None:
        cls = type(self)
        if getattr(cls, "kind", None) is None or getattr(cls, "domain", None) is None:
            raise TypeError(
                f"{cls.__name__} deve declarar 'domain' e 'kind' como atributos de classe"
            )
        self.validate()

    def validate(self) -> None:
        """Hook de validação do payload; padrão aceita qualquer valor."""

    def get(self) -> Any:
        return self.value

    @classmethod
    def kind_name(cls) -> str:
        return cls.domain.kind_name(cls.kind)

    # -----------------------------
    # Forma declarativa
    # -----------------------------
    @classmethod
    def from_spec(cls, spec: Any) -> "ConfigElement":
        """
        Constrói o elemento a partir da forma declarativa.

        `None` (ex.: `global:` sem valor em YAML) é sempre o elemento com o
        payload default; elementos sem default válido levantam
        `InvalidElementValueError`.
        """
        if spec is None:
            return cls()
        return cls(spec)

    def to_spec(self) -> Any:
        return to_plain(self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind_name(), "value": self.to_spec()}

    def _invalid(self, expected: str, value: Any = None) -> InvalidElementValueError:
        return InvalidElementValueError(
            invalid_element_value(
                element=self.kind_name(),
                value=self.value if value is None else value,
                expected=expected,
            )
        )

    # -----------------------------
    # Composição
    # -----------------------------
    def __or__(self, other: Any) -> "Configuration":
        from .composite import Configuration

        if not isinstance(other, (ConfigElement, Configuration)):
            return NotImplemented
        return Configuration(self) | other
