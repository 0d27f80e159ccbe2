# src/chainconf/core/__init__.py
"""
Core do chainconf.

Este pacote contém o motor de composição de configurações, independente
de qualquer domínio concreto (busca, alinhamento, ...).

Componentes principais:
    - domain     → kinds de um domínio e tabela de compatibilidade simétrica
    - element    → contrato de elemento de configuração (kind como metadado de classe)
    - composite  → `Configuration`, operador `|`, `compose` e `compose_all`
    - derived    → resolução de elementos de valor derivado (total + categorias)
    - registry   → catálogo de domínios e seus tipos de elemento
    - context    → log estruturado de eventos de construção
    - config     → carregamento declarativo (YAML/JSON), override e hashing
    - errors / exceptions → payloads canônicos e exceções tipadas

Princípios fundamentais:
    - Nenhuma decisão silenciosa: duplicidades e conflitos são sempre erros
    - Composição persistente: valores imutáveis, sem estado compartilhado mutável
    - Validação estrutural antes de qualquer algoritmo consumir a configuração

Limites explícitos:
    - Não contém algoritmos de busca ou alinhamento
    - Não interpreta flags de linha de comando
"""
