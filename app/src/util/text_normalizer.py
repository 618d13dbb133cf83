"""Normalização de textos e nomes de colunas.

Responsabilidades:
- Remover acentos e padronizar caixa
- Gerar chaves comparáveis para nomes de colunas
- Buscar valores de uma linha por nomes alternativos
"""

import re
import unicodedata
from typing import Mapping, Optional, Sequence


def normalizar_texto(valor) -> str:
    """Remove acentos, converte para maiúsculas e apara espaços.

    Parâmetros:
    - valor (Any): texto original (None é tratado como vazio)

    Retorno:
    - str: texto normalizado
    """
    if valor is None:
        return ""
    texto = unicodedata.normalize("NFD", str(valor))
    texto = "".join(c for c in texto if unicodedata.category(c) != "Mn")
    return texto.upper().strip()


def normalizar_chave(valor) -> str:
    """Gera chave só com letras e dígitos, usada para casar nomes de colunas."""
    return re.sub(r"[^A-Z0-9]", "", normalizar_texto(valor))


def encontrar_coluna(linha: Mapping[str, object], alvos: Sequence[str]) -> Optional[str]:
    """Localiza a coluna da linha cujo nome normalizado casa com algum alvo.

    Parâmetros:
    - linha (Mapping): registro bruto
    - alvos (Sequence[str]): nomes aceitos para a coluna

    Retorno:
    - str | None: nome original da coluna encontrada
    """
    chaves_alvo = {normalizar_chave(alvo) for alvo in alvos}
    for coluna in linha.keys():
        if normalizar_chave(coluna) in chaves_alvo:
            return coluna
    return None


def obter_valor(linha: Mapping[str, object], alvos: Sequence[str], padrao: str = "") -> str:
    """Retorna o texto da primeira coluna que casa com os alvos."""
    coluna = encontrar_coluna(linha, alvos)
    if coluna is None:
        return padrao
    valor = linha[coluna]
    if valor is None:
        return padrao
    return str(valor)
