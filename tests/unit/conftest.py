"""Fixtures compartilhadas para os testes."""

import sys
from pathlib import Path

import pytest


RAIZ = Path(__file__).resolve().parents[2]
DIRETORIO_APP = RAIZ / "app"
if str(DIRETORIO_APP) not in sys.path:
    sys.path.insert(0, str(DIRETORIO_APP))

MATERIAS = [
    "PORTUGUÊS",
    "MATEMÁTICA",
    "HISTÓRIA",
    "GEOGRAFIA",
    "CIÊNCIAS",
    "ARTE",
    "ENSINO RELIGIOSO",
    "INGLÊS",
    "EDUCAÇÃO FÍSICA",
]
PERIODOS = ["6º ANO", "7º ANO", "8º ANO", "1º BIMESTRE", "2º BIMESTRE", "3º BIMESTRE"]


def montar_linha(
    nome="Aluno Teste",
    inscricao="1001",
    curso="ADMINISTRAÇÃO",
    nascimento="01/01/2010",
    escola="ESCOLA MUNICIPAL JOSÉ DE ALENCAR",
    bairro="JARDIM",
    cota="AMPLA CONCORRÊNCIA",
    nota="8",
    notas=None,
):
    """Monta uma linha de planilha com a mesma nota em todas as matérias e períodos.

    O dicionário ``notas`` sobrescreve colunas específicas, por exemplo
    ``{"PORTUGUÊS - 6º ANO": ""}``.
    """
    linha = {
        "Carimbo de data/hora": "10/11/2025 08:00:00",
        "NOME COMPLETO": nome,
        "NÚMERO DE INSCRIÇÃO": inscricao,
        "DATA DE NASCIMENTO": nascimento,
        "OPÇÃO DE CURSO": curso,
        "MUNICÍPIO": "CRATEÚS",
        "BAIRRO": bairro,
        "ESCOLA DE ORIGEM": escola,
        "COTA DE ESCOLHA": cota,
    }
    for materia in MATERIAS:
        for periodo in PERIODOS:
            linha[f"{materia} - {periodo}"] = nota
    linha.update(notas or {})
    return linha


@pytest.fixture()
def fabrica_linha():
    """Retorna a função de montagem de linhas de inscrição."""
    return montar_linha


@pytest.fixture()
def linha_exemplo():
    """Retorna uma linha completa de candidato da rede pública."""
    return montar_linha()
