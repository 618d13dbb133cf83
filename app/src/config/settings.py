"""Configurações centrais do projeto.

Responsabilidades:
- Definir caminhos de arquivos
- Definir a tabela de vagas por cota
- Definir matérias, cursos e palavras-chave de classificação
"""

import json
import os
from pathlib import Path


class Configuracoes:
    """Centraliza configurações da aplicação.

    Responsabilidades:
    - Fornecer caminhos de diretórios
    - Declarar capacidades padrão (Anexo I, turmas de 45 vagas)
    - Listar matérias e cursos reconhecidos
    """

    BASE_DIR = Path(__file__).resolve().parents[2]
    DEFAULT_DATA_DIR = os.path.join(BASE_DIR, "data")
    DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", DEFAULT_DATA_DIR))
    OUTPUT_DIR = os.path.abspath(os.getenv("OUTPUT_DIR", os.path.join(BASE_DIR, "output")))
    OUTPUT_PATH = os.path.join(OUTPUT_DIR, "resultado_selecao.json")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "")

    VAGAS_PCD = int(os.getenv("VAGAS_PCD", "2"))
    VAGAS_PUBLICA_CENTRO = int(os.getenv("VAGAS_PUBLICA_CENTRO", "10"))
    VAGAS_PUBLICA_AMPLA = int(os.getenv("VAGAS_PUBLICA_AMPLA", "24"))
    VAGAS_PRIVADA_CENTRO = int(os.getenv("VAGAS_PRIVADA_CENTRO", "3"))
    VAGAS_PRIVADA_AMPLA = int(os.getenv("VAGAS_PRIVADA_AMPLA", "6"))

    _CAPACIDADE_POR_CURSO_RAW = os.getenv("CAPACIDADE_POR_CURSO", "").strip()
    if _CAPACIDADE_POR_CURSO_RAW:
        try:
            CAPACIDADE_POR_CURSO = json.loads(_CAPACIDADE_POR_CURSO_RAW)
        except json.JSONDecodeError:
            CAPACIDADE_POR_CURSO = {}
    else:
        CAPACIDADE_POR_CURSO = {}

    EPSILON_DESEMPATE = 1e-4
    # Divisor fixo das médias de desempate (uma posição por ano escolar).
    DIVISOR_DESEMPATE = 4
    NOTA_MAXIMA = 10.0
    NOTA_MAXIMA_ESCALA_CEM = 100.0

    CURSOS = [
        "ADMINISTRAÇÃO",
        "AGRONEGÓCIO",
        "COMÉRCIO",
        "REDES DE COMPUTADORES",
    ]

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
    MATERIA_PORTUGUES = "PORTUGUÊS"
    MATERIA_MATEMATICA = "MATEMÁTICA"

    PERIODOS_ANUAIS = {
        "6º ANO": "6º",
        "7º ANO": "7º",
        "8º ANO": "8º",
    }
    BIMESTRES_9ANO = {
        "1º BIMESTRE": "9º-B1",
        "2º BIMESTRE": "9º-B2",
        "3º BIMESTRE": "9º-B3",
    }

    COLUNAS_NOME = ["NOME COMPLETO"]
    COLUNAS_INSCRICAO = ["NÚMERO DE INSCRIÇÃO", "NUMERO DE INSCRICAO"]
    COLUNAS_CURSO = ["OPÇÃO DE CURSO", "OPCAO DE CURSO", "OPÇAO DE CURSO"]
    COLUNAS_NASCIMENTO = ["DATA DE NASCIMENTO"]
    COLUNAS_CARIMBO = ["Carimbo de data/hora"]
    COLUNAS_MUNICIPIO = ["MUNICÍPIO", "MUNICIPIO"]
    COLUNAS_BAIRRO = ["BAIRRO"]
    COLUNAS_ESCOLA = ["ESCOLA DE ORIGEM"]
    COLUNAS_COTA = ["COTA DE ESCOLHA"]

    PALAVRAS_REDE_PRIVADA = ["PRIVADA"]
    PALAVRAS_RESIDENCIA = ["CENTRO"]
    PALAVRAS_PCD = ["DEFICIENCIA", "PCD"]
