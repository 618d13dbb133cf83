"""Validação de contrato de dados.

Responsabilidades:
- Validar presença de colunas obrigatórias
- Falhar explicitamente se contrato for violado
"""

from typing import List

import pandas as pd

from src.config.settings import Configuracoes
from src.util.logger import logger
from src.util.text_normalizer import normalizar_chave


class ContratoDataFrame:
    """Define e valida contrato de dados para planilhas de inscrição.

    Responsabilidades:
    - Especificar colunas obrigatórias (com nomes alternativos)
    - Comparar nomes de colunas sem acentos, caixa ou pontuação
    - Falhar com mensagem clara se violado
    """

    def __init__(self, colunas_obrigatorias: List[List[str]]):
        """Inicializa o contrato.

        Parâmetros:
        - colunas_obrigatorias (list[list[str]]): para cada coluna, os nomes aceitos
        """
        self.colunas_obrigatorias = colunas_obrigatorias

    def validar(self, df: pd.DataFrame) -> None:
        """Valida o DataFrame contra o contrato.

        Parâmetros:
        - df (pd.DataFrame): DataFrame a validar

        Exceções:
        - ValueError: quando contrato é violado
        """
        if df is None or df.empty:
            raise ValueError("DataFrame vazio ou nulo. Impossível validar contrato.")

        chaves_disponiveis = {normalizar_chave(coluna) for coluna in df.columns}
        colunas_faltantes = [
            alternativas[0]
            for alternativas in self.colunas_obrigatorias
            if not any(normalizar_chave(nome) in chaves_disponiveis for nome in alternativas)
        ]
        if colunas_faltantes:
            raise ValueError(
                f"Contrato de dados violado: colunas obrigatórias ausentes: {colunas_faltantes}. "
                f"Colunas disponíveis: {list(df.columns)}"
            )

        logger.info(f"Contrato de dados validado com sucesso. {len(df)} registros.")


CONTRATO_INSCRICOES = ContratoDataFrame(
    colunas_obrigatorias=[Configuracoes.COLUNAS_NOME, Configuracoes.COLUNAS_CURSO],
)
