"""Carregamento das planilhas de inscrição.

Responsabilidades:
- Localizar arquivos CSV e Excel
- Ler todos os valores como texto
- Unificar abas e arquivos
- Validar contrato de dados
"""

import glob
import os
from typing import Dict, List

import pandas as pd

from src.config.settings import Configuracoes
from src.infrastructure.data.data_contract import CONTRATO_INSCRICOES
from src.util.logger import logger


class CarregadorInscricoes:
    """Responsável pelo carregamento e unificação das planilhas de inscrição.

    Responsabilidades:
    - Buscar arquivos na pasta de dados
    - Ler CSV com separador ';' ou ','
    - Concatenar abas de arquivos Excel
    """

    def __init__(self, diretorio: str | None = None):
        """Inicializa o carregador.

        Parâmetros:
        - diretorio (str | None): pasta de dados; padrão Configuracoes.DATA_DIR
        """
        self.diretorio = diretorio or Configuracoes.DATA_DIR

    def carregar_dados(self) -> pd.DataFrame:
        """Busca planilhas na pasta de dados e unifica os registros.

        Retorno:
        - pd.DataFrame: inscrições consolidadas, valores como texto

        Exceções:
        - FileNotFoundError: quando não há arquivos .xlsx ou .csv
        - RuntimeError: quando nenhuma planilha possui registros
        - ValueError: quando o contrato de dados é violado
        """
        padroes = ["*.xlsx", "*.csv"]
        arquivos = []
        for padrao in padroes:
            caminho_busca = os.path.join(self.diretorio, padrao)
            arquivos.extend(sorted(glob.glob(caminho_busca)))
            logger.info(f"Buscando arquivos em: {caminho_busca}")

        if not arquivos:
            self._registrar_conteudo_pasta()
            raise FileNotFoundError(
                f"Nenhuma planilha de inscrição encontrada em {self.diretorio}. "
                "Defina DATA_DIR ou copie os arquivos exportados do formulário."
            )

        dados_unificados = []
        for caminho_arquivo in arquivos:
            if caminho_arquivo.endswith(".xlsx"):
                logger.info(f"Carregando arquivo Excel: {caminho_arquivo}")
                abas = self._ler_excel(caminho_arquivo)
                dados_unificados.extend(df for df in abas.values() if not df.empty)
            else:
                logger.info(f"Carregando arquivo CSV: {caminho_arquivo}")
                df_csv = self._ler_csv(caminho_arquivo)
                if not df_csv.empty:
                    dados_unificados.append(df_csv)

        if not dados_unificados:
            raise RuntimeError("Nenhuma planilha com registros foi carregada.")

        try:
            df_final = pd.concat(dados_unificados, ignore_index=True).fillna("")
        except Exception as erro:
            logger.error(f"Erro ao concatenar os dados: {erro}")
            raise erro

        logger.info(f"Inscrições unificadas: {df_final.shape}")

        try:
            CONTRATO_INSCRICOES.validar(df_final)
        except ValueError as erro:
            logger.error(f"Falha na validação do contrato de dados: {erro}")
            raise erro

        return df_final

    def carregar_linhas(self) -> List[Dict[str, str]]:
        """Retorna as inscrições como lista de registros coluna -> texto."""
        df = self.carregar_dados()
        return [{str(chave): str(valor) for chave, valor in registro.items()} for registro in df.to_dict(orient="records")]

    def _registrar_conteudo_pasta(self) -> None:
        """Registra o conteúdo da pasta de dados no log."""
        try:
            conteudo = os.listdir(self.diretorio)
            logger.error(f"Conteúdo encontrado em {self.diretorio}: {conteudo}")
        except OSError:
            return

    @staticmethod
    def _ler_excel(caminho_arquivo: str) -> Dict[str, pd.DataFrame]:
        """Lê todas as abas de um arquivo Excel como texto.

        Exceções:
        - Exception: quando a leitura falha
        """
        try:
            return pd.read_excel(caminho_arquivo, sheet_name=None, dtype=str, keep_default_na=False)
        except Exception as erro:
            logger.error(f"Erro crítico ao ler o Excel: {erro}")
            raise erro

    @staticmethod
    def _ler_csv(caminho_arquivo: str) -> pd.DataFrame:
        """Lê um arquivo CSV como texto, tentando ';' e depois ','.

        Exceções:
        - Exception: quando a leitura falha
        """
        opcoes = {"dtype": str, "keep_default_na": False, "encoding": "utf-8-sig"}
        try:
            try:
                df = pd.read_csv(caminho_arquivo, sep=";", **opcoes)
                if len(df.columns) <= 1:
                    df = pd.read_csv(caminho_arquivo, sep=",", **opcoes)
            except pd.errors.ParserError:
                df = pd.read_csv(caminho_arquivo, sep=",", **opcoes)
            return df
        except Exception as erro:
            logger.error(f"Erro crítico ao ler o CSV: {erro}")
            raise erro
