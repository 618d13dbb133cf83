"""Fábrica de logger da aplicação.

Responsabilidades:
- Configurar loggers de forma padronizada
- Evitar duplicação de handlers
- Direcionar saída para stdout e, opcionalmente, para arquivo
"""

import logging
import os
import sys
from typing import List

from src.config.settings import Configuracoes

FORMATO_LOG = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FORMATO_DATA = "%Y-%m-%d %H:%M:%S"


class FabricaLogger:
    """Responsável por configurar e fornecer instâncias de Logger.

    Responsabilidades:
    - Configuração única de logger
    - Handler de console sempre presente
    - Handler de arquivo quando LOG_FILE estiver definido
    """

    @staticmethod
    def _criar_handlers(caminho_arquivo: str) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if caminho_arquivo:
            diretorio = os.path.dirname(os.path.abspath(caminho_arquivo))
            os.makedirs(diretorio, exist_ok=True)
            handlers.append(logging.FileHandler(caminho_arquivo, encoding="utf-8"))
        return handlers

    @classmethod
    def configurar(cls, nome: str = "SELECAO_EEEP_APP", caminho_arquivo: str = None):
        """Configura o logger se ainda não estiver configurado.

        Parâmetros:
        - nome (str): nome do logger
        - caminho_arquivo (str): arquivo de log; usa LOG_FILE quando omitido

        Retorno:
        - logging.Logger: logger configurado
        """
        instancia = logging.getLogger(nome)
        if instancia.handlers:
            return instancia

        instancia.setLevel(Configuracoes.LOG_LEVEL)
        formatador = logging.Formatter(fmt=FORMATO_LOG, datefmt=FORMATO_DATA)
        destino = Configuracoes.LOG_FILE if caminho_arquivo is None else caminho_arquivo

        for handler in cls._criar_handlers(destino):
            handler.setFormatter(formatador)
            instancia.addHandler(handler)

        instancia.propagate = False
        return instancia


logger = FabricaLogger.configurar()
