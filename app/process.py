"""Ponto de entrada do processamento em lote da seleção.

Responsabilidades:
- Carregar as planilhas de inscrição
- Executar a seleção de todos os cursos
- Gravar o resumo em JSON e finalizar com código de saída
"""

import os

from src.application.selection_service import ServicoSelecao
from src.config.settings import Configuracoes
from src.infrastructure.data.data_loader import CarregadorInscricoes
from src.util.logger import logger


if __name__ == "__main__":
    logger.info("Iniciando processamento da seleção...")

    try:
        carregador = CarregadorInscricoes()
        linhas = carregador.carregar_linhas()

        resumo = ServicoSelecao().processar_linhas(linhas)

        os.makedirs(os.path.dirname(Configuracoes.OUTPUT_PATH), exist_ok=True)
        with open(Configuracoes.OUTPUT_PATH, "w", encoding="utf-8") as arquivo:
            arquivo.write(resumo.model_dump_json(indent=2))

        logger.info(f"Resultado gravado em {Configuracoes.OUTPUT_PATH}. Processo concluído com sucesso!")

    except Exception as erro:
        logger.exception(f"Ocorreu um erro fatal durante o processamento da seleção: {str(erro)}")
        exit(1)
