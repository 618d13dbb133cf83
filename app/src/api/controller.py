"""Controlador de seleção da API.

Responsabilidades:
- Definir rotas de processamento da seleção
- Resolver dependências do serviço de seleção
- Traduzir erros em respostas HTTP
"""

from typing import Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.application.selection_service import ServicoSelecao
from src.domain.candidate import CapacidadeCotas
from src.infrastructure.data.data_loader import CarregadorInscricoes


class RequisicaoSelecao(BaseModel):
    """Linhas de inscrição enviadas pelo cliente."""

    linhas: List[Dict[str, Union[str, int, float, None]]] = Field(
        ..., description="Registros coluna -> valor da planilha (texto ou número)"
    )
    capacidade: Optional[CapacidadeCotas] = Field(None, description="Vagas aplicadas a todos os cursos")


def obter_carregador_inscricoes():
    """Dependência para obter o carregador de planilhas da pasta de dados."""
    return CarregadorInscricoes()


class ControladorSelecao:
    """Controlador de seleção.

    Responsabilidades:
    - Registrar rotas de seleção
    - Expor processamento de linhas enviadas e de planilhas da pasta de dados
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        """Registra as rotas de seleção."""
        self.roteador.add_api_route(
            path="/selection/process",
            endpoint=self._processar,
            methods=["POST"],
            response_model=dict,
            summary="Processa linhas de inscrição enviadas no corpo",
        )

        self.roteador.add_api_route(
            path="/selection/run",
            endpoint=self._processar_pasta,
            methods=["POST"],
            response_model=dict,
            summary="Processa as planilhas da pasta de dados",
        )

        self.roteador.add_api_route(
            path="/selection/capacity",
            endpoint=self._obter_capacidade,
            methods=["GET"],
            response_model=dict,
        )

    @staticmethod
    async def _processar(requisicao: RequisicaoSelecao):
        """Processa as linhas enviadas.

        Parâmetros:
        - requisicao (RequisicaoSelecao): linhas e vagas opcionais

        Retorno:
        - dict: resumo do processamento

        Exceções:
        - HTTPException: dados inválidos
        """
        try:
            servico = ServicoSelecao(capacidade=requisicao.capacidade)
            return servico.processar_linhas(requisicao.linhas).model_dump(mode="json")
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))

    @staticmethod
    async def _processar_pasta(carregador: CarregadorInscricoes = Depends(obter_carregador_inscricoes)):
        """Processa as planilhas encontradas na pasta de dados.

        Retorno:
        - dict: resumo do processamento

        Exceções:
        - HTTPException: planilha ausente, inválida ou ilegível
        """
        try:
            linhas = carregador.carregar_linhas()
            return ServicoSelecao().processar_linhas(linhas).model_dump(mode="json")
        except (ValueError, TypeError, KeyError, FileNotFoundError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except RuntimeError as erro:
            raise HTTPException(status_code=503, detail=str(erro))

    @staticmethod
    async def _obter_capacidade():
        """Retorna a tabela de vagas padrão por curso."""
        capacidade = CapacidadeCotas()
        return {"capacidade": capacidade.model_dump(), "total": capacidade.total}
