"""Ponto de entrada da API FastAPI.

Responsabilidades:
- Configurar a aplicação FastAPI
- Registrar rotas e eventos
"""

import os

import uvicorn
from fastapi import FastAPI

from src.api.controller import ControladorSelecao
from src.config.settings import Configuracoes
from src.util.logger import logger

app = FastAPI(
    title="Seleção EEEP",
    description="API de classificação de candidatos por cotas, com listas de classificados e classificáveis",
    version="1.0.0",
)


@app.on_event("startup")
async def evento_inicializacao():
    """Registra a inicialização e a pasta de dados em uso."""
    logger.info(f"Inicializando API de seleção. Pasta de dados: {Configuracoes.DATA_DIR}")


controlador_selecao = ControladorSelecao()
app.include_router(controlador_selecao.roteador, prefix="/api/v1", tags=["Seleção"])


@app.get("/health", tags=["Infraestrutura"])
def checar_saude():
    """Endpoint de health check.

    Retorno:
    - dict: status da aplicação
    """
    return {"status": "ok"}


if __name__ == "__main__":
    porta = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=porta)
