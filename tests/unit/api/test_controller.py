"""Testes do controlador de seleção."""

from unittest.mock import Mock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.controller import ControladorSelecao, obter_carregador_inscricoes


def criar_cliente(carregador=None):
    aplicacao = FastAPI()
    controlador = ControladorSelecao()
    if carregador is not None:
        aplicacao.dependency_overrides[obter_carregador_inscricoes] = lambda: carregador
    aplicacao.include_router(controlador.roteador, prefix="/api/v1")
    return TestClient(aplicacao)


def test_processar_linhas_sucesso(fabrica_linha):
    cliente = criar_cliente()
    linhas = [fabrica_linha(nome="Ana", inscricao="1"), fabrica_linha(nome="Bruno", inscricao="2", nota="6")]

    resposta = cliente.post("/api/v1/selection/process", json={"linhas": linhas})

    assert resposta.status_code == 200
    corpo = resposta.json()
    assert corpo["total_processado"] == 2
    ampla = corpo["resultados"][0]["classificados"]["PUBLICA_AMPLA"]
    assert [e["candidato"]["nome"] for e in ampla] == ["ANA", "BRUNO"]
    assert [e["posicao"] for e in ampla] == [1, 2]


def test_processar_linhas_com_capacidade(fabrica_linha):
    cliente = criar_cliente()
    capacidade = {"pcd": 0, "publica_centro": 0, "publica_ampla": 1, "privada_centro": 0, "privada_ampla": 0}
    linhas = [fabrica_linha(nome="Ana", inscricao="1"), fabrica_linha(nome="Bruno", inscricao="2", nota="6")]

    resposta = cliente.post("/api/v1/selection/process", json={"linhas": linhas, "capacidade": capacidade})

    resultado = resposta.json()["resultados"][0]
    assert len(resultado["classificados"]["PUBLICA_AMPLA"]) == 1
    assert resultado["classificaveis"]["PUBLICA_AMPLA"][0]["candidato"]["nome"] == "BRUNO"


def test_processar_capacidade_negativa_invalida(fabrica_linha):
    cliente = criar_cliente()

    resposta = cliente.post(
        "/api/v1/selection/process",
        json={"linhas": [fabrica_linha()], "capacidade": {"pcd": -1}},
    )

    assert resposta.status_code == 422


def test_processar_pasta_sucesso(fabrica_linha):
    carregador = Mock()
    carregador.carregar_linhas.return_value = [fabrica_linha()]

    resposta = criar_cliente(carregador).post("/api/v1/selection/run")

    assert resposta.status_code == 200
    assert resposta.json()["total_processado"] == 1


def test_processar_pasta_sem_arquivos():
    carregador = Mock()
    carregador.carregar_linhas.side_effect = FileNotFoundError("sem planilhas")

    resposta = criar_cliente(carregador).post("/api/v1/selection/run")

    assert resposta.status_code == 400
    assert "sem planilhas" in resposta.json()["detail"]


def test_processar_pasta_erro_de_leitura():
    carregador = Mock()
    carregador.carregar_linhas.side_effect = RuntimeError("boom")

    resposta = criar_cliente(carregador).post("/api/v1/selection/run")

    assert resposta.status_code == 503


def test_obter_capacidade_padrao():
    resposta = criar_cliente().get("/api/v1/selection/capacity")

    assert resposta.status_code == 200
    corpo = resposta.json()
    assert set(corpo["capacidade"]) == {"pcd", "publica_centro", "publica_ampla", "privada_centro", "privada_ampla"}
    assert corpo["total"] == sum(corpo["capacidade"].values())


def test_processar_linhas_com_notas_numericas(fabrica_linha):
    cliente = criar_cliente()
    linha = fabrica_linha(nome="Ana", inscricao=1)
    linha.update({chave: 9 for chave in linha if " - " in chave})
    linha["PORTUGUÊS - 6º ANO"] = 8.5
    linha["MATEMÁTICA - 6º ANO"] = None

    resposta = cliente.post("/api/v1/selection/process", json={"linhas": [linha]})

    assert resposta.status_code == 200
    candidato = resposta.json()["resultados"][0]["classificados"]["PUBLICA_AMPLA"][0]["candidato"]
    assert candidato["numero_inscricao"] == "1"
    assert 8.5 < candidato["nota_final"] <= 9.0
