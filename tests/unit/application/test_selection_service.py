"""Testes do serviço de seleção."""

import pytest

from src.application.selection_service import ServicoSelecao
from src.config.settings import Configuracoes
from src.domain.candidate import CapacidadeCotas, CategoriaCota, StatusCandidato


def test_filtra_linhas_sem_nome_ou_inscricao(fabrica_linha):
    linhas = [
        fabrica_linha(nome="Ana", inscricao="1"),
        fabrica_linha(nome="", inscricao="2"),
        fabrica_linha(nome="Bruno", inscricao="  "),
        fabrica_linha(nome="Carla", inscricao="3"),
    ]

    resumo = ServicoSelecao().processar_linhas(linhas)

    assert resumo.total_processado == 2


def test_resultados_na_ordem_dos_cursos_configurados(fabrica_linha):
    linhas = [
        fabrica_linha(nome="Ana", inscricao="1", curso="comercio"),
        fabrica_linha(nome="Bruno", inscricao="2", curso="Enfermagem"),
    ]

    resumo = ServicoSelecao().processar_linhas(linhas)

    assert [r.curso for r in resumo.resultados] == Configuracoes.CURSOS + ["Enfermagem"]
    comercio = resumo.resultados[Configuracoes.CURSOS.index("COMÉRCIO")]
    assert comercio.classificados[CategoriaCota.PUBLICA_AMPLA][0].candidato.nome == "ANA"


def test_processamento_ponta_a_ponta(fabrica_linha):
    linhas = [
        fabrica_linha(nome="Ana", inscricao="1", nota="9", bairro="Centro"),
        fabrica_linha(nome="Bruno", inscricao="2", nota="8", cota="Pessoa com Deficiência"),
        fabrica_linha(nome="Carla", inscricao="3", nota="7", escola="Privada"),
        fabrica_linha(nome="Davi", inscricao="4", nota="6"),
    ]
    capacidade = CapacidadeCotas(pcd=1, publica_centro=1, publica_ampla=0, privada_centro=0, privada_ampla=0)

    resumo = ServicoSelecao(capacidade=capacidade).processar_linhas(linhas)
    resultado = resumo.resultados[0]

    assert resultado.curso == "ADMINISTRAÇÃO"
    assert [e.candidato.nome for e in resultado.classificados[CategoriaCota.PCD]] == ["BRUNO"]
    assert [e.candidato.nome for e in resultado.classificados[CategoriaCota.PUBLICA_CENTRO]] == ["ANA"]
    # Sem vagas sobrando não há remanejamento; Davi e Carla aguardam.
    assert resultado.vagas_revertidas == 0
    assert [e.candidato.nome for e in resultado.classificaveis[CategoriaCota.PUBLICA_AMPLA]] == ["DAVI"]
    assert [e.candidato.nome for e in resultado.classificaveis[CategoriaCota.PRIVADA_AMPLA]] == ["CARLA"]
    assert all(c.status == StatusCandidato.CLASSIFICAVEL for c in resultado.candidatos_em_espera())


def test_vagas_revertidas_preenchidas_pela_rede_publica(fabrica_linha):
    linhas = [fabrica_linha(nome=f"Aluno {i}", inscricao=str(i), nota=str(9 - i * 0.5)) for i in range(3)]
    capacidade = CapacidadeCotas(pcd=1, publica_centro=1, publica_ampla=0, privada_centro=0, privada_ampla=1)

    resultado = ServicoSelecao(capacidade=capacidade).processar_linhas(linhas).resultados[0]

    assert resultado.vagas_revertidas == 3
    assert len(resultado.classificados[CategoriaCota.PUBLICA_AMPLA]) == 3
    assert resultado.total_classificados <= capacidade.total


def test_capacidade_configurada_por_curso(monkeypatch):
    monkeypatch.setattr(
        Configuracoes,
        "CAPACIDADE_POR_CURSO",
        {"Redes de Computadores": {"pcd": 1, "publica_ampla": 30}},
    )

    capacidade = ServicoSelecao().obter_capacidade("REDES DE COMPUTADORES")

    assert capacidade.pcd == 1
    assert capacidade.publica_ampla == 30
    assert capacidade.privada_ampla == Configuracoes.VAGAS_PRIVADA_AMPLA
    assert ServicoSelecao().obter_capacidade("COMÉRCIO") == CapacidadeCotas()


def test_capacidade_configurada_invalida(monkeypatch):
    monkeypatch.setattr(Configuracoes, "CAPACIDADE_POR_CURSO", {"COMÉRCIO": {"pcd": -1}})

    with pytest.raises(ValueError):
        ServicoSelecao().obter_capacidade("COMÉRCIO")


def test_nota_final_na_faixa_para_notas_malformadas(fabrica_linha):
    linhas = [
        fabrica_linha(nome="A", inscricao="1", nota="950"),
        fabrica_linha(nome="B", inscricao="2", nota="abc"),
        fabrica_linha(nome="C", inscricao="3", nota="75"),
    ]

    resumo = ServicoSelecao().processar_linhas(linhas)

    for resultado in resumo.resultados:
        for lista in list(resultado.classificados.values()) + list(resultado.classificaveis.values()):
            for entrada in lista:
                assert 0.0 <= entrada.candidato.nota_final <= 10.0
                assert entrada.posicao >= 1


def test_resumo_serializavel_em_json(fabrica_linha):
    resumo = ServicoSelecao().processar_linhas([fabrica_linha()])

    dados = resumo.model_dump(mode="json")

    assert dados["total_processado"] == 1
    primeira = dados["resultados"][0]["classificados"]["PUBLICA_AMPLA"][0]
    assert primeira["posicao"] == 1
    assert primeira["candidato"]["status"] == "CLASSIFICADO"
    assert primeira["candidato"]["elegibilidades"] == ["PUBLICA_AMPLA"]


def test_linha_sem_curso_descartada(fabrica_linha):
    linhas = [fabrica_linha(nome="Ana", inscricao="1"), fabrica_linha(nome="Bruno", inscricao="2", curso="  ")]

    resumo = ServicoSelecao().processar_linhas(linhas)

    assert resumo.total_processado == 1
    assert [r.curso for r in resumo.resultados] == Configuracoes.CURSOS
    nomes = [
        entrada.candidato.nome
        for resultado in resumo.resultados
        for lista in resultado.classificados.values()
        for entrada in lista
    ]
    assert nomes == ["ANA"]


def test_capacidade_configurada_aceita_categorias_em_maiusculas(monkeypatch):
    monkeypatch.setattr(Configuracoes, "CAPACIDADE_POR_CURSO", {"ADMINISTRAÇÃO": {"PCD": 1, " Publica_Ampla ": 20}})

    capacidade = ServicoSelecao().obter_capacidade("ADMINISTRAÇÃO")

    assert capacidade.pcd == 1
    assert capacidade.publica_ampla == 20


def test_capacidade_configurada_com_categoria_desconhecida(monkeypatch):
    monkeypatch.setattr(Configuracoes, "CAPACIDADE_POR_CURSO", {"COMÉRCIO": {"vagas_extras": 5, "pcd": 3}})
    avisos = []
    monkeypatch.setattr("src.application.selection_service.logger.warning", avisos.append)

    capacidade = ServicoSelecao().obter_capacidade("COMÉRCIO")

    assert capacidade.pcd == 3
    assert any("vagas_extras" in aviso for aviso in avisos)


@pytest.mark.parametrize(
    "configuracao",
    [["ADMINISTRAÇÃO", 10], {"ADMINISTRAÇÃO": [1, 2, 3]}, {"ADMINISTRAÇÃO": 45}],
)
def test_capacidade_configurada_fora_do_formato_usa_padrao(monkeypatch, configuracao):
    monkeypatch.setattr(Configuracoes, "CAPACIDADE_POR_CURSO", configuracao)
    avisos = []
    monkeypatch.setattr("src.application.selection_service.logger.warning", avisos.append)

    capacidade = ServicoSelecao().obter_capacidade("ADMINISTRAÇÃO")

    assert capacidade == CapacidadeCotas()
    assert len(avisos) == 1
