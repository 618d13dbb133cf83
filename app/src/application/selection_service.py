"""Serviço de seleção de candidatos.

Responsabilidades:
- Filtrar linhas sem nome ou número de inscrição
- Construir candidatos e agrupá-los por curso
- Executar alocação e lista de espera de cada curso
"""

from typing import Dict, List, Mapping, Optional, Sequence

from src.application.candidate_builder import ConstrutorCandidatos
from src.application.seat_allocator import AlocadorVagas
from src.application.waitlist_builder import ConstrutorListaEspera
from src.config.settings import Configuracoes
from src.domain.candidate import Candidato, CapacidadeCotas, ResultadoCurso, ResumoProcessamento
from src.util.logger import logger
from src.util.text_normalizer import normalizar_texto, obter_valor

class ServicoSelecao:
    """Orquestra a seleção de todos os cursos.

    Responsabilidades:
    - Resolver a tabela de vagas de cada curso
    - Processar cursos de forma independente
    - Consolidar o resumo do processamento
    """

    def __init__(self, capacidade: Optional[CapacidadeCotas] = None):
        """Inicializa o serviço.

        Parâmetros:
        - capacidade (CapacidadeCotas | None): vagas aplicadas a todos os cursos;
          quando None, usa a configuração por curso ou o padrão do Anexo I
        """
        self.capacidade = capacidade
        self.construtor = ConstrutorCandidatos()
        self.construtor_espera = ConstrutorListaEspera()

    def processar_linhas(self, linhas: Sequence[Mapping[str, object]]) -> ResumoProcessamento:
        """Processa as linhas brutas de inscrição.

        Parâmetros:
        - linhas (Sequence[Mapping]): registros coluna -> texto

        Retorno:
        - ResumoProcessamento: total processado e resultado por curso
        """
        validas = self.filtrar_linhas_validas(linhas)
        candidatos = [self.construtor.construir(linha, indice) for indice, linha in enumerate(validas)]
        logger.info(f"{len(candidatos)} candidato(s) construído(s) a partir de {len(linhas)} linha(s).")

        resultados = [
            self.processar_curso(curso, candidatos_curso)
            for curso, candidatos_curso in self._agrupar_por_curso(candidatos).items()
        ]
        return ResumoProcessamento(total_processado=len(candidatos), resultados=resultados)

    def processar_curso(
        self,
        curso: str,
        candidatos: Sequence[Candidato],
        capacidade: Optional[CapacidadeCotas] = None,
    ) -> ResultadoCurso:
        """Executa alocação e lista de espera para um curso.

        Parâmetros:
        - curso (str): nome do curso
        - candidatos (Sequence[Candidato]): candidatos do curso
        - capacidade (CapacidadeCotas | None): vagas do curso

        Retorno:
        - ResultadoCurso: classificados e classificáveis do curso
        """
        capacidade = capacidade or self.obter_capacidade(curso)
        alocacao = AlocadorVagas(capacidade).alocar(candidatos)
        classificaveis = self.construtor_espera.construir(alocacao.nao_alocados)

        resultado = ResultadoCurso(
            curso=curso,
            capacidade=capacidade,
            classificados=alocacao.classificados,
            classificaveis=classificaveis,
            vagas_revertidas=alocacao.vagas_revertidas,
        )
        logger.info(
            f"Curso {curso}: {len(candidatos)} candidato(s), {resultado.total_classificados} classificado(s), "
            f"{len(alocacao.nao_alocados)} classificável(is), {alocacao.vagas_revertidas} vaga(s) revertida(s)."
        )
        return resultado

    def obter_capacidade(self, curso: str) -> CapacidadeCotas:
        """Retorna as vagas do curso: fixas do serviço, configuradas por curso ou padrão.

        Exceções:
        - ValueError: vagas configuradas fora da faixa permitida
        """
        if self.capacidade is not None:
            return self.capacidade

        configuradas = Configuracoes.CAPACIDADE_POR_CURSO
        if not isinstance(configuradas, dict):
            logger.warning("CAPACIDADE_POR_CURSO não é um objeto JSON; usando vagas padrão.")
            return CapacidadeCotas()

        chave = normalizar_texto(curso)
        for nome, vagas in configuradas.items():
            if normalizar_texto(nome) == chave:
                return self._montar_capacidade(nome, vagas)
        return CapacidadeCotas()

    @staticmethod
    def _montar_capacidade(curso: str, vagas: object) -> CapacidadeCotas:
        if not isinstance(vagas, dict):
            logger.warning(f"Vagas configuradas para '{curso}' não são um objeto JSON; usando vagas padrão.")
            return CapacidadeCotas()

        campos = set(CapacidadeCotas.model_fields)
        normalizadas = {str(categoria).strip().lower(): quantidade for categoria, quantidade in vagas.items()}
        desconhecidas = sorted(set(normalizadas) - campos)
        if desconhecidas:
            logger.warning(f"Categorias desconhecidas em CAPACIDADE_POR_CURSO para '{curso}': {desconhecidas}.")
        return CapacidadeCotas(**{campo: normalizadas[campo] for campo in campos if campo in normalizadas})

    @staticmethod
    def filtrar_linhas_validas(linhas: Sequence[Mapping[str, object]]) -> List[Mapping[str, object]]:
        """Mantém apenas linhas com nome, número de inscrição e curso preenchidos."""
        validas = []
        sem_curso = 0
        for linha in linhas:
            nome = obter_valor(linha, Configuracoes.COLUNAS_NOME).strip()
            inscricao = obter_valor(linha, Configuracoes.COLUNAS_INSCRICAO).replace('"', "").strip()
            if not (nome and inscricao):
                continue
            if not obter_valor(linha, Configuracoes.COLUNAS_CURSO).strip():
                sem_curso += 1
                continue
            validas.append(linha)

        if sem_curso:
            logger.warning(f"{sem_curso} linha(s) descartada(s) sem curso informado.")
        descartadas = len(linhas) - len(validas) - sem_curso
        if descartadas:
            logger.warning(f"{descartadas} linha(s) descartada(s) sem nome ou número de inscrição.")
        return validas

    @staticmethod
    def _agrupar_por_curso(candidatos: Sequence[Candidato]) -> Dict[str, List[Candidato]]:
        grupos: Dict[str, List[Candidato]] = {curso: [] for curso in Configuracoes.CURSOS}
        for candidato in candidatos:
            if candidato.curso not in grupos:
                logger.warning(f"Curso não reconhecido '{candidato.curso}' processado separadamente.")
                grupos[candidato.curso] = []
            grupos[candidato.curso].append(candidato)
        return grupos
