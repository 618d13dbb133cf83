"""Alocação de vagas por cota de um curso.

Responsabilidades:
- Ordenar candidatos pelos critérios de classificação e desempate
- Executar as fases de alocação (PCD, região, ampla, remanejamento)
- Reverter vagas não preenchidas para a ampla concorrência pública
"""

from functools import cmp_to_key
from typing import Dict, List, Sequence, Set, Tuple

from pydantic import BaseModel, Field

from src.config.settings import Configuracoes
from src.domain.candidate import (
    CATEGORIAS_ORDENADAS,
    CATEGORIAS_RESERVADAS,
    Candidato,
    CapacidadeCotas,
    CategoriaCota,
    EntradaLista,
    RedeEnsino,
    StatusCandidato,
)
from src.util.logger import logger

ROTULO_REMANEJO = f"{CategoriaCota.PUBLICA_AMPLA.rotulo} (REMANEJO)"

CATEGORIAS_REGIAO = {
    RedeEnsino.PUBLICA: CategoriaCota.PUBLICA_CENTRO,
    RedeEnsino.PRIVADA: CategoriaCota.PRIVADA_CENTRO,
}
CATEGORIAS_AMPLA = {
    RedeEnsino.PUBLICA: CategoriaCota.PUBLICA_AMPLA,
    RedeEnsino.PRIVADA: CategoriaCota.PRIVADA_AMPLA,
}


class ResultadoAlocacao(BaseModel):
    """Saída da alocação de um curso antes da montagem da lista de espera."""

    ordenados: List[Candidato]
    classificados: Dict[CategoriaCota, List[EntradaLista]]
    nao_alocados: List[Candidato]
    vagas_revertidas: int = Field(0, ge=0)


def _comparar(a: Candidato, b: Candidato) -> int:
    epsilon = Configuracoes.EPSILON_DESEMPATE

    if abs(b.nota_final - a.nota_final) > epsilon:
        return -1 if a.nota_final > b.nota_final else 1

    if a.data_nascimento != b.data_nascimento:
        # Sem data de nascimento fica atrás de qualquer data conhecida.
        if a.data_nascimento is None:
            return 1
        if b.data_nascimento is None:
            return -1
        return -1 if a.data_nascimento < b.data_nascimento else 1

    if abs(b.media_portugues - a.media_portugues) > epsilon:
        return -1 if a.media_portugues > b.media_portugues else 1

    if a.media_matematica != b.media_matematica:
        return -1 if a.media_matematica > b.media_matematica else 1
    return 0


def ordenar_candidatos(candidatos: Sequence[Candidato]) -> List[Candidato]:
    """Ordena por nota final, idade (mais velho primeiro), português e matemática.

    Empates completos preservam a ordem de entrada.
    """
    return sorted(candidatos, key=cmp_to_key(_comparar))


class AlocadorVagas:
    """Executa as fases de alocação de um curso sobre uma cópia das vagas.

    Responsabilidades:
    - Nunca reduzir uma categoria abaixo de zero
    - Não desfazer alocações de fases anteriores
    - Trabalhar sobre cópias dos candidatos para permitir reexecução
    """

    def __init__(self, capacidade: CapacidadeCotas):
        """Inicializa o alocador com a tabela de vagas do curso.

        Parâmetros:
        - capacidade (CapacidadeCotas): vagas originais por categoria
        """
        self.capacidade = capacidade

    def alocar(self, candidatos: Sequence[Candidato]) -> ResultadoAlocacao:
        """Aloca os candidatos de um curso.

        Parâmetros:
        - candidatos (Sequence[Candidato]): candidatos já pontuados e classificados

        Retorno:
        - ResultadoAlocacao: listas de classificados e candidatos não alocados
        """
        ordenados = ordenar_candidatos([c.model_copy(deep=True) for c in candidatos])
        for candidato in ordenados:
            candidato.status = StatusCandidato.NAO_ALOCADO
            candidato.categoria_selecionada = None
            candidato.alocado_em = None
            candidato.posicao = None
            candidato.concorrencia_simultanea = False

        vagas = self.capacidade.como_dicionario()
        listas: Dict[CategoriaCota, List[EntradaLista]] = {c: [] for c in CATEGORIAS_ORDENADAS}
        alocados: Set[str] = set()

        self._fase_pcd(ordenados, vagas, listas, alocados)
        self._fase_regiao(ordenados, vagas, listas, alocados)
        self._fase_ampla(ordenados, vagas, listas, alocados)
        vagas, revertidas = self.reverter_vagas(vagas)
        self._fase_remanejamento(ordenados, vagas, listas, alocados)

        return ResultadoAlocacao(
            ordenados=ordenados,
            classificados=listas,
            nao_alocados=[c for c in ordenados if c.id not in alocados],
            vagas_revertidas=revertidas,
        )

    @staticmethod
    def reverter_vagas(vagas: Dict[CategoriaCota, int]) -> Tuple[Dict[CategoriaCota, int], int]:
        """Move as vagas restantes de todas as outras categorias para a pública ampla.

        Parâmetros:
        - vagas (dict): vagas restantes por categoria

        Retorno:
        - tuple[dict, int]: novas vagas restantes e total revertido
        """
        novas = dict(vagas)
        revertidas = 0
        for categoria in CATEGORIAS_RESERVADAS + (CategoriaCota.PRIVADA_AMPLA,):
            revertidas += novas[categoria]
            novas[categoria] = 0
        novas[CategoriaCota.PUBLICA_AMPLA] += revertidas

        if revertidas:
            destino = CategoriaCota.PUBLICA_AMPLA.rotulo
            logger.info(f"{revertidas} vaga(s) não preenchida(s) revertida(s) para {destino}.")
        return novas, revertidas

    @staticmethod
    def _alocar(
        candidato: Candidato,
        categoria: CategoriaCota,
        rotulo: str,
        vagas: Dict[CategoriaCota, int],
        listas: Dict[CategoriaCota, List[EntradaLista]],
        alocados: Set[str],
    ) -> None:
        lista = listas[categoria]
        candidato.status = StatusCandidato.CLASSIFICADO
        candidato.categoria_selecionada = categoria
        candidato.alocado_em = rotulo
        candidato.posicao = len(lista) + 1
        candidato.concorrencia_simultanea = categoria in (
            CategoriaCota.PUBLICA_AMPLA,
            CategoriaCota.PRIVADA_AMPLA,
        ) and any(c in CATEGORIAS_RESERVADAS for c in candidato.elegibilidades)
        lista.append(EntradaLista(candidato=candidato, posicao=candidato.posicao))
        alocados.add(candidato.id)
        vagas[categoria] -= 1

    def _fase_pcd(
        self,
        ordenados: List[Candidato],
        vagas: Dict[CategoriaCota, int],
        listas: Dict[CategoriaCota, List[EntradaLista]],
        alocados: Set[str],
    ) -> None:
        for candidato in ordenados:
            if candidato.id in alocados:
                continue
            if candidato.pcd and vagas[CategoriaCota.PCD] > 0:
                self._alocar(candidato, CategoriaCota.PCD, CategoriaCota.PCD.rotulo, vagas, listas, alocados)

    def _fase_regiao(
        self,
        ordenados: List[Candidato],
        vagas: Dict[CategoriaCota, int],
        listas: Dict[CategoriaCota, List[EntradaLista]],
        alocados: Set[str],
    ) -> None:
        for candidato in ordenados:
            if candidato.id in alocados or not candidato.residente_centro:
                continue
            categoria = CATEGORIAS_REGIAO[candidato.rede_ensino]
            if vagas[categoria] > 0:
                self._alocar(candidato, categoria, categoria.rotulo, vagas, listas, alocados)

    def _fase_ampla(
        self,
        ordenados: List[Candidato],
        vagas: Dict[CategoriaCota, int],
        listas: Dict[CategoriaCota, List[EntradaLista]],
        alocados: Set[str],
    ) -> None:
        for candidato in ordenados:
            if candidato.id in alocados:
                continue
            categoria = CATEGORIAS_AMPLA[candidato.rede_ensino]
            if vagas[categoria] > 0:
                self._alocar(candidato, categoria, categoria.rotulo, vagas, listas, alocados)

    def _fase_remanejamento(
        self,
        ordenados: List[Candidato],
        vagas: Dict[CategoriaCota, int],
        listas: Dict[CategoriaCota, List[EntradaLista]],
        alocados: Set[str],
    ) -> None:
        # Apenas a rede pública concorre às vagas revertidas.
        for candidato in ordenados:
            if candidato.id in alocados or candidato.rede_ensino != RedeEnsino.PUBLICA:
                continue
            if vagas[CategoriaCota.PUBLICA_AMPLA] > 0:
                self._alocar(candidato, CategoriaCota.PUBLICA_AMPLA, ROTULO_REMANEJO, vagas, listas, alocados)
