"""Montagem das listas de espera (classificáveis).

Responsabilidades:
- Incluir cada candidato não alocado em todas as listas em que é elegível
- Manter contadores de posição independentes por lista
"""

from typing import Dict, List, Sequence

from src.domain.candidate import (
    CATEGORIAS_ORDENADAS,
    Candidato,
    CategoriaCota,
    EntradaLista,
    RedeEnsino,
    StatusCandidato,
)


class ConstrutorListaEspera:
    """Monta as cinco listas de espera de um curso.

    O mesmo candidato pode aparecer em até três listas, com posições diferentes
    em cada uma. Não há deduplicação: cada lista atende a uma convocação própria.
    """

    @staticmethod
    def listas_do_candidato(candidato: Candidato) -> List[CategoriaCota]:
        """Retorna as listas de espera que recebem o candidato."""
        if candidato.rede_ensino == RedeEnsino.PUBLICA:
            listas = [CategoriaCota.PUBLICA_AMPLA]
            if candidato.residente_centro:
                listas.append(CategoriaCota.PUBLICA_CENTRO)
        else:
            listas = [CategoriaCota.PRIVADA_AMPLA]
            if candidato.residente_centro:
                listas.append(CategoriaCota.PRIVADA_CENTRO)

        if candidato.pcd:
            listas.append(CategoriaCota.PCD)
        return listas

    def construir(self, nao_alocados: Sequence[Candidato]) -> Dict[CategoriaCota, List[EntradaLista]]:
        """Constrói as listas de espera na ordem global de classificação.

        Parâmetros:
        - nao_alocados (Sequence[Candidato]): candidatos restantes, já ordenados

        Retorno:
        - dict[CategoriaCota, list[EntradaLista]]: listas de espera por categoria
        """
        listas: Dict[CategoriaCota, List[EntradaLista]] = {c: [] for c in CATEGORIAS_ORDENADAS}

        for candidato in nao_alocados:
            candidato.status = StatusCandidato.CLASSIFICAVEL
            for categoria in self.listas_do_candidato(candidato):
                lista = listas[categoria]
                lista.append(EntradaLista(candidato=candidato, posicao=len(lista) + 1))

        return listas
