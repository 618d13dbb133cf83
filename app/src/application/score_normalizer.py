"""Normalização de notas e cálculo de médias.

Responsabilidades:
- Converter notas textuais em valores na escala 0-10
- Registrar avisos de notas ajustadas ou ignoradas
- Calcular médias anuais, médias de desempate e nota final
"""

import re
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.config.settings import Configuracoes
from src.util.text_normalizer import obter_valor

_PADRAO_NUMERO = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class NotaNormalizada(BaseModel):
    """Nota já convertida para a escala 0-10."""

    model_config = ConfigDict(frozen=True)

    valor: float = Field(0.0, ge=0, le=10)
    aviso: Optional[str] = None
    em_branco: bool = False


class MediasCandidato(BaseModel):
    """Médias calculadas a partir das notas de um candidato."""

    media_6ano: float = 0.0
    media_7ano: float = 0.0
    media_8ano: float = 0.0
    media_9ano: float = 0.0
    possui_notas_6ano: bool = False
    possui_notas_7ano: bool = False
    possui_notas_8ano: bool = False
    possui_notas_9ano: bool = False
    media_portugues: float = 0.0
    media_matematica: float = 0.0
    nota_final: float = 0.0
    avisos: List[str] = Field(default_factory=list)


def _formatar_numero(numero: float) -> str:
    return f"{numero:g}"


def _media(valores: List[float]) -> float:
    if not valores:
        return 0.0
    return min(Configuracoes.NOTA_MAXIMA, sum(valores) / len(valores))


class NormalizadorNotas:
    """Calcula as médias de um candidato a partir da linha bruta da planilha.

    Responsabilidades:
    - Ler as colunas de notas de cada matéria e período
    - Excluir notas em branco das médias
    - Excluir da nota final os anos sem nenhuma nota
    """

    @staticmethod
    def normalizar_nota(texto) -> NotaNormalizada:
        """Converte o texto de uma nota para a escala 0-10.

        Regras:
        - vazio ou não numérico: 0, em branco, sem aviso
        - entre 10 e 100: dividido por 10 (escala 0-100), com aviso
        - acima de 100 ou negativo: ignorado, com aviso
        - entre 0 e 10: mantido

        Parâmetros:
        - texto (str | None): nota como veio da planilha

        Retorno:
        - NotaNormalizada: valor, aviso e indicador de nota em branco
        """
        if texto is None:
            return NotaNormalizada(em_branco=True)

        limpo = str(texto).replace('"', "").replace(",", ".", 1).strip()
        correspondencia = _PADRAO_NUMERO.match(limpo)
        if not correspondencia:
            return NotaNormalizada(em_branco=True)

        numero = float(correspondencia.group())
        if numero > Configuracoes.NOTA_MAXIMA:
            if numero <= Configuracoes.NOTA_MAXIMA_ESCALA_CEM:
                ajustado = numero / 10
                return NotaNormalizada(
                    valor=ajustado,
                    aviso=f"Nota {_formatar_numero(numero)} ajustada para {_formatar_numero(ajustado)}",
                )
            return NotaNormalizada(
                em_branco=True, aviso=f"Nota {_formatar_numero(numero)} ignorada (>100)"
            )
        if numero < 0:
            return NotaNormalizada(
                em_branco=True, aviso=f"Nota {_formatar_numero(numero)} ignorada (<0)"
            )

        return NotaNormalizada(valor=numero)

    def calcular_medias(self, linha: Mapping[str, object]) -> MediasCandidato:
        """Calcula médias anuais, de desempate e nota final de uma linha.

        Parâmetros:
        - linha (Mapping): registro bruto com as colunas de notas

        Retorno:
        - MediasCandidato: médias e avisos gerados na leitura das notas
        """
        avisos: List[str] = []
        notas_por_ano: Dict[str, List[float]] = {rotulo: [] for rotulo in Configuracoes.PERIODOS_ANUAIS.values()}
        desempate: Dict[str, List[float]] = {
            Configuracoes.MATERIA_PORTUGUES: [],
            Configuracoes.MATERIA_MATEMATICA: [],
        }

        for materia in Configuracoes.MATERIAS:
            for periodo, rotulo in Configuracoes.PERIODOS_ANUAIS.items():
                nota = self._ler_nota(linha, materia, periodo, rotulo, avisos)
                if nota.em_branco:
                    continue
                notas_por_ano[rotulo].append(nota.valor)
                if materia in desempate:
                    desempate[materia].append(nota.valor)

        medias_materias_9ano: List[float] = []
        for materia in Configuracoes.MATERIAS:
            bimestres = []
            for periodo, rotulo in Configuracoes.BIMESTRES_9ANO.items():
                nota = self._ler_nota(linha, materia, periodo, rotulo, avisos)
                if not nota.em_branco:
                    bimestres.append(nota.valor)
            if not bimestres:
                continue
            media_materia = _media(bimestres)
            medias_materias_9ano.append(media_materia)
            if materia in desempate:
                desempate[materia].append(media_materia)

        anos = [
            notas_por_ano["6º"],
            notas_por_ano["7º"],
            notas_por_ano["8º"],
            medias_materias_9ano,
        ]
        medias_anos = [_media(notas) for notas in anos]
        medias_validas = [media for media, notas in zip(medias_anos, anos) if notas]

        return MediasCandidato(
            media_6ano=medias_anos[0],
            media_7ano=medias_anos[1],
            media_8ano=medias_anos[2],
            media_9ano=medias_anos[3],
            possui_notas_6ano=bool(anos[0]),
            possui_notas_7ano=bool(anos[1]),
            possui_notas_8ano=bool(anos[2]),
            possui_notas_9ano=bool(anos[3]),
            media_portugues=self._media_desempate(desempate[Configuracoes.MATERIA_PORTUGUES]),
            media_matematica=self._media_desempate(desempate[Configuracoes.MATERIA_MATEMATICA]),
            nota_final=_media(medias_validas),
            avisos=avisos,
        )

    @staticmethod
    def _media_desempate(componentes: List[float]) -> float:
        # Divisor fixo, não a quantidade de componentes preenchidos.
        return min(Configuracoes.NOTA_MAXIMA, sum(componentes) / Configuracoes.DIVISOR_DESEMPATE)

    def _ler_nota(
        self,
        linha: Mapping[str, object],
        materia: str,
        periodo: str,
        rotulo: str,
        avisos: List[str],
    ) -> NotaNormalizada:
        nota = self.normalizar_nota(obter_valor(linha, [f"{materia} - {periodo}"]))
        if nota.aviso:
            avisos.append(f"{materia} {rotulo}: {nota.aviso}")
        return nota
