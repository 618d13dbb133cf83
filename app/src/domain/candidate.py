"""Modelos de domínio da seleção de candidatos.

Responsabilidades:
- Representar candidatos, cotas e redes de ensino
- Representar a tabela de vagas de um curso
- Representar listas de classificados e classificáveis por curso
"""

from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from src.config.settings import Configuracoes


class RedeEnsino(str, Enum):
    """Rede de ensino da escola de origem."""

    PUBLICA = "PÚBLICA"
    PRIVADA = "PRIVADA"


class CategoriaCota(str, Enum):
    """Categorias de concorrência de um curso."""

    PCD = "PCD"
    PUBLICA_CENTRO = "PUBLICA_CENTRO"
    PUBLICA_AMPLA = "PUBLICA_AMPLA"
    PRIVADA_CENTRO = "PRIVADA_CENTRO"
    PRIVADA_AMPLA = "PRIVADA_AMPLA"

    @property
    def rotulo(self) -> str:
        """Rótulo exibido para a categoria."""
        return ROTULOS_CATEGORIA[self]


ROTULOS_CATEGORIA = {
    CategoriaCota.PCD: "PCD",
    CategoriaCota.PUBLICA_CENTRO: "PÚBLICA - REGIÃO",
    CategoriaCota.PUBLICA_AMPLA: "PÚBLICA - AMPLA",
    CategoriaCota.PRIVADA_CENTRO: "PRIVADA - REGIÃO",
    CategoriaCota.PRIVADA_AMPLA: "PRIVADA - AMPLA",
}

CATEGORIAS_ORDENADAS: Tuple[CategoriaCota, ...] = (
    CategoriaCota.PCD,
    CategoriaCota.PUBLICA_CENTRO,
    CategoriaCota.PUBLICA_AMPLA,
    CategoriaCota.PRIVADA_CENTRO,
    CategoriaCota.PRIVADA_AMPLA,
)

CATEGORIAS_RESERVADAS = (
    CategoriaCota.PCD,
    CategoriaCota.PUBLICA_CENTRO,
    CategoriaCota.PRIVADA_CENTRO,
)


class StatusCandidato(str, Enum):
    """Situação do candidato ao final da alocação."""

    NAO_ALOCADO = "NAO_ALOCADO"
    CLASSIFICADO = "CLASSIFICADO"
    CLASSIFICAVEL = "CLASSIFICAVEL"


class Candidato(BaseModel):
    """Candidato inscrito em um curso.

    Responsabilidades:
    - Guardar identidade, origem e notas já normalizadas
    - Guardar elegibilidades calculadas na construção
    - Receber os campos da fase de alocação
    """

    id: str = Field(..., min_length=1)
    numero_inscricao: str = Field(..., min_length=1)
    nome: str = Field(..., min_length=1)
    carimbo_data_hora: str = ""
    data_nascimento: Optional[date] = None
    curso: str = ""
    municipio: str = ""
    bairro: str = ""
    rede_ensino: RedeEnsino = RedeEnsino.PUBLICA
    cota_declarada: str = ""
    pcd: bool = False
    residente_centro: bool = False

    media_6ano: float = Field(0.0, ge=0, le=10)
    media_7ano: float = Field(0.0, ge=0, le=10)
    media_8ano: float = Field(0.0, ge=0, le=10)
    media_9ano: float = Field(0.0, ge=0, le=10)
    possui_notas_6ano: bool = False
    possui_notas_7ano: bool = False
    possui_notas_8ano: bool = False
    possui_notas_9ano: bool = False
    media_portugues: float = Field(0.0, ge=0, le=10)
    media_matematica: float = Field(0.0, ge=0, le=10)
    nota_final: float = Field(0.0, ge=0, le=10)

    elegibilidades: Tuple[CategoriaCota, ...] = ()

    status: StatusCandidato = StatusCandidato.NAO_ALOCADO
    categoria_selecionada: Optional[CategoriaCota] = None
    alocado_em: Optional[str] = None
    posicao: Optional[int] = Field(None, ge=1)
    concorrencia_simultanea: bool = False

    avisos: List[str] = Field(default_factory=list)


class CapacidadeCotas(BaseModel):
    """Tabela de vagas de um curso por categoria."""

    model_config = ConfigDict(frozen=True)

    pcd: int = Field(default_factory=lambda: Configuracoes.VAGAS_PCD, ge=0)
    publica_centro: int = Field(default_factory=lambda: Configuracoes.VAGAS_PUBLICA_CENTRO, ge=0)
    publica_ampla: int = Field(default_factory=lambda: Configuracoes.VAGAS_PUBLICA_AMPLA, ge=0)
    privada_centro: int = Field(default_factory=lambda: Configuracoes.VAGAS_PRIVADA_CENTRO, ge=0)
    privada_ampla: int = Field(default_factory=lambda: Configuracoes.VAGAS_PRIVADA_AMPLA, ge=0)

    def como_dicionario(self) -> Dict[CategoriaCota, int]:
        """Retorna uma cópia mutável das vagas indexada por categoria."""
        return {categoria: getattr(self, categoria.value.lower()) for categoria in CATEGORIAS_ORDENADAS}

    @property
    def total(self) -> int:
        return sum(self.como_dicionario().values())


class EntradaLista(BaseModel):
    """Posição de um candidato em uma lista específica."""

    candidato: Candidato
    posicao: int = Field(..., ge=1)


def _listas_vazias() -> Dict[CategoriaCota, List[EntradaLista]]:
    return {categoria: [] for categoria in CATEGORIAS_ORDENADAS}


class ResultadoCurso(BaseModel):
    """Resultado da seleção de um curso.

    Responsabilidades:
    - Expor as cinco listas de classificados
    - Expor as cinco listas de classificáveis (lista de espera)
    - Registrar as vagas revertidas para a ampla concorrência pública
    """

    curso: str
    capacidade: CapacidadeCotas = Field(default_factory=CapacidadeCotas)
    classificados: Dict[CategoriaCota, List[EntradaLista]] = Field(default_factory=_listas_vazias)
    classificaveis: Dict[CategoriaCota, List[EntradaLista]] = Field(default_factory=_listas_vazias)
    vagas_revertidas: int = Field(0, ge=0)

    @property
    def total_classificados(self) -> int:
        return sum(len(lista) for lista in self.classificados.values())

    def candidatos_em_espera(self) -> List[Candidato]:
        """Retorna os candidatos em espera sem repetição, deduplicados por id."""
        vistos = set()
        unicos = []
        for categoria in CATEGORIAS_ORDENADAS:
            for entrada in self.classificaveis[categoria]:
                if entrada.candidato.id not in vistos:
                    vistos.add(entrada.candidato.id)
                    unicos.append(entrada.candidato)
        return unicos


class ResumoProcessamento(BaseModel):
    """Resumo agregado de uma execução da seleção."""

    total_processado: int = Field(0, ge=0)
    resultados: List[ResultadoCurso] = Field(default_factory=list)
