"""Classificação de elegibilidade para as cotas.

Responsabilidades:
- Inferir rede de ensino, residência e condição PCD a partir dos textos da inscrição
- Derivar o conjunto ordenado de categorias às quais o candidato concorre
"""

from typing import Tuple

from src.config.settings import Configuracoes
from src.domain.candidate import CategoriaCota, RedeEnsino
from src.util.text_normalizer import normalizar_texto


class ClassificadorElegibilidade:
    """Regras de concorrência simultânea entre cotas e ampla concorrência."""

    @staticmethod
    def classificar(rede: RedeEnsino, residente_centro: bool, pcd: bool) -> Tuple[CategoriaCota, ...]:
        """Retorna as categorias em que o candidato pode concorrer.

        Parâmetros:
        - rede (RedeEnsino): rede da escola de origem
        - residente_centro (bool): se reside no bairro da escola
        - pcd (bool): se declarou deficiência

        Retorno:
        - tuple[CategoriaCota, ...]: categorias elegíveis, ampla da rede primeiro
        """
        elegibilidades = []
        if rede == RedeEnsino.PUBLICA:
            elegibilidades.append(CategoriaCota.PUBLICA_AMPLA)
            if residente_centro:
                elegibilidades.append(CategoriaCota.PUBLICA_CENTRO)
        else:
            elegibilidades.append(CategoriaCota.PRIVADA_AMPLA)
            if residente_centro:
                elegibilidades.append(CategoriaCota.PRIVADA_CENTRO)

        if pcd:
            elegibilidades.append(CategoriaCota.PCD)

        return tuple(elegibilidades)

    @staticmethod
    def inferir_rede(escola_origem: str) -> RedeEnsino:
        texto = normalizar_texto(escola_origem)
        if any(palavra in texto for palavra in Configuracoes.PALAVRAS_REDE_PRIVADA):
            return RedeEnsino.PRIVADA
        return RedeEnsino.PUBLICA

    @staticmethod
    def inferir_residencia(bairro: str) -> bool:
        texto = normalizar_texto(bairro)
        return any(palavra in texto for palavra in Configuracoes.PALAVRAS_RESIDENCIA)

    @staticmethod
    def inferir_pcd(cota_declarada: str) -> bool:
        texto = normalizar_texto(cota_declarada)
        return any(palavra in texto for palavra in Configuracoes.PALAVRAS_PCD)
