"""Construção de candidatos a partir das linhas da planilha.

Responsabilidades:
- Extrair identidade e origem do candidato
- Calcular médias via normalizador de notas
- Calcular elegibilidades uma única vez
"""

import re
from datetime import date
from typing import Mapping, Optional

import pandas as pd

from src.application.eligibility_classifier import ClassificadorElegibilidade
from src.application.score_normalizer import NormalizadorNotas
from src.config.settings import Configuracoes
from src.domain.candidate import Candidato
from src.util.text_normalizer import normalizar_texto, obter_valor

_PADRAO_DATA_BR = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})")


class ConstrutorCandidatos:
    """Monta instâncias de Candidato a partir de registros brutos.

    Responsabilidades:
    - Gerar número de inscrição quando ausente
    - Resolver o curso para a grafia configurada
    - Agregar avisos de qualidade de dados
    """

    def __init__(self):
        """Inicializa o construtor com normalizador e classificador."""
        self.normalizador = NormalizadorNotas()
        self.classificador = ClassificadorElegibilidade()

    def construir(self, linha: Mapping[str, object], indice: int) -> Candidato:
        """Constrói um candidato a partir de uma linha.

        Parâmetros:
        - linha (Mapping): registro bruto (coluna -> texto)
        - indice (int): posição da linha entre as linhas válidas

        Retorno:
        - Candidato: candidato com notas e elegibilidades calculadas
        """
        avisos = []

        inscricao_bruta = obter_valor(linha, Configuracoes.COLUNAS_INSCRICAO)
        inscricao = inscricao_bruta.replace('"', "").strip()
        if not inscricao:
            inscricao = str(indice + 1)
            avisos.append("Número de inscrição ausente; gerado automaticamente.")

        nome = obter_valor(linha, Configuracoes.COLUNAS_NOME).strip()
        bairro = obter_valor(linha, Configuracoes.COLUNAS_BAIRRO)
        cota = obter_valor(linha, Configuracoes.COLUNAS_COTA)
        rede = self.classificador.inferir_rede(obter_valor(linha, Configuracoes.COLUNAS_ESCOLA))
        residente = self.classificador.inferir_residencia(bairro)
        pcd = self.classificador.inferir_pcd(cota)

        data_nascimento = self.converter_data(obter_valor(linha, Configuracoes.COLUNAS_NASCIMENTO))
        if data_nascimento is None:
            avisos.append("Data de nascimento ausente ou inválida; desempate por idade desconsiderado.")

        medias = self.normalizador.calcular_medias(linha)
        avisos.extend(medias.avisos)

        return Candidato(
            id=f"{indice}-{nome}",
            numero_inscricao=inscricao,
            nome=nome.upper(),
            carimbo_data_hora=obter_valor(linha, Configuracoes.COLUNAS_CARIMBO),
            data_nascimento=data_nascimento,
            curso=self.resolver_curso(obter_valor(linha, Configuracoes.COLUNAS_CURSO)),
            municipio=obter_valor(linha, Configuracoes.COLUNAS_MUNICIPIO),
            bairro=bairro,
            rede_ensino=rede,
            cota_declarada=cota,
            pcd=pcd,
            residente_centro=residente,
            elegibilidades=self.classificador.classificar(rede, residente, pcd),
            avisos=avisos,
            **medias.model_dump(exclude={"avisos"}),
        )

    @staticmethod
    def resolver_curso(texto: str) -> str:
        """Retorna a grafia configurada do curso ou o texto original aparado."""
        normalizado = normalizar_texto(texto)
        for curso in Configuracoes.CURSOS:
            if normalizar_texto(curso) == normalizado:
                return curso
        return texto.strip()

    @staticmethod
    def converter_data(texto: str) -> Optional[date]:
        """Converte datas no formato dd/mm/aaaa (ou ISO) para date.

        Retorno:
        - date | None: data convertida ou None quando inválida
        """
        texto = (texto or "").strip()
        if not texto:
            return None

        correspondencia = _PADRAO_DATA_BR.match(texto)
        if correspondencia:
            dia, mes, ano = (int(parte) for parte in correspondencia.groups())
            try:
                return date(ano, mes, dia)
            except ValueError:
                return None

        convertida = pd.to_datetime(texto, errors="coerce")
        if pd.isna(convertida):
            return None
        return convertida.date()
