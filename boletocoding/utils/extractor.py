import re
from decimal import Decimal

from boletocoding.core.boleto import BoletoCode
from boletocoding.core.logger import logger

# Linha bancária (47), arrecadação (48, com ou sem DVs separados por hífen)
# e código de barras puro (44). Os lookarounds impedem que uma linha de 48
# seja lida como uma de 47 seguida de um dígito solto.
REGEX_LINHA_DIGITAVEL = re.compile(
    r"(?<!\d)(?:"
    r"\d{5}[\.\s]?\d{5}[\.\s]?\d{5}[\.\s]?\d{6}[\.\s]?\d{5}[\.\s]?\d{6}[\.\s]?\d[\.\s]?\d{14}"
    r"|\d{11}[\-\s]?\d[\-\s]?\d{11}[\-\s]?\d[\-\s]?\d{11}[\-\s]?\d[\-\s]?\d{11}[\-\s]?\d"
    r"|\d{44}"
    r")(?!\d)"
)
REGEX_VALOR_RS = re.compile(r"R\$\s?(\d{1,3}(?:\.\d{3})*,\d{2})")


def limpar_codigo(texto):
    """Remove espaços, pontos e caracteres não numéricos"""
    if not texto:
        return None
    return re.sub(r"\D", "", texto)


def extrair_linhas_digitaveis(texto):
    """Todas as linhas digitáveis/códigos de barras do texto, só com os dígitos."""
    if not texto:
        return []
    return [limpar_codigo(m.group(0)) for m in REGEX_LINHA_DIGITAVEL.finditer(texto)]


def extrair_valor_do_texto(texto):
    """
    Busca valores no padrão R$ 1.234,56.
    Estratégia: assume o último valor (geralmente o Total).
    """
    if not texto:
        return None
    valores = REGEX_VALOR_RS.findall(texto)
    if not valores:
        return None
    return Decimal(valores[-1].replace(".", "").replace(",", "."))


def extrair_boleto_de_texto(texto, auto_complete=True, validate_blocks=False):
    """
    Inteligência central: recebe qualquer string (corpo de email ou texto
    de PDF) e devolve o primeiro boleto válido encontrado.

    Se o código de barras não trouxer valor (zerado), usa o valor em R$
    impresso no documento.
    """
    candidatos = extrair_linhas_digitaveis(texto)
    if not candidatos:
        logger.info("Nenhuma linha digitável encontrada no texto.")
        return None

    for linha in candidatos:
        boleto = BoletoCode(linha, auto_complete, validate_blocks=validate_blocks)
        if boleto.is_valid():
            break
        logger.warning(f"⚠️ Linha descartada, DV não confere: {linha}")
    else:
        return None

    if boleto.get_value() == 0:
        valor_texto = extrair_valor_do_texto(texto)
        if valor_texto is not None:
            logger.info(f"Valor ausente no código de barras, usando R$ {valor_texto} do texto")
            boleto.set_value(valor_texto)

    return boleto
