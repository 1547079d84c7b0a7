"""
Pipeline de decodificação da linha digitável.

normalização -> conversão para código de barras -> validação do DV
-> (se válido) extração de valor e vencimento.

Tudo é calculado de uma vez em decode(), que devolve um DecodedBoleto
imutável. Nenhuma etapa levanta exceção por causa de uma linha mal
digitada: o problema aparece como is_valid=False ou due_date=None.
"""
import re
from datetime import date, timedelta
from decimal import Decimal

from boletocoding.core.checksum import mod_10, mod_11
from boletocoding.core.layout import (
    BARCODE_SLICES,
    DEALERSHIP_PREFIX,
    DIGITABLE_LINE_LENGTH,
    DUE_DATE_BASE,
    FIELD_CHECK_SLICES,
    MIN_DUE_FACTOR,
    MOD_10_VALUE_IDS,
    VALID_LENGTHS,
    VALUE_ID_POSITION,
    layout_for,
)
from boletocoding.core.logger import logger
from boletocoding.core.models import DecodedBoleto

# Pontos, hífens e espaços impressos no boleto
SEPARADORES = re.compile(r"[\s.\-]+")


def strip_formatting(linha: str) -> str:
    return SEPARADORES.sub("", linha)


def complete_digitable_line(linha: str) -> str:
    """Completa com zeros à direita linhas de 45 ou 46 dígitos até 47."""
    if len(linha) in (45, 46):
        completada = linha.ljust(DIGITABLE_LINE_LENGTH, "0")
        logger.debug(f"Linha completada com {len(completada) - len(linha)} zero(s) à direita")
        return completada
    return linha


def to_barcode(linha: str) -> str:
    """Reorganiza a linha digitável na ordem dos 44 dígitos do código de barras."""
    trechos = BARCODE_SLICES.get(len(linha))
    if trechos is None:
        return linha
    return "".join(linha[trecho] for trecho in trechos)


def checksum_for(barcode: str):
    """
    Escolhe o módulo do DV geral.
    Arrecadação com identificador de valor 6 ou 7 usa módulo 10,
    todo o resto usa módulo 11.
    """
    if barcode.startswith(DEALERSHIP_PREFIX) and barcode[VALUE_ID_POSITION:VALUE_ID_POSITION + 1] in MOD_10_VALUE_IDS:
        return mod_10
    return mod_11


def _blocos_validos(linha: str, barcode: str) -> bool:
    campos = FIELD_CHECK_SLICES.get(len(linha), ())
    verificar = checksum_for(barcode) if len(linha) == 48 else mod_10
    for campo in campos:
        trecho = linha[campo]
        if not verificar(trecho, len(trecho) - 1):
            logger.debug(f"DV do bloco {trecho} não confere")
            return False
    return True


def validate(linha: str, barcode: str, validate_blocks: bool = False) -> bool:
    if len(linha) not in VALID_LENGTHS:
        logger.debug(f"Tamanho inválido: {len(linha)} dígitos")
        return False
    if not (linha.isascii() and linha.isdigit()):
        logger.debug("Linha contém caracteres não numéricos")
        return False
    if validate_blocks and not _blocos_validos(linha, barcode):
        return False

    posicao_dv = layout_for(barcode).check_digit
    verificar = checksum_for(barcode)
    valido = verificar(barcode, posicao_dv)
    logger.debug(f"DV geral por {verificar.__name__} na posição {posicao_dv}: {'ok' if valido else 'falhou'}")
    return valido


def extract_value(barcode: str) -> Decimal:
    """Trecho de valor em centavos, com a vírgula inserida a duas casas da direita."""
    digitos = barcode[layout_for(barcode).value]
    return Decimal(f"{digitos[:-2]}.{digitos[-2:]}")


def extract_due_date(barcode: str):
    """
    Arrecadação traz a data no formato AAAAMMDD.
    Boleto bancário traz o fator: dias corridos desde 07/10/1997.
    """
    layout = layout_for(barcode)
    if layout.due_factor is None:
        ano = int(barcode[layout.due_year])
        mes = int(barcode[layout.due_month])
        dia = int(barcode[layout.due_day])
        try:
            return date(ano, mes, dia)
        except ValueError:
            logger.debug(f"Data {ano:04d}-{mes:02d}-{dia:02d} inexistente, vencimento ignorado")
            return None

    fator = int(barcode[layout.due_factor])
    if fator < MIN_DUE_FACTOR:
        return None
    return DUE_DATE_BASE + timedelta(days=fator)


def decode(digitable_line: str, auto_complete: bool = True, validate_blocks: bool = False) -> DecodedBoleto:
    linha = strip_formatting(digitable_line)
    if auto_complete:
        linha = complete_digitable_line(linha)

    barcode = to_barcode(linha)
    layout = layout_for(barcode)
    valido = validate(linha, barcode, validate_blocks=validate_blocks)

    if not valido:
        return DecodedBoleto(
            digitable_line=linha,
            barcode=barcode,
            document_type=layout.document_type,
            is_valid=False,
        )

    return DecodedBoleto(
        digitable_line=linha,
        barcode=barcode,
        document_type=layout.document_type,
        is_valid=True,
        value=extract_value(barcode),
        due_date=extract_due_date(barcode),
    )
