"""
Posições fixas da linha digitável e do código de barras (padrão FEBRABAN).

Tudo que é recorte por offset fica aqui, separado por tipo de documento
e por tamanho de linha, para que os dois caminhos (bancário e arrecadação)
possam ser conferidos e testados de forma independente.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

BARCODE_LENGTH = 44
DIGITABLE_LINE_LENGTH = 47
VALID_LENGTHS = frozenset({44, 47, 48})

# Contas de consumo/tributos começam com 8
DEALERSHIP_PREFIX = "8"
# Identificador de valor (3º dígito) que pede módulo 10
MOD_10_VALUE_IDS = frozenset("67")
VALUE_ID_POSITION = 2

DUE_DATE_BASE = date(1997, 10, 7)
MIN_DUE_FACTOR = 1000


class DocumentType(str, Enum):
    STANDARD = "bancario"
    DEALERSHIP = "arrecadacao"


@dataclass(frozen=True)
class BarcodeLayout:
    document_type: DocumentType
    check_digit: int
    value: slice
    due_factor: Optional[slice] = None
    due_year: Optional[slice] = None
    due_month: Optional[slice] = None
    due_day: Optional[slice] = None


STANDARD_LAYOUT = BarcodeLayout(
    document_type=DocumentType.STANDARD,
    check_digit=4,
    value=slice(9, 19),
    due_factor=slice(5, 9),
)

DEALERSHIP_LAYOUT = BarcodeLayout(
    document_type=DocumentType.DEALERSHIP,
    check_digit=3,
    value=slice(4, 15),
    due_year=slice(19, 23),
    due_month=slice(23, 25),
    due_day=slice(25, 27),
)

LAYOUTS = {
    DocumentType.STANDARD: STANDARD_LAYOUT,
    DocumentType.DEALERSHIP: DEALERSHIP_LAYOUT,
}

# Ordem dos trechos da linha digitável que compõem o código de barras.
# 47 dígitos: banco/moeda, DV geral, fator+valor e os três campos livres
# sem os seus DVs. 48 dígitos: quatro blocos de 11, sem o DV de cada bloco.
BARCODE_SLICES = {
    47: (
        slice(0, 4),
        slice(32, 33),
        slice(33, 37),
        slice(37, 47),
        slice(4, 9),
        slice(10, 20),
        slice(21, 31),
    ),
    48: (
        slice(0, 11),
        slice(12, 23),
        slice(24, 35),
        slice(36, 47),
    ),
}

# Campos da linha digitável que terminam com o próprio DV
FIELD_CHECK_SLICES = {
    47: (slice(0, 10), slice(10, 21), slice(21, 32)),
    48: (slice(0, 12), slice(12, 24), slice(24, 36), slice(36, 48)),
}


def layout_for(barcode: str) -> BarcodeLayout:
    if barcode.startswith(DEALERSHIP_PREFIX):
        return DEALERSHIP_LAYOUT
    return STANDARD_LAYOUT
