from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from boletocoding.core.layout import DocumentType

# Sentinela de "valor ainda desconhecido"
ZERO = Decimal("0")


@dataclass(frozen=True)
class DecodedBoleto:
    """
    Resultado imutável da decodificação de uma linha digitável.
    Todos os campos são calculados juntos, na construção; não existe
    estado intermediário observável.
    """
    digitable_line: str
    barcode: str
    document_type: DocumentType
    is_valid: bool
    value: Decimal = ZERO
    due_date: Optional[date] = None
