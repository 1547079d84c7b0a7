from decimal import Decimal

from boletocoding.core.decoder import decode
from boletocoding.core.errors import ValueAlreadyDecodedError
from boletocoding.core.models import ZERO


def _to_decimal(valor) -> Decimal:
    if isinstance(valor, Decimal):
        return valor
    if isinstance(valor, float):
        # Evita 0.1 -> 0.1000000000000000055511151231257827
        return Decimal(str(valor))
    return Decimal(valor)


class BoletoCode:
    """
    Boleto decodificado a partir da linha digitável.

    Linha, código de barras, validade e vencimento são calculados na
    construção e não mudam mais. O subtotal é a única parte mutável:
    parte do valor e recebe descontos e acréscimos na ordem das chamadas.

    Sempre confira is_valid() antes de confiar em get_value() ou
    get_due_date(); uma linha inválida não levanta exceção.
    """

    def __init__(self, digitable_line: str, auto_complete: bool = True, *, validate_blocks: bool = False):
        self._decoded = decode(digitable_line, auto_complete=auto_complete, validate_blocks=validate_blocks)
        self._value = self._decoded.value
        self._subtotal = self._decoded.value

    def __repr__(self):
        return (
            f"BoletoCode(barcode={self.barcode!r}, valid={self.is_valid()}, "
            f"value={self._value}, due_date={self.get_due_date()})"
        )

    @property
    def decoded(self):
        return self._decoded

    @property
    def digitable_line(self) -> str:
        return self._decoded.digitable_line

    @property
    def barcode(self) -> str:
        return self._decoded.barcode

    @property
    def document_type(self):
        return self._decoded.document_type

    @property
    def due_date(self):
        return self._decoded.due_date

    def is_valid(self) -> bool:
        return self._decoded.is_valid

    def get_value(self) -> Decimal:
        return self._value

    def get_subtotal(self) -> Decimal:
        return self._subtotal

    def get_due_date(self, fmt: str = "%Y-%m-%d"):
        """Vencimento formatado com o padrão strftime informado, ou None."""
        if self._decoded.due_date is None:
            return None
        return self._decoded.due_date.strftime(fmt)

    def set_value(self, valor) -> None:
        """
        Informa o valor do documento quando o código de barras não o trouxe.
        Se o valor já veio do código, use discount ou surcharge.
        """
        if self._value != ZERO:
            raise ValueAlreadyDecodedError(self._value)
        self._value = self._subtotal = _to_decimal(valor)

    def surcharge(self, valor) -> None:
        self._subtotal += _to_decimal(valor)

    def discount(self, valor) -> None:
        self._subtotal -= _to_decimal(valor)
