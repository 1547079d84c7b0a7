class BoletoError(Exception):
    """Erro base de todo o pacote."""


class InvalidOperationError(BoletoError):
    """Operação não permitida no estado atual do boleto."""


class ValueAlreadyDecodedError(InvalidOperationError):
    """
    Disparado por set_value quando o valor já veio do código de barras.
    Nesse caso o ajuste deve ser feito com discount ou surcharge.
    """

    def __init__(self, valor):
        self.valor = valor
        super().__init__(
            f"Valor R$ {valor} calculado pelo código de barras. "
            "Use os métodos discount ou surcharge."
        )
