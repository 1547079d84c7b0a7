"""
Cálculo dos dígitos verificadores por módulo 10 e módulo 11.

Funções puras, sem estado, reutilizáveis fora da classe BoletoCode para
conferir qualquer sequência numérica com DV embutido.
"""
from itertools import cycle


def _somente_digitos(codigo) -> bool:
    return isinstance(codigo, str) and codigo.isascii() and codigo.isdigit()


def _separar_dv(codigo: str, posicao_dv: int):
    """Retorna (código sem o DV, DV informado) ou None se a posição não existir."""
    if not _somente_digitos(codigo) or not 0 <= posicao_dv < len(codigo):
        return None
    return codigo[:posicao_dv] + codigo[posicao_dv + 1:], int(codigo[posicao_dv])


def calc_mod_11(numero: str, posicao_dv: int = 4) -> int:
    """
    DV módulo 11 de um número que ainda não contém o dígito.

    Pesos de 2 a 9 da direita para a esquerda, reiniciando em 2.
    No boleto bancário (DV na posição 4) os resultados 0, 10 e 11 viram 1.
    Na arrecadação, 0 e 1 viram 0, e 10 e 11 viram 1.
    """
    soma = 0
    for digito, peso in zip(reversed(numero), cycle(range(2, 10))):
        soma += int(digito) * peso

    dv = 11 - (soma % 11)
    if posicao_dv == 4:
        if dv in (0, 10, 11):
            dv = 1
    elif dv in (0, 1):
        dv = 0
    elif dv in (10, 11):
        dv = 1
    return dv


def calc_mod_10(numero: str) -> int:
    """DV módulo 10: pesos 2 e 1 alternados, somando os algarismos de cada produto."""
    soma = 0
    for digito, peso in zip(reversed(numero), cycle((2, 1))):
        parcial = int(digito) * peso
        soma += parcial // 10 + parcial % 10

    dv = soma % 10
    if dv != 0:
        dv = 10 - dv
    return dv


def mod_11(codigo: str, posicao_dv: int) -> bool:
    partes = _separar_dv(codigo, posicao_dv)
    if partes is None:
        return False
    numero, dv = partes
    return dv == calc_mod_11(numero, posicao_dv)


def mod_10(codigo: str, posicao_dv: int) -> bool:
    partes = _separar_dv(codigo, posicao_dv)
    if partes is None:
        return False
    numero, dv = partes
    return dv == calc_mod_10(numero)
