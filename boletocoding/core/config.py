import os
from dotenv import load_dotenv

# Carrega as variáveis do arquivo .env
load_dotenv()


def _env_bool(nome, padrao):
    valor = os.getenv(nome)
    if valor is None or not valor.strip():
        return padrao
    return valor.strip().lower() not in ("0", "false", "no", "nao", "não")


class Config:
    # --- DECODIFICAÇÃO ---
    # Completa com zeros linhas digitadas sem os zeros finais (45/46 dígitos)
    AUTO_COMPLETE = _env_bool("BOLETO_AUTO_COMPLETE", True)
    # Confere também o DV de cada campo/bloco da linha digitável
    VALIDAR_BLOCOS = _env_bool("BOLETO_VALIDAR_BLOCOS", False)

    # --- SAÍDA ---
    FORMATO_DATA = os.getenv("BOLETO_FORMATO_DATA", "%d/%m/%Y")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # --- PDF ---
    # Senha de PDFs protegidos (ex: 3 primeiros dígitos do CPF)
    PDF_SENHA = os.getenv("BOLETO_PDF_SENHA") or None
