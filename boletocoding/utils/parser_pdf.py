import pdfplumber

from boletocoding.utils.extractor import extrair_boleto_de_texto


def extrair_texto_pdf(pdf_path, password=None):
    """Consolida o texto de todas as páginas do documento."""
    paginas = []
    with pdfplumber.open(pdf_path, password=password) as pdf:
        for pagina in pdf.pages:
            texto = pagina.extract_text()
            if texto:
                paginas.append(texto)
    return "\n".join(paginas)


def extrair_boleto_pdf(pdf_path, password=None, auto_complete=True, validate_blocks=False):
    """
    Abre o PDF, extrai o conteúdo textual e utiliza o extrator universal
    para identificar a linha digitável.
    """
    texto = extrair_texto_pdf(pdf_path, password=password)
    return extrair_boleto_de_texto(texto, auto_complete=auto_complete, validate_blocks=validate_blocks)
