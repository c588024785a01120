class AdOptimizerError(Exception):
    """최상위 에러. str()은 화면에 그대로 노출되는 사용자 메시지."""

    default_message = "Ocorreu um erro desconhecido ao contatar o serviço de IA."

    def __init__(self, message: str | None = None):
        self.user_message = message or self.default_message
        super().__init__(self.user_message)


class ConfigError(AdOptimizerError):
    default_message = (
        "A chave de API não foi encontrada. "
        "Configure a variável de ambiente ANTHROPIC_API_KEY."
    )


class ValidationError(AdOptimizerError):
    default_message = "Por favor, insira uma URL válida."


class NetworkError(AdOptimizerError):
    default_message = (
        "Não foi possível otimizar o anúncio. "
        "Verifique a URL ou a configuração da sua chave de API."
    )


class ParseError(AdOptimizerError):
    default_message = (
        "A resposta da IA não estava no formato JSON esperado e não pôde ser lida."
    )

    def __init__(self, raw_text: str = "", message: str | None = None):
        super().__init__(message)
        self.raw_text = raw_text


class SchemaError(AdOptimizerError):
    default_message = (
        "A resposta da IA, embora seja um JSON válido, "
        "não contém os campos esperados."
    )

    def __init__(self, field: str | None = None, message: str | None = None):
        super().__init__(message)
        self.field = field
