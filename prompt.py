from models import AdCopy

SYSTEM_PROMPT = """Você é um especialista em marketing digital e copywriting para marketplaces.
Seu trabalho é transformar anúncios de produtos em anúncios completos, persuasivos e claros.

## Regras
- Escreva sempre em português do Brasil.
- Não invente especificações técnicas, preços ou garantias que não possam ser confirmados.
- Toda descrição deve terminar com uma chamada para ação (CTA)."""

USER_PROMPT_TEMPLATE = """Sua tarefa é analisar a URL de um produto, entendê-lo e, em seguida, criar um anúncio completo e otimizado.

URL para Análise: "{product_url}"

Siga estes passos:
1. **Pesquisa:** {research_step}
2. **Criação:** Com base na análise, crie um "Título Otimizado" e uma "Descrição Otimizada". O texto deve ser persuasivo, claro e com uma chamada para ação (CTA).
3. **Sugestão de Imagem:** Descreva uma "Sugestão de Imagem" ideal para o anúncio.
4. **Pontos de Destaque:** Liste os "Pontos de Destaque" da sua otimização, explicando por que as escolhas são eficazes.
5. **Avaliação:** Forneça um "Nível de Persuasão" (Alto, Médio, Baixo) e uma "Nota de Clareza" (Excelente, Bom, A Melhorar).

{output_rules}"""

SEARCH_RESEARCH_STEP = (
    "Use a busca na web para ler a página do produto e entender seus benefícios "
    "e seu público-alvo."
)
SCHEMA_RESEARCH_STEP = (
    "Deduza a partir da URL qual é o produto, seus benefícios e seu público-alvo."
)

JSON_OUTPUT_RULES = """**Formato de Saída OBRIGATÓRIO:**
Sua resposta DEVE ser APENAS um objeto JSON válido, sem nenhum texto ou formatação antes ou depois, com a seguinte estrutura:
{
  "optimizedTitle": "string",
  "optimizedDescription": "string",
  "improvements": ["string"],
  "persuasionScore": "string",
  "clarityScore": "string",
  "imageSuggestion": "string"
}"""

TOOL_OUTPUT_RULES = (
    "**Formato de Saída OBRIGATÓRIO:** entregue o resultado chamando a ferramenta "
    "`submit_optimized_ad`."
)

RESULT_TOOL_NAME = "submit_optimized_ad"

RESULT_SCHEMA = AdCopy.model_json_schema(by_alias=True)


def build_user_prompt(product_url: str, mode: str = "search") -> str:
    if mode == "schema":
        return USER_PROMPT_TEMPLATE.format(
            product_url=product_url,
            research_step=SCHEMA_RESEARCH_STEP,
            output_rules=TOOL_OUTPUT_RULES,
        )
    return USER_PROMPT_TEMPLATE.format(
        product_url=product_url,
        research_step=SEARCH_RESEARCH_STEP,
        output_rules=JSON_OUTPUT_RULES,
    )
