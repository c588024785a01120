from pydantic import BaseModel, ConfigDict, Field, StrictStr


class GroundingSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., min_length=1)
    title: str = ""


class AdCopy(BaseModel):
    # 필드 선언 순서 = 검증 순서
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    optimized_title: StrictStr = Field(
        ...,
        alias="optimizedTitle",
        min_length=1,
        description="Título otimizado do anúncio.",
    )
    optimized_description: StrictStr = Field(
        ...,
        alias="optimizedDescription",
        description="Descrição otimizada, terminando com uma CTA.",
    )
    improvements: tuple[StrictStr, ...] = Field(
        ...,
        description="Pontos de destaque da otimização.",
    )
    persuasion_score: StrictStr = Field(
        ...,
        alias="persuasionScore",
        description="Nível de persuasão: Alto, Médio ou Baixo.",
    )
    clarity_score: StrictStr = Field(
        ...,
        alias="clarityScore",
        description="Nota de clareza: Excelente, Bom ou A Melhorar.",
    )
    image_suggestion: StrictStr = Field(
        ...,
        alias="imageSuggestion",
        description="Descrição da imagem ideal para o anúncio.",
    )


class OptimizedAdResult(AdCopy):
    sources: tuple[GroundingSource, ...] = ()
