"""모델 응답 파싱/검증.

extract_json: 자유 텍스트 응답에서 JSON 객체를 꺼낸다 (search 모드 전용).
validate_result: 파싱된 값이 광고 결과 스키마를 만족하는지 확인한다 (두 모드 공통).

extract_json은 best-effort 휴리스틱이다. 코드 펜스가 없으면 첫 '{'부터 마지막 '}'까지
잘라내므로, 응답 본문 안에 JSON 외의 중괄호가 섞여 있으면 잘못 추출될 수 있다.
"""

import json
import logging
import re
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from errors import ParseError, SchemaError
from models import GroundingSource, OptimizedAdResult

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```json[ \t]*\r?\n(.*?)\r?\n[ \t]*```", re.DOTALL)


def extract_json(raw_text: str):
    text = (raw_text or "").strip()

    match = _JSON_FENCE_RE.search(text)
    if match:
        candidate = match.group(1)
    else:
        first = text.find("{")
        last = text.rfind("}")
        if first == -1 or last <= first:
            logger.error(f"응답에서 JSON 객체를 찾지 못함. 원본 응답: {raw_text!r}")
            raise ParseError(raw_text)
        candidate = text[first : last + 1]

    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error(f"JSON 파싱 실패 ({e}). 원본 응답: {raw_text!r}")
        logger.error(f"파싱 시도한 문자열: {candidate!r}")
        raise ParseError(raw_text) from e


def validate_result(value, sources=()) -> OptimizedAdResult:
    if not isinstance(value, Mapping):
        logger.error(f"응답이 JSON 객체가 아님: {type(value).__name__}")
        raise SchemaError(None)

    # 모델이 보낸 sources는 신뢰하지 않음. 출처는 호출 측에서 수집한 것만 사용
    payload = {k: v for k, v in value.items() if k != "sources"}
    payload["sources"] = tuple(sources)

    try:
        return OptimizedAdResult.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0] if first["loc"] else None
        logger.error(f"'{field}' 필드 누락 또는 타입 오류: {first['msg']} ({value!r})")
        raise SchemaError(field) from e


def collect_sources(items) -> tuple[GroundingSource, ...]:
    """(uri, title) 목록 → URI 없는 항목 제거, 중복은 처음 것만 유지."""
    seen = set()
    sources = []
    for uri, title in items:
        if not uri or uri in seen:
            continue
        seen.add(uri)
        sources.append(GroundingSource(uri=uri, title=title or ""))
    return tuple(sources)
