import logging

import anthropic

from config import Settings
from errors import ConfigError, NetworkError, ParseError
from models import OptimizedAdResult
from prompt import (
    RESULT_SCHEMA,
    RESULT_TOOL_NAME,
    SYSTEM_PROMPT,
    build_user_prompt,
)
from response_parser import collect_sources, extract_json, validate_result

WEB_SEARCH_TOOL_TYPE = "web_search_20250305"

logger = logging.getLogger(__name__)


class AdOptimizer:
    """상품 URL → 최적화된 광고. 요청마다 1회 호출, 재시도 없음."""

    def __init__(self, settings: Settings, http_client=None):
        self.settings = settings
        self._http_client = http_client

    def optimize(self, product_url: str) -> OptimizedAdResult:
        if not self.settings.api_key:
            raise ConfigError()

        client = anthropic.Anthropic(
            api_key=self.settings.api_key,
            timeout=self.settings.timeout_seconds,
            max_retries=0,
            http_client=self._http_client,
        )
        try:
            if self.settings.mode == "schema":
                response = self._call_api(client, self._schema_request(product_url))
                return result_from_tool_use(response)

            response = self._call_api(client, self._search_request(product_url))
            return result_from_search(response)
        finally:
            # 주입받은 http_client는 호출 측 소유
            if self._http_client is None:
                client.close()

    def _base_request(self, product_url: str) -> dict:
        return {
            "model": self.settings.model,
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [
                {
                    "role": "user",
                    "content": build_user_prompt(product_url, self.settings.mode),
                }
            ],
        }

    def _search_request(self, product_url: str) -> dict:
        request = self._base_request(product_url)
        request["tools"] = [
            {
                "type": WEB_SEARCH_TOOL_TYPE,
                "name": "web_search",
                "max_uses": self.settings.max_searches,
            }
        ]
        return request

    def _schema_request(self, product_url: str) -> dict:
        request = self._base_request(product_url)
        request["tools"] = [
            {
                "name": RESULT_TOOL_NAME,
                "description": "Entrega o anúncio otimizado no formato estruturado.",
                "input_schema": RESULT_SCHEMA,
            }
        ]
        request["tool_choice"] = {"type": "tool", "name": RESULT_TOOL_NAME}
        return request

    def _call_api(self, client, request: dict):
        try:
            return client.messages.create(**request)
        except anthropic.APIStatusError as e:
            logger.error(
                f"API 에러 응답 (HTTP {e.status_code}, request_id={e.request_id}): "
                f"{e.message}"
            )
            raise NetworkError() from e
        except anthropic.APIConnectionError as e:
            logger.error(f"API 연결 실패 ({type(e).__name__}): {e}")
            raise NetworkError() from e
        except anthropic.APIError as e:
            logger.error(f"API 호출 실패 ({type(e).__name__}): {e}")
            raise NetworkError() from e


def result_from_search(response) -> OptimizedAdResult:
    """웹 검색 모드: 텍스트 블록을 합쳐 JSON 추출 후 검증. 출처는 검색 결과/인용에서 수집."""
    texts = []
    found = []
    for block in response.content:
        if block.type == "text":
            texts.append(block.text)
            for citation in getattr(block, "citations", None) or []:
                found.append(
                    (getattr(citation, "url", None), getattr(citation, "title", None))
                )
        elif block.type == "web_search_tool_result":
            # 검색 실패 시 content는 리스트가 아니라 에러 객체
            if isinstance(block.content, list):
                for item in block.content:
                    found.append((item.url, item.title))

    raw_text = "".join(texts)
    logger.info(f"모델 응답 수신 ({len(raw_text)}자, 출처 후보 {len(found)}개)")

    parsed = extract_json(raw_text)
    return validate_result(parsed, collect_sources(found))


def result_from_tool_use(response) -> OptimizedAdResult:
    """스키마 모드: 강제된 tool_use 입력을 바로 검증. 텍스트 추출 경로는 거치지 않는다."""
    for block in response.content:
        if block.type == "tool_use" and block.name == RESULT_TOOL_NAME:
            return validate_result(block.input)

    raw_text = "".join(b.text for b in response.content if b.type == "text")
    logger.error(
        f"'{RESULT_TOOL_NAME}' 호출 없음 (stop_reason={response.stop_reason}). "
        f"원본 응답: {raw_text!r}"
    )
    raise ParseError(raw_text)
