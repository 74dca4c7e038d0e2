"""Gateway: OpenAI-compatible LLM client — implements LLMClient port.

Defaults target OpenRouter, but any OpenAI-compatible API works.
"""

from __future__ import annotations

import openai

from panda_nexus.l1_entities.errors import MissingCredentialError
from panda_nexus.l2_use_cases.ports.llm_client import ChatResponse, CompletionRequest


class OpenAICompatLLMClient:
    """Wraps openai.AsyncOpenAI to implement the LLMClient protocol.

    SDK retries are disabled: a failed call is reported once and the caller
    decides what to do with it. A missing key fails before any request is made,
    so the SDK never substitutes OPENAI_API_KEY for it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://openrouter.ai/api/v1',
        *,
        referer: str = '',
        title: str = '',
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._headers: dict[str, str] = {}
        if referer:
            self._headers['HTTP-Referer'] = referer
        if title:
            self._headers['X-Title'] = title

    def _require_key(self) -> str:
        if not self._api_key:
            raise MissingCredentialError(f'No API key configured for {self._base_url}')
        return self._api_key

    def _async_client(self) -> openai.AsyncOpenAI:
        return openai.AsyncOpenAI(
            api_key=self._require_key(),
            base_url=self._base_url,
            timeout=self._timeout,
            max_retries=0,
            default_headers=self._headers,
        )

    async def complete(self, request: CompletionRequest) -> ChatResponse:
        client = self._async_client()
        resp = await client.chat.completions.create(
            model=request.model,
            messages=request.messages,  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            top_p=request.top_p,
            frequency_penalty=request.frequency_penalty,
            presence_penalty=request.presence_penalty,
            stream=False,
        )
        # OpenRouter can answer 200 with an error body and no choices.
        choices = getattr(resp, 'choices', None) or []
        if not choices or choices[0].message is None:
            return ChatResponse(content='')
        return ChatResponse(content=choices[0].message.content or '')

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = openai.OpenAI(
                api_key=self._require_key(),
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
                default_headers=self._headers,
            )
            client.models.list()
            return True, ''
        except MissingCredentialError as e:
            return False, str(e)
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'
