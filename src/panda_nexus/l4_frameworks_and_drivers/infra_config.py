"""Built-in defaults and infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
import os

from pydantic import BaseModel, Field

from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

API_KEY_ENV = 'OPENROUTER_API_KEY'

APP_CONFIG_DEFAULTS: dict = {
    'models': {
        'by_category': {
            'auto': 'deepseek/deepseek-chat-v3.1:free',
            'code': 'qwen/qwen3-coder:free',
            'creative': 'mistralai/mistral-nemo:free',
            'knowledge': 'cognitivecomputations/dolphin-mistral-24b-venice-edition:free',
            'general': 'deepseek/deepseek-chat-v3.1:free',
        },
        'multimodal': 'google/gemini-2.5-flash-image-preview:free',
        'spell_check': 'deepseek/deepseek-chat-v3.1:free',
    },
    'completion': {
        'history_window': 5,
        'max_tokens': 2000,
        'top_p': 0.9,
        'frequency_penalty': 0.1,
        'presence_penalty': 0.1,
        'temperatures': {
            'auto': 0.7,
            'code': 0.3,
            'creative': 0.8,
            'knowledge': 0.7,
            'general': 0.7,
        },
    },
    'prompts': {
        'system': {
            'auto': (
                'You are PandaNexus, a helpful AI assistant. Work out what the user needs and answer '
                'clearly, choosing the level of detail the question calls for.'
            ),
            'code': (
                'You are PandaNexus Code, an expert software engineer. Give correct, idiomatic code in '
                'fenced blocks with the language named, followed by a short explanation.'
            ),
            'creative': (
                'You are PandaNexus Creative, an imaginative writing partner. Offer vivid, original ideas '
                'and prose, and build on what the user has already written.'
            ),
            'knowledge': (
                'You are PandaNexus Knowledge, a careful research assistant. Explain topics accurately and '
                'in depth, separate facts from speculation, and say when you are unsure.'
            ),
            'general': (
                'You are PandaNexus, a friendly conversational assistant. Keep replies warm, concise and natural.'
            ),
        },
    },
    'fallbacks': {
        'messages': {
            'auto': "Hi! I'm PandaNexus AI assistant. How can I help?",
            'code': "Here's a simple code example: console.log('Hello PandaNexus');",
            'creative': "Let's create something amazing! What project are you working on?",
            'knowledge': 'I can provide detailed knowledge and explanations on any topic.',
            'general': "Hello! I'm PandaNexus, your AI assistant. How can I assist you today?",
        },
    },
    'image': {
        'base_url': 'https://image.pollinations.ai',
        'width': 768,
        'height': 768,
        'enhance': True,
    },
    'spell_check': {
        'remote_refinement': True,
        'temperature': 0.1,
        'max_tokens': 500,
        'instruction': 'Correct spelling, grammar, and punctuation. Return ONLY the corrected text.',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, {k: v for k, v in raw.items() if k in APP_CONFIG_DEFAULTS})
    return AppConfig.model_validate(merged)


class OpenRouterProviderConfig(BaseModel):
    api_key: str | None = None  # None → read OPENROUTER_API_KEY env
    base_url: str = 'https://openrouter.ai/api/v1'
    referer: str = 'https://pandanexus.dev'
    title: str = 'PandaNexus AI Platform'
    timeout: float = Field(default=30.0, gt=0)

    def resolved_api_key(self) -> str | None:
        return self.api_key or os.environ.get(API_KEY_ENV)


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openrouter: OpenRouterProviderConfig = Field(default_factory=OpenRouterProviderConfig)
