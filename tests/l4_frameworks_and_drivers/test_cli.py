"""Tests for CLI entry point — patches the container at its source module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from panda_nexus import __version__
from panda_nexus.l1_entities.completion import OFFLINE_MODEL
from panda_nexus.l1_entities.service_category import ServiceCategory
from panda_nexus.l4_frameworks_and_drivers.cli import cli
from panda_nexus.l4_frameworks_and_drivers.container import DependencyContainer
from panda_nexus.l4_frameworks_and_drivers.infra_config import build_app_config
from tests.conftest import FakeLLMClient

# cli() imports DependencyContainer lazily, so patch where it is defined.
_CONTAINER = 'panda_nexus.l4_frameworks_and_drivers.container.DependencyContainer'


def _fake_container(fake: FakeLLMClient):
    def _build(config, infra=None):
        return DependencyContainer(config, infra=infra, llm_client=fake)

    return _build


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ['--help'])
        assert result.exit_code == 0
        for name in ('ask', 'chat', 'spell', 'check'):
            assert name in result.output

    def test_ask_prints_reply(self):
        fake = FakeLLMClient('Use reversed() or slicing.')
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['ask', '-s', 'code', 'how to reverse a list'])
        assert result.exit_code == 0
        assert 'Use reversed() or slicing.' in result.output
        assert fake.requests[0].model == build_app_config({}).models.by_category[ServiceCategory.CODE]

    def test_ask_image_request_prints_url(self):
        fake = FakeLLMClient()
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['ask', 'draw a lighthouse at night'])
        assert result.exit_code == 0
        assert 'https://image.pollinations.ai/prompt/a%20lighthouse%20at%20night' in result.output
        assert fake.requests == []

    def test_ask_fallback_does_not_fail(self):
        fake = FakeLLMClient()
        fake.set_error(ConnectionError('down'))
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['ask', 'hello there'])
        assert result.exit_code == 0
        assert OFFLINE_MODEL in result.output

    def test_spell(self):
        with patch(_CONTAINER, side_effect=_fake_container(FakeLLMClient())):
            result = CliRunner().invoke(cli, ['spell', 'i beleive teh cat is here'])
        assert result.exit_code == 0
        assert 'I believe the cat is here.' in result.output

    def test_chat_keeps_history_and_switches_service(self):
        fake = FakeLLMClient('ok')
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['chat'], input='hello\n/service code\nwhat about now\n/quit\n')
        assert result.exit_code == 0
        assert len(fake.requests) == 2
        second = fake.requests[1]
        assert second.model == build_app_config({}).models.by_category[ServiceCategory.CODE]
        assert [m['role'] for m in second.messages] == ['system', 'user', 'assistant', 'user']

    def test_chat_exits_on_eof(self):
        with patch(_CONTAINER, side_effect=_fake_container(FakeLLMClient())):
            result = CliRunner().invoke(cli, ['chat'], input='')
        assert result.exit_code == 0

    def test_check_unreachable_exits_1(self):
        fake = FakeLLMClient()
        fake.set_connectivity(False, 'Connection refused')
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['check'])
        assert result.exit_code == 1
        assert 'Connection refused' in result.output

    def test_check_reachable(self):
        with patch(_CONTAINER, side_effect=_fake_container(FakeLLMClient())):
            result = CliRunner().invoke(cli, ['check'])
        assert result.exit_code == 0

    def test_config_file_applied(self, sample_config_yaml: Path):
        fake = FakeLLMClient('done')
        with patch(_CONTAINER, side_effect=_fake_container(fake)):
            result = CliRunner().invoke(cli, ['-c', str(sample_config_yaml), 'ask', '-s', 'code', 'hi'])
        assert result.exit_code == 0
        assert fake.requests[0].model == 'acme/coder-large'

    def test_invalid_config_exits_1(self, tmp_path: Path):
        bad = tmp_path / 'bad.yaml'
        bad.write_text('completion:\n  history_window: 0\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(bad), 'spell', 'x'])
        assert result.exit_code == 1
        assert 'Error' in result.output
