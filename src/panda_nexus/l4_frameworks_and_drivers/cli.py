"""CLI entry point for panda-nexus."""

from __future__ import annotations

import asyncio
import sys

import click

from panda_nexus import __version__
from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.completion import CompletionResult
from panda_nexus.l1_entities.service_category import ServiceCategory

CATEGORY_CHOICES = [c.value for c in ServiceCategory]


def _build_container(config_path: str | None):
    import yaml  # noqa: PLC0415 -- deferred: not needed for --help

    from panda_nexus.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from panda_nexus.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai SDK not loaded on --help
        DependencyContainer,
    )
    from panda_nexus.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )

    try:
        raw = YamlConfigLoader().load_raw(config_path)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:  # ValidationError is a ValueError
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    return DependencyContainer(config, infra=infra)


def _echo_result(result: CompletionResult) -> None:
    click.echo(result.content)
    if result.generated_image:
        click.echo(result.generated_image)
    click.echo(f'[{result.model_used}]', err=True)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, debug):
    """panda-nexus -- multi-model chat routing with offline fallback."""
    if debug:
        from panda_nexus.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: debug only
        from panda_nexus.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: debug only
            setup_file_logging,
        )

        log_path = setup_file_logging(LOG_DIR)
        click.echo(f'Debug log: {log_path}', err=True)
    ctx.obj = {'config_path': config_path}


@cli.command()
@click.argument('message')
@click.option('-s', '--service', type=click.Choice(CATEGORY_CHOICES), default='auto', help='Service category.')
@click.option('-i', '--image', 'image_url', default=None, help='Image URL or data URI to attach.')
@click.pass_context
def ask(ctx, message, service, image_url):
    """Send a single MESSAGE and print the reply."""
    container = _build_container(ctx.obj['config_path'])
    history = [ChatMessage(role='user', content=message, attached_image=image_url)]
    result = asyncio.run(container.controller.send_message(history, service))
    _echo_result(result)


@cli.command()
@click.option('-s', '--service', type=click.Choice(CATEGORY_CHOICES), default='auto', help='Service category.')
@click.pass_context
def chat(ctx, service):
    """Interactive conversation. '/service NAME' switches category, '/quit' exits."""
    container = _build_container(ctx.obj['config_path'])
    category = ServiceCategory(service)
    history: list[ChatMessage] = []

    while True:
        try:
            line = click.prompt('you', prompt_suffix='> ').strip()
        except click.Abort:
            click.echo()
            break
        if not line:
            continue
        if line == '/quit':
            break
        if line.startswith('/service'):
            category = ServiceCategory.coerce(line.removeprefix('/service'))
            click.echo(f'Service: {category.value}', err=True)
            continue

        history.append(ChatMessage(role='user', content=line))
        result = asyncio.run(container.controller.send_message(history, category))
        _echo_result(result)
        history.append(ChatMessage(role='assistant', content=result.content))


@cli.command()
@click.argument('text')
@click.pass_context
def spell(ctx, text):
    """Print TEXT with spelling, capitalization and punctuation corrected."""
    container = _build_container(ctx.obj['config_path'])
    click.echo(asyncio.run(container.controller.spell_check(text)))


@cli.command()
@click.pass_context
def check(ctx):
    """Check that the completion endpoint is reachable."""
    container = _build_container(ctx.obj['config_path'])
    ok, err = container.llm_client.check_connectivity()
    if not ok:
        click.echo(f'Warning: completion endpoint not reachable ({err}). Replies will use offline fallbacks.', err=True)
        sys.exit(1)
    click.echo('Completion endpoint reachable.')
