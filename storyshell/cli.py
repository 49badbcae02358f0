"""
Command line entry point for the demo shell
"""
import sys
from functools import update_wrapper
from typing import Optional

import click

from storyshell.core.config import Settings, settings, validate_configuration
from storyshell.core.exceptions import ConfigurationBindingError, StoryShellError
from storyshell.services.shell_factory import ShellFactory
from storyshell.shell import DemoShell
from storyshell.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)

SHELL_COMMANDS = {
    "demo": "Demo: write a story and have it reviewed",
    "animal": "Invent an animal",
    "help": "List available commands",
    "exit": "Leave the shell (also: quit)",
}


def build_shell(config: Settings) -> DemoShell:
    """Bind configuration and wire the shell, exiting on configuration errors"""
    try:
        return ShellFactory(config).create_shell()
    except ConfigurationBindingError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)


def pass_shell(f):
    """Hand the command a shell wired from the group's settings, built on invocation"""
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        return ctx.invoke(f, build_shell(ctx.obj), *args, **kwargs)
    return update_wrapper(new_func, f)


@click.group()
@click.option('--properties', 'properties_file', type=click.Path(dir_okay=False),
              help='Properties file holding story.* settings')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                               case_sensitive=False),
              help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, properties_file: Optional[str], log_level: Optional[str]):
    """Story agent demo shell"""
    overrides = {}
    if properties_file:
        overrides["properties_file"] = properties_file
    if log_level:
        overrides["log_level"] = log_level
    config = Settings(**overrides) if overrides else settings

    setup_logging(config)
    validate_configuration(config)

    ctx.obj = config


@cli.command()
@pass_shell
def demo(shell: DemoShell):
    """Demo: write a story and have it reviewed"""
    try:
        click.echo(shell.demo())
    except StoryShellError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@pass_shell
def animal(shell: DemoShell):
    """Invent an animal"""
    try:
        click.echo(shell.animal())
    except StoryShellError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command(name="shell")
@pass_shell
def interactive(shell: DemoShell):
    """Interactive shell: run demo and animal repeatedly"""
    operations = {"demo": shell.demo, "animal": shell.animal}
    click.echo("Story agent shell. Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("storyshell", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        command = line.strip().lower()
        if not command:
            continue
        if command in ("exit", "quit"):
            break
        if command == "help":
            for name, description in SHELL_COMMANDS.items():
                click.echo(f"  {name:<8} {description}")
            continue

        operation = operations.get(command)
        if operation is None:
            click.echo(f"Unknown command: {command}. Type 'help' for commands.")
            continue

        try:
            click.echo(operation())
        except StoryShellError as e:
            logger.debug(f"Shell command '{command}' failed: {e}")
            click.echo(f"❌ Error: {e}", err=True)


if __name__ == "__main__":
    cli()
