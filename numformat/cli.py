"""
CLI entry point for the USA number formatter.
Runs the interactive terminal UI, or formats a single number with --number.
"""

import sys
import asyncio
from pathlib import Path
from typing import Optional
import click
import yaml
from pydantic import ValidationError

from . import __version__
from .errors import ConfigError, NumformatError
from .models import AppConfig
from .utils import get_logger, init_logger


@click.command()
@click.option(
    '--number',
    help='Format this number once and print every rendering (no interactive UI)'
)
@click.option(
    '--copy',
    'copy_index',
    type=click.IntRange(min=0),
    help='With --number: copy the rendering at this row index (0-3) to the clipboard'
)
@click.option(
    '--config',
    type=click.Path(dir_okay=False),
    default='config.yaml',
    help='Path to configuration file (default: config.yaml)'
)
@click.option(
    '--feedback-ms',
    type=click.IntRange(min=0),
    help='Override how long the copy confirmation stays visible'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (detailed logs written to the debug log file)'
)
@click.version_option(version=__version__, prog_name='USA Number Formatter')
def main(
    number: Optional[str],
    copy_index: Optional[int],
    config: str,
    feedback_ms: Optional[int],
    debug: bool
):
    """
    USA Number Formatter

    Type a US phone number and get its international, national, E.164 and
    dotted renderings. Use the arrow keys to pick one and Ctrl+C (or a mouse
    click) to copy it.

    Examples:

      # Interactive mode
      python main.py

      # One-shot formatting
      python main.py --number 5852826396

      # Copy the E.164 rendering
      python main.py --number 5852826396 --copy 2
    """
    if copy_index is not None and number is None:
        click.echo("Error: --copy requires --number.", err=True)
        sys.exit(2)

    try:
        config_data = load_config(config)
        app_config = build_app_config(config_data, feedback_ms=feedback_ms, debug=debug)
    except ConfigError as e:
        click.echo(f"Error loading config file: {e}", err=True)
        sys.exit(1)

    if number is not None:
        init_logger(
            debug_mode=app_config.debug_mode,
            debug_log_file=app_config.debug_log_file if app_config.debug_mode else None
        )
        sys.exit(run_once(app_config, number, copy_index))

    # The full-screen UI owns the console; logs only go to the debug file
    init_logger(
        debug_mode=app_config.debug_mode,
        debug_log_file=app_config.debug_log_file if app_config.debug_mode else None,
        console=False
    )

    from .terminal import TerminalApp

    try:
        TerminalApp(app_config).run()
    except NumformatError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def run_once(config: AppConfig, number: str, copy_index: Optional[int] = None) -> int:
    """
    Format one number and optionally copy one of its renderings.

    Returns:
        Process exit code
    """
    from .interaction import InteractionController
    from .services import SystemClipboard

    logger = get_logger()

    async def session() -> int:
        controller = InteractionController(SystemClipboard(), config=config)
        state = controller.on_input_changed(number)

        if state.formats.is_empty:
            logger.warning(f"Not a valid US phone number: {number!r}")
            return 1

        logger.print_table(
            title=config.title,
            data=[[index, key, value] for index, (key, value) in enumerate(state.formats.items())],
            headers=["#", "Format", "Value"]
        )

        if copy_index is None:
            return 0

        task = controller.on_copy_requested(copy_index)
        if task is None:
            logger.error(f"No rendering at index {copy_index}")
            return 1

        try:
            await task
            feedback = controller.feedback_message
        finally:
            controller.close()

        if not feedback:
            logger.error("Clipboard write failed")
            return 1

        logger.success(f"{feedback} ({controller.state.selected_value})")
        return 0

    return asyncio.run(session())


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file. A missing file means defaults."""
    path = Path(config_path)

    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    return data


def build_app_config(
    config_data: dict,
    feedback_ms: Optional[int] = None,
    debug: bool = False
) -> AppConfig:
    """Build AppConfig from config file and CLI overrides."""

    feedback_section = config_data.get('feedback', {}) or {}
    ui_section = config_data.get('ui', {}) or {}
    debug_section = config_data.get('debug', {}) or {}

    try:
        return AppConfig(
            feedback_message=feedback_section.get('message', 'Number has copied!'),
            feedback_duration_ms=(
                feedback_ms if feedback_ms is not None
                else feedback_section.get('duration_ms', 1000)
            ),
            suppress_stale_feedback=feedback_section.get('suppress_stale', False),
            title=ui_section.get('title', 'USA Number Formatter'),
            mouse_enabled=ui_section.get('mouse', True),
            debug_mode=debug,
            debug_log_file=debug_section.get('log_file', './debug/debug.log'),
        )
    except ValidationError as e:
        raise ConfigError(str(e)) from e


if __name__ == '__main__':
    main()
