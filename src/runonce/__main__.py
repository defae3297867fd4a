"""CLI entry point for RunOnce.

Provides commands for detecting a snippet's language, printing its
highlight spans, and running it in a terminal.
"""

from pathlib import Path
from typing import IO, TYPE_CHECKING

import click

from runonce import __version__

if TYPE_CHECKING:
    from runonce.config.models import Config

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)

verbose_option = click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr")


def _load_config(config: Path | None, verbose: bool = False) -> "Config":
    """Load configuration and set up logging, reporting failures as usage errors."""
    from runonce.config.loader import load_config
    from runonce.errors import ConfigurationError
    from runonce.utils.logging import configure_logging

    try:
        cfg = load_config(config)
    except (ConfigurationError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    configure_logging(cfg.logging, verbose=verbose)
    return cfg


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """RunOnce - run a script snippet once.

    Detects the scripting language of a snippet, highlights it, and runs
    it in a new terminal through a temporary file that the terminal
    deletes when you are done.
    """
    pass


@cli.command()
@config_option
@verbose_option
def languages(config: Path | None, verbose: bool) -> None:
    """List supported languages with their extension and command."""
    from runonce.models.language import file_extension

    cfg = _load_config(config, verbose)
    for language in cfg.detection.languages:
        command = cfg.execution.command_for(language)
        click.echo(f"{language.value:<12} {file_extension(language):<6} {command}")


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@click.option(
    "--top",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Only show the N most likely languages",
)
@config_option
@verbose_option
def detect(file: IO[str], top: int | None, config: Path | None, verbose: bool) -> None:
    """Detect the language of FILE (default: stdin).

    Prints every supported language with its confidence and the
    confidence band (low, middle or high) from the configured range.
    """
    from runonce.services.detector import LanguageDetector

    cfg = _load_config(config, verbose)
    detector = LanguageDetector(cfg.detection.languages)
    code = file.read()

    results = detector.detect(code) if top is None else detector.detect_top_n(code, top)
    for result in results:
        level = cfg.detection.confidence.classify(result.confidence)
        click.echo(f"{result.language.value:<12} {result.confidence:.2f} {level.value}")


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8", errors="replace"))
@click.option("--language", "-l", help="Language of FILE (detected when omitted)")
@config_option
@verbose_option
def highlight(file: IO[str], language: str | None, config: Path | None, verbose: bool) -> None:
    """Print the highlight spans of FILE.

    Each line holds start offset, length, token type and the
    highlighted text.
    """
    from runonce.services.detector import LanguageDetector
    from runonce.services.highlighter import Highlighter

    cfg = _load_config(config, verbose)
    code = file.read()

    if language is None:
        language = LanguageDetector(cfg.detection.languages).detect_top(code).language.value

    highlighter = Highlighter()
    if not highlighter.supports(language):
        click.echo(f"No highlighting rules for language: {language}", err=True)
        return

    for span in highlighter.analyze(code, language):
        click.echo(f"{span.start}\t{span.length}\t{span.type.value}\t{span.text(code)!r}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--language", "-l", help="Language of FILE (detected when omitted)")
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory for the script (default: current directory)",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    help="Accept the detected language and skip confirmation",
)
@config_option
@verbose_option
def run(
    file: Path, language: str | None, cwd: Path | None, yes: bool, config: Path | None, verbose: bool
) -> None:
    """Run FILE once in a new terminal.

    The snippet is copied to a temporary script in the working directory.
    The terminal runs it, waits for a key press, then deletes the script.
    """
    from runonce.errors import RunOnceError
    from runonce.services.detector import LanguageDetector
    from runonce.services.executor import ScriptExecutor
    from runonce.services.selection import choose_language

    cfg = _load_config(config, verbose)
    try:
        code = file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{file.name} is not valid UTF-8 text: {e.reason}") from e
    working_directory = cwd or Path.cwd()
    confirm = cfg.selector.confirm_before_execution

    if language is None:
        results = LanguageDetector(cfg.detection.languages).detect(code)
        choice = choose_language(results, cfg.selector, cfg.detection.confidence)
        language = choice.suggested.value
        if choice.show_selector and not yes:
            language = click.prompt(
                f"Detected {choice.suggested.value} ({choice.confidence:.2f}). Language",
                type=click.Choice([lang.value for lang in choice.candidates], case_sensitive=False),
                default=choice.suggested.value,
            )

    if confirm and not yes:
        click.confirm(f"Run {file.name} as {language} in {working_directory}?", abort=True)

    executor = ScriptExecutor(cfg.execution, languages=cfg.detection.languages)
    try:
        executor.execute(code, language, working_directory)
    except RunOnceError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Launched {language} script in {working_directory}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
