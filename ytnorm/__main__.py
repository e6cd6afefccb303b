"""ytnorm CLI - YouTube URL normalization and validation."""

import asyncio
import json
from pathlib import Path
from typing import Any

import fire
import yaml  # type: ignore[import-untyped]
from rich.console import Console
from rich.table import Table

from ytnorm import __version__
from ytnorm.batch import BatchProgress, BatchValidator
from ytnorm.config import get_config_path, load_config
from ytnorm.logging import configure_logging, logger
from ytnorm.models import URLValidationError, ValidationResult
from ytnorm.normalizer import normalize
from ytnorm.validator import classify, get_url_hint, validate_quick

console = Console()

_STATE_STYLES = {"empty": "dim", "typing": "yellow", "valid": "green", "invalid": "red"}


def read_url_list(file_path: Path | str) -> list[str]:
    """Read URLs from a text file (one per line) or a YAML list.

    Text files skip blank lines and lines starting with '#'. YAML files may hold
    a plain list or a mapping with a 'urls' key.
    """
    path = Path(file_path)
    content = path.read_text(encoding="utf-8")

    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(content)
        if isinstance(data, dict):
            data = data.get("urls")
        if not isinstance(data, list):
            raise ValueError("Invalid YAML: expected a list of URLs or a 'urls' key")
        return [str(item) for item in data]

    return [
        line.strip()
        for line in content.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]


class YtnormCLI:
    """YouTube URL normalization and validation CLI.

    Examples:
        ytnorm normalize "youtu.be/dQw4w9WgXcQ?t=1m30s"
        ytnorm --json-output validate "https://vimeo.com/123"
        ytnorm classify "https://www.youtube"
        ytnorm batch urls.txt --output report.yaml
    """

    def __init__(self, verbose: bool = False, json_output: bool = False) -> None:
        """Initialize CLI with options.

        Args:
            verbose: Enable debug logging
            json_output: Output results as JSON instead of human-readable text
        """
        configure_logging(verbose)
        self._json = json_output
        logger.debug("ytnorm initialized with verbose={}, json={}", verbose, json_output)

    def _output(self, data: dict[str, Any]) -> dict[str, Any] | None:
        """Output result as JSON or print nothing (human output already printed)."""
        if self._json:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        return data if self._json else None

    def version(self) -> None:
        """Show ytnorm version."""
        if self._json:
            self._output({"version": __version__})
        else:
            console.print(f"ytnorm {__version__}")

    def config(self) -> dict[str, Any] | None:
        """Show config file location and effective settings.

        Example:
            ytnorm config
        """
        config_path = get_config_path()
        settings = load_config(config_path)

        if self._json:
            return self._output(
                {
                    "config_path": str(config_path),
                    "config_exists": config_path.exists(),
                    "settings": settings.model_dump(),
                }
            )

        console.print(f"[bold]Config path:[/bold] {config_path}")
        if not config_path.exists():
            console.print("[dim]No config file, using defaults[/dim]")
        for key, value in settings.model_dump().items():
            console.print(f"  {key} = {value}")
        return None

    def normalize(self, url: str) -> dict[str, Any] | None:
        """Print the canonical watch URL and any metadata for a YouTube URL.

        Exits with status 1 if the URL cannot be normalized.

        Example:
            ytnorm normalize "https://m.youtube.com/watch?v=dQw4w9WgXcQ&t=30"
        """
        # fire turns numeric-looking IDs into ints
        url = str(url)
        try:
            normalized = normalize(url)
        except URLValidationError as e:
            if self._json:
                self._output({"error": e.to_dict()})
            else:
                console.print(f"[red]{e.kind.name}: {e.message}[/red]")
            raise SystemExit(1) from e

        if self._json:
            return self._output(normalized.to_dict())

        console.print(normalized.canonical)
        if normalized.metadata is not None:
            for key, value in normalized.metadata.to_dict().items():
                console.print(f"  [dim]{key}:[/dim] {value}")
        return None

    def validate(self, url: str) -> dict[str, Any] | None:
        """Validate a URL and explain what is wrong with it, if anything.

        Example:
            ytnorm validate "https://www.youtube.com/channel/UCxxx"
        """
        result = validate_quick(str(url))
        if self._json:
            return self._output(result.to_dict())
        _print_result(result)
        return None

    def classify(self, text: str) -> dict[str, Any] | None:
        """Classify possibly-incomplete input as empty, typing, valid or invalid.

        Example:
            ytnorm classify "https://www.youtu"
        """
        text = str(text)
        state = classify(text)
        hint = get_url_hint(text)

        if self._json:
            return self._output({"input_state": state.value, "hint": hint})

        style = _STATE_STYLES[state.value]
        console.print(f"[{style}]{state.value}[/{style}]")
        if hint:
            console.print(f"[dim]{hint}[/dim]")
        return None

    def batch(self, file_path: str, output: str | None = None) -> dict[str, Any] | None:
        """Validate every URL in a file (one per line, or a YAML list).

        Uses batch_size and batch_delay_ms from the config.

        Args:
            file_path: Text or YAML file with URLs
            output: Write a YAML report to this path

        Example:
            ytnorm batch urls.txt
            ytnorm batch urls.yaml --output report.yaml
        """
        settings = load_config()
        urls = read_url_list(file_path)
        validator = BatchValidator(settings.batch_size, settings.batch_delay_seconds)

        def on_progress(progress: BatchProgress) -> None:
            logger.debug("Batch progress: {}/{}", progress.done, progress.total)

        results = asyncio.run(validator.run(urls, on_progress))
        report: dict[str, Any] = {
            "total": len(results),
            "valid": sum(1 for r in results if r.is_valid),
            "results": [{"input": url, **r.to_dict()} for url, r in zip(urls, results)],
        }

        if output:
            Path(output).write_text(
                yaml.dump(report, default_flow_style=False, allow_unicode=True, sort_keys=False),
                encoding="utf-8",
            )
            logger.info("Saved report to {}", output)

        if self._json:
            return self._output(report)

        table = Table(title=f"{report['valid']}/{report['total']} valid")
        table.add_column("Input", overflow="fold")
        table.add_column("Result", overflow="fold")
        for url, result in zip(urls, results):
            if result.normalized_url is not None:
                table.add_row(url, f"[green]{result.normalized_url.canonical}[/green]")
            elif result.error is not None:
                table.add_row(url, f"[red]{result.error.kind.name}[/red] {result.error.message}")
        console.print(table)
        return None


def _print_result(result: ValidationResult) -> None:
    if result.normalized_url is not None:
        console.print(f"[green]Valid[/green] {result.normalized_url.canonical}")
        return
    error = result.error
    if error is None:
        return
    console.print(f"[red]{error.kind.name}[/red]: {error.message}")
    if error.suggestion:
        console.print(f"  [dim]Suggestion:[/dim] {error.suggestion}")
    if error.example:
        console.print(f"  [dim]Example:[/dim] {error.example}")


def main() -> None:
    """CLI entry point."""
    fire.Fire(YtnormCLI)


if __name__ == "__main__":
    main()
