# smp/cli.py
"""
Command-line interface for the smp sample tool, powered by Typer.
"""

import asyncio
import enum
import json
from pathlib import Path
from typing import Optional

import typer
import yaml

from smp.dataprocess import fetch as fetch_mod
from smp.dataprocess import json_query, parallel as parallel_mod, transform as transform_mod
from smp.executor import CommandExecutable, CommandExecutor, CommandFailure, ExecutionResult, SmpError, load_executor
from smp.processing.retry import CommandProcessor
from smp.utils.config import DEFAULT_MAX_RETRIES, executor_settings, load_config
from smp.utils.logging import get_logger, setup_logger

# Create the main Typer application
app = typer.Typer(
    no_args_is_help=True,
    help="Sample command-line tool for running shell commands.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

dataprocess_app = typer.Typer(
    no_args_is_help=True,
    help="Data processing examples: fetch, json, parallel, transform.",
)
app.add_typer(dataprocess_app, name="dataprocess")

# A shared dictionary to store global state from the callback
state = {}


class Backend(str, enum.Enum):
    """Enum for available executor backends."""

    local = "local"
    mock = "mock"


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Path to a file for logging."
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        help="YAML file with executor and retry settings.",
    ),
    shell: Optional[str] = typer.Option(
        None, "--shell", help="Shell used to run commands (overrides config)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.001, help="Per-command timeout in seconds. Default: none."
    ),
    backend: Backend = typer.Option(
        Backend.local, "--backend", help="Executor backend."
    ),
):
    """
    Main callback to set up logging and global state.
    """
    setup_logger(logfile=log_file, verbose=verbose)
    log = get_logger(__name__)

    try:
        cfg = load_config(config_path) if config_path else {}
        settings = executor_settings(cfg)
    except (ValueError, yaml.YAMLError) as e:
        log.error("Invalid configuration %s: %s", config_path, e)
        raise typer.Exit(code=1)
    if shell:
        settings["shell"] = shell
    if timeout is not None:
        settings["timeout"] = timeout

    state["verbose"] = verbose
    state["backend"] = backend.value
    state.update(settings)
    log.debug("CLI context initialized. backend=%s, settings=%s", backend.value, settings)


def _executor() -> CommandExecutable:
    backend = state.get("backend", Backend.local.value)
    if backend == Backend.local.value:
        return load_executor(backend, shell=state["shell"], timeout=state["timeout"])
    return load_executor(backend)


def _run(command: str) -> ExecutionResult:
    """Execute through the configured backend; launch/timeout errors exit with 1."""
    log = get_logger(__name__)
    try:
        return _executor().execute(command)
    except SmpError as e:
        log.error("%s", e)
        raise typer.Exit(code=1)


def _exit_status(exit_code: int) -> int:
    """Map a signal death (-N) to the shell convention 128+N."""
    return 128 - exit_code if exit_code < 0 else exit_code


def _report(result: ExecutionResult) -> None:
    """Print captured output; on a non-zero exit, print the error and exit with its code."""
    if result.exit_code != 0:
        typer.echo(result.error)
        raise typer.Exit(code=_exit_status(result.exit_code))
    if result.output:
        typer.echo(result.output)


@app.command()
def simple():
    """
    Example of executing a simple command.
    """
    _report(_run('echo "Hello, world"'))


@app.command("complex")
def complex_command():
    """
    Example of executing multiple commands in sequence.
    """
    _report(_run("date '+%Y-%m-%d %H:%M:%S'; echo 'Current directory:'; pwd; echo 'Current user:'; whoami"))


@app.command()
def pipe():
    """
    Example of complex command using pipes.
    """
    _report(_run("ls -la | grep '^d' | sort -r | head -3"))


@app.command()
def output():
    """
    Example of obtaining command output.
    """
    result = _run("echo 'This text will be processed in Python' | wc -w")
    if result.exit_code != 0:
        _report(result)
    typer.echo(f"Command output: {result.output} words")
    typer.echo("You can process and transform output in Python")


@app.command()
def args(
    text: str = typer.Argument(..., help="String to process"),
    count: int = typer.Option(1, "--count", "-c", min=0, help="Number of repetitions"),
    uppercase: bool = typer.Option(False, "--uppercase", "-u", help="Convert to uppercase"),
):
    """
    Example of a command that receives arguments.
    """
    log = get_logger(__name__)
    executor = _executor()
    if not isinstance(executor, CommandExecutor):
        log.error("Backend '%s' does not support text processing.", state.get("backend"))
        raise typer.Exit(code=1)
    try:
        result = executor.execute_text_processing(text, count=count, uppercase=uppercase)
    except SmpError as e:
        log.error("%s", e)
        raise typer.Exit(code=1)
    _report(result)


@app.command()
def retry(
    command: str = typer.Argument(..., help="Shell command to run until it succeeds"),
    max_retries: Optional[int] = typer.Option(
        None, "--max-retries", "-n", min=1,
        help=f"Maximum number of attempts (config retry.max_retries, default {DEFAULT_MAX_RETRIES}).",
    ),
):
    """
    Run a command, retrying immediately while it exits non-zero.
    """
    log = get_logger(__name__)
    attempts = max_retries if max_retries is not None else state.get("max_retries", DEFAULT_MAX_RETRIES)
    processor = CommandProcessor(_executor())
    try:
        result = processor.process_with_retry(command, max_retries=attempts)
    except CommandFailure as e:
        typer.echo(e.stderr)
        raise typer.Exit(code=_exit_status(e.exit_code))
    except SmpError as e:
        log.error("%s", e)
        raise typer.Exit(code=1)
    if result:
        typer.echo(result)


@dataprocess_app.command("fetch")
def fetch(
    url: str = typer.Option(fetch_mod.DEFAULT_URL, "--url", "-u", help="API URL to fetch data from"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", "-o", help="Output data file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose output"),
):
    """
    Example of asynchronous API data retrieval.
    """
    if verbose:
        typer.echo(f"Starting data fetch from URL: {url}")
    try:
        data = asyncio.run(fetch_mod.fetch_json(url))
    except fetch_mod.FetchError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    pretty = fetch_mod.pretty_json(data)
    if output_file:
        output_file.write_text(pretty, encoding="utf-8")
        typer.echo(f"Result saved to file '{output_file}'")
    else:
        typer.echo("API response:")
        typer.echo(pretty)


@dataprocess_app.command("json")
def json_command(
    input_file: Optional[Path] = typer.Option(
        None, "--input-file", "-i", exists=True, dir_okay=False,
        help="Path to the JSON file to process",
    ),
    key_path: Optional[str] = typer.Option(None, "--key-path", "-k", help="JSON key path to extract (e.g., user.name)"),
    filter_expr: Optional[str] = typer.Option(None, "--filter", "-f", help="Filter by specific condition (e.g., id=1)"),
):
    """
    Example of JSON data processing.
    """
    try:
        items = json_query.load_items(input_file)
    except (ValueError, OSError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    if key_path:
        typer.echo(f"Extraction result for key '{key_path}':")
        for index, value in json_query.extract_key_path(items, key_path):
            shown = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
            typer.echo(f"Item[{index}]: {shown}")

    parsed = json_query.parse_filter(filter_expr) if filter_expr else None
    if parsed:
        key, value = parsed
        typer.echo(f"Results for filter '{key}={value}':")
        matched = json_query.filter_items(items, key, value)
        if not matched:
            typer.echo("No items match the condition")
        for index, item in enumerate(matched):
            typer.echo(f"Result[{index}]:")
            typer.echo(json.dumps(item, indent=2, ensure_ascii=False))

    if key_path is None and filter_expr is None:
        typer.echo("JSON data:")
        typer.echo(json.dumps(items, indent=2, ensure_ascii=False))


@dataprocess_app.command("parallel")
def parallel(
    tasks: int = typer.Option(5, "--tasks", "-t", min=0, help="Number of tasks to process"),
    duration: float = typer.Option(1.0, "--duration", "-d", min=0.0, help="Processing time for each task (seconds)"),
    sequential: bool = typer.Option(False, "--sequential", "-s", help="Execute sequentially instead of in parallel"),
):
    """
    Example of concurrent processing with asyncio.
    """
    mode = "sequentially" if sequential else "in parallel"
    typer.echo(f"Starting task processing: executing {tasks} tasks ({duration} seconds each) {mode}")

    report = asyncio.run(parallel_mod.run_tasks(tasks, duration, sequential=sequential, emit=typer.echo))

    typer.echo("All tasks completed")
    typer.echo(f"Elapsed time: {report.elapsed:.2f} seconds")
    typer.echo(f"Theoretical processing time: {report.theoretical:.2f} seconds")
    typer.echo(f"Efficiency: {report.efficiency:.2f}%")


@dataprocess_app.command("transform")
def transform(
    input_file: Path = typer.Option(..., "--input-file", "-i", help="Input file to process"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", "-o", help="Output file to save the result"),
    transform_type: str = typer.Option(
        "uppercase", "--transform-type", "-t",
        help="Transformation type to execute (uppercase, lowercase, count, reverse)",
    ),
    backup: bool = typer.Option(False, "--backup", "-b", help="Create a backup of the original file"),
):
    """
    Example of file transformation processing.
    """
    try:
        out = transform_mod.transform_file(
            input_file, transform_type=transform_type, output_path=output_file, backup=backup
        )
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    if backup:
        typer.echo(f"Backup created: {transform_mod.backup_path(input_file)}")
    typer.echo(f"Transformation result saved: {out}")

    typer.echo(f"\nProcessing result preview (first {transform_mod.PREVIEW_LIMIT} characters):")
    typer.echo("--------------------------")
    typer.echo(transform_mod.preview(out.read_text(encoding="utf-8")))
    typer.echo("--------------------------")


if __name__ == "__main__":
    app()
