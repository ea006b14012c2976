import sys
from pathlib import Path
from typing import Annotated, NoReturn

import rich
from rich.markup import escape
import typer

from .config import CLIOptions, Config, Newline
from .measure import measure_text, viewpoint
from .wrapper import LineWrapper, WidthError

DEFAULT_WIDTH = 80

app = typer.Typer(
    no_args_is_help=False,
    add_completion=False,
    context_settings=dict(help_option_names=["-h", "--help"]),
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    help="Wrap text to a fixed display width, with wide East Asian characters and Japanese line breaking rules.",
)


def error(message: str) -> NoReturn:
    rich.print(f"[bold red]Error:[/bold red] [red]{escape(message)}[/red]", file=sys.stderr)
    sys.exit(1)


def resolve_options(
    config: Config,
    file: Path | None,
    width: int | None,
    indent: str | None,
    newline: Newline | None,
    measure: bool,
) -> CLIOptions:
    if width is None:
        if config.width is not None:
            width = config.width
        elif sys.stdout.isatty():
            width = viewpoint().cols
        else:
            width = DEFAULT_WIDTH
    return CLIOptions(
        width=width,
        indent=indent if indent is not None else config.indent,
        newline=newline or config.newline,
        measure=measure,
        file=file,
    )


@app.command()
def run(
    file: Annotated[
        Path | None,
        typer.Argument(help="The file to wrap. Reads STDIN when omitted."),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Maximum line width, indent included."),
    ] = None,
    indent: Annotated[
        str | None,
        typer.Option("--indent", "-i", help="Indent prepended to every line."),
    ] = None,
    newline: Annotated[
        Newline | None,
        typer.Option("--newline", help="Line separator of the output."),
    ] = None,
    measure: Annotated[
        bool,
        typer.Option("--measure", help="Print the size of the wrapped text."),
    ] = False,
):
    config = Config.load()
    options = resolve_options(config, file, width, indent, newline, measure)

    try:
        wrapper = LineWrapper(options.indent, options.width)
    except WidthError as e:
        error(str(e))

    try:
        text = options.read_input()
    except (OSError, UnicodeDecodeError) as e:
        error(f"cannot read {options.file or 'stdin'}: {e}")

    if options.measure:
        size, _ = measure_text("\n".join(wrapper.wrap_lines(text)))
        print(f"{size.rows}x{size.cols}")
        return

    result = wrapper.wrap(text, options.newline.sequence)
    if result:
        sys.stdout.write(result + options.newline.sequence)


def main():
    try:
        app()
    except KeyboardInterrupt:
        rich.print("\n[red]Aborted.[/red]")
        sys.exit(1)
