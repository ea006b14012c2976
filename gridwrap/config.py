import os
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn
import tomllib

import rich
from rich.markup import escape
from pydantic import BaseModel, Field, ValidationError

USER_CONFIG_PATH = Path.home() / ".config" / "gridwrap" / "config.toml"


def config_error(message: str) -> NoReturn:
    rich.print(f"[bold red]Error:[/bold red] {escape(message)}", file=sys.stderr)
    sys.exit(1)


class Newline(StrEnum):
    LF = "lf"
    CRLF = "crlf"
    NATIVE = "native"

    @property
    def sequence(self) -> str:
        match self:
            case Newline.LF:
                return "\n"
            case Newline.CRLF:
                return "\r\n"
            case _:
                return os.linesep


class Config(BaseModel):
    width: int | None = Field(
        default=None,
        gt=0,
        description="Maximum line width in columns, indent included. Unset means the terminal width, or 80 when not writing to a terminal.",
    )
    indent: str = Field(default="", description="Indent prepended to every line.")
    newline: Newline = Field(
        default=Newline.NATIVE, description="Line separator of the output."
    )

    @staticmethod
    def load(path: Path | None = None) -> "Config":
        path = path or USER_CONFIG_PATH
        try:
            if not path.is_file():
                # Copy config.template.toml to the config path
                path.parent.mkdir(parents=True, exist_ok=True)
                template = Path(__file__).parent / "config.template.toml"
                path.write_text(template.read_text())
            doc = tomllib.loads(path.read_text())
        except OSError as e:
            config_error(f"cannot read config file {path}: {e}")
        except tomllib.TOMLDecodeError as e:
            config_error(f"invalid config file: {e}")
        main = doc.get("gridwrap", {})
        if not isinstance(main, dict):
            config_error(f"invalid config file: [gridwrap] must be a table in {path}")
        if width := os.getenv("GRIDWRAP_WIDTH"):
            main["width"] = width
        if (indent := os.getenv("GRIDWRAP_INDENT")) is not None:
            main["indent"] = indent
        try:
            return Config.model_validate(main)
        except ValidationError as e:
            config_error(f"invalid configuration: {e}")


class CLIOptions(BaseModel):
    width: int = 80
    indent: str = ""
    newline: Newline = Newline.NATIVE

    measure: bool = False
    """Print the size of the wrapped text instead of the text"""

    file: Path | None = None
    """The file to wrap. Read STDIN when unset."""

    def read_input(self) -> str:
        if self.file is None:
            return sys.stdin.read()
        return self.file.read_text(encoding="utf-8")
