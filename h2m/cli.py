"""Command-line interface: md2html and html2md commands plus an interactive prompt."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
import threading
from typing import IO, Sequence

from h2m.converter import convert_html_to_markdown, convert_markdown_to_html
from h2m.files import read_file, write_file
from h2m.styles import COMMAND, ERROR, HELP, SIGNATURE, TITLE

APP_VERSION = "1.0.0"
PROG = "H2M"

_LOGO = "H2M"
_HELP_TEXT = """Un outil CLI pour la conversion de fichiers.

    Fonctionnalités principales:
    - Conversion Markdown → HTML
    - Conversion HTML → Markdown

    Exemples d'utilisation:
    """
_EXAMPLES = """
    md2html -i document.md -o resultat.html
    html2md -i page.html -o resultat.md
    """
_EXEC_ERROR = "Erreur d'exécution de la commande : "
_GOODBYE = "Fermeture de H2M..."


class Spinner:
    """A terminal spinner drawn by a background thread while work is in progress."""

    FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

    def __init__(
        self,
        suffix: str = " Converting...",
        interval: float = 0.1,
        stream: IO[str] | None = None,
        enabled: bool | None = None,
    ) -> None:
        self.suffix = suffix
        self.interval = interval
        self.stream = stream if stream is not None else sys.stdout
        self.enabled = enabled
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._width = 0

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _should_draw(self) -> bool:
        if self.enabled is not None:
            return self.enabled
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _spin(self) -> None:
        for frame in itertools.cycle(self.FRAMES):
            line = f"{frame}{self.suffix}"
            self._width = len(line)
            self.stream.write(f"\r{line}")
            self.stream.flush()
            if self._stop_event.wait(self.interval):
                break

    def start(self) -> None:
        """Begin drawing the spinner; does nothing if it is already running."""
        if self.running or not self._should_draw():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop drawing the spinner and erase its line."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        self.stream.write("\r" + " " * self._width + "\r")
        self.stream.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


class _ParserExit(SystemExit):
    def __init__(self, status: int, message: str | None) -> None:
        super().__init__(status)
        self.message = (message or "").strip()


class _Parser(argparse.ArgumentParser):
    def exit(self, status=0, message=None):
        if message:
            sys.stderr.write(message)
        raise _ParserExit(status, message)


def format_long_description() -> str:
    """Return the logo, main features and usage examples."""
    return TITLE.sprint(_LOGO) + "\n" + HELP.sprint(_HELP_TEXT) + COMMAND.sprint(_EXAMPLES)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its md2html and html2md commands."""
    parser = _Parser(
        prog=PROG,
        description=format_long_description(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-o", "--output", default="", help=HELP.sprint("fichier de sortie (obligatoire)"))
    parser.add_argument("-i", "--input", default="", help=HELP.sprint("fichier d'entrée (obligatoire)"))
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"{PROG} version {APP_VERSION}",
        help=HELP.sprint("affiche la version"),
    )
    parser.set_defaults(handler=None)

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument("-o", "--output", default=argparse.SUPPRESS, help=HELP.sprint("fichier de sortie (obligatoire)"))
    shared.add_argument("-i", "--input", default=argparse.SUPPRESS, help=HELP.sprint("fichier d'entrée (obligatoire)"))

    commands = parser.add_subparsers(dest="command", title=HELP.sprint("Commandes disponibles"))
    md2html = commands.add_parser(
        "md2html", aliases=["markdown-to-html"], parents=[shared],
        help="Convert Markdown to HTML", description="Convert a Markdown file to HTML",
    )
    md2html.set_defaults(handler=run_md2html)
    html2md = commands.add_parser(
        "html2md", aliases=["html-to-markdown"], parents=[shared],
        help="Convert HTML to Markdown", description="Convert an HTML file to Markdown",
    )
    html2md.set_defaults(handler=run_html2md)
    return parser


def _ask(prompt: str) -> str:
    print(prompt)
    tokens = sys.stdin.readline().split()
    return tokens[0] if tokens else ""


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _convert_file(
    input_file: str,
    output_file: str,
    *,
    source_kind: str,
    source_ext: str,
    target_kind: str,
    target_ext: str,
    convert,
) -> str:
    if not input_file:
        input_file = _ask(f"Enter the path to the {source_kind} file:")
    if not input_file:
        raise SystemExit(f"Error: No {source_kind} file provided")
    if _extension(input_file) != source_ext:
        raise SystemExit(f"Error: Input file must have a {source_ext} extension")

    with Spinner():
        try:
            content = read_file(input_file)
        except OSError as exc:
            raise SystemExit(f"Read error: {exc}") from exc
        try:
            result = convert(content)
        except Exception as exc:
            raise SystemExit(f"Conversion error: {exc}") from exc

    if not output_file:
        output_file = _ask(f"Enter the path to the {target_kind} file:")
    if _extension(output_file) != target_ext:
        raise SystemExit(f"Error: Output file must have a {target_ext} extension")

    try:
        write_file(output_file, result)
    except OSError as exc:
        raise SystemExit(f"Write error: {exc}") from exc
    print(f"Conversion successful! {target_kind} saved to {output_file} {SIGNATURE}")
    return result


def run_md2html(input_file: str, output_file: str) -> str:
    """Convert a .md file to a .html file, prompting for missing paths."""
    return _convert_file(
        input_file, output_file,
        source_kind="Markdown", source_ext=".md",
        target_kind="HTML", target_ext=".html",
        convert=convert_markdown_to_html,
    )


def run_html2md(input_file: str, output_file: str) -> str:
    """Convert a .html file to a .md file, prompting for missing paths."""
    return _convert_file(
        input_file, output_file,
        source_kind="HTML", source_ext=".html",
        target_kind="Markdown", target_ext=".md",
        convert=lambda content: convert_html_to_markdown(content.decode("utf-8", errors="replace")),
    )


def _run_command(parser: argparse.ArgumentParser, args: Sequence[str]) -> int:
    try:
        namespace = parser.parse_args(list(args))
    except _ParserExit as exc:
        if exc.code:
            print(ERROR.sprint(_EXEC_ERROR), exc.message)
        return int(exc.code or 0)
    if namespace.handler is None:
        parser.print_help()
        return 0
    namespace.handler(namespace.input, namespace.output)
    return 0


def start_repl(stream: IO[str] | None = None) -> None:
    """Read commands line by line and run them until 'exit' or end of input."""
    stream = stream if stream is not None else sys.stdin
    parser = build_parser()
    print("\nEntrez une commande (ou tapez 'exit' pour quitter) :")
    try:
        while True:
            print(TITLE.sprint("H2M> "), end="", flush=True)
            line = stream.readline()
            if not line:
                print(_GOODBYE)
                return
            command = line.strip()
            if command == "exit":
                print(_GOODBYE)
                return
            if not command:
                continue
            _run_command(parser, command.split())
    except KeyboardInterrupt:
        print("\n" + _GOODBYE)


def execute(argv: Sequence[str] | None = None) -> int:
    """Run the command line; with no arguments, start the interactive prompt."""
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if any(arg in ("--help", "-h") for arg in args):
        return _run_command(parser, args)
    print(format_long_description())
    if args:
        return _run_command(parser, args)
    start_repl()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the h2m command."""
    return execute(argv)


if __name__ == "__main__":
    sys.exit(main())