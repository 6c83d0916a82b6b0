"""
Command line entry point.

Usage:
    gtrans [-to LANG] [-open] [text ...]

Reads the text from STDIN when no arguments are given.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from typing import Callable, Mapping, Sequence, TextIO
from urllib.parse import quote

from gtrans import __version__
from gtrans.client import GoogleTranslateClient
from gtrans.errors import GtransError
from gtrans.language import detect_target_lang

logger = logging.getLogger(__name__)

SECOND_LANG_ENV = "GOOGLE_TRANSLATE_SECOND_LANG"
WEB_URL = "https://translate.google.com/#auto/{lang}/{text}"

EPILOG = """\
[one of these]
  export GOOGLE_TRANSLATE_API_KEY=<Your Google Translate API Key>
  export GOOGLE_TRANSLATE_ACCESS_TOKEN=<Your Google Translate Access Token>

[optional]
  export GOOGLE_TRANSLATE_LANG=<default target language (e.g. en, ja, ...)>
  export GOOGLE_TRANSLATE_SECOND_LANG=<second language (e.g. en, ja, ...)>

If you set both GOOGLE_TRANSLATE_LANG and GOOGLE_TRANSLATE_SECOND_LANG,
gtrans automatically switches target language.

Example:
  $ gtrans "Golang is awesome"
  Golangは素晴らしいです
  $ gtrans "Golangは素晴らしいです"
  Golang is great
  $ gtrans "Golangは素晴らしいです" | gtrans | gtrans | gtrans ...
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtrans",
        description=(
            "gtrans translates input text specified by argument or STDIN using "
            "Google Translate. Source language will be automatically detected."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Everything from the first word of text on is text, flags included.
    parser.add_argument(
        "text", nargs=argparse.REMAINDER, help="text to translate (default: read STDIN)"
    )
    parser.add_argument("-to", "--to", dest="target", default="", help="target language")
    parser.add_argument(
        "-open",
        "--open",
        dest="open_browser",
        action="store_true",
        help="open Google Translate in browser instead of writing translated result to STDOUT",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to STDERR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - [gtrans] %(message)s",
        stream=sys.stderr,
    )


def read_input(words: Sequence[str], stdin: TextIO) -> str:
    if words[:1] == ["--"]:
        words = words[1:]
    text = " ".join(words)
    if text != "":
        return text

    # Undecodable bytes are replaced rather than rejected.
    buffer = getattr(stdin, "buffer", None)
    try:
        if buffer is not None:
            return buffer.read().decode("utf-8", errors="replace")
        return stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise GtransError(f"failed to read STDIN: {exc}") from exc


def resolve_bounce(client: GoogleTranslateClient, text: str, target: str, second_lang: str) -> str:
    """
    Switch to second_lang when the text is already written in target.

    The comparison is a plain string match on the codes Google returns.
    """
    if not second_lang:
        return target

    source = client.detect(text)
    if source == target:
        logger.info("Input is already %r, translating to %r instead", target, second_lang)
        return second_lang
    return target


def google_translate_url(target: str, text: str) -> str:
    return WEB_URL.format(lang=target, text=quote(text, safe=""))


def open_google_translate(
    target: str, text: str, opener: Callable[[str], bool] | None = None
) -> str:
    url = google_translate_url(target, text)
    opener = opener or webbrowser.open
    logger.debug("Opening %s", url)
    if not opener(url):
        raise GtransError(f"failed to open browser for {url}")
    return url


def run_translation(
    target: str,
    text: str,
    out: TextIO,
    environ: Mapping[str, str] | None = None,
    client: GoogleTranslateClient | None = None,
) -> None:
    env = os.environ if environ is None else environ
    client = client or GoogleTranslateClient.from_env(env)

    target = resolve_bounce(client, text, target, env.get(SECOND_LANG_ENV, ""))
    translated = client.translate(text, target)
    out.write(translated + "\n")


def run(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        target = detect_target_lang(args.target, environ)
        text = read_input(args.text, stdin or sys.stdin)
        if args.open_browser:
            open_google_translate(target, text)
        else:
            run_translation(target, text, stdout or sys.stdout, environ)
    except GtransError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())
