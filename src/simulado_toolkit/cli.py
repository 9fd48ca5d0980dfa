"""
Command line export of question sheets.

Usage:
    simulado-pdf questions.json --topic "Frações" --subject "Matemática"
    simulado-pdf simulado.json --topic "Simulado 1" -o out/simulado.pdf
    simulado-pdf questions.jsonl --topic "Revisão" --data-uri > uri.txt
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from simulado_toolkit import __version__
from simulado_toolkit.core.utils import LoaderError, load_questions
from simulado_toolkit.exporter import (
    EMPTY_QUESTIONS_NOTICE,
    ExportConfig,
    ExportError,
    build_questions_pdf,
)

logger = logging.getLogger("simulado_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simulado-pdf",
        description="Export multiple-choice questions to a two-column PDF with answer key",
    )
    parser.add_argument("questions", type=Path, help="JSON/JSONL file with questions")
    parser.add_argument("--topic", required=True, help="Document title")
    parser.add_argument("--subject", help="Discipline shown in the header")
    parser.add_argument("-o", "--output", type=Path, help="Output PDF path (default: <topic>.pdf)")
    parser.add_argument("--logo", help="Header logo path or URL")
    parser.add_argument("--no-answer-key", action="store_true", help="Omit the answer key pages")
    parser.add_argument("--strict", action="store_true", help="Validate questions against the JSON schema")
    parser.add_argument("--data-uri", action="store_true", help="Print a data URI instead of writing a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def default_output_path(topic: str) -> Path:
    """File name derived from the topic, unsafe characters replaced."""
    stem = re.sub(r'[\\/:*?"<>|\s]+', "_", topic).strip("_.") or "questoes"
    return Path(f"{stem}.pdf")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    
    try:
        questions = load_questions(args.questions, strict=args.strict)
    except LoaderError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    
    if not questions:
        print(f"error: {EMPTY_QUESTIONS_NOTICE}", file=sys.stderr)
        return 1
    
    config = ExportConfig(
        logo_source=args.logo,
        include_answer_key=not args.no_answer_key,
    )
    
    try:
        result = build_questions_pdf(questions, args.topic, args.subject, config=config)
    except ExportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    
    for warning in result.warnings:
        logger.warning(warning)
    
    if args.data_uri:
        print(result.data_uri)
        return 0
    
    output = args.output or default_output_path(args.topic)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(result.pdf_bytes)
    except OSError as e:
        print(f"error: cannot write {output}: {e}", file=sys.stderr)
        return 1
    
    logger.info(f"Wrote {result.page_count} pages to {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
