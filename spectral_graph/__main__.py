import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from spectral_graph import (
    ConsoleUI,
    Editor,
    LayoutOptions,
    MATRIX_TITLES,
    MatrixKind,
    dump_document,
    get_matrix,
    load_document,
    save_matrix_mat,
    show_matrix,
    spectral_layout,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _split_values(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [part.strip() for part in value.replace(";", ",").split(",")]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Graph matrices and spectral layout for drawing documents"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print a graph matrix of the selection")
    show.add_argument("kind", choices=[kind.value for kind in MatrixKind])
    show.add_argument("path", help="Path to the JSON document")
    show.add_argument("--page", type=int, default=0, help="Page number (default: 0)")
    show.add_argument(
        "--mat-output",
        help="Also write the matrix to a MATLAB .mat file at the given path",
    )

    layout = sub.add_parser("layout", help="Apply a spectral layout to the selection")
    layout.add_argument("path", help="Path to the JSON document")
    layout.add_argument("--page", type=int, default=0, help="Page number (default: 0)")
    layout.add_argument("--x", help="Comma separated x eigenvector (prompted if omitted)")
    layout.add_argument("--y", help="Comma separated y eigenvector (prompted if omitted)")
    layout.add_argument(
        "--anchor",
        choices=["top_left", "center"],
        default="top_left",
        help="Point of each vertex box placed on its mapped position",
    )
    layout.add_argument(
        "--output",
        help="Where to write the laid out document (default: overwrite input)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "layout" and (args.x is None) != (args.y is None):
        parser.error("--x and --y must be given together")

    _configure_logging(args.log_level)

    logger.info("Loading document from %s", args.path)
    if args.command == "show":
        ui = ConsoleUI(prompt=None)
    else:
        ui = ConsoleUI(x_values=_split_values(args.x), y_values=_split_values(args.y))
    try:
        document = load_document(args.path)
        editor = Editor(document, ui, pno=args.page)
    except (ValueError, OSError) as exc:
        logger.error("Cannot open %s: %s", args.path, exc)
        raise SystemExit(1)

    if args.command == "show":
        kind = MatrixKind(args.kind)
        matrix = get_matrix(editor.page(), kind)
        if not show_matrix(editor, matrix, MATRIX_TITLES[kind]):
            raise SystemExit(1)
        if args.mat_output:
            output_path = Path(args.mat_output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            save_matrix_mat(output_path, matrix, kind.value)
            print(f"Matrix written to {output_path}")
        return

    transaction = spectral_layout(editor, LayoutOptions(anchor=args.anchor))
    if transaction is None:
        raise SystemExit(1)

    output_path = Path(args.output or args.path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dump_document(editor.document, output_path)
    print(
        f"Laid out {len(transaction.vertices)} vertex(es) and "
        f"{len(transaction.edges)} edge(s); document written to {output_path}"
    )


if __name__ == "__main__":
    main(sys.argv[1:])
