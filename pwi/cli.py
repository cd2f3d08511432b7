from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import CFG_FILE, CYCLE_POLICIES, Settings, load_settings, save_settings, settings_path
from .engine import expand, print_with_includes
from .errors import PWIUserError
from .logs import setup_logging
from .store import FsStore
from .types import Document
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pwi",
        description="Print markdown documents with their includes expanded",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--root",
        type=Path,
        default=None,
        help="vault directory (default: current directory)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared arguments for render/print
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("document", help="vault-relative path of the root document (extension optional)")
        sp.add_argument("--ext", dest="file_extension", help="extension of included documents (default from settings)")
        sp.add_argument(
            "--no-cleanup",
            dest="cleanup_newlines",
            action="store_false",
            default=None,
            help="keep runs of blank lines as they are",
        )
        sp.add_argument(
            "--on-cycle",
            dest="cycle_policy",
            choices=CYCLE_POLICIES,
            help="skip a cyclic include with a warning, or fail",
        )

    sp_render = sub.add_parser("render", help="write the expanded document to stdout")
    add_common(sp_render)

    sp_print = sub.add_parser("print", help="save the expanded document next to the source")
    add_common(sp_print)
    sp_print.add_argument("--prefix", dest="output_prefix", help="output file name prefix (default from settings)")

    sub.add_parser("init", help=f"write a default {CFG_FILE} into the vault")

    return p


def _settings(root: Path, ns: argparse.Namespace) -> Settings:
    """Settings file values with command-line overrides on top."""
    settings = load_settings(root)
    overrides = {
        key: getattr(ns, key)
        for key in ("file_extension", "output_prefix", "cleanup_newlines", "cycle_policy")
        if getattr(ns, key, None) is not None
    }
    return replace(settings, **overrides)


def _document_path(store: FsStore, name: str, file_extension: str) -> str:
    """Accept the root document with or without its extension."""
    if isinstance(store.resolve(name), Document) or name.endswith(file_extension):
        return name
    return name + file_extension


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    setup_logging(ns.verbose)
    root = (ns.root or Path.cwd()).resolve()

    try:
        if ns.cmd == "init":
            if settings_path(root).exists():
                raise PWIUserError(f"Settings already exist: {settings_path(root)}")
            path = save_settings(root, Settings())
            sys.stdout.write(path.as_posix() + "\n")
            return 0

        settings = _settings(root, ns)
        store = FsStore(root)
        doc = _document_path(store, ns.document, settings.file_extension)

        if ns.cmd == "render":
            text = expand(
                store,
                doc,
                settings.file_extension,
                settings.cleanup_newlines,
                cycle_policy=settings.cycle_policy,
            )
            sys.stdout.write(text)
            return 0

        if ns.cmd == "print":
            created = print_with_includes(store, doc, settings)
            sys.stdout.write(created.path + "\n")
            return 0

    except PWIUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
