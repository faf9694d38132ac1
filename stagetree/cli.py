"""Command-line front door for stagetree.

Builds the selection tree for a repository, applies ``--exclude`` toggles,
prints the tree, and optionally stages the selected files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .git_backend import GitCommandError, GitDiffProvider, GitStageSink
from .selection_tree import render_selection_tree
from .session import SelectionSession
from .ui_theme import available_theme_names, resolve_theme


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show changed files as a selectable tree and stage the selection."
    )
    parser.add_argument("path", nargs="?", default=None, help="Repository path. Defaults to current directory.")
    parser.add_argument(
        "--exclude",
        metavar="PATH",
        action="append",
        default=[],
        help="Deselect a changed file or folder (repeatable).",
    )
    parser.add_argument("--stage", action="store_true", help="Stage the selected files.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); saved as the new default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log git commands to stderr.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and run one build/select/stage pass.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.theme is not None:
        if args.theme.strip().lower() not in available_theme_names():
            raise SystemExit(f"Unknown theme: {args.theme}")
        config.save_theme_name(args.theme.strip().lower())
        theme_name: str | None = args.theme
    else:
        theme_name = config.load_theme_name()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Path not found: {path}")

    timeout_seconds = config.load_git_timeout_seconds()
    try:
        provider = GitDiffProvider(path, timeout_seconds, include_untracked=config.load_include_untracked())
        sink = GitStageSink(provider.repo_root, timeout_seconds) if args.stage else None
        session = SelectionSession(provider, sink)
        session.rebuild()

        for excluded in args.exclude:
            nodes = session.nodes_at(excluded)
            if not nodes:
                raise SystemExit(f"Path not in change set: {excluded}")
            for node in nodes:
                session.request_toggle(node.id, False)
        session.refresh()

        colorize = not args.no_color and sys.stdout.isatty()
        lines = render_selection_tree(session.root, colorize=colorize, theme=resolve_theme(theme_name))
        if not lines:
            sys.stdout.write("No changes.\n")
            return
        sys.stdout.write("\n".join(lines) + "\n")

        if args.stage:
            staged = session.stage_selected()
            sys.stdout.write(f"Staged {len(staged)} file(s).\n")
    except GitCommandError as exc:
        raise SystemExit(f"git error: {exc}") from exc


if __name__ == "__main__":
    main()
