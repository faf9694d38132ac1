"""stagetree: pick the changed files to stage from a tri-state folder tree.

``main`` runs the command-line tool; the selection engine itself lives in
``stagetree.selection_tree`` and the git collaborators in
``stagetree.git_backend``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported on call so ``import stagetree`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
