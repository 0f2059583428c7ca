"""Issue edit pipeline."""

from linproj.edit.changeset import build_update_input
from linproj.edit.editor import open_editor
from linproj.edit.frontmatter import parse_frontmatter, render_frontmatter, validate_field
from linproj.edit.pipeline import EditDeps, execute_edit, fields_from_options
from linproj.edit.progress import EditProgress, NullEditProgress
from linproj.edit.recovery import RecoveryStore
from linproj.edit.team_move import validate_team_move

__all__ = [
    "EditDeps",
    "EditProgress",
    "NullEditProgress",
    "RecoveryStore",
    "build_update_input",
    "execute_edit",
    "fields_from_options",
    "open_editor",
    "parse_frontmatter",
    "render_frontmatter",
    "validate_field",
    "validate_team_move",
]
