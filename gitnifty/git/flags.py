"""Ensembles fermés de flags acceptés par chaque opération git.

Chaque opération n'accepte que les flags de sa propre énumération.
Il s'agit d'un contrat de typage : aucune vérification n'est faite
à l'exécution.
"""

from enum import StrEnum


class ResetMode(StrEnum):
    """Mode unique accepté par ``git reset``."""

    SOFT = "--soft"
    MIXED = "--mixed"
    HARD = "--hard"
    MERGE = "--merge"
    KEEP = "--keep"


class PushFlag(StrEnum):
    """Flags acceptés par ``git push``."""

    FORCE = "--force"
    FORCE_WITH_LEASE = "--force-with-lease"
    SET_UPSTREAM = "--set-upstream"
    TAGS = "--tags"
    FOLLOW_TAGS = "--follow-tags"
    ALL = "--all"
    DELETE = "--delete"
    DRY_RUN = "--dry-run"
    NO_VERIFY = "--no-verify"
    QUIET = "--quiet"
    VERBOSE = "--verbose"


class MergeFlag(StrEnum):
    """Flags acceptés par ``git merge``."""

    NO_FF = "--no-ff"
    FF_ONLY = "--ff-only"
    SQUASH = "--squash"
    NO_COMMIT = "--no-commit"
    NO_EDIT = "--no-edit"
    ABORT = "--abort"
    CONTINUE = "--continue"
    QUIET = "--quiet"


class CheckoutFlag(StrEnum):
    """Flags acceptés par ``git checkout``."""

    CREATE = "-b"
    FORCE_CREATE = "-B"
    FORCE = "--force"
    DETACH = "--detach"
    ORPHAN = "--orphan"
    TRACK = "--track"
    QUIET = "--quiet"


class BranchFlag(StrEnum):
    """Flags acceptés par ``git branch``."""

    DELETE = "-d"
    FORCE_DELETE = "-D"
    MOVE = "-m"
    FORCE_MOVE = "-M"
    COPY = "-c"
    ALL = "-a"
    REMOTES = "-r"
    LIST = "--list"
    SHOW_CURRENT = "--show-current"
    VERBOSE = "-v"


class TagFlag(StrEnum):
    """Flags acceptés par ``git tag``."""

    ANNOTATE = "-a"
    FORCE = "-f"
    DELETE = "-d"
    LIST = "-l"
    SIGN = "-s"


class RestoreFlag(StrEnum):
    """Flags acceptés par ``git restore`` (voir aussi SourceFlag)."""

    STAGED = "--staged"
    WORKTREE = "--worktree"
    QUIET = "--quiet"
    PROGRESS = "--progress"
    OURS = "--ours"
    THEIRS = "--theirs"


class SourceFlag(str):
    """Flag ``--source=<ref>`` de ``git restore``.

    Le flag porte la référence à restaurer.

    Example:
        >>> SourceFlag("HEAD~1")
        '--source=HEAD~1'
    """

    ref: str

    def __new__(cls, ref: str) -> "SourceFlag":
        flag = super().__new__(cls, f"--source={ref}")
        flag.ref = ref
        return flag
