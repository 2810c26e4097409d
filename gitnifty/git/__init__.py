"""Module de la façade git.

Classes disponibles :
    Git : Façade typée, une coroutine par opération.
    PushTarget : Forme canonique des arguments de push.
    ResetMode, PushFlag, MergeFlag, CheckoutFlag, BranchFlag,
    TagFlag, RestoreFlag, SourceFlag : Flags par opération.
"""

from gitnifty.git.arguments import PushTarget, resolve_push_arguments
from gitnifty.git.branches import parse_default_branch
from gitnifty.git.client import Git
from gitnifty.git.flags import (
    BranchFlag,
    CheckoutFlag,
    MergeFlag,
    PushFlag,
    ResetMode,
    RestoreFlag,
    SourceFlag,
    TagFlag,
)
from gitnifty.git.probe import try_command

__all__ = [
    # Façade
    "Git",
    # Arguments
    "PushTarget",
    "resolve_push_arguments",
    "parse_default_branch",
    "try_command",
    # Flags
    "BranchFlag",
    "CheckoutFlag",
    "MergeFlag",
    "PushFlag",
    "ResetMode",
    "RestoreFlag",
    "SourceFlag",
    "TagFlag",
]
