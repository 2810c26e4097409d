"""Résolution des arguments surchargés de ``git push``."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from gitnifty.git.flags import PushFlag

DEFAULT_REMOTE = "origin"

PushFlags = Union[PushFlag, Sequence[PushFlag]]


@dataclass(frozen=True)
class PushTarget:
    """Forme canonique des arguments de ``git push``.

    Attributes:
        remote: Nom du dépôt distant.
        branch: Branche à pousser, None si absente.
        flags: Flags dans l'ordre donné par l'appelant.
    """

    remote: str = DEFAULT_REMOTE
    branch: Optional[str] = None
    flags: tuple[str, ...] = ()


def _is_flags(value: object) -> bool:
    """Indique si un argument positionnel est un flag ou une liste de flags."""
    return isinstance(value, PushFlag) or (
        isinstance(value, Sequence) and not isinstance(value, str)
    )


def _as_tuple(flags: Optional[PushFlags]) -> tuple[str, ...]:
    """Normalise un flag ou une liste de flags en tuple."""
    if flags is None:
        return ()
    if isinstance(flags, str):
        return (str(flags),)
    return tuple(str(flag) for flag in flags)


def resolve_push_arguments(
    remote_or_flags: Union[str, PushFlags, None] = None,
    branch_or_flags: Union[str, PushFlags, None] = None,
    flags: Optional[PushFlags] = None,
) -> PushTarget:
    """Classe les arguments positionnels de push selon leur forme.

    - premier argument flag(s) : ce sont tous les flags, remote
      ``origin`` et pas de branche ;
    - sinon le premier argument est le remote ; si le second est
      un flag ou une liste de flags, pas de branche ;
    - sinon le second est la branche et le troisième les flags.

    Args:
        remote_or_flags: Remote ou flags.
        branch_or_flags: Branche ou flags.
        flags: Flags, quand remote et branche sont donnés.

    Returns:
        PushTarget canonique.
    """
    if _is_flags(remote_or_flags):
        return PushTarget(flags=_as_tuple(remote_or_flags))

    remote = remote_or_flags or DEFAULT_REMOTE
    if _is_flags(branch_or_flags):
        return PushTarget(remote=remote, flags=_as_tuple(branch_or_flags))

    return PushTarget(
        remote=remote,
        branch=branch_or_flags or None,
        flags=_as_tuple(flags),
    )
