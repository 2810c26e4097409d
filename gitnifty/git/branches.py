"""Déduction de la branche par défaut depuis ``git branch -r``."""

HEAD_MARKER = "origin/HEAD"
HEAD_PREFIX = "origin/HEAD -> origin/"
FALLBACK_BRANCH = "main"


def parse_default_branch(listing: str) -> str:
    """Extrait la branche pointée par ``origin/HEAD``.

    Heuristique : sans ligne ``origin/HEAD`` (liste vide, pas de
    remote), retourne ``main`` sans vérifier que cette branche existe.

    Args:
        listing: Sortie de ``git branch -r``.

    Returns:
        Nom de branche nu (ex: "develop") ou "main".
    """
    for line in listing.split("\n"):
        if HEAD_MARKER in line:
            return line.replace(HEAD_PREFIX, "", 1).strip()
    return FALLBACK_BRANCH
