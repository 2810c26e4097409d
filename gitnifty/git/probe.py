"""Adaptateur tolérant aux échecs pour les sondes booléennes."""

from typing import Any, Awaitable, Callable


async def try_command(operation: Callable[[], Awaitable[Any]]) -> bool:
    """Exécute une opération et réduit son issue à un booléen.

    Certaines commandes git sortent en erreur pour signifier
    « condition non remplie » (``git diff --quiet``, ``@{u}``).
    Le résultat texte est ignoré ; toute erreur, quelle que soit
    sa cause, donne False sans que son contenu ne remonte.

    Args:
        operation: Fabrique sans argument de la coroutine à attendre.

    Returns:
        True si l'opération aboutit, False sinon.
    """
    try:
        await operation()
    except Exception:
        return False
    return True
