"""Module d'exécution des commandes git.

Ce module fournit des classes pour construire et exécuter
des lignes de commande de manière structurée.

Classes disponibles :
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Constructeur fluent de commandes.
    ShellCommandExecutor : Exécuteur concret via asyncio.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
"""

from gitnifty.commands.base import (
    CommandResult,
    CommandExecutor,
)
from gitnifty.commands.builder import (
    CommandBuilder,
    join_values,
    quote_message,
)
from gitnifty.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from gitnifty.commands.runner import ShellCommandExecutor

__all__ = [
    # Structures de données
    "CommandResult",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    "join_values",
    "quote_message",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    # Implémentation
    "ShellCommandExecutor",
]
