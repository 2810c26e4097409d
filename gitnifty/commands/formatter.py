"""Formateurs pour les messages de log des commandes git.

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut pour les logs fichier.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gitnifty.commands.base import CommandResult


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(self, command: str, cwd: Optional[str]) -> str:
        """Formate le message de début d'exécution.

        Args:
            command: Commande exécutée.
            cwd: Répertoire de travail.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_failure(self, result: CommandResult) -> str:
        """Formate le message d'échec d'une commande.

        Args:
            result: Résultat de la commande en échec.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut, compatible avec les fichiers de log.

    Example :
        Exécution : git commit -m "init" (/path/to/repo)
        Code retour 128 : git commit -m "init"
    """

    def format_start(self, command: str, cwd: Optional[str]) -> str:
        """Formate le début d'exécution avec le répertoire de travail."""
        if cwd:
            return f"Exécution : {command} ({cwd})"
        return f"Exécution : {command}"

    def format_failure(self, result: CommandResult) -> str:
        """Formate l'échec avec le code retour, sans la sortie d'erreur."""
        return f"Code retour {result.return_code} : {result.command}"
