"""Interfaces abstraites et structures de données pour l'exécution
des commandes git.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from gitnifty.errors.exceptions import CommandExecutionError


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande.

    Attributes:
        command: Commande exécutée, telle que passée au shell.
        cwd: Répertoire de travail de l'exécution.
        return_code: Code de retour du processus (-1 si non lancé).
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
        success: True si la commande a réussi (code 0).
        duration: Durée d'exécution en secondes.
    """

    command: str
    cwd: Optional[str]
    return_code: int
    stdout: str
    stderr: str
    success: bool
    duration: float


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes.

    Point de passage unique de toutes les opérations git : l'exécuteur
    n'a aucune connaissance des opérations elles-mêmes.
    """

    @abstractmethod
    async def run(
        self,
        command: str,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat brut.

        Args:
            command: Commande complète sous forme de chaîne.
            cwd: Répertoire de travail.

        Returns:
            Résultat de l'exécution.
        """
        pass

    async def execute(
        self,
        command: str,
        cwd: Optional[str] = None,
    ) -> str:
        """Exécute une commande et retourne sa sortie standard nettoyée.

        Args:
            command: Commande complète sous forme de chaîne.
            cwd: Répertoire de travail.

        Returns:
            Sortie standard sans espaces en début et fin.

        Raises:
            CommandExecutionError: Si le code retour est non nul ou si
                le processus n'a pas pu être lancé.
        """
        result = await self.run(command, cwd=cwd)
        if not result.success:
            raise CommandExecutionError(
                command=result.command,
                stderr=result.stderr,
                return_code=result.return_code,
                cwd=result.cwd,
            )
        return result.stdout.strip()
