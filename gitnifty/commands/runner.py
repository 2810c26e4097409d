"""Exécuteur de commandes git via asyncio.

Ce module fournit ShellCommandExecutor, une implémentation concrète
de CommandExecutor qui lance chaque commande dans un sous-processus
shell et attend sa fin sans bloquer la boucle d'événements.

Example :
    Exécution simple avec logs fichier :

        from gitnifty import FileLogger
        from gitnifty.commands import ShellCommandExecutor

        logger = FileLogger("/var/log/gitnifty.log")
        executor = ShellCommandExecutor(logger=logger)
        branch = await executor.execute(
            "git rev-parse --abbrev-ref HEAD", cwd="/path/to/repo"
        )
"""

import asyncio
import time
from typing import Optional

from gitnifty.commands.base import CommandExecutor, CommandResult
from gitnifty.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from gitnifty.logging.base import Logger


class ShellCommandExecutor(CommandExecutor):
    """Exécuteur de commandes via asyncio.create_subprocess_shell.

    Un seul sous-processus par appel, sortie entièrement bufferisée
    et rendue à la fin du processus. Ni retry, ni timeout.

    Attributes:
        _logger: Logger optionnel pour les logs fichier.
        _formatter: Formateur des messages de log.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel pour les sorties fichier.
            formatter: Formateur des messages (défaut:
                PlainCommandFormatter).
        """
        self._logger = logger
        self._formatter = formatter or PlainCommandFormatter()

    def _log(self, message: str) -> None:
        """Envoie un message au logger si disponible."""
        if self._logger:
            self._logger.log_info(message)

    async def run(
        self,
        command: str,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Un code retour non nul n'est tracé qu'au niveau info, sans la
        sortie d'erreur : pour une sonde il signifie seulement
        « condition non remplie ». L'appelant qui propage l'échec
        décide de le journaliser en erreur.

        Args:
            command: Commande complète sous forme de chaîne.
            cwd: Répertoire de travail.

        Returns:
            CommandResult avec les sorties décodées. Un échec de
            lancement (OSError, ou ValueError pour un octet nul dans
            la commande) donne return_code=-1 et le message dans stderr.
        """
        self._log(self._formatter.format_start(command, cwd))

        start = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
            stdout, stderr = await proc.communicate()
        except (OSError, ValueError) as e:
            result = CommandResult(
                command=command,
                cwd=cwd,
                return_code=-1,
                stdout="",
                stderr=str(e),
                success=False,
                duration=time.monotonic() - start,
            )
            self._log(self._formatter.format_failure(result))
            return result

        result = CommandResult(
            command=command,
            cwd=cwd,
            return_code=proc.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            success=proc.returncode == 0,
            duration=time.monotonic() - start,
        )
        if not result.success:
            self._log(self._formatter.format_failure(result))
        return result
