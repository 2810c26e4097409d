"""
Module contenant les exceptions personnalisées de gitnifty.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les erreurs de gitnifty."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Exception levée pour un fichier de configuration illisible."""
    pass


class CommandExecutionError(ApplicationError):
    """Échec d'une commande git (code retour non nul ou lancement impossible).

    Le message embarque la commande exacte et la sortie d'erreur du
    processus, afin que l'appelant sache ce qui a été lancé et pourquoi
    cela a échoué.

    Attributes:
        command: Commande exécutée.
        stderr: Sortie d'erreur capturée, telle quelle.
        return_code: Code de retour du processus (-1 si non lancé).
        cwd: Répertoire de travail de l'exécution.
    """

    def __init__(
        self,
        command: str,
        stderr: str = "",
        return_code: int = -1,
        cwd: Optional[str] = None,
    ) -> None:
        self.command = command
        self.stderr = stderr
        self.return_code = return_code
        self.cwd = cwd
        super().__init__(
            f"Erreur lors de l'exécution de la commande : {command}\n{stderr}"
        )
