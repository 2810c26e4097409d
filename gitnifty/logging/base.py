"""Contrat de journalisation des invocations git.

Deux niveaux suffisent à la bibliothèque :
    - info : chaque commande lancée, son code retour non nul et
      les changements d'état du dépôt (init, clone, checkout, commit) ;
    - error : les échecs qui remontent à l'appelant, avec la commande
      et la sortie d'erreur de git.

Les échecs des sondes booléennes ne sont jamais journalisés en erreur.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Destination des messages émis par l'exécuteur et la façade Git."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace une invocation git ou un changement d'état du dépôt.

        Args:
            message: Ligne préformatée (ex: "Exécution : git init").
        """
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace un échec propagé à l'appelant.

        Args:
            message: Message de CommandExecutionError (commande et stderr).
        """
        pass
