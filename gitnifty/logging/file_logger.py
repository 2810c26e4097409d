"""Implémentation concrète du logger avec fichier."""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from gitnifty.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Logger qui écrit les commandes git exécutées dans un fichier.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: Union[str, Path],
        config: Optional[Mapping[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Configuration optionnelle, la section ``logging``
                    est lue (clés supportées: level, format)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        logging_cfg = (config or {}).get("logging", {})
        level_name = str(logging_cfg.get("level", "INFO")).upper()
        log_format = logging_cfg.get("format", DEFAULT_FORMAT)
        log_level = getattr(logging, level_name, logging.INFO)

        self.logger = logging.getLogger(f"gitnifty.{self.log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            file_handler = logging.FileHandler(
                self.log_file, encoding="utf-8"
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log une invocation git ou un changement d'état."""
        self.logger.info(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log un échec propagé à l'appelant."""
        self.logger.error(message)
        self._flush()
