"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from gitnifty.config.options import GitOptions
from gitnifty.errors.exceptions import (ConfigurationError,
                                        FileConfigurationError)


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Dictionnaire de configuration brut, validé ensuite
            section par section
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier.
    """

    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Charge un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Dictionnaire de configuration brut

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        raise ValueError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


class GitOptionsLoader:
    """Charge les GitOptions depuis la section ``[git]`` d'un fichier.

    Example:
        Fichier ``gitnifty.toml`` :

            [git]
            cwd = "/path/to/repo"

        >>> options = GitOptionsLoader("gitnifty.toml").load()
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader en chargeant le fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            FileConfigurationError: Si le contenu est illisible.
        """
        loader = config_loader or FileConfigLoader()
        try:
            self._config: dict[str, Any] = loader.load(config_path)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration invalide {config_path}: {e}"
            ) from e

    @property
    def config(self) -> dict[str, Any]:
        """Retourne le dictionnaire de configuration brut."""
        return self._config

    def load(self, section: str = "git") -> GitOptions:
        """Retourne les options de la section demandée.

        Une section absente donne les options par défaut.

        Args:
            section: Nom de la section (défaut: "git").

        Returns:
            Instance validée de GitOptions.

        Raises:
            ConfigurationError: Si la section ne respecte pas le schéma.
        """
        try:
            return GitOptions.model_validate(self._config.get(section, {}))
        except ValidationError as e:
            raise ConfigurationError(
                f"Section [{section}] invalide: {e}"
            ) from e
