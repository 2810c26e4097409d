"""Options de session d'une instance Git."""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitOptions(BaseModel):
    """Configuration d'une instance Git.

    Immuable après construction.

    Attributes:
        cwd: Répertoire de travail des commandes git. Par défaut,
            le répertoire courant du processus appelant.
    """

    model_config = ConfigDict(frozen=True)

    cwd: str = Field(default_factory=os.getcwd)

    @field_validator("cwd", mode="before")
    @classmethod
    def _default_cwd(cls, value: Any) -> Any:
        """Remplace une valeur absente ou vide par le répertoire courant."""
        if value is None or value == "":
            return os.getcwd()
        if isinstance(value, Path):
            return str(value)
        return value
