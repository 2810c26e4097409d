"""Constructeur fluent pour assembler les commandes git.

Ce module fournit la classe CommandBuilder qui permet de construire
une ligne de commande sous forme de chaîne via une API fluent.
Les flags sont toujours placés avant les arguments positionnels.

Example:
    Construction d'une commande push :

        from gitnifty.commands import CommandBuilder

        cmd = (
            CommandBuilder("git", "push")
            .with_flags(["--force", "--tags"])
            .with_arg("origin")
            .with_arg("dev")
            .build()
        )
        # Résultat : "git push --force --tags origin dev"
"""

from typing import List, Optional, Sequence, Union

FlagInput = Union[str, Sequence[str], None]


def join_values(values: FlagInput) -> str:
    """Joint une valeur ou une liste de valeurs par des espaces.

    L'ordre donné est conservé et aucune valeur n'est découpée.
    Une valeur seule et une liste d'un élément donnent le même
    résultat.

    Args:
        values: Valeur unique, séquence de valeurs ou None.

    Returns:
        Chaîne jointe (vide si None ou liste vide).
    """
    if values is None:
        return ""
    if isinstance(values, str):
        return str(values)
    return " ".join(str(value) for value in values)


def quote_message(message: str) -> str:
    """Entoure un message de guillemets doubles.

    Chaque guillemet double du message est échappé par un
    antislash avant l'ajout des guillemets extérieurs.

    Args:
        message: Message libre (ex: message de commit).

    Returns:
        Message prêt à être placé dans la ligne de commande.
    """
    escaped = message.replace('"', '\\"')
    return f'"{escaped}"'


class CommandBuilder:
    """Constructeur fluent pour assembler des commandes git."""

    def __init__(self, program: str, verb: Optional[str] = None) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom du programme à exécuter (ex: "git").
            verb: Sous-commande optionnelle (ex: "commit").

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._base: List[str] = [program]
        if verb:
            self._base.append(verb)
        self._flags: List[str] = []
        self._args: List[str] = []

    def with_flag(self, flag: Optional[str]) -> "CommandBuilder":
        """Ajoute un flag simple, ignoré si None.

        Args:
            flag: Flag à ajouter (ex: '--hard').

        Returns:
            L'instance courante pour le chaînage.
        """
        if flag:
            self._flags.append(str(flag))
        return self

    def with_flags(self, flags: FlagInput) -> "CommandBuilder":
        """Ajoute un flag ou une liste de flags dans l'ordre donné.

        Args:
            flags: Flag unique, séquence de flags ou None.

        Returns:
            L'instance courante pour le chaînage.
        """
        joined = join_values(flags)
        if joined:
            self._flags.append(joined)
        return self

    def with_arg(self, value: Optional[str]) -> "CommandBuilder":
        """Ajoute un argument positionnel, ignoré si None ou vide.

        Args:
            value: Argument positionnel.

        Returns:
            L'instance courante pour le chaînage.
        """
        if value:
            self._args.append(value)
        return self

    def with_args(self, values: FlagInput) -> "CommandBuilder":
        """Ajoute une valeur ou une liste d'arguments positionnels.

        Args:
            values: Argument unique ou séquence d'arguments.

        Returns:
            L'instance courante pour le chaînage.
        """
        joined = join_values(values)
        if joined:
            self._args.append(joined)
        return self

    def build(self) -> str:
        """Construit et retourne la ligne de commande.

        Returns:
            Commande complète, éléments séparés par un espace.
        """
        return " ".join(self._base + self._flags + self._args)
