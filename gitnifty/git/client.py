"""Façade typée au-dessus de la ligne de commande git.

Chaque méthode normalise ses arguments en une seule ligne de commande
et la délègue au CommandExecutor. Les sondes booléennes passent par
try_command et ne lèvent jamais d'exception.

Example:
    Utilisation typique :

        from gitnifty import Git, GitOptions, PushFlag

        git = Git(GitOptions(cwd="/path/to/repo"))
        await git.add()
        await git.commit('fix: "quoted" message')
        if await git.has_upstream_branch():
            await git.push()
        else:
            await git.push("origin", "dev", [PushFlag.SET_UPSTREAM])
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from gitnifty.commands.base import CommandExecutor
from gitnifty.commands.builder import CommandBuilder, quote_message
from gitnifty.commands.runner import ShellCommandExecutor
from gitnifty.config.loader import GitOptionsLoader
from gitnifty.config.options import GitOptions
from gitnifty.errors.exceptions import CommandExecutionError
from gitnifty.git.arguments import PushFlags, resolve_push_arguments
from gitnifty.git.branches import parse_default_branch
from gitnifty.git.flags import (
    BranchFlag,
    CheckoutFlag,
    MergeFlag,
    ResetMode,
    RestoreFlag,
    SourceFlag,
    TagFlag,
)
from gitnifty.git.probe import try_command
from gitnifty.logging.base import Logger

GIT = "git"
ALL_PATHS = "."

Paths = Union[str, Sequence[str]]
RestoreFlags = Union[
    RestoreFlag, SourceFlag, Sequence[Union[RestoreFlag, SourceFlag]]
]


class Git:
    """Interface haut niveau pour piloter un dépôt git.

    Les opérations à effet de bord (init, clone, checkout, commit)
    retournent l'instance pour permettre le chaînage ; les requêtes
    retournent la sortie standard nettoyée ; les sondes retournent
    un booléen.

    Attributes:
        _options: Options de session (répertoire de travail).
        _executor: Exécuteur des lignes de commande.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        options: Optional[GitOptions] = None,
        executor: Optional[CommandExecutor] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise la façade.

        Args:
            options: Options de session. Par défaut, le répertoire
                courant du processus.
            executor: Exécuteur injectable (défaut:
                ShellCommandExecutor partageant le logger).
            logger: Logger optionnel.
        """
        self._options = options or GitOptions()
        self._logger = logger
        self._executor = executor or ShellCommandExecutor(logger=logger)

    @classmethod
    def from_config_file(
        cls,
        config_path: Union[str, Path],
        executor: Optional[CommandExecutor] = None,
        logger: Optional[Logger] = None,
    ) -> "Git":
        """Crée une instance depuis la section ``[git]`` d'un fichier.

        Args:
            config_path: Fichier TOML ou JSON.
            executor: Exécuteur injectable.
            logger: Logger optionnel.

        Returns:
            Instance configurée.
        """
        options = GitOptionsLoader(config_path).load()
        return cls(options, executor=executor, logger=logger)

    @property
    def cwd(self) -> str:
        """Répertoire de travail des commandes."""
        return self._options.cwd

    def _log(self, message: str) -> None:
        """Trace un changement d'état du dépôt si un logger est fourni."""
        if self._logger:
            self._logger.log_info(message)

    async def _execute(self, builder: CommandBuilder) -> str:
        """Exécute une commande sans journaliser son échec.

        Réservé aux sondes : leur échec signifie « condition non
        remplie » et son contenu ne doit pas remonter.
        """
        return await self._executor.execute(builder.build(), cwd=self.cwd)

    async def _run(self, builder: CommandBuilder) -> str:
        """Exécute une commande dont l'échec est propagé à l'appelant.

        Raises:
            CommandExecutionError: Journalisée en erreur puis relevée.
        """
        try:
            return await self._execute(builder)
        except CommandExecutionError as e:
            if self._logger:
                self._logger.log_error(str(e))
            raise

    # --- Requêtes ---

    async def get_user_name(self) -> str:
        """Retourne le ``user.name`` configuré.

        Raises:
            CommandExecutionError: Si git est absent ou la clé non définie.
        """
        return await self._run(
            CommandBuilder(GIT, "config").with_arg("user.name")
        )

    async def get_user_email(self) -> str:
        """Retourne le ``user.email`` configuré.

        Raises:
            CommandExecutionError: Si git est absent ou la clé non définie.
        """
        return await self._run(
            CommandBuilder(GIT, "config").with_arg("user.email")
        )

    async def get_current_branch_name(self) -> str:
        """Retourne le nom de la branche courante.

        Raises:
            CommandExecutionError: Si le répertoire n'est pas un dépôt.
        """
        return await self._run(
            CommandBuilder(GIT, "rev-parse")
            .with_flag("--abbrev-ref")
            .with_arg("HEAD")
        )

    async def get_default_branch_name(self) -> str:
        """Retourne la branche par défaut du remote ``origin``.

        Retourne ``main`` si ``origin/HEAD`` est introuvable.

        Raises:
            CommandExecutionError: Si ``git branch -r`` échoue.
        """
        branches = await self._run(
            CommandBuilder(GIT, "branch").with_flag("-r")
        )
        return parse_default_branch(branches)

    # --- Sondes ---

    async def has_no_unstaged_changes(self) -> bool:
        """Vérifie l'absence de modifications non indexées."""
        return await try_command(
            lambda: self._execute(
                CommandBuilder(GIT, "diff").with_flag("--quiet")
            )
        )

    async def has_no_staged_changes(self) -> bool:
        """Vérifie l'absence de modifications indexées non commitées."""
        return await try_command(
            lambda: self._execute(
                CommandBuilder(GIT, "diff").with_flags(["--cached", "--quiet"])
            )
        )

    async def is_working_dir_clean(self) -> bool:
        """Vérifie l'absence de toute modification, indexée ou non.

        Les deux sondes sont exécutées l'une après l'autre.
        """
        unstaged_clean = await self.has_no_unstaged_changes()
        staged_clean = await self.has_no_staged_changes()
        return unstaged_clean and staged_clean

    async def has_upstream_branch(self) -> bool:
        """Vérifie qu'une branche amont est configurée."""
        return await try_command(
            lambda: self._execute(
                CommandBuilder(GIT, "rev-parse")
                .with_flags(["--abbrev-ref", "--symbolic-full-name"])
                .with_arg("@{u}")
            )
        )

    # --- Opérations chaînables ---

    async def init(self) -> "Git":
        """Initialise un dépôt dans le répertoire de travail."""
        await self._run(CommandBuilder(GIT, "init"))
        self._log(f"Dépôt initialisé : {self.cwd}")
        return self

    async def clone(
        self, repo_url: str, directory: Optional[str] = None
    ) -> "Git":
        """Clone un dépôt, optionnellement dans ``directory``.

        Args:
            repo_url: URL ou chemin du dépôt source.
            directory: Répertoire cible.
        """
        await self._run(
            CommandBuilder(GIT, "clone").with_arg(repo_url).with_arg(directory)
        )
        self._log(f"Dépôt cloné : {repo_url}")
        return self

    async def checkout(
        self,
        branch: str,
        flags: Union[CheckoutFlag, Sequence[CheckoutFlag], None] = None,
    ) -> "Git":
        """Bascule sur ``branch`` (``git checkout [flags] <branch>``).

        Args:
            branch: Branche, commit ou chemin.
            flags: Flag ou liste de flags (ex: CheckoutFlag.CREATE).
        """
        await self._run(
            CommandBuilder(GIT, "checkout").with_flags(flags).with_arg(branch)
        )
        self._log(f"Checkout : {branch}")
        return self

    async def commit(self, message: str) -> "Git":
        """Crée un commit avec ``message``.

        Les guillemets doubles du message sont échappés.
        """
        await self._run(
            CommandBuilder(GIT, "commit")
            .with_flag("-m")
            .with_arg(quote_message(message))
        )
        self._log(f"Commit créé dans {self.cwd}")
        return self

    # --- Opérations retournant la sortie ---

    async def push(
        self,
        remote_or_flags: Union[str, PushFlags, None] = None,
        branch_or_flags: Union[str, PushFlags, None] = None,
        flags: Optional[PushFlags] = None,
    ) -> str:
        """Pousse vers un remote.

        Formes acceptées::

            push()                              # git push origin
            push([PushFlag.FORCE])              # git push --force origin
            push("upstream", [PushFlag.TAGS])   # git push --tags upstream
            push("origin", "dev", [PushFlag.TAGS])

        Args:
            remote_or_flags: Remote (défaut ``origin``) ou flags.
            branch_or_flags: Branche ou flags.
            flags: Flags, quand remote et branche sont donnés.
        """
        target = resolve_push_arguments(
            remote_or_flags, branch_or_flags, flags
        )
        return await self._run(
            CommandBuilder(GIT, "push")
            .with_flags(target.flags)
            .with_arg(target.remote)
            .with_arg(target.branch)
        )

    async def tag(
        self,
        name: str,
        message: Optional[str] = None,
        flags: Union[TagFlag, Sequence[TagFlag], None] = None,
    ) -> str:
        """Crée (ou supprime, selon les flags) le tag ``name``.

        Args:
            name: Nom du tag.
            message: Message d'annotation, ajouté via ``-m``.
            flags: Flag ou liste de flags.
        """
        builder = CommandBuilder(GIT, "tag").with_flags(flags).with_arg(name)
        if message is not None:
            builder.with_args(["-m", quote_message(message)])
        return await self._run(builder)

    async def merge(
        self,
        branch: str,
        flags: Union[MergeFlag, Sequence[MergeFlag], None] = None,
    ) -> str:
        """Fusionne ``branch`` dans la branche courante."""
        return await self._run(
            CommandBuilder(GIT, "merge").with_flags(flags).with_arg(branch)
        )

    async def branch(
        self,
        name: Optional[str] = None,
        flags: Union[BranchFlag, Sequence[BranchFlag], None] = None,
    ) -> str:
        """Liste, crée ou supprime des branches selon les flags."""
        return await self._run(
            CommandBuilder(GIT, "branch").with_flags(flags).with_arg(name)
        )

    async def add(self, paths: Paths = ALL_PATHS) -> str:
        """Indexe les chemins donnés (tous par défaut)."""
        return await self._run(CommandBuilder(GIT, "add").with_args(paths))

    async def reset(
        self,
        mode: Optional[ResetMode] = None,
        target: Optional[str] = None,
    ) -> str:
        """Réinitialise HEAD (``git reset [mode] [target]``).

        Args:
            mode: Un seul mode parmi ResetMode.
            target: Commit ou référence cible.
        """
        return await self._run(
            CommandBuilder(GIT, "reset").with_flag(mode).with_arg(target)
        )

    async def restore(
        self,
        paths: Paths = ALL_PATHS,
        flags: Optional[RestoreFlags] = None,
    ) -> str:
        """Restaure des fichiers (``git restore [flags] <paths>``).

        Args:
            paths: Chemin ou liste de chemins (tous par défaut).
            flags: Flag(s), dont ``SourceFlag(ref)``.
        """
        return await self._run(
            CommandBuilder(GIT, "restore").with_flags(flags).with_args(paths)
        )
