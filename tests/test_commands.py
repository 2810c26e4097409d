"""Tests pour le module commands."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gitnifty.commands import (
    CommandBuilder,
    CommandExecutor,
    CommandResult,
    PlainCommandFormatter,
    ShellCommandExecutor,
    join_values,
    quote_message,
)
from gitnifty.errors import CommandExecutionError
from gitnifty.git.flags import PushFlag
from gitnifty.logging.base import Logger


def _make_proc(stdout=b"", stderr=b"", returncode=0):
    """Crée un mock de processus asyncio configuré."""
    proc = MagicMock()
    proc.communicate = AsyncMock(return_value=(stdout, stderr))
    proc.returncode = returncode
    return proc


# --- Tests CommandResult ---


class TestCommandResult:
    """Tests pour la dataclass CommandResult."""

    def test_creation_avec_tous_les_champs(self):
        """Test de la création avec tous les champs."""
        result = CommandResult(
            command="git status",
            cwd="/repo",
            return_code=0,
            stdout="propre",
            stderr="",
            success=True,
            duration=0.5,
        )
        assert result.command == "git status"
        assert result.cwd == "/repo"
        assert result.return_code == 0
        assert result.stdout == "propre"
        assert result.success is True

    def test_frozen(self):
        """Test que la dataclass est immuable."""
        result = CommandResult(
            command="git status",
            cwd=None,
            return_code=0,
            stdout="",
            stderr="",
            success=True,
            duration=0.0,
        )
        with pytest.raises(AttributeError):
            result.return_code = 1


# --- Tests des helpers de normalisation ---


class TestJoinValues:
    """Tests pour join_values."""

    def test_none_donne_chaine_vide(self):
        """Test qu'une valeur absente donne une chaîne vide."""
        assert join_values(None) == ""

    def test_liste_vide_donne_chaine_vide(self):
        """Test qu'une liste vide donne une chaîne vide."""
        assert join_values([]) == ""

    def test_ordre_conserve(self):
        """Test que l'ordre de l'appelant est conservé."""
        assert join_values(["--tags", "--force"]) == "--tags --force"
        assert join_values(["--force", "--tags"]) == "--force --tags"

    def test_flag_seul_equivaut_liste_un_element(self):
        """Test qu'un flag seul et une liste d'un flag sont identiques."""
        assert join_values(PushFlag.FORCE) == join_values([PushFlag.FORCE])
        assert join_values(PushFlag.FORCE) == "--force"

    def test_valeur_non_decoupee(self):
        """Test qu'une valeur contenant des espaces n'est pas découpée."""
        assert join_values(["mon fichier.txt", "b"]) == "mon fichier.txt b"


class TestQuoteMessage:
    """Tests pour quote_message."""

    def test_message_simple(self):
        """Test d'un message sans guillemets."""
        assert quote_message("initial commit") == '"initial commit"'

    def test_guillemets_echappes(self):
        """Test que chaque guillemet double est échappé."""
        assert quote_message('fix "a" and "b"') == '"fix \\"a\\" and \\"b\\""'

    def test_apostrophe_conservee(self):
        """Test qu'une apostrophe n'est pas modifiée."""
        assert quote_message("l'index") == "\"l'index\""


# --- Tests CommandBuilder ---


class TestCommandBuilder:
    """Tests pour le constructeur fluent CommandBuilder."""

    def test_build_programme_seul(self):
        """Test de build avec le programme seul."""
        assert CommandBuilder("git").build() == "git"

    def test_build_avec_verbe(self):
        """Test de build avec une sous-commande."""
        assert CommandBuilder("git", "init").build() == "git init"

    def test_flags_avant_arguments(self):
        """Test que les flags précèdent toujours les arguments."""
        cmd = (
            CommandBuilder("git", "merge")
            .with_arg("feature")
            .with_flags(["--no-ff", "--no-edit"])
            .build()
        )
        assert cmd == "git merge --no-ff --no-edit feature"

    def test_with_flag_none_ignore(self):
        """Test qu'un flag None est ignoré."""
        assert CommandBuilder("git", "reset").with_flag(None).build() == (
            "git reset"
        )

    def test_with_arg_none_ignore(self):
        """Test qu'un argument None est ignoré."""
        cmd = (
            CommandBuilder("git", "clone")
            .with_arg("https://example.com/repo.git")
            .with_arg(None)
            .build()
        )
        assert cmd == "git clone https://example.com/repo.git"

    def test_with_args_liste(self):
        """Test d'ajout d'une liste d'arguments positionnels."""
        cmd = CommandBuilder("git", "add").with_args(["a", "b"]).build()
        assert cmd == "git add a b"

    def test_programme_vide_leve_erreur(self):
        """Test qu'un programme vide lève ValueError."""
        with pytest.raises(ValueError):
            CommandBuilder("")

    def test_programme_espaces_leve_erreur(self):
        """Test qu'un programme d'espaces lève ValueError."""
        with pytest.raises(ValueError):
            CommandBuilder("   ")


# --- Tests PlainCommandFormatter ---


class TestPlainCommandFormatter:
    """Tests pour PlainCommandFormatter."""

    def setup_method(self):
        """Initialise le formateur."""
        self.formatter = PlainCommandFormatter()

    def test_format_start_avec_cwd(self):
        """Test du message de début avec répertoire."""
        msg = self.formatter.format_start("git init", "/repo")
        assert msg == "Exécution : git init (/repo)"

    def test_format_start_sans_cwd(self):
        """Test du message de début sans répertoire."""
        assert self.formatter.format_start("git init", None) == (
            "Exécution : git init"
        )

    def test_format_failure(self):
        """Test que le message d'échec omet la sortie d'erreur."""
        result = CommandResult(
            command="git push origin",
            cwd="/repo",
            return_code=128,
            stdout="",
            stderr="fatal: no remote\n",
            success=False,
            duration=0.1,
        )
        msg = self.formatter.format_failure(result)
        assert msg == "Code retour 128 : git push origin"
        assert "fatal" not in msg


# --- Tests ShellCommandExecutor.run ---


class TestShellCommandExecutorRun:
    """Tests pour la méthode run() de ShellCommandExecutor."""

    def setup_method(self):
        """Initialise les mocks pour chaque test."""
        self.mock_logger = MagicMock(spec=Logger)
        self.executor = ShellCommandExecutor(logger=self.mock_logger)

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_commande_reussie(self, mock_shell):
        """Test d'une commande réussie."""
        mock_shell.return_value = _make_proc(stdout=b"  main\n")

        result = await self.executor.run("git branch", cwd="/repo")

        assert result.success is True
        assert result.return_code == 0
        assert result.stdout == "  main\n"
        assert result.command == "git branch"
        assert result.cwd == "/repo"
        assert result.duration >= 0

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_transmet_cwd(self, mock_shell):
        """Test que le répertoire de travail est transmis."""
        mock_shell.return_value = _make_proc()

        await self.executor.run("git status", cwd="/tmp/repo")

        assert mock_shell.call_args[0][0] == "git status"
        assert mock_shell.call_args[1]["cwd"] == "/tmp/repo"

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_commande_echouee(self, mock_shell):
        """Test d'une commande échouée."""
        mock_shell.return_value = _make_proc(
            stderr=b"fatal: not a git repository", returncode=128,
        )

        result = await self.executor.run("git status")

        assert result.success is False
        assert result.return_code == 128
        assert result.stderr == "fatal: not a git repository"
        self.mock_logger.log_error.assert_not_called()
        assert self.mock_logger.log_info.call_count == 2
        for call in self.mock_logger.log_info.call_args_list:
            assert "fatal" not in call[0][0]

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_lancement_impossible(self, mock_shell):
        """Test d'un processus qui ne peut pas être lancé."""
        mock_shell.side_effect = FileNotFoundError(
            "No such file or directory: '/nonexistent'"
        )

        result = await self.executor.run("git status", cwd="/nonexistent")

        assert result.success is False
        assert result.return_code == -1
        assert "/nonexistent" in result.stderr
        self.mock_logger.log_error.assert_not_called()
        assert self.mock_logger.log_info.call_count == 2

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_octet_nul_dans_commande(self, mock_shell):
        """Test qu'un octet nul donne un échec structuré."""
        mock_shell.side_effect = ValueError("embedded null byte")

        result = await self.executor.run("git commit -m \"a\0b\"")

        assert result.success is False
        assert result.return_code == -1
        assert result.stderr == "embedded null byte"

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_log_commande(self, mock_shell):
        """Test que la commande est loguée."""
        mock_shell.return_value = _make_proc()

        await self.executor.run("git diff --quiet", cwd="/repo")

        self.mock_logger.log_info.assert_called_once()
        call_args = self.mock_logger.log_info.call_args[0][0]
        assert "git diff --quiet" in call_args

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_run_sans_logger(self, mock_shell):
        """Test de l'exécution sans logger."""
        mock_shell.return_value = _make_proc(stdout=b"ok")
        executor = ShellCommandExecutor()

        result = await executor.run("git --version")

        assert result.success is True
        assert result.stdout == "ok"


# --- Tests CommandExecutor.execute ---


class TestCommandExecutorExecute:
    """Tests pour execute(), commun à tous les exécuteurs."""

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_execute_retourne_stdout_nettoye(self, mock_shell):
        """Test que seuls les espaces de début et fin sont retirés."""
        mock_shell.return_value = _make_proc(stdout=b"\n  John  Doe \n")

        result = await ShellCommandExecutor().execute("git config user.name")

        assert result == "John  Doe"

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_execute_leve_erreur_avec_commande_et_stderr(
        self, mock_shell
    ):
        """Test que l'erreur contient la commande et stderr."""
        mock_shell.return_value = _make_proc(
            stderr=b"error: pathspec 'x' did not match", returncode=1,
        )

        with pytest.raises(CommandExecutionError) as exc_info:
            await ShellCommandExecutor().execute("git checkout x", cwd="/r")

        error = exc_info.value
        assert error.command == "git checkout x"
        assert error.return_code == 1
        assert error.cwd == "/r"
        assert "git checkout x" in str(error)
        assert "error: pathspec 'x' did not match" in str(error)

    @pytest.mark.asyncio
    async def test_execute_utilise_run_abstrait(self):
        """Test qu'un exécuteur personnalisé n'implémente que run()."""

        class FakeExecutor(CommandExecutor):
            async def run(self, command, cwd=None):
                return CommandResult(
                    command=command,
                    cwd=cwd,
                    return_code=0,
                    stdout=f" {command} \n",
                    stderr="",
                    success=True,
                    duration=0.0,
                )

        assert await FakeExecutor().execute("git init") == "git init"

    @pytest.mark.asyncio
    @patch(
        "gitnifty.commands.runner.asyncio.create_subprocess_shell",
        new_callable=AsyncMock,
    )
    async def test_execute_octet_nul_leve_command_execution_error(
        self, mock_shell
    ):
        """Test que ValueError au lancement devient CommandExecutionError."""
        mock_shell.side_effect = ValueError("embedded null byte")

        with pytest.raises(CommandExecutionError) as exc_info:
            await ShellCommandExecutor().execute("git add a\0b")

        assert exc_info.value.return_code == -1
        assert "embedded null byte" in str(exc_info.value)
