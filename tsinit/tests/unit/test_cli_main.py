"""Unit tests for the tsconfig-init command and run operation."""

import io
import json
import signal
import sys
import threading

import click
import pytest

from tsinit import cli_main
from tsinit.cli_main import interruptible_prompts, run
from tsinit.core.errors import ProjectExistsError

# Every question answered on the command line, so nothing is prompted
ALL_ANSWERS = [".", "--strictness", "balanced", "--transpiler", "--no-library", "--no-monorepo", "--no-dom"]


def _read_tsconfig(directory):
    return json.loads((directory / "tsconfig.json").read_text(encoding="utf-8"))


class TestRunWritesConfig:
    """Test tsconfig.json generation through run()."""

    @pytest.mark.asyncio
    async def test_defaults_in_current_directory(self, project_root, capsys):
        """Test -y writes the default config into the working directory."""
        await run(["-y"])

        compiler = _read_tsconfig(project_root)["compilerOptions"]
        assert compiler["strict"] is True
        assert compiler["module"] == "NodeNext"
        assert compiler["lib"] == ["es2022"]
        out = capsys.readouterr().out
        assert "tsconfig.json has been generated in" in out

    @pytest.mark.asyncio
    async def test_named_project_directory(self, project_root):
        """Test a project name creates a subdirectory."""
        await run(["web", "--strictness", "rigorous", "--dom", "--no-transpiler", "-y"])

        compiler = _read_tsconfig(project_root / "web")["compilerOptions"]
        assert compiler["noUncheckedIndexedAccess"] is True
        assert compiler["lib"] == ["es2022", "dom", "dom.iterable"]
        assert compiler["noEmit"] is True

    @pytest.mark.asyncio
    async def test_file_contents_are_pretty_json(self, project_root):
        """Test the file is written exactly as rendered."""
        await run(["-y", "--library"])

        text = (project_root / "tsconfig.json").read_text(encoding="utf-8")
        assert text.startswith("{\n  \"compilerOptions\": {")
        assert not text.endswith("\n")
        assert json.loads(text)["compilerOptions"]["declaration"] is True

    @pytest.mark.asyncio
    async def test_dry_run_prints_without_writing(self, project_root, capsys):
        """Test --dry-run sends the config to stdout only."""
        await run(["-y", "--dry-run", "--monorepo"])

        assert not (project_root / "tsconfig.json").exists()
        printed = json.loads(capsys.readouterr().out)
        assert printed["compilerOptions"]["composite"] is True

    @pytest.mark.asyncio
    async def test_argv_defaults_to_sys_argv(self, project_root, monkeypatch, capsys):
        """Test run() without arguments parses the process command line."""
        monkeypatch.setattr(sys, "argv", ["tsconfig-init", "-y", "--dry-run"])

        await run()

        assert json.loads(capsys.readouterr().out)["compilerOptions"]["strict"] is True

    @pytest.mark.asyncio
    async def test_assume_yes_from_environment(self, project_root, monkeypatch):
        """Test TSINIT_ASSUME_YES skips every prompt."""
        monkeypatch.setenv("TSINIT_ASSUME_YES", "1")

        await run([])

        assert (project_root / "tsconfig.json").exists()


class TestRunExistingConfig:
    """Test handling of an existing tsconfig.json."""

    @pytest.mark.asyncio
    async def test_refuses_overwrite_with_yes(self, project_root):
        """Test -y never replaces an existing file."""
        (project_root / "tsconfig.json").write_text("{}", encoding="utf-8")

        with pytest.raises(ProjectExistsError, match="--force"):
            await run(["-y"])

        assert (project_root / "tsconfig.json").read_text(encoding="utf-8") == "{}"

    @pytest.mark.asyncio
    async def test_force_overwrites(self, project_root):
        """Test --force replaces the existing file."""
        (project_root / "tsconfig.json").write_text("{}", encoding="utf-8")

        await run(["-y", "--force"])

        assert "compilerOptions" in _read_tsconfig(project_root)

    @pytest.mark.asyncio
    async def test_declined_confirmation(self, project_root, monkeypatch):
        """Test answering no to the overwrite question fails the run."""
        (project_root / "tsconfig.json").write_text("{}", encoding="utf-8")
        monkeypatch.setattr(cli_main.click, "confirm", lambda *args, **kwargs: False)

        with pytest.raises(ProjectExistsError):
            await run(ALL_ANSWERS)

        assert (project_root / "tsconfig.json").read_text(encoding="utf-8") == "{}"

    @pytest.mark.asyncio
    async def test_accepted_confirmation(self, project_root, monkeypatch):
        """Test answering yes to the overwrite question replaces the file."""
        (project_root / "tsconfig.json").write_text("{}", encoding="utf-8")
        monkeypatch.setattr(cli_main.click, "confirm", lambda *args, **kwargs: True)

        await run(ALL_ANSWERS)

        assert "compilerOptions" in _read_tsconfig(project_root)


class TestRunCommandLine:
    """Test command-line parsing behavior."""

    @pytest.mark.asyncio
    async def test_help_returns_normally(self, project_root, capsys):
        """Test --help prints usage and counts as success."""
        await run(["--help"])

        out = capsys.readouterr().out
        assert "Initialize a TypeScript project" in out
        assert "--strictness" in out
        assert not (project_root / "tsconfig.json").exists()

    @pytest.mark.asyncio
    async def test_version(self, project_root, capsys):
        """Test --version prints the program version."""
        await run(["--version"])

        assert "tsconfig-init v" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unknown_option_raises(self, project_root):
        """Test usage errors propagate to the caller."""
        with pytest.raises(click.UsageError):
            await run(["--bogus"])

    @pytest.mark.asyncio
    async def test_invalid_strictness_raises(self, project_root):
        """Test values outside the menu are rejected by click."""
        with pytest.raises(click.BadParameter):
            await run(["--strictness", "paranoid", "-y"])


class TestCli:
    """Test the click command's parsed request."""

    def test_only_given_answers_are_preset(self):
        """Test flags left at their defaults stay unanswered."""
        request = cli_main.cli.main(
            args=["app", "--no-dom"], prog_name="tsconfig-init", standalone_mode=False
        )

        assert request.preset == {"project_name": "app", "is_dom": False}
        assert request.assume_yes is False
        assert request.force is False

    def test_switches(self):
        """Test behavior switches are carried through."""
        request = cli_main.cli.main(
            args=["-y", "-f", "--dry-run", "-v"], prog_name="tsconfig-init", standalone_mode=False
        )

        assert request.preset == {}
        assert request.assume_yes is True
        assert request.force is True
        assert request.dry_run is True
        assert request.verbose is True


class TestInteractiveRun:
    """Test runs that read answers from stdin."""

    @pytest.mark.asyncio
    async def test_dry_run_stdout_is_only_json(self, project_root, monkeypatch, capsys):
        """Test questions and menus stay on stderr during --dry-run."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("\n" * 6))

        await run(["--dry-run"])

        captured = capsys.readouterr()
        assert json.loads(captured.out)["compilerOptions"]["strict"] is True
        assert "What is the name of your project?" in captured.err
        assert "Balanced (Recommended)" in captured.err
        assert "Balanced (Recommended)" not in captured.out

    @pytest.mark.asyncio
    async def test_overwrite_question_on_stderr(self, project_root, monkeypatch, capsys):
        """Test the overwrite confirmation is asked on stderr."""
        (project_root / "tsconfig.json").write_text("{}", encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", io.StringIO("y\n"))

        await run(ALL_ANSWERS)

        captured = capsys.readouterr()
        assert "Overwrite it?" in captured.err
        assert "Overwrite it?" not in captured.out
        assert "compilerOptions" in _read_tsconfig(project_root)


class TestInterruptiblePrompts:
    """Test SIGINT handling around blocking prompts."""

    def test_default_handler_while_prompting(self, monkeypatch):
        """Test Ctrl-C raises KeyboardInterrupt inside the block and the old handler returns."""
        def loop_handler(signum, frame):
            pass

        monkeypatch.setattr(signal, "getsignal", lambda signum: loop_handler)
        installed = []
        monkeypatch.setattr(signal, "signal", lambda signum, handler: installed.append((signum, handler)))

        with interruptible_prompts():
            assert installed == [(signal.SIGINT, signal.default_int_handler)]

        assert installed[-1] == (signal.SIGINT, loop_handler)

    def test_handler_restored_after_abort(self, monkeypatch):
        """Test the previous handler comes back when the prompt is aborted."""
        installed = []
        monkeypatch.setattr(signal, "getsignal", lambda signum: signal.SIG_DFL)
        monkeypatch.setattr(signal, "signal", lambda signum, handler: installed.append(handler))

        with pytest.raises(click.Abort):
            with interruptible_prompts():
                raise click.Abort()

        assert installed == [signal.default_int_handler, signal.SIG_DFL]

    @pytest.mark.asyncio
    async def test_prompts_run_on_the_calling_thread(self, project_root, monkeypatch):
        """Test prompting happens on the main thread where SIGINT is delivered."""
        threads = []
        real_prompt_options = cli_main.prompt_options

        def fake_prompt_options(console, preset, assume_defaults):
            threads.append(threading.current_thread())
            return real_prompt_options(console, preset, assume_defaults)

        monkeypatch.setattr(cli_main, "prompt_options", fake_prompt_options)

        await run(["-y", "--dry-run"])

        assert threads == [threading.main_thread()]
