"""Tests for gitcz.cli module."""

import yaml
from typer.testing import CliRunner

from gitcz.cli import app
from gitcz.config import get_config_file
from gitcz.git import GitError
from gitcz.session import CommitSession, SessionResult


runner = CliRunner()


class TestMainCommand:
    """Tests for main git-cz command."""

    def test_shows_help(self):
        """Test that help is displayed."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Conventional Commits" in result.output
        assert "--config" in result.output
        assert "init" in result.output

    def test_shows_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "git-cz" in result.output

    def test_not_a_repo(self, mocker):
        """Test running outside a repository fails."""
        mocker.patch("gitcz.cli.main.get_repo_root", side_effect=GitError("Not in a git repository."))
        mock_run = mocker.patch("gitcz.cli.main.run_session")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Git error" in result.output
        mock_run.assert_not_called()

    def test_config_error_stops_before_ui(self, mocker, temp_dir):
        """Test an invalid config is reported before the dialogue starts."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mock_run = mocker.patch("gitcz.cli.main.run_session")
        config_path = temp_dir / "bad.yaml"
        config_path.write_text(yaml.dump({"skip_questions": ["subject"]}))

        result = runner.invoke(app, ["--config", str(config_path)])

        assert result.exit_code == 1
        assert "Error loading config" in result.output
        assert "invalid skip question: subject" in result.output
        mock_run.assert_not_called()

    def test_missing_config_file(self, mocker, temp_dir):
        """Test an explicit config path must exist."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("gitcz.cli.main.run_session")

        result = runner.invoke(app, ["-c", str(temp_dir / "missing.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_commit_success(self, mocker, temp_dir):
        """Test a committed session exits cleanly."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mock_run = mocker.patch("gitcz.cli.main.run_session", return_value=SessionResult.COMMITTED)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Committed." in result.output
        session = mock_run.call_args.args[0]
        assert isinstance(session, CommitSession)
        assert session.repository.path == temp_dir

    def test_declined(self, mocker, temp_dir):
        """Test a declined session exits with 0."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("gitcz.cli.main.run_session", return_value=SessionResult.DECLINED)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "cancelled" in result.output.lower()

    def test_quit(self, mocker, temp_dir):
        """Test quitting exits with 0 and says nothing about commits."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("gitcz.cli.main.run_session", return_value=SessionResult.QUIT)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Committed" not in result.output

    def test_commit_failure(self, mocker, temp_dir):
        """Test a failed commit exits non-zero with the git error."""
        mocker.patch("gitcz.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch(
            "gitcz.cli.main.run_session",
            side_effect=GitError("Git command failed: git commit\nnothing to commit"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Commit failed!" in result.output
        assert "nothing to commit" in result.output


class TestInitCommand:
    """Tests for git-cz init command."""

    def test_writes_default_config(self, mocker, mock_repo_root):
        """Test the config file is created."""
        mocker.patch("gitcz.cli.init.get_repo_root", return_value=mock_repo_root)

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert get_config_file(mock_repo_root).exists()
        assert "Configuration saved" in result.output

    def test_refuses_to_overwrite(self, mocker, mock_repo_root):
        """Test an existing config is kept without --force."""
        mocker.patch("gitcz.cli.init.get_repo_root", return_value=mock_repo_root)
        config_file = get_config_file(mock_repo_root)
        config_file.parent.mkdir()
        config_file.write_text("skip_questions: [body]\n")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_file.read_text() == "skip_questions: [body]\n"

    def test_force_overwrites(self, mocker, mock_repo_root):
        """Test --force replaces an existing config."""
        mocker.patch("gitcz.cli.init.get_repo_root", return_value=mock_repo_root)
        config_file = get_config_file(mock_repo_root)
        config_file.parent.mkdir()
        config_file.write_text("skip_questions: [body]\n")

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0
        assert "types:" in config_file.read_text()

    def test_handles_git_error(self, mocker):
        """Test init outside a repository fails."""
        mocker.patch("gitcz.cli.init.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "error" in result.output.lower()


class TestTypesCommand:
    """Tests for git-cz types command."""

    def test_lists_default_types(self, mocker):
        """Test the built-in catalogue is listed outside a repository."""
        mocker.patch("gitcz.cli.list_types.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["types"])

        assert result.exit_code == 0
        assert "feat" in result.output
        assert "A bug fix" in result.output

    def test_lists_configured_types(self, mocker, temp_dir, sample_config_dict):
        """Test types from an explicit config file are listed."""
        mocker.patch("gitcz.cli.list_types.get_repo_root", return_value=temp_dir)
        config_path = temp_dir / "config.yaml"
        config_path.write_text(yaml.dump(sample_config_dict))

        result = runner.invoke(app, ["types", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "docs" in result.output
        assert "refactor" not in result.output
