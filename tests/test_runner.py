import sys
import pytest
from unittest.mock import patch, MagicMock
from dev_tools.core.models import RunResult
from dev_tools.core.runner import run, autorest_executable, autorest_arguments, autorest
from dev_tools.utils import assert_ex


class TestAutorestExecutable:
    def test_no_arguments(self):
        assert_ex.starts_with(autorest_executable(), "autorest")

    def test_aix(self):
        command = autorest_executable(os_platform="aix", autorest_path="./node_modules/.bin")
        assert command == "./node_modules/.bin/autorest"

    def test_darwin(self):
        assert autorest_executable(os_platform="darwin", autorest_path="blah") == "blah/autorest"

    def test_freebsd(self):
        assert autorest_executable(os_platform="freebsd") == "autorest"

    def test_linux_with_full_path(self):
        command = autorest_executable(os_platform="linux", autorest_path="place/autorest")
        assert command == "place/autorest"

    def test_openbsd(self):
        assert autorest_executable(os_platform="openbsd") == "autorest"

    def test_sunos(self):
        assert autorest_executable(os_platform="sunos") == "autorest"

    def test_win32(self):
        command = autorest_executable(os_platform="win32", autorest_path="./node_modules/.bin")
        assert command == "./node_modules/.bin/autorest.cmd"

    def test_win32_backslash_path(self):
        command = autorest_executable(os_platform="win32", autorest_path="C:\\tools\\bin\\")
        assert command == "C:/tools/bin/autorest.cmd"

    def test_win32_cmd_not_doubled(self):
        command = autorest_executable(os_platform="win32", autorest_path="bin/autorest.cmd")
        assert command == "bin/autorest.cmd"

    def test_no_platform_specified(self):
        command = autorest_executable(autorest_path="./node_modules/.bin")
        assert_ex.starts_with(command, "./node_modules/.bin/autorest")


class TestAutorestArguments:
    def test_readme_only(self):
        assert autorest_arguments("readme.md") == ["readme.md"]

    def test_no_readme(self):
        assert autorest_arguments("", {}) == []

    def test_options(self):
        args = autorest_arguments("readme.md", {
            "typescript": True,
            "output-folder": "out",
            "debug": False,
            "tag": None,
        })
        assert args == ["readme.md", "--typescript", "--output-folder=out"]


class TestRun:
    @pytest.fixture
    def mock_popen(self):
        with patch('dev_tools.core.runner.subprocess.Popen') as mock:
            process = MagicMock()
            process.communicate.return_value = ("out", "err")
            process.returncode = 3
            process.pid = 1234
            process.__enter__.return_value = process
            mock.return_value = process
            yield mock

    def test_run_collects_result(self, mock_popen):
        result = run("tool", ["--flag"], cwd="somewhere")

        assert result == RunResult(exit_code=3, stdout="out", stderr="err", process_id=1234)
        assert result.succeeded() is False
        args, kwargs = mock_popen.call_args
        assert args[0] == ["tool", "--flag"]
        assert kwargs["cwd"] == "somewhere"

    def test_real_process(self):
        result = run(sys.executable, ["-c", "print('hello')"])
        assert result.succeeded()
        assert_ex.contains(result.stdout, "hello")
        assert_ex.defined(result.process_id, "result.process_id")

    def test_missing_executable(self):
        error = assert_ex.throws(lambda: run("./i'm/not/here/autorest"))
        assert isinstance(error, FileNotFoundError)


class TestAutorest:
    def test_missing_autorest(self):
        error = assert_ex.throws(
            lambda: autorest("fake readme.md file path", {}, autorest_path="./i'm/not/here")
        )
        assert isinstance(error, FileNotFoundError)

    def test_invokes_run(self):
        with patch('dev_tools.core.runner.run') as mock_run:
            mock_run.return_value = RunResult(exit_code=0)
            result = autorest("readme.md", {"typescript": True}, autorest_path="bin",
                              cwd="repo", os_platform="linux")

        assert result.exit_code == 0
        mock_run.assert_called_once_with("bin/autorest", ["readme.md", "--typescript"], cwd="repo")
