"""
Pytest coverage for the confirmation prompt and command execution.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from ffvidlib.core import errors
from ffvidlib.core.operations import Command
from ffvidlib.media import ffmpeg_run

COMMAND = Command("ffmpeg", ("-vf scale=1920:1080", "out.mp4"))

#============================================

@pytest.fixture
def fake_run(monkeypatch):
	seen = {"cmds": [], "returncode": 0}

	def fake_run_cmd(cmd: str) -> int:
		seen["cmds"].append(cmd)
		return seen["returncode"]

	monkeypatch.setattr(ffmpeg_run.utils, "runCmd", fake_run_cmd)
	return seen

#============================================

def test_preview_and_prompt_text(capsys, fake_run) -> None:
	"""
	Ensure the operator sees the full command and the prompt.
	"""
	ffmpeg_run.run(COMMAND, stream=io.StringIO("n\n"))
	out = capsys.readouterr().out
	assert "The command that will be executed is:\n\n" in out
	assert "\tffmpeg -vf scale=1920:1080 out.mp4\n" in out
	assert "Are you sure you wanna execute? (Y/n): " in out

#============================================

@pytest.mark.parametrize("answer", ["y\n", "n\n", "yes\n", "Y \n", " Y\n", "", "\n"])
def test_anything_but_y_aborts(capsys, fake_run, answer: str) -> None:
	confirmed = ffmpeg_run.run(COMMAND, execute=True, stream=io.StringIO(answer))
	assert confirmed is False
	assert "Exiting..." in capsys.readouterr().out
	assert fake_run["cmds"] == []

#============================================

@pytest.mark.parametrize("answer", ["Y\n", "Y", "Y\r\n"])
def test_y_confirms(fake_run, answer: str) -> None:
	assert ffmpeg_run.confirm(COMMAND, stream=io.StringIO(answer)) is True

#============================================

def test_execution_disabled_by_default(fake_run) -> None:
	confirmed = ffmpeg_run.run(COMMAND, stream=io.StringIO("Y\n"))
	assert confirmed is True
	assert fake_run["cmds"] == []

#============================================

def test_execute_runs_joined_command(fake_run) -> None:
	ffmpeg_run.run(COMMAND, execute=True, stream=io.StringIO("Y\n"))
	assert fake_run["cmds"] == ["ffmpeg -vf scale=1920:1080 out.mp4"]

#============================================

def test_failed_execution_raises(fake_run) -> None:
	fake_run["returncode"] = 1
	with pytest.raises(errors.RunningError) as excinfo:
		ffmpeg_run.run(COMMAND, execute=True, stream=io.StringIO("Y\n"))
	assert "status 1" in excinfo.value.message

#============================================

def test_reads_stdin_by_default(monkeypatch, fake_run) -> None:
	monkeypatch.setattr(sys, "stdin", io.StringIO("Y\n"))
	assert ffmpeg_run.confirm(COMMAND) is True
