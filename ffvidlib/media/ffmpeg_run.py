#!/usr/bin/env python3

import sys
from ffvidlib.core import display
from ffvidlib.core import utils
from ffvidlib.core.errors import RunningError
from ffvidlib.core.operations import Command

CONFIRM_PROMPT = "Are you sure you wanna execute? (Y/n): "

#============================================

def read_answer(stream=None) -> str:
	if stream is None:
		stream = sys.stdin
	line = stream.readline()
	return line.rstrip("\r\n")

#============================================

def confirm(command: Command, stream=None) -> bool:
	"""
	Show the command and ask the operator; only an exact "Y" confirms.
	"""
	print("The command that will be executed is:\n")
	display.print_command(command.to_text())
	print(f"\n{CONFIRM_PROMPT}")
	answer = read_answer(stream)
	utils.write_log(f"confirmation answer: {answer!r}")
	return answer == "Y"

#============================================

def run(command: Command, execute: bool = False, stream=None) -> bool:
	"""
	Confirm and, when execute is enabled, run the command.

	Returns:
		bool: True when the operator confirmed.
	"""
	if not confirm(command, stream):
		print("Exiting...")
		return False
	if not execute:
		utils.echo("execution disabled, set `execute: true` in the config to run")
		return True
	returncode = utils.runCmd(command.to_shell())
	if returncode != 0:
		raise RunningError(f"{command.invocation} exited with status {returncode}")
	return True
