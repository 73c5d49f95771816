#!/usr/bin/env python3

import subprocess
import time

_QUIET_MODE = False
_DEBUG_LOG_PATH = None

#============================================

def set_quiet_mode(enabled: bool) -> None:
	global _QUIET_MODE
	_QUIET_MODE = bool(enabled)

#============================================

def is_quiet_mode() -> bool:
	return _QUIET_MODE

#============================================

def set_debug_log(log_path: str = None) -> None:
	"""
	Route write_log() output to log_path; None disables the debug log.
	"""
	global _DEBUG_LOG_PATH
	_DEBUG_LOG_PATH = log_path

#============================================

def write_log(message: str) -> None:
	if _DEBUG_LOG_PATH is None:
		return
	timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
	line = f"[{timestamp}] {message}\n"
	with open(_DEBUG_LOG_PATH, "a", encoding="utf-8") as handle:
		handle.write(line)

#============================================

def echo(message: str) -> None:
	"""
	Print unless quiet mode is on; always mirrored to the debug log.
	"""
	write_log(message)
	if not _QUIET_MODE:
		print(message)

#============================================

def runCmd(cmd: str) -> int:
	showcmd = cmd.strip()
	print(f"CMD: '{showcmd}'")
	write_log(f"start: {showcmd}")
	t0 = time.time()
	proc = subprocess.Popen(showcmd, shell=True, stderr=subprocess.PIPE,
		stdout=subprocess.PIPE)
	proc.communicate()
	write_log(f"end ({time.time() - t0:.3f}s, rc={proc.returncode}): {showcmd}")
	return proc.returncode

