#!/usr/bin/env python3

"""
CLI front end: ffvid [--resize W:H] [--quality Q] [--preview] [--merge P1 P2 ...] <outpath>
"""

import sys
from ffvidlib.core import builder
from ffvidlib.core import config as config_module
from ffvidlib.core import parser
from ffvidlib.core import utils
from ffvidlib.core.errors import FfvidError
from ffvidlib.media import ffmpeg_run

#============================================

def main(argv: list = None) -> int:
	if argv is None:
		argv = sys.argv
	try:
		config = config_module.load_config()
	except FfvidError as exc:
		print(repr(exc))
		return 0
	utils.set_quiet_mode(config.quiet)
	utils.set_debug_log(config.debug_log)
	utils.write_log(f"argv: {argv!r}")

	try:
		operations = parser.parse_args(argv, check_paths=config.check_paths)
	except FfvidError as exc:
		utils.write_log(f"parse failed: {exc!r}")
		print(repr(exc))
		return 0
	utils.echo(repr(operations))

	try:
		command = builder.build_args(operations, config)
	except FfvidError as exc:
		utils.write_log(f"build failed: {exc!r}")
		print(repr(exc))
		return 0
	utils.echo(repr(command))

	try:
		ffmpeg_run.run(command, execute=config.execute)
	except FfvidError as exc:
		print(repr(exc))
	return 0

#============================================

if __name__ == '__main__':
	sys.exit(main())
