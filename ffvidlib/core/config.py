#!/usr/bin/env python3

import os
import yaml
from ffvidlib.core.errors import ConfigError

DEFAULT_CONFIG_FILE = os.path.join('~', '.config', 'ffvid', 'config.yaml')

#============================================

class FfvidConfig():
	def __init__(self):
		self.config_file = None
		self.transcoder = 'ffmpeg'
		self.player = 'ffplay'
		self.execute = False
		self.check_paths = False
		self.quiet = False
		self.debug_log = None

#============================================

# key -> accepted types
CONFIG_KEYS = {
	'transcoder': (str,),
	'player': (str,),
	'execute': (bool,),
	'check_paths': (bool,),
	'quiet': (bool,),
	'debug_log': (str, type(None)),
}

#============================================

class ConfigLoader():
	def __init__(self, config_file: str = None):
		self.config_file = config_file

	#============================
	def resolve_path(self) -> str:
		"""
		Pick the config file: explicit argument, FFVID_CONFIG, then the
		per-user default if it exists. Returns None when there is none.
		"""
		if self.config_file is not None:
			return self.config_file
		env_file = os.environ.get('FFVID_CONFIG', '')
		if env_file != '':
			return env_file
		default_file = os.path.expanduser(DEFAULT_CONFIG_FILE)
		if os.path.isfile(default_file):
			return default_file
		return None

	#============================
	def load(self) -> FfvidConfig:
		config = FfvidConfig()
		config_file = self.resolve_path()
		if config_file is None:
			return config
		config.config_file = config_file
		data = self._load_yaml(config_file)
		self._apply(config, data)
		return config

	#============================
	def _load_yaml(self, config_file: str) -> dict:
		if not os.path.isfile(config_file):
			raise ConfigError(f"config file not found: {config_file}")
		file_size = os.path.getsize(config_file)
		if file_size > 10 ** 6:
			raise ConfigError("config file is larger than 1MB")
		with open(config_file, 'r') as data_file:
			try:
				data = yaml.safe_load(data_file)
			except yaml.YAMLError as exc:
				raise ConfigError(f"config file is not valid yaml: {exc}") from exc
		# an empty file means all defaults
		if data is None:
			return {}
		if not isinstance(data, dict):
			raise ConfigError("config yaml must be a mapping at the top level")
		return data

	#============================
	def _apply(self, config: FfvidConfig, data: dict) -> None:
		for key, value in data.items():
			if key not in CONFIG_KEYS:
				raise ConfigError(f"unknown config key: {key}")
			if not isinstance(value, CONFIG_KEYS[key]):
				raise ConfigError(f"config key {key} has the wrong type")
			if key in ('transcoder', 'player') and value.strip() == '':
				raise ConfigError(f"config key {key} must not be empty")
			setattr(config, key, value)

#============================================

def load_config(config_file: str = None) -> FfvidConfig:
	return ConfigLoader(config_file).load()
