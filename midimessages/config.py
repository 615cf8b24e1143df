import logging
import os
import typing

import yaml

import midimessages.constants.messages
import midimessages.encoder


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.

	A missing or empty file gives an empty configuration, so the defaults apply.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	logger.info(f"Loaded config from {config_path}")
	return config


def default_channel_from_config (config: typing.Dict[str, typing.Any]) -> int:

	"""
	Read ``midi.default_channel`` from a configuration dict (default 1).

	The channel is returned as written; encoders clamp it when they use it.
	"""

	midi_section = config.get('midi') or {}

	if not isinstance(midi_section, dict):
		raise ValueError(f"Config section 'midi' must be a mapping, got {type(midi_section).__name__}")

	return midi_section.get('default_channel', midimessages.constants.messages.DEFAULT_CHANNEL)


def encoder_from_config (config: typing.Dict[str, typing.Any]) -> midimessages.encoder.MidiEncoder:

	"""Create a `MidiEncoder` whose default channel comes from the configuration."""

	return midimessages.encoder.MidiEncoder(default_channel=default_channel_from_config(config))


def configure (config: typing.Dict[str, typing.Any]) -> None:

	"""Apply the configuration to the process-wide default channel."""

	channel = default_channel_from_config(config)
	midimessages.encoder.set_global_channel(channel)
	logger.info(f"Global MIDI channel: {channel}")
