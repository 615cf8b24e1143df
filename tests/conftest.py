import typing

import pytest

import midimessages.constants.messages
import midimessages.encoder


@pytest.fixture(autouse=True)
def reset_global_channel () -> typing.Iterator[None]:

	"""Restore the process-wide default channel after every test."""

	midimessages.encoder.set_global_channel(midimessages.constants.messages.DEFAULT_CHANNEL)
	yield
	midimessages.encoder.set_global_channel(midimessages.constants.messages.DEFAULT_CHANNEL)


@pytest.fixture
def config_file (tmp_path: typing.Any) -> typing.Callable[[str], str]:

	"""Write YAML text to a temporary config file and return its path."""

	def _write (text: str) -> str:

		path = tmp_path / "config.yaml"
		path.write_text(text)
		return str(path)

	return _write
