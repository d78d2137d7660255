"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .raids import Raids
from .emojis import Emojis

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=logging.INFO)
logging.getLogger("discord.http").setLevel(logging.WARNING)

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
raids = Raids(_RAW_CONFIG)
emojis = Emojis(_RAW_CONFIG)


class Config:
    core = core
    raids = raids
    emojis = emojis


__all__ = ["core", "raids", "emojis", "Config"]
