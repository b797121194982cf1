from dataclasses import dataclass

from jotter.functions.config import config_setup, load_config

TEXT_EXTENSION = ".txt"
FILENAME_FORMAT = "%Y-%m-%d_%H-%M-%S"

# Initialize the config once at import time
if "config" not in globals():
    global config
    config_setup()
    config = load_config()


@dataclass
class StatusTitles:
    unnamed = "unnamed"
    editor = "Editor"
    shortcuts = "Keys"
