from platformdirs import PlatformDirs

dirs = PlatformDirs("jotter", "jotter")

VAR_TO_DIR = {
    "CONFIG": dirs.user_config_dir.replace("\\", "/"),
}

# shown in the status line and the shortcuts screen, in this order
KEYBIND_DESCRIPTIONS = {
    "previous": "Prev",
    "next": "Next",
    "new": "New",
    "save": "Save",
    "help": "Keys",
    "quit": "Exit",
}
