"""Fixed locations and constants.

The catalog lives next to the installed package; there is no per-user
override. Everything that varies between runs is gathered by prompts.
"""

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

CATALOG_PATH = PACKAGE_DIR / "registry" / "registries.json"

# Built-in mirrors shipped in registries.json. They cannot be deleted,
# edited or renamed through the interactive menus.
PROTECTED_NAMES = ("npm", "cnpm", "yarn", "taobao", "tencent", "huawei", "npmMirror")

# The upstream registry; switching to it is judged differently (see switch.py).
DEFAULT_REGISTRY_NAME = "npm"

NPM_COMMAND = "npm"

LOG_LEVEL_ENV = "REGSWITCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
