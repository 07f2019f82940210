from pathlib import Path
from .constants import LOG_DIR_NAME, STYLE_FILE

BASE_DIR = Path(__file__).resolve().parent
STYLE_PATH = BASE_DIR / STYLE_FILE

# log dir is created lazily by the file logger, not at import time
LOG_DIR = Path.cwd() / LOG_DIR_NAME
LOGIN_LOG_FILE = LOG_DIR / "login.log"
