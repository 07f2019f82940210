APP_NAME = "SpringBoot Chat"
STYLE_FILE = "styles.qss"
LOG_DIR_NAME = "logs"

# Simulated network latency of the login stub (milliseconds)
LOGIN_DELAY_MS = 2000

NICKNAME_MIN_LEN = 2
NICKNAME_MAX_LEN = 10
