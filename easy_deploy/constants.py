"""Global constants for easy-deploy"""

APP_NAME = "easy-deploy"
LOG_FORMAT = "%(message)s"

# File naming
STATE_FILE_PREFIX = ".easy-deploy_"
HIDDEN_FILE_PREFIX = "."
HIDDEN_ID_SEPARATOR = "_"

# Retention
MAX_VERSIONS_TO_KEEP = 10

# State schema tags, oldest first. Only the last one is ever written.
STATE_SCHEMA_V1 = "V1"
STATE_SCHEMA_V2 = "V2"
STATE_SCHEMA_V3 = "V3"
CURRENT_STATE_SCHEMA = STATE_SCHEMA_V3

# Configuration
USER_CONFIG_FILE = "~/.config/easy-deploy/config.yaml"

# Environment variables
ENV_CONFIG_PATH = "EASY_DEPLOY_CONFIG"
ENV_LOG_LEVEL = "EASY_DEPLOY_LOG_LEVEL"
ENV_MAX_VERSIONS = "EASY_DEPLOY_MAX_VERSIONS"
ENV_STRICT_CLEANUP = "EASY_DEPLOY_STRICT_CLEANUP"

# Display
TIME_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
CURRENT_MARKER = "*"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "ED001"
    SOURCE_NOT_READABLE = "ED002"
    TARGET_NOT_WRITABLE = "ED003"
    LINK_UPDATE_FAILED = "ED004"
    CLEANUP_FAILED = "ED005"
    STATE_IO_ERROR = "ED006"
    STATE_CORRUPTED = "ED007"
    NOTHING_TO_ROLLBACK = "ED008"
    DEPLOYMENT_NOT_FOUND = "ED009"


