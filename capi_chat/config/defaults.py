"""Built-in defaults for the capi_chat settings layer."""

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_JSON = True
DEFAULT_LOG_FILE = None

ENV_PREFIX = "CAPI_CHAT_"
CONFIG_FILE_ENV = "CAPI_CHAT_CONFIG_FILE"
