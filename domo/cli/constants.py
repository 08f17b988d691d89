"""Exit codes and constants for the Domo CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 2
    PRECONDITION_FAILED = 4
    NETWORK_ERROR = 6
    EDITOR_ERROR = 7


DEFAULT_EDITOR = "vim"

ENV_HOST = "DOMO_API_HOST"
ENV_CLIENT_ID = "DOMO_API_CLIENT_ID"
ENV_CLIENT_SECRET = "DOMO_API_CLIENT_SECRET"
ENV_EDITOR = "DOMO_EDITOR"
ENV_INTEGRATION_WH_URL = "DOMO_INTEGRATION_WH_URL"
ENV_INTEGRATION_WH_TOKEN = "DOMO_INTEGRATION_WH_TOKEN"
ENV_BUZZ_WH_URL = "DOMO_BUZZ_WH_URL"
ENV_DATASET_WH_URL = "DOMO_DATASET_WH_URL"
