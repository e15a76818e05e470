import os
from typing import Optional


def getenv_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


def getenv_optional(name: str) -> Optional[str]:
    """Value of the environment variable, None when unset or empty"""
    return os.getenv(name) or None


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# metadata | environment | architecture
DEFAULT_INSTANCE_TYPE_SOURCE = "metadata"
INSTANCE_TYPE_SOURCE = os.getenv("INSTANCE_TYPE_SOURCE", DEFAULT_INSTANCE_TYPE_SOURCE).strip().lower()

EC2_INSTANCE_TYPE_ENVAR = os.getenv("EC2_INSTANCE_TYPE_ENVAR", "EC2_INSTANCE_TYPE")

IMDS_ENDPOINT = os.getenv("IMDS_ENDPOINT", "http://169.254.169.254").rstrip("/")
IMDS_TIMEOUT_SECONDS = float(os.getenv("IMDS_TIMEOUT_SECONDS", "1.0"))
IMDS_RETRIES = int(os.getenv("IMDS_RETRIES", "2"))
IMDS_USE_TOKEN = getenv_bool("IMDS_USE_TOKEN", "true")
IMDS_TOKEN_TTL_SECONDS = int(os.getenv("IMDS_TOKEN_TTL_SECONDS", "21600"))

# when unset, metadata fetch failures propagate to the caller
INSTANCE_TYPE_FALLBACK = getenv_optional("INSTANCE_TYPE_FALLBACK")
