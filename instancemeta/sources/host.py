import os
import platform

from markupsafe import Markup

from .. import settings

GRAVITON_ARCHITECTURE = "aarch64"


def get_architecture() -> str:
    """Processor architecture reported by the platform, '' when unknown"""
    return platform.machine() or ""


def is_graviton_architecture(architecture) -> bool:
    """True only for the 64-bit ARM identifier used by Graviton hosts"""
    if not architecture:
        return False
    return architecture == GRAVITON_ARCHITECTURE


def get_instance_type_from_environment(envar_name: str = settings.EC2_INSTANCE_TYPE_ENVAR) -> str:
    """Read the instance type from the environment, returning a readable placeholder when not set"""
    instance_type = os.getenv(envar_name)
    if not instance_type:
        # rendered unescaped, environment values are escaped
        return Markup("Unknown (<tt>{}</tt> not set)").format(envar_name)
    return instance_type
