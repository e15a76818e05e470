import importlib
import os
from unittest import mock

import pytest
from instancemeta import settings
from instancemeta.settings import getenv_bool, getenv_optional


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("True", True), ("1", True), ("yes", True), (" YES ", True), ("false", False), ("0", False), ("no", False), ("", False)],
)
def test_getenv_bool(value, expected):
    with mock.patch.dict(os.environ, {"IMDS_USE_TOKEN": value}):
        assert getenv_bool("IMDS_USE_TOKEN", "true") is expected


def test_getenv_bool_default():
    with mock.patch.dict(os.environ):
        os.environ.pop("IMDS_USE_TOKEN", None)
        assert getenv_bool("IMDS_USE_TOKEN", "true") is True
        assert getenv_bool("IMDS_USE_TOKEN") is False


def test_getenv_optional():
    with mock.patch.dict(os.environ, {"INSTANCE_TYPE_FALLBACK": ""}):
        assert getenv_optional("INSTANCE_TYPE_FALLBACK") is None
    with mock.patch.dict(os.environ, {"INSTANCE_TYPE_FALLBACK": "Unknown"}):
        assert getenv_optional("INSTANCE_TYPE_FALLBACK") == "Unknown"


def test_settings_empty_fallback():
    try:
        with mock.patch.dict(os.environ, {"INSTANCE_TYPE_FALLBACK": "", "IMDS_USE_TOKEN": "false", "INSTANCE_TYPE_SOURCE": " Environment "}):
            importlib.reload(settings)
            assert settings.INSTANCE_TYPE_FALLBACK is None
            assert settings.IMDS_USE_TOKEN is False
            assert settings.INSTANCE_TYPE_SOURCE == "environment"
    finally:
        importlib.reload(settings)
