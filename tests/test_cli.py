from unittest import mock

from instancemeta.cli import log_startup
from instancemeta.exceptions import MetadataFetchError
from instancemeta.providers import InstanceMetadataProvider


def test_log_startup():
    provider = InstanceMetadataProvider(instance_type_source=lambda: "c7g.large", architecture_source=lambda: "aarch64")
    with mock.patch("instancemeta.cli.logger.info") as mock_info, mock.patch("instancemeta.cli.logger.warning") as mock_warning:
        log_startup(provider)
    mock_warning.assert_not_called()
    messages = [c.args[0] for c in mock_info.call_args_list]
    assert "instance_type: c7g.large" in messages
    assert "architecture: aarch64 (graviton=True)" in messages


def test_log_startup_metadata_unavailable():
    source = mock.Mock(side_effect=[MetadataFetchError("metadata service unavailable"), "c6g.medium"])
    provider = InstanceMetadataProvider(instance_type_source=source, architecture_source=lambda: "aarch64")
    with mock.patch("instancemeta.cli.logger.warning") as mock_warning:
        log_startup(provider)
    mock_warning.assert_called_once()
    assert "metadata service unavailable" in mock_warning.call_args.args[0]

    # nothing cached, the next lookup fetches again
    assert provider.get_instance_type() == "c6g.medium"
