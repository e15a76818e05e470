import logging
from typing import Optional

import requests
from urllib3.exceptions import ReadTimeoutError

from ... import settings
from ...exceptions import MetadataFetchError
from ...utils import requests_retry_session

logger = logging.getLogger("sources")

TOKEN_PATH = "/latest/api/token"
INSTANCE_TYPE_PATH = "/latest/meta-data/instance-type"
TOKEN_URL = f"{settings.IMDS_ENDPOINT}{TOKEN_PATH}"
INSTANCE_TYPE_URL = f"{settings.IMDS_ENDPOINT}{INSTANCE_TYPE_PATH}"

IMDSV2_HDR_TOKEN_TTL = "X-aws-ec2-metadata-token-ttl-seconds"
IMDSV2_HDR_TOKEN = "X-aws-ec2-metadata-token"


def is_read_timeout(error: requests.RequestException) -> bool:
    """True for a read timeout, including one raised after the retry adapter gave up"""
    if isinstance(error, requests.exceptions.ReadTimeout):
        return True
    reason = getattr(error.args[0], "reason", None) if error.args else None
    return isinstance(reason, ReadTimeoutError)


class InstanceMetadataClient:
    """
    Minimal EC2 instance metadata service (IMDS) client.

    An IMDSv2 session token is requested first when `use_token` is set.
    If the token request is refused the value is requested without a token (IMDSv1).

    AWS meta-data docs:
    https://docs.aws.amazon.com/AWSEC2/latest/UserGuide/instancedata-data-retrieval.html
    """

    def __init__(
        self,
        endpoint: str = settings.IMDS_ENDPOINT,
        timeout: float = settings.IMDS_TIMEOUT_SECONDS,
        retries: int = settings.IMDS_RETRIES,
        use_token: bool = settings.IMDS_USE_TOKEN,
        token_ttl_seconds: int = settings.IMDS_TOKEN_TTL_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.use_token = use_token
        self.token_ttl_seconds = token_ttl_seconds
        self.session = requests_retry_session(retries=retries, session=session)

    def _get_token(self) -> Optional[str]:
        url = f"{self.endpoint}{TOKEN_PATH}"
        headers = {IMDSV2_HDR_TOKEN_TTL: str(self.token_ttl_seconds)}
        try:
            response = self.session.put(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            # token responses do not reach containers when the hop limit is 1
            if is_read_timeout(e):
                logger.debug(f"IMDSv2 token request timed out, continuing without token: {e}")
                return None
            raise MetadataFetchError(f"Unable to reach instance metadata service ({url}): {e}", url=url) from e
        if response.status_code != 200:
            logger.debug(f"IMDSv2 token request refused ({response.status_code}), continuing without token")
            return None
        return response.text

    def close(self) -> None:
        self.session.close()

    def get(self, path: str) -> str:
        """Get the text value of a metadata path, for example '/latest/meta-data/instance-type'"""
        headers = {}
        if self.use_token:
            token = self._get_token()
            if token:
                headers[IMDSV2_HDR_TOKEN] = token

        url = f"{self.endpoint}{path}"
        logger.debug(f"requesting ({url})...")
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise MetadataFetchError(f"Unable to reach instance metadata service ({url}): {e}", url=url) from e

        if response.status_code != 200:
            raise MetadataFetchError(f"({response.status_code}) error requesting ({url})", url=url, status_code=response.status_code)
        value = response.text.strip()
        if not value:
            raise MetadataFetchError(f"Empty response from ({url})", url=url, status_code=response.status_code)
        return value


IMDS_CLIENT = InstanceMetadataClient()


def get_instance_type(client: Optional[InstanceMetadataClient] = None) -> str:
    """
    Obtain instance type

    Raises MetadataFetchError when the metadata service is unreachable or does not answer with a value.
    """
    client = client or IMDS_CLIENT
    return client.get(INSTANCE_TYPE_PATH)
