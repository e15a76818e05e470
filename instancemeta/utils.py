import requests
from requests.adapters import HTTPAdapter
from urllib3 import Retry


def requests_retry_session(retries=2, backoff_factor=0.1, status_forcelist=(500, 502, 503, 504), session=None):
    """
    request retry session used for instance metadata service calls
    :param retries:
    :param backoff_factor:
    :param status_forcelist:
    :param session:
    :return:
    """
    session = session or requests.Session()
    retry = Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=frozenset(["GET", "PUT"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
