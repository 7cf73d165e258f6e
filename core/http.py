"""HTTP access to the followed rooms API.

This module builds the cookie and browser-like headers the endpoint expects
and performs the single GET request. It returns parsed JSON and leaves shape
validation to the caller.
"""

from functools import partial

import requests

from core.errors import InvalidResponseError, TransportError

API_URL = 'https://chaturbate.com/follow/api/online_followed_rooms/'
REFERER = 'https://chaturbate.com/followed-cams/'
REQUEST_TIMEOUT = 10

# Headers mimicking a browser XHR; the cookie header is added per client
BASE_HEADERS = {
    'accept': '*/*',
    'accept-language': 'en-US,en;q=0.9',
    'referer': REFERER,
    'sec-ch-ua': '"Google Chrome";v="137", "Chromium";v="137", "Not/A)Brand";v="24"',
    'sec-ch-ua-mobile': '?0',
    'sec-ch-ua-platform': '"Windows"',
    'sec-fetch-dest': 'empty',
    'sec-fetch-mode': 'cors',
    'sec-fetch-site': 'same-origin',
    'user-agent': ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                   '(KHTML, like Gecko) Chrome/137.0.0.0 Safari/537.36'),
    'x-requested-with': 'XMLHttpRequest',
}


def build_cookie_string(session_id: str, csrf_token: str,
                        additional_cookies: dict[str, str] | None = None) -> str:
    """Build the cookie header value for authentication.

    Additional cookies are merged last, so they override the fixed ones.

    Args:
        session_id: Session ID cookie
        csrf_token: CSRF token cookie
        additional_cookies: Extra cookies as key-value pairs

    Returns:
        Cookie string in 'key=value; key=value' form
    """
    cookies = {
        'sessionid': session_id,
        'csrftoken': csrf_token,
        'agreeterms': '1',
        **(additional_cookies or {}),
    }
    return '; '.join(f"{key}={value}" for key, value in cookies.items())


def build_headers(session_id: str, csrf_token: str,
                  additional_cookies: dict[str, str] | None = None) -> dict[str, str]:
    """Build request headers including the composed cookie string."""
    headers = dict(BASE_HEADERS)
    headers['cookie'] = build_cookie_string(session_id, csrf_token, additional_cookies)
    return headers


def fetch_snapshot(session: requests.Session, headers: dict[str, str],
                   url: str = API_URL, timeout: float = REQUEST_TIMEOUT):
    """Make the GET request and return the parsed JSON body.

    Args:
        session: requests Session to issue the request on
        headers: Request headers (see build_headers)
        url: Endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON payload

    Raises:
        TransportError: On connection failure or a non-success status
        InvalidResponseError: If the body is not valid JSON
    """
    try:
        response = session.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise TransportError(None, str(e)) from e

    if not response.ok:
        raise TransportError(response.status_code, response.reason or '')

    try:
        return response.json()
    except ValueError as e:
        raise InvalidResponseError(f"Invalid response: body is not JSON ({e})") from e


def make_fetcher(session: requests.Session, session_id: str, csrf_token: str,
                 additional_cookies: dict[str, str] | None = None,
                 url: str = API_URL, timeout: float = REQUEST_TIMEOUT):
    """Bind a session and credentials into a zero-argument fetch callable."""
    headers = build_headers(session_id, csrf_token, additional_cookies)
    return partial(fetch_snapshot, session, headers, url=url, timeout=timeout)
