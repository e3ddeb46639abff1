"""
Text processing utilities for display forms of résumé fields.
"""

import re

URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
WWW_PREFIX = "www."


def strip_url_scheme(url: str) -> str:
    """
    Remove a leading http:// or https:// scheme from a URL.

    Args:
        url: URL as written in the résumé document

    Returns:
        URL without its scheme; unchanged if it has none

    Example:
        >>> strip_url_scheme("https://janedoe.dev")
        'janedoe.dev'
        >>> strip_url_scheme("janedoe.dev")
        'janedoe.dev'
    """
    return URL_SCHEME.sub("", url, count=1)


def strip_url_scheme_and_www(url: str) -> str:
    """
    Remove a leading scheme and then a leading "www." from a URL.

    Example:
        >>> strip_url_scheme_and_www("https://www.linkedin.com/in/janedoe")
        'linkedin.com/in/janedoe'
    """
    display = strip_url_scheme(url)
    if display.lower().startswith(WWW_PREFIX):
        display = display[len(WWW_PREFIX):]
    return display


def first_title_segment(title: str, separator: str = "|") -> str:
    """
    First segment of a pipe-separated professional title, trimmed.

    Example:
        >>> first_title_segment("Senior Engineer | Cloud | Mentor")
        'Senior Engineer'
    """
    return title.split(separator)[0].strip()
