# hosts.py — pull standard payloads out of partner share URLs
"""
Each partner site hides the payload somewhere different in its links.
`HOST_RULES` is an ordered table of (host matcher, payload finders);
the first rule whose matcher accepts the lowercased host wins, and its
finders are tried in order until one yields a candidate string.
"""

import logging
from typing import Any, Callable, NamedTuple, Optional, Tuple
from urllib.parse import SplitResult, parse_qsl, urlsplit

from .standard import try_decode_standard

logger = logging.getLogger(__name__)

Finder = Callable[[SplitResult], Optional[str]]


# ---------- Host matchers ----------
def exact(name: str) -> Callable[[str], bool]:
    return lambda host: host == name


def suffix(*names: str) -> Callable[[str], bool]:
    return lambda host: any(host.endswith(n) for n in names)


# ---------- Payload finders ----------
def query_arg(key: str, prefix: str = "") -> Finder:
    """Value of the first `key` query argument, minus `prefix`."""
    def find(url: SplitResult) -> Optional[str]:
        for k, v in parse_qsl(url.query, keep_blank_values=True):
            if k == key:
                return _strip(v, prefix)
        return None
    return find


def raw_query(prefix: str) -> Finder:
    """The whole undecoded query string, minus `prefix`."""
    return lambda url: _strip(url.query, prefix)


def path(prefix: str) -> Finder:
    return lambda url: _strip(url.path, prefix)


def _strip(s: str, prefix: str) -> Optional[str]:
    if s is None or not s.startswith(prefix):
        return None
    return s[len(prefix):]


class HostRule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    finders: Tuple[Finder, ...]


HOST_RULES: Tuple[HostRule, ...] = (
    HostRule("f-puzzles", exact("f-puzzles.com"), (query_arg("load"),)),
    HostRule("sudokupad", suffix("sudokupad.app", "app.crackingthecryptic.com"), (
        query_arg("puzzleid", prefix="fpuzzles"),
        raw_query("fpuzzles"),
        path("/fpuzzles"),
    )),
    HostRule("sudokulab", suffix("sudokulab.net"), (query_arg("fpuzzle"),)),
)


def find_rule(host: str) -> Optional[HostRule]:
    host = host.lower()
    for rule in HOST_RULES:
        if rule.matches(host):
            return rule
    return None


def find_candidate(url_text: str) -> Optional[str]:
    """Raw encoded payload carried by a partner URL, if any rule applies."""
    try:
        url = urlsplit(url_text)
        host = url.hostname
    except ValueError:
        return None
    if not host:
        return None
    rule = find_rule(host)
    if rule is None:
        logger.debug(f"No host rule for {host!r}")
        return None
    for finder in rule.finders:
        candidate = finder(url)
        if candidate is not None:
            logger.debug(f"Host rule {rule.name!r} found a {len(candidate)} char candidate")
            return candidate
    logger.debug(f"Host rule {rule.name!r} found no payload")
    return None


def extract(input_text: str) -> Optional[Any]:
    """Decoded standard Value from a share URL or bare payload.

    Returns None when nothing decodes; that is an ordinary outcome.
    """
    candidate = find_candidate(input_text)
    if candidate is not None:
        # Query decoding turns '+' into ' '; put them back
        value = try_decode_standard(candidate.replace(" ", "+"))
        if value is not None:
            return value
    logger.debug("Trying input as a bare payload")
    return try_decode_standard(input_text)
