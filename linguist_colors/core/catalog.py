"""Load Linguist's languages.yml and turn it into a name -> Color mapping.

The catalog is a YAML mapping of language name to a record. Only `type`,
`ace_mode` and `language_id` are required per record; `color`, `extensions`
and `tm_scope` are optional and every other key is ignored.

Sources:
  http(s)://...   fetched with requests (optionally cached on disk)
  anything else   read as a local file path

Any problem with the catalog as a whole raises CatalogError. A single bad
colour is the caller's choice: skipped and reported, or raised as FormatError.
"""

from __future__ import annotations

import hashlib
import os
import time
from typing import Any

import requests
import yaml

from linguist_colors.core.color import Color, FormatError, parse_hex
from linguist_colors.core.types import LanguageInfo

_REQUIRED_KEYS = ('type', 'ace_mode', 'language_id')
DEFAULT_CACHE_TTL = 3600  # seconds


class CatalogError(Exception):
    """The catalog could not be fetched, read or deserialized."""


def _cache_path(cache_dir: str, url: str) -> str:
    """One cache file per URL: languages-<sha256 prefix>.yml."""
    digest = hashlib.sha256(url.encode('utf-8')).hexdigest()[:16]
    return os.path.join(cache_dir, f'languages-{digest}.yml')


def fetch_catalog(
    url: str,
    timeout: float = 30.0,
    cache_dir: str | None = None,
    ttl: float = DEFAULT_CACHE_TTL,
) -> str:
    """GET the catalog body. Reuses a cached copy younger than ttl seconds."""
    if cache_dir:
        cache = _cache_path(cache_dir, url)
        if os.path.exists(cache) and time.time() - os.path.getmtime(cache) < ttl:
            with open(cache, encoding='utf-8') as f:
                return f.read()

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise CatalogError(f'can not fetch languages from {url}: {e}') from e
    body = response.text

    if cache_dir:
        os.makedirs(cache_dir, exist_ok=True)
        with open(_cache_path(cache_dir, url), 'w', encoding='utf-8') as f:
            f.write(body)

    return body


def read_catalog(path: str) -> str:
    try:
        with open(path, encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise CatalogError(f'can not read {path}: {e}') from e


def _is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def _to_info(name: str, entry: Any) -> LanguageInfo:
    if not isinstance(entry, dict):
        raise CatalogError(f'{name}: expected a mapping, got {type(entry).__name__}')
    missing = [k for k in _REQUIRED_KEYS if k not in entry]
    if missing:
        raise CatalogError(f'{name}: missing field(s) {", ".join(missing)}')
    try:
        language_id = int(entry['language_id'])
    except (TypeError, ValueError):
        raise CatalogError(f'{name}: language_id is not an integer: {entry["language_id"]!r}') from None

    color = entry.get('color')
    extensions = entry.get('extensions')
    return LanguageInfo(
        name=name,
        language_id=language_id,
        ace_mode=str(entry['ace_mode']),
        type=str(entry['type']),
        color=str(color) if color is not None else None,
        extensions=[str(e) for e in extensions] if extensions else None,
        tm_scope=entry.get('tm_scope'),
    )


def parse_catalog(text: str) -> dict[str, LanguageInfo]:
    """Deserialize languages.yml text into LanguageInfo records keyed by name."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f'can not deserialize languages: {e}') from e
    if not isinstance(data, dict):
        raise CatalogError(f'can not deserialize languages: top level is {type(data).__name__}, not a mapping')
    return {str(name): _to_info(str(name), entry) for name, entry in data.items()}


def load_catalog(
    source: str,
    timeout: float = 30.0,
    cache_dir: str | None = None,
) -> dict[str, LanguageInfo]:
    """Fetch (URL) or read (path) the catalog and deserialize it."""
    text = fetch_catalog(source, timeout=timeout, cache_dir=cache_dir) if _is_url(source) else read_catalog(source)
    return parse_catalog(text)


def color_set(
    catalog: dict[str, LanguageInfo],
    strict: bool = False,
) -> tuple[dict[str, Color], dict[str, str]]:
    """Parse colours of the languages that have one.

    Returns (colors, skipped). `colors` iterates in ascending name order.
    `skipped` maps name -> reason for colours that failed to parse; with
    strict=True the first such FormatError is raised instead.
    """
    colors: dict[str, Color] = {}
    skipped: dict[str, str] = {}
    for name in sorted(catalog):
        raw = catalog[name].color
        if raw is None:
            continue
        try:
            colors[name] = parse_hex(raw)
        except FormatError as e:
            if strict:
                raise
            skipped[name] = str(e)
    return colors, skipped
