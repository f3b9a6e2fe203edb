"""
Resume Data Loading

Resolves which resume file to read (YAML or JSON) and parses it into a plain dict.

Resolution rules:
    - RESUME_FILE ending in `.yaml`: only that YAML file is tried
    - RESUME_FILE ending in `.json`: only that JSON file is tried
    - otherwise: resume.yaml in the project root, then resume.json
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from vitae.contexts.loading.exceptions import ResumeNotFoundError, ResumeParseError
from vitae.contexts.loading.logger import _log_info, _log_warning
from vitae.utils.config import BuildConfig


@dataclass(frozen=True)
class YamlSource:
    path: Path


@dataclass(frozen=True)
class JsonSource:
    path: Path


@dataclass(frozen=True)
class NotFound:
    attempted_paths: Tuple[Path, ...]


ResumeSource = Union[YamlSource, JsonSource, NotFound]


class ResumeYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates as plain strings, the way JSON would."""


ResumeYamlLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, pattern) for tag, pattern in resolvers if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def candidate_paths(config: BuildConfig) -> Tuple[Optional[Path], Optional[Path]]:
    """
    Work out which YAML and JSON paths may be probed.

    Returns:
        Tuple of (yaml_path, json_path); an entry is None when the explicit
        resume file rules that format out.
    """
    yaml_path: Optional[Path] = config.default_yaml_path
    json_path: Optional[Path] = config.default_json_path

    if config.resume_file is not None:
        override = config.resolve(config.resume_file)
        file_name = override.name.lower()

        if file_name.endswith(".yaml"):
            yaml_path, json_path = override, None
        elif file_name.endswith(".json"):
            yaml_path, json_path = None, override
        else:
            _log_warning(
                f"RESUME_FILE must end in .yaml or .json, ignoring {override} "
                f"and using the default resume files"
            )

    return yaml_path, json_path


def resolve_resume_source(config: BuildConfig) -> ResumeSource:
    """Probe the candidate paths (YAML first) and tag the first one that exists."""
    yaml_path, json_path = candidate_paths(config)

    if yaml_path is not None and yaml_path.exists():
        return YamlSource(yaml_path)
    if json_path is not None and json_path.exists():
        return JsonSource(json_path)

    return NotFound(tuple(path for path in (yaml_path, json_path) if path is not None))


def parse_yaml_file(path: Path) -> Any:
    """
    Parse a YAML file into plain Python containers.

    Strings such as `${...}` are ordinary text and dates stay strings.
    """
    return yaml.load(path.read_text(encoding="utf-8"), Loader=ResumeYamlLoader)


def parse_json_file(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def load_resume_source(source: ResumeSource) -> Dict[str, Any]:
    """
    Parse a resolved resume source.

    Raises:
        ResumeNotFoundError: If the source is NotFound
        ResumeParseError: If parsing fails or the top level is not a mapping
    """
    if isinstance(source, NotFound):
        raise ResumeNotFoundError(source.attempted_paths)

    if isinstance(source, YamlSource):
        parser = parse_yaml_file
    elif isinstance(source, JsonSource):
        parser = parse_json_file
    else:
        raise TypeError(f"Unknown resume source: {source!r}")

    _log_info(f"Reading resume from: {source.path}")

    try:
        data = parser(source.path)
    except Exception as e:
        raise ResumeParseError(source.path, e) from e

    if not isinstance(data, dict):
        raise ResumeParseError(
            source.path,
            message=f"top level must be a mapping, got {type(data).__name__}",
        )

    return data


def load_resume_data(config: BuildConfig) -> Dict[str, Any]:
    """
    Resolve and parse the resume data for a build.

    Args:
        config: Build configuration

    Returns:
        Resume data as a dict (no schema enforced)
    """
    return load_resume_source(resolve_resume_source(config))
