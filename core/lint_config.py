"""
Lint Config Module
Settings for the shorthand rule, loaded from a JSON file.
"""

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .class_rewriter import PLACEMENT_INPLACE, PLACEMENTS
from .errors import ConfigError
from .shorthand_families import FAMILY_NAMES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = '.shorthandrc.json'
DEFAULT_CALLEES = ('classnames', 'clsx', 'ctl', 'cva', 'tv')
DEFAULT_CLASS_ATTRIBUTES = ('class', 'className')

@dataclass(frozen=True)
class LintConfig:
    """
    Configuration for the enforces-shorthand rule.

    Attributes:
        prefix: Tailwind class prefix (e.g. 'tw-'), empty when unused
        separator: Variant separator, ':' unless Tailwind is configured otherwise
        class_attributes: Markup attributes holding class strings
        callees: Helper functions whose string arguments are class strings
        skip_class_attribute: Only scan callees, never attributes
        families: Enabled family names, None enables all but the opt-in size family
        placement: 'inplace' or 'append' for shorthand positioning
        tailwind_config: Path to tailwind.config.js for prefix/separator
    """
    prefix: str = ''
    separator: str = ':'
    class_attributes: Tuple[str, ...] = DEFAULT_CLASS_ATTRIBUTES
    callees: Tuple[str, ...] = DEFAULT_CALLEES
    skip_class_attribute: bool = False
    families: Optional[Tuple[str, ...]] = None
    placement: str = PLACEMENT_INPLACE
    tailwind_config: Optional[str] = None

    def __post_init__(self):
        if self.placement not in PLACEMENTS:
            raise ConfigError(f"placement must be one of {', '.join(PLACEMENTS)}, got '{self.placement}'")
        if not self.separator:
            raise ConfigError("separator must not be empty")
        if self.families is not None:
            unknown = sorted(set(self.families) - set(FAMILY_NAMES))
            if unknown:
                raise ConfigError(f"Unknown shorthand families: {', '.join(unknown)}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LintConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values = dict(data)
        for key in ('class_attributes', 'callees', 'families'):
            if values.get(key) is not None:
                if isinstance(values[key], str) or not isinstance(values[key], (list, tuple)):
                    raise ConfigError(f"'{key}' must be a list of strings")
                values[key] = tuple(values[key])
        return cls(**values)

def load_config(path: Union[str, Path, None] = None,
                base_dir: Union[str, Path, None] = None) -> LintConfig:
    """Load a LintConfig from `path`, or from .shorthandrc.json in `base_dir`.

    A missing default file yields the default configuration; a missing
    explicit path is an error.
    """
    if path is None:
        candidate = Path(base_dir or '.') / DEFAULT_CONFIG_FILE
        if not candidate.exists():
            logger.debug(f"No {DEFAULT_CONFIG_FILE} found, using defaults")
            return LintConfig()
        path = candidate

    config_path = Path(path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config in {config_path} must be a JSON object")
    logger.info(f"Loaded lint config from {config_path}")
    return LintConfig.from_dict(data)

def resolve_tailwind_options(config: LintConfig, reader=None) -> LintConfig:
    """Fill prefix/separator from tailwind.config.js when the config points at one.

    Values set explicitly in the lint config win over the Tailwind config.
    """
    if not config.tailwind_config:
        return config
    if reader is None:
        from tailwind.config_reader import TailwindConfigReader
        reader = TailwindConfigReader()
    options = reader.extract_options(reader.read_config(config.tailwind_config))
    updates = {}
    if not config.prefix and options.get('prefix'):
        updates['prefix'] = options['prefix']
    if config.separator == ':' and options.get('separator'):
        updates['separator'] = options['separator']
    if updates:
        logger.info(f"Using Tailwind options from {config.tailwind_config}: {updates}")
    return replace(config, **updates)
