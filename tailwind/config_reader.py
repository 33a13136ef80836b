"""
Tailwind Config Reader Module
Reads the class-syntax options (prefix, separator) from tailwind.config.js.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {'prefix': '', 'separator': ':'}

class TailwindConfigReader:
    def __init__(self, node_binary: str = 'node', timeout: float = 30.0):
        self.node_binary = node_binary
        self.timeout = timeout
        self.config: Dict[str, Any] = {}

    def read_config(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Parse tailwind.config.js using Node.js and return as dict."""
        resolved = str(Path(config_path).resolve())
        node_script = f"""
        const loaded = require({json.dumps(resolved)});
        const config = loaded && loaded.default ? loaded.default : loaded;
        console.log(JSON.stringify(config));
        """
        try:
            result = subprocess.run([self.node_binary, '-e', node_script], capture_output=True,
                                    text=True, check=True, timeout=self.timeout)
            config = json.loads(result.stdout.strip() or '{}')
            if not isinstance(config, dict):
                raise ValueError(f"Expected a config object, got {type(config).__name__}")
            logger.debug(f"Parsed config from {config_path}: {config}")
            self.config = config
            return config
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            logger.error(f"Failed to parse config {config_path}: {e}")
            self.config = {}
            return {'error': str(e)}

    def extract_options(self, config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Prefix and separator from a parsed config, defaults where absent or invalid."""
        config = self.config if config is None else config
        options = dict(DEFAULT_OPTIONS)
        if not isinstance(config, dict) or 'error' in config:
            return options
        for key in options:
            value = config.get(key)
            if isinstance(value, str) and (value or key == 'prefix'):
                options[key] = value
            elif value is not None:
                logger.warning(f"Ignoring non-string Tailwind option {key}={value!r}")
        return options
