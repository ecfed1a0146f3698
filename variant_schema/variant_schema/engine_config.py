# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the schema engine."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EngineConfig:
    """Configuration class for schema loading and validation."""
    max_depth: int = 100
    combine_keywords: bool = True
    check_references: bool = True
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = True
    max_cache_size: int = 128

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=int(os.getenv('VARIANT_SCHEMA_MAX_DEPTH', '100')),
            combine_keywords=_env_flag('VARIANT_SCHEMA_COMBINE_KEYWORDS', 'true'),
            check_references=_env_flag('VARIANT_SCHEMA_CHECK_REFERENCES', 'true'),
            log_level=os.getenv('VARIANT_SCHEMA_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('VARIANT_SCHEMA_PRINT_LEVEL', 'WARNING'),
            cache_enabled=_env_flag('VARIANT_SCHEMA_CACHE_ENABLED', 'true'),
            max_cache_size=int(os.getenv('VARIANT_SCHEMA_MAX_CACHE_SIZE', '128')),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name='variant_schema',
        )


# Global configuration instance
engine_config = EngineConfig.from_env()
