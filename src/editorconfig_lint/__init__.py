"""editorconfig-lint: check files against the rules in their .editorconfig."""

__version__ = "0.1.0"

from editorconfig_lint.config import Config, ConfigError, load_config  # noqa: E402
from editorconfig_lint.findings import Diagnosis, Reason  # noqa: E402
from editorconfig_lint.scanner import check, check_bytes, check_file  # noqa: E402

__all__ = [
    "Config",
    "ConfigError",
    "Diagnosis",
    "Reason",
    "__version__",
    "check",
    "check_bytes",
    "check_file",
    "load_config",
]
