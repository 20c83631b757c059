"""
Signer configuration.

Settings live in an optional YAML file. Its location is given explicitly to
`load_config`, or through the `LEGACY_SIGNER_CONFIG` environment variable.
When neither points at an existing file the defaults apply.

Usage:
- `load_config()` to read the configured file (or get the defaults).
- Pass the result to `sign(..., config=...)`.
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

CONFIG_ENV_VAR = "LEGACY_SIGNER_CONFIG"

# Largest bound for which `chain_id * 2 + 36` still fits in four bytes.
CHAIN_ID_LIMIT = 2**31 - 18


class SignerConfig(BaseModel):
    """
    Settings that constrain what the signer will produce.

    Attributes:
    - max_chain_id (int): exclusive upper bound on the chain ids accepted
      when signing with replay protection.
    """

    max_chain_id: int = Field(default=110, gt=0, le=CHAIN_ID_LIMIT)


DEFAULT_CONFIG = SignerConfig()


def load_config(path: Optional[Union[str, Path]] = None) -> SignerConfig:
    """
    Load and validate a `SignerConfig` from a YAML file.

    Parameters
    ----------
    path :
        File to read. Defaults to the path in `LEGACY_SIGNER_CONFIG`.

    Returns
    -------
    config : `SignerConfig`
        The validated configuration, or the defaults when there is no file.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return SignerConfig()
        path = env_path

    config_path = Path(path)
    if not config_path.exists():
        return SignerConfig()

    with config_path.open("r") as file:
        config_data = yaml.safe_load(file) or {}

    if not isinstance(config_data, dict):
        raise ValueError(f"Invalid configuration: {path} is not a mapping")

    try:
        return SignerConfig(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
