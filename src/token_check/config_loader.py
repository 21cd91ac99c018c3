# src/token_check/config_loader.py
import os
import sys
import yaml

CONFIG_FILENAME = ".tokencheck.yml"

DEFAULT_CONFIG = {
    "rate": "1e9",
    "thresholds": "64,80,100",
    "exact": True,
    "color": True,
}


def _normalize(key, value):
    if key in ("exact", "color"):
        return bool(value)
    if key == "thresholds" and isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def load_config(repo_root: str = ".", path: str = None) -> dict:
    """
    Load .tokencheck.yml from repo_root (or an explicit path) and merge it
    over the defaults. Returns a dict with keys: rate, thresholds, exact, color.
    """
    cfg = DEFAULT_CONFIG.copy()
    path = path or os.path.join(repo_root, CONFIG_FILENAME)
    if not os.path.exists(path):
        return cfg

    try:
        with open(path, "r", encoding="utf-8") as fh:
            user = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"WARNING: Ignoring config {path}: {e}", file=sys.stderr)
        return cfg

    if not isinstance(user, dict):
        print(f"WARNING: Config {path} must contain a mapping.", file=sys.stderr)
        return cfg

    for key in DEFAULT_CONFIG:
        if key in user and user[key] is not None:
            cfg[key] = _normalize(key, user[key])
    cfg["source"] = path
    return cfg
