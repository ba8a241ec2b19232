from typing import TextIO, Any

import yaml


def load_yaml(fh: TextIO) -> Any:
    """Loads YAML (or JSON, which is YAML too)"""
    return yaml.safe_load(fh)


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
