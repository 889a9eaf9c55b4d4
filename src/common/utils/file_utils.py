import json
import os
from typing import Any

import yaml

YAML_EXTENSIONS = (".yaml", ".yml")


def load_json_file(filepath: str) -> dict[str, Any]:
    with open(filepath, "r") as file:
        data = json.load(file)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {filepath}")
    return data


def load_yaml_file(filepath: str) -> dict[str, Any]:
    with open(filepath, "r") as file:
        data = yaml.safe_load(file)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {filepath}")
    return data


def load_document(filepath: str) -> dict[str, Any]:
    """
    Load a YAML or JSON document, choosing the parser by file extension.
    Anything that isn't a .yaml/.yml file is parsed as JSON.
    """
    _, ext = os.path.splitext(filepath)
    if ext.lower() in YAML_EXTENSIONS:
        return load_yaml_file(filepath)
    return load_json_file(filepath)
