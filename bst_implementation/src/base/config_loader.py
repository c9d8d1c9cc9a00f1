import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from bst_implementation.src.base.node import Key
from bst_implementation.src.tree import BinarySearchTree


@dataclass
class TreeConfig:
    name: str
    keys: list[Key]
    remove: list[Key] = field(default_factory=list)

    def build(self) -> BinarySearchTree:
        tree = BinarySearchTree(self.keys)
        for key in self.remove:
            tree.remove(key)
        return tree


def _as_keys(raw_keys: list, tree_name: str) -> list[Key]:
    if not isinstance(raw_keys, list):
        raise ValueError(f"Tree {tree_name!r} keys must be a list, got {raw_keys!r}")

    keys = []
    for raw_key in raw_keys:
        # bool is an int subclass but never a valid key
        if isinstance(raw_key, bool) or not isinstance(raw_key, (int, float)):
            raise ValueError(f"Tree {tree_name!r} has a non numeric key: {raw_key!r}")
        keys.append(raw_key)
    return keys


def get_tree_configs(json_data_from_file: dict) -> list[TreeConfig]:
    tree_configs = []
    for tree_entry in json_data_from_file["trees"]:
        if not isinstance(tree_entry, dict):
            raise ValueError(f"Tree entry must be an object: {tree_entry!r}")

        name = tree_entry.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Tree entry without a name: {tree_entry!r}")

        tree_config = TreeConfig(
            name=name,
            keys=_as_keys(tree_entry.get("keys", []), name),
            remove=_as_keys(tree_entry.get("remove", []), name),
        )
        logging.debug(f"loaded {tree_config = }")
        tree_configs.append(tree_config)
    return tree_configs


TREE_CONFIG_FILE = "bst_config.json"


def get_tree_configs_from_config(config_path: Path | None = None) -> list[TreeConfig]:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / ".." / TREE_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_tree_configs(json_data_from_file)
