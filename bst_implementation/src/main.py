import logging

from bst_implementation.src.base.config_loader import get_tree_configs_from_config
from bst_implementation.src.tree import BinarySearchTree


def format_report(name: str, tree: BinarySearchTree) -> str:
    deepest = tree.find_deepest()
    return "\n".join(
        [
            f"{name}:",
            f"  inorder: {tree.inorder()}",
            f"  postorder: {tree.postorder()}",
            f"  deepest: depth={deepest.depth} values={deepest.values}",
        ]
    )


def main():
    logging.basicConfig(level=logging.INFO)
    for tree_config in get_tree_configs_from_config():
        tree = tree_config.build()
        logging.info(f"built {tree_config.name} with root {tree.root}")
        print(format_report(tree_config.name, tree))


if __name__ == "__main__":
    main()
