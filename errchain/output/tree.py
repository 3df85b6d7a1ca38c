"""Tree views of an error chain."""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from errchain.core.chain import relation_of

__all__ = ["chain_tree", "chain_lines", "node_label"]

_KIND_STYLES = {
    "previous": "yellow",
    "constituent": "cyan",
}


def node_label(error: BaseException) -> Text:
    """One-line label: the message followed by the dimmed class name."""
    label = Text(str(error) or "<no message>", style="bold")
    label.append(f"  {type(error).__name__}", style="dim")
    return label


def chain_tree(error: BaseException) -> Tree:
    """Build a Rich tree with one nested branch per link.

    Each branch is labelled with the relation kind the target has to its
    parent node.
    """
    tree = Tree(node_label(error))
    branch = tree
    for kind, target in _links(error):
        label = Text(f"{kind}: ", style=_KIND_STYLES[kind]) + node_label(target)
        branch = branch.add(label)
    return tree


def chain_lines(error: BaseException) -> list[str]:
    """Plain-text counterpart of chain_tree, one line per node."""
    lines = [str(error)]
    for depth, (kind, target) in enumerate(_links(error), start=1):
        lines.append(f"{'  ' * depth}{kind}: {target}")
    return lines


def _links(error: BaseException) -> list[tuple[str, BaseException]]:
    links: list[tuple[str, BaseException]] = []
    seen = {id(error)}
    relation = relation_of(error)
    while relation is not None and id(relation.error) not in seen:
        seen.add(id(relation.error))
        links.append((relation.kind, relation.error))
        relation = relation_of(relation.error)
    return links
