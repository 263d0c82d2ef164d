"""General trees of labelled nodes: building, printing and measuring."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A labelled node; its children are printed only when ``expanded``."""

    data: str = ""
    children: list["TreeNode"] = field(default_factory=list)
    expanded: bool = False


def _team(name: str, members: list[str]) -> TreeNode:
    return TreeNode(name, [TreeNode(m) for m in members], expanded=True)


def build_sample_tree() -> TreeNode:
    """A development studio split into teams and their parts."""
    return TreeNode(
        "R1 개발실",
        [
            _team("디자인팀", ["전투", "경제", "스토리"]),
            _team("프로그래밍팀", ["서버", "클라", "엔진"]),
            _team("아트팀", ["배경", "캐릭터"]),
        ],
        expanded=True,
    )


def format_tree(root: TreeNode, depth: int = 0) -> str:
    """One line per shown node, indented by one dash per level."""
    lines: list[str] = []

    def walk(node: TreeNode, level: int) -> None:
        lines.append("-" * level + node.data)
        if node.expanded:
            for child in node.children:
                walk(child, level + 1)

    walk(root, depth)
    return "".join(line + "\n" for line in lines)


def height(root: TreeNode) -> int:
    """Number of levels in the tree; a lone node has height 1."""
    return max((height(child) + 1 for child in root.children), default=1)