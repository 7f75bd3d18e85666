"""Graphviz DOT rendering of an agent tree."""

from typing import Protocol

from ..models import Agent, HighlightPair

DARK_GREEN = "#0F5223"
LIGHT_GREEN = "#69CB87"
LIGHT_GRAY = "#cccccc"
BACKGROUND = "#333537"


class IGraphRenderer(Protocol):
    """Renders an agent's call graph with some edges highlighted."""

    def render(self, agent: Agent, highlight_pairs: list[HighlightPair]) -> str:
        """Return the graph source."""
        ...


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DotGraphRenderer:
    """Renders agents as ellipses and tools as boxes."""

    def render(self, agent: Agent, highlight_pairs: list[HighlightPair]) -> str:
        highlighted_nodes = {name for pair in highlight_pairs for name in pair}
        highlighted_edges = set(highlight_pairs)

        lines = [
            "digraph {",
            f"  graph [bgcolor={_quote(BACKGROUND)}, rankdir=LR];",
        ]
        seen: set[str] = set()
        edges: list[tuple[str, str]] = []
        self._walk(agent, lines, edges, seen, highlighted_nodes)

        for src, dst in edges:
            if (src, dst) in highlighted_edges or (dst, src) in highlighted_edges:
                style = f'color={_quote(LIGHT_GREEN)}, penwidth=2'
            else:
                style = f"color={_quote(LIGHT_GRAY)}, arrowhead=none"
            lines.append(f"  {_quote(src)} -> {_quote(dst)} [{style}];")

        lines.append("}")
        return "\n".join(lines)

    def _walk(
        self,
        agent: Agent,
        lines: list[str],
        edges: list[tuple[str, str]],
        seen: set[str],
        highlighted: set[str],
    ) -> None:
        if agent.name in seen:
            return
        seen.add(agent.name)
        lines.append(self._node(agent.name, "ellipse", agent.name in highlighted))

        for tool in agent.tools:
            if tool.name not in seen:
                seen.add(tool.name)
                lines.append(self._node(tool.name, "box", tool.name in highlighted))
            edges.append((agent.name, tool.name))

        for sub_agent in agent.sub_agents:
            edges.append((agent.name, sub_agent.name))
            self._walk(sub_agent, lines, edges, seen, highlighted)

    @staticmethod
    def _node(name: str, shape: str, highlighted: bool) -> str:
        if highlighted:
            attrs = (
                f"shape={shape}, style=filled, fillcolor={_quote(DARK_GREEN)}, "
                f"color={_quote(DARK_GREEN)}, fontcolor={_quote(LIGHT_GRAY)}"
            )
        else:
            attrs = (
                f"shape={shape}, style=rounded, color={_quote(LIGHT_GRAY)}, "
                f"fontcolor={_quote(LIGHT_GRAY)}"
            )
        return f"  {_quote(name)} [{attrs}];"
