# catalog_tree/utils/formatters.py
from datetime import datetime
from typing import List, Optional, Sequence, Set, Tuple
import pytz
from ..config import Config
from ..models.category import Category
from ..services.expansion import ExpansionState

def format_datetime(dt: Optional[datetime]) -> str:
    """Format a timestamp in the configured timezone"""
    if dt is None:
        return "-"
    local_tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(local_tz).strftime("%Y-%m-%d %H:%M:%S")

def format_tree_lines(roots: Sequence[Category], expansion: Optional[ExpansionState] = None) -> List[str]:
    """Indented outline of the visible part of a forest"""
    lines: List[str] = []
    seen: Set[int] = set()
    stack: List[Tuple[Category, int]] = [(node, 0) for node in reversed(roots)]

    while stack:
        node, depth = stack.pop()
        if node.id in seen:
            continue
        seen.add(node.id)

        expanded = expansion is None or node.id in expansion
        if node.children:
            marker = "▾" if expanded else "▸"
        else:
            marker = "•"
        status = "" if node.is_active else " [inactive]"
        lines.append(f"{'  ' * depth}{marker} {node.name} ({node.id}){status}")
        if node.children and expanded:
            stack.extend((child, depth + 1) for child in reversed(node.children))

    return lines
