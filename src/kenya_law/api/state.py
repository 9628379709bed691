from typing import Any, Optional

from kenya_law.store.database import StatuteDatabase

# Statute store, opened at startup by dependencies.load_store()
store: Optional[StatuteDatabase] = None
store_error: Optional[str] = None

# Tool usage (for monitoring)
tool_stats = {
    'validations': 0,
    'valid_citations': 0,
    'formats': 0,
    'resolutions': 0,
    'unresolved': 0,
}

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
CITATIONS_VALIDATED: Any = None


def record_tool_call(tool: str, ok: Optional[bool] = None) -> None:
    if tool == 'validate':
        tool_stats['validations'] += 1
        if ok:
            tool_stats['valid_citations'] += 1
    elif tool == 'format':
        tool_stats['formats'] += 1
    elif tool == 'resolve':
        tool_stats['resolutions'] += 1
        if ok is False:
            tool_stats['unresolved'] += 1
