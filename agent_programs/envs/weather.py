"""天气 -> 窗户 示例世界的感知与动作。

场景：窗户根据室外天气自动开关；晴天开窗通风，雨天关窗防潮。

本文件只提供：
- 感知 Weather 与动作 Window（可判等、可哈希，满足查找表约束）
- 条件-动作规则 window_rule，可直接作为 SimpleReflexAgent 的 rule_match
- weather_table(horizon)：为有限生命周期生成完整查找表

不提供：天气的生成或任何仿真循环，由驱动方负责。
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from agent_programs.agents.table_agent import DEFAULT_MAX_ENTRIES, LookupTable, build_table


class Weather(Enum):
    SUNNY = "sunny"
    RAINY = "rainy"


class Window(Enum):
    OPEN = "open"
    CLOSE = "close"


_RULES = {
    Weather.SUNNY: Window.OPEN,
    Weather.RAINY: Window.CLOSE,
}


def window_rule(weather: Weather) -> Window:
    return _RULES[weather]


def weather_table(horizon: int, *, max_entries: Optional[int] = DEFAULT_MAX_ENTRIES) -> LookupTable:
    """长度 1..horizon 的全部天气序列 -> 按最后一个感知决定的窗户动作。

    条目数为 sum_{t=1..horizon} 2^t；horizon=3 时为 14。
    """
    return build_table(tuple(Weather), horizon, lambda seq: window_rule(seq[-1]), max_entries=max_entries)
