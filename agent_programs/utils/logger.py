"""统一结构化日志封装。

为什么：
- 智能体程序每一步都可能被高频调用，需要带上下文的键值日志，而不是拼接字符串
- 统一由本模块提供 get_logger，避免到处配置日志，减少耦合

如何使用：
- 在任何模块：from agent_programs.utils.logger import get_logger; log = get_logger(__name__)
- 记录：log.info("agent.init", kind="table", entries=14)
- 逐步事件（agent.table.run / agent.reflex.run）为 debug 级别，默认被过滤；
  需要时由驱动方调用 configure_logging("DEBUG") 打开
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import structlog


DEFAULT_LEVEL = logging.INFO

_level: Optional[int] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = DEFAULT_LEVEL) -> int:
    """设置结构化日志的过滤级别，返回生效的数值级别。

    - 可重复调用：后一次调用覆盖前一次的级别
    - 不缓存 logger，模块级 log 代理在下一次记录时即采用新级别
    """
    global _level
    resolved = _resolve_level(level)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    logging.getLogger().setLevel(resolved)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    _level = resolved
    return resolved


def current_level() -> Optional[int]:
    """已配置的级别；尚未配置时为 None。"""
    return _level


def get_logger(name: Optional[str] = None):
    """获取结构化 Logger；首次调用时按默认级别延迟配置。"""
    if _level is None:
        configure_logging()
    return structlog.get_logger(name or "agent_programs")
