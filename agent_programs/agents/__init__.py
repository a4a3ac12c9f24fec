"""Agents layer.

只负责：
- 从感知到动作的程序（查表驱动 / 简单反射）

不负责：
- 环境仿真、驱动循环，或任何配置文件格式
"""

__all__ = [
    "base_agent",
    "table_agent",
    "reflex_agent",
]
