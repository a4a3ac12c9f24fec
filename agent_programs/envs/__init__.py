"""Example worlds.

只负责：
- 示例世界中感知与动作的取值，以及与之配套的规则/查找表

不负责：
- 环境仿真、感知生成或驱动循环
"""

__all__ = [
    "weather",
]
