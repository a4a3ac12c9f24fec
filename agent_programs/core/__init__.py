"""Core layer.

只负责：
- 查找表与感知在程序边界上的校验（可判等、可哈希、字母表成员）

不负责：
- 决策逻辑（在 agents 中）或任何环境循环
"""

__all__ = [
    "validator",
]
