"""Utility layer.

提供与业务无关的通用工具：
- 日志封装（结构化日志）
- 配置加载（YAML 查找表）
"""

__all__ = [
    "logger",
    "config_loader",
]
