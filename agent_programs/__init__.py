"""Top-level package for agent programs.

该包聚焦于分层解耦：
- agents: 仅处理从感知（percept）到动作（action）的程序，不包含环境循环
- core: 查找表边界上的校验（可比较、可哈希）
- envs: 示例世界的感知/动作取值（天气 -> 窗户），不含仿真
- utils: 仅提供通用工具（日志、配置加载）

注意：环境/驱动循环由调用方负责（参见根目录 `main.py`），避免在包初始化时做副作用操作。
"""

__all__ = [
    "agents",
    "core",
    "envs",
    "utils",
]
