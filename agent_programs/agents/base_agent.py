"""智能体程序抽象基类：强调与环境解耦。

设计动机：
- AgentProgram 不依赖任何环境/仿真，只处理"下一个感知 -> 一个动作"
- 具体程序（查表 / 简单反射）实现相同接口，便于热插拔

统一接口：
- run(percept): 由驱动方按时间顺序逐个提供感知，返回动作
- reset(): 回到"已构造、等待第一个感知"状态
- __call__(percept): run 的便捷别名，使程序可直接作为函数传递

状态机：
- 仅两个状态："已构造，等待首个感知" 与 "运行中"
- 唯一转移是 run，且 run 在运行中自环；没有终止态，由驱动方决定何时停止调用

并发约定：
- run 同步执行、不挂起；同一实例不得被多个线程并发调用（由调用方串行化）
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from agent_programs.utils.logger import get_logger


log = get_logger(__name__)


class AgentProgramError(Exception):
    """智能体程序相关异常的基类。"""

    pass


class AgentProgram(ABC):
    """智能体程序抽象基类：仅定义感知到动作的映射，不绑定任何环境细节。"""

    kind: str = "base"

    def __init__(self, name: Optional[str] = None):
        self._name = name or self.kind

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def run(self, percept: Any) -> Any:
        """接收下一个感知并返回一个动作。

        约定：
        - 驱动方按经历顺序提供感知，不得跳过、重排或重放
        - 单次调用即单次尝试；失败后只能用新的感知继续
        """
        raise NotImplementedError

    def reset(self) -> None:
        """回到初始状态。无内部状态的程序无需覆盖。"""
        log.info("agent.reset", kind=self.kind, name=self._name)

    def __call__(self, percept: Any) -> Any:
        return self.run(percept)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
