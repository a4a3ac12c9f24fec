"""简单反射智能体（Simple Reflex Agent）。

与查表程序相反，反射程序不保存任何感知历史：动作只取决于当前感知，
由两个纯函数组合得到：

    action = rule_match(interpret_input(percept))

- interpret_input: 感知 -> 状态描述；感知本身就是状态时使用 identity
- rule_match: 状态 -> 动作（条件-动作规则）

每次调用的时间与内存开销与已见感知数量无关。若两个函数本身只在部分输入上有定义，
由调用方在领域内编码（例如返回一个"无操作"动作）；本程序不检查也不恢复它们抛出的异常。
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from agent_programs.agents.base_agent import AgentProgram
from agent_programs.utils.logger import get_logger


log = get_logger(__name__)


T = TypeVar("T")


def identity(value: T) -> T:
    return value


class SimpleReflexAgent(AgentProgram):
    """组合 interpret_input 与 rule_match 的无状态程序。"""

    kind = "reflex"

    def __init__(
        self,
        interpret_input: Callable[[Any], Any],
        rule_match: Callable[[Any], Any],
        *,
        name: Optional[str] = None,
    ):
        super().__init__(name=name)
        if not callable(interpret_input) or not callable(rule_match):
            raise TypeError("interpret_input and rule_match must be callable")
        self._interpret_input = interpret_input
        self._rule_match = rule_match
        log.info(
            "agent.init",
            kind=self.kind,
            name=self.name,
            interpret=getattr(interpret_input, "__name__", repr(interpret_input)),
            rule=getattr(rule_match, "__name__", repr(rule_match)),
        )

    @property
    def interpret_input(self) -> Callable[[Any], Any]:
        return self._interpret_input

    @property
    def rule_match(self) -> Callable[[Any], Any]:
        return self._rule_match

    def run(self, percept: Any) -> Any:
        action = self._rule_match(self._interpret_input(percept))
        log.debug("agent.reflex.run", name=self.name)
        return action

    @classmethod
    def from_rule(cls, rule_match: Callable[[Any], Any], *, name: Optional[str] = None) -> "SimpleReflexAgent":
        """感知即状态时的便捷构造：interpret_input 取 identity。"""
        return cls(identity, rule_match, name=name)
