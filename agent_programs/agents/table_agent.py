"""查表驱动智能体（Table-Driven Agent）。

程序本身很简单：每收到一个感知，先把它追加到感知历史，再用"完整的历史序列"
去查一张预先计算好的表，得到动作。

为什么这种方案注定不可扩展：
- 设 P 为可能的感知集合，T 为智能体的生命周期（一共会收到的感知数），
  完整的查找表需要 sum_{t=1..T} |P|^t 个条目（见 table_size）
- 只要 |P| > 1 且 T 无界，条目数就发散；即使有界，条目数也随 T 指数增长
- 因此长生命周期或高基数感知的智能体不应使用此方案，而应使用无历史的
  简单反射程序（reflex_agent.SimpleReflexAgent）

约定：
- 查找表完全由调用方提供且必须有限；本模块绝不在运行时扩充表
- build_table 只为有限 horizon 枚举全部序列，并受 max_entries 限制
- 查不到完整历史时抛出 PerceptSequenceNotFound，绝不返回默认动作
"""

from __future__ import annotations

from itertools import product
from typing import Any, Callable, Dict, Hashable, Iterable, Mapping, Optional, Sequence, Tuple

from agent_programs.agents.base_agent import AgentProgram, AgentProgramError
from agent_programs.core.validator import PerceptSequence, TableValidator, ensure_percept
from agent_programs.utils.logger import get_logger


log = get_logger(__name__)


LookupTable = Dict[PerceptSequence, Any]

DEFAULT_MAX_ENTRIES = 1_000_000


class PerceptSequenceNotFound(AgentProgramError, LookupError):
    """当前完整的感知历史在查找表中没有对应条目。"""

    def __init__(self, history: PerceptSequence):
        self.history = tuple(history)
        super().__init__(f"No table entry for percept sequence of length {len(self.history)}: {self.history!r}")


class TableTooLargeError(AgentProgramError, ValueError):
    """生成的有限查找表会超过调用方给定的条目上限。"""

    pass


def table_size(alphabet_size: int, horizon: int) -> int:
    """覆盖长度 1..horizon 的全部感知序列所需的条目数：sum_{t=1..T} |P|^t。"""
    if isinstance(alphabet_size, bool) or not isinstance(alphabet_size, int):
        raise TypeError("alphabet_size must be an int")
    if isinstance(horizon, bool) or not isinstance(horizon, int):
        raise TypeError("horizon must be an int")
    if alphabet_size < 0 or horizon < 0:
        raise ValueError("alphabet_size and horizon must be non-negative")
    return sum(alphabet_size ** t for t in range(1, horizon + 1))


def build_table(
    alphabet: Iterable[Hashable],
    horizon: int,
    policy: Callable[[PerceptSequence], Any],
    *,
    max_entries: Optional[int] = DEFAULT_MAX_ENTRIES,
) -> LookupTable:
    """为有限生命周期枚举完整查找表。

    - alphabet: 全部可能的感知（去重后保持给定顺序）
    - horizon: 生命周期 T，必须为正整数；无界生命周期无法构造
    - policy: 由完整感知序列决定动作
    - max_entries: 条目上限，None 表示不限制（调用方自负）
    """
    if horizon is None:
        raise ValueError("horizon must be finite; an unbounded lifetime needs an infinite table")
    if isinstance(horizon, bool) or not isinstance(horizon, int):
        raise TypeError("horizon must be an int")
    if horizon < 1:
        raise ValueError("horizon must be at least 1")

    percepts = tuple(dict.fromkeys(ensure_percept(p) for p in alphabet))
    if not percepts:
        raise ValueError("alphabet must contain at least one percept")

    expected = table_size(len(percepts), horizon)
    if max_entries is not None and expected > max_entries:
        raise TableTooLargeError(
            f"A complete table over {len(percepts)} percepts for horizon {horizon} "
            f"needs {expected} entries (limit {max_entries})"
        )

    table: LookupTable = {}
    for length in range(1, horizon + 1):
        for sequence in product(percepts, repeat=length):
            table[sequence] = policy(sequence)

    log.info("table.build", alphabet_size=len(percepts), horizon=horizon, entries=len(table))
    return table


class TableDrivenAgent(AgentProgram):
    """查表驱动程序：追加感知，再用完整历史精确查表。"""

    kind = "table"

    def __init__(
        self,
        table: Mapping[Sequence[Hashable], Any] | Iterable[Tuple[Sequence[Hashable], Any]],
        *,
        alphabet: Optional[Iterable[Hashable]] = None,
        name: Optional[str] = None,
    ):
        super().__init__(name=name)
        # 持有独立副本：构造后调用方对原表的修改不影响本实例
        self._table: LookupTable = TableValidator(alphabet).normalize(table)
        self._percepts: list = []
        log.info("agent.init", kind=self.kind, name=self.name, entries=len(self._table))

    @property
    def table(self) -> Mapping[PerceptSequence, Any]:
        return dict(self._table)

    @property
    def history(self) -> PerceptSequence:
        """到目前为止收到的全部感知（只读）。"""
        return tuple(self._percepts)

    @property
    def percept_count(self) -> int:
        return len(self._percepts)

    def covers(self, percepts: Sequence[Hashable]) -> bool:
        """查找表是否包含给定的完整感知序列。"""
        return tuple(percepts) in self._table

    def run(self, percept: Hashable) -> Any:
        # 先校验再追加，保证历史始终可作为查找键
        ensure_percept(percept)
        self._percepts.append(percept)

        key = tuple(self._percepts)
        try:
            action = self._table[key]
        except KeyError:
            log.warning("agent.table.miss", name=self.name, history_len=len(key))
            raise PerceptSequenceNotFound(key) from None

        log.debug("agent.table.run", name=self.name, history_len=len(key))
        return action

    def reset(self) -> None:
        self._percepts.clear()
        super().reset()
