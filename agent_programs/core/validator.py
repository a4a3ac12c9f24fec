"""查找表边界校验模块。

功能：
- 感知必须可判等且可哈希，才能组成查找表的键（感知序列）
- 将调用方提供的表（映射或 (序列, 动作) 对）规范化为 Dict[Tuple[percept, ...], action]
- 可选：按声明的感知字母表检查成员关系

注意：该约束只施加在查表程序的边界上；反射程序对感知没有任何要求。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable, Optional, Sequence, Tuple

from agent_programs.agents.base_agent import AgentProgramError


PerceptSequence = Tuple[Hashable, ...]


class UnhashablePerceptError(AgentProgramError, TypeError):
    """感知或表键无法哈希，不能作为查找键使用。"""

    pass


class InvalidTableError(AgentProgramError, ValueError):
    """查找表结构不合法：空序列、重复序列、非序列键或越出字母表。"""

    pass


def is_lookup_key(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def ensure_percept(percept: Any) -> Hashable:
    """校验单个感知可作为查找键的一部分，原样返回。"""
    if not is_lookup_key(percept):
        raise UnhashablePerceptError(
            f"Percept {percept!r} of type {type(percept).__name__} is not hashable"
        )
    return percept


class TableValidator:
    def __init__(self, alphabet: Optional[Iterable[Hashable]] = None):
        """基于可选字母表对查找表进行校验与规范化。

        - alphabet 为 None 时只检查可哈希性与结构
        - 否则每个感知都必须属于字母表
        """
        self._alphabet = None
        if alphabet is not None:
            self._alphabet = frozenset(ensure_percept(p) for p in alphabet)

    @property
    def alphabet(self) -> Optional[frozenset]:
        return self._alphabet

    def sequence_key(self, percepts: Sequence[Any]) -> PerceptSequence:
        """把一个感知序列转换为表键（元组）。"""
        # 字符串本身是序列，但几乎总是"把单个感知当成了序列"的误用
        if isinstance(percepts, (str, bytes)) or not isinstance(percepts, (tuple, list)):
            raise InvalidTableError(
                f"Table keys must be percept sequences (tuple or list), got {percepts!r}"
            )
        if not percepts:
            raise InvalidTableError("Table keys must contain at least one percept")
        key = tuple(ensure_percept(p) for p in percepts)
        if self._alphabet is not None:
            unknown = [p for p in key if p not in self._alphabet]
            if unknown:
                raise InvalidTableError(
                    f"Percepts {unknown!r} in sequence {key!r} are outside the declared alphabet"
                )
        return key

    def normalize(self, entries: Mapping | Iterable[Tuple[Sequence[Any], Any]]) -> Dict[PerceptSequence, Any]:
        """按配置校验并返回新的查找表字典。"""
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        table: Dict[PerceptSequence, Any] = {}
        for percepts, action in pairs:
            key = self.sequence_key(percepts)
            if key in table:
                raise InvalidTableError(f"Duplicate table entry for percept sequence {key!r}")
            table[key] = action
        return table
