"""配置加载工具：集中读取与校验 YAML 查找表配置。

为何需要：
- 查找表的填充策略属于调用方；以文件形式声明，避免在代码中硬编码条目
- 通过统一加载入口，把结构错误集中转换为 TableConfigError

文件结构（v1）：
- name / version
- alphabet: 可选，声明全部可能的感知
- table: 显式条目列表 [{percepts: [...], action: ...}]
- generate: 可选 {horizon, rules}，按"最后一个感知 -> 动作"生成长度 1..horizon 的完整表
- demo.percepts: 演示驱动按顺序喂给智能体的感知
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

import yaml

from agent_programs.agents.base_agent import AgentProgramError
from agent_programs.agents.table_agent import DEFAULT_MAX_ENTRIES, LookupTable, TableTooLargeError, build_table
from agent_programs.core.validator import InvalidTableError, TableValidator, UnhashablePerceptError, ensure_percept
from agent_programs.utils.logger import get_logger


log = get_logger(__name__)


class TableConfigError(AgentProgramError, ValueError):
    """查找表配置文件结构错误。"""

    pass


@dataclass(frozen=True)
class TableSpec:
    """从配置文件读出的查找表（纯数据）。table 与 rules 为只读视图。"""

    name: str
    table: Mapping[Tuple[Hashable, ...], Any]
    alphabet: Optional[Tuple[Hashable, ...]] = None
    rules: Mapping[Hashable, Any] = field(default_factory=dict)
    demo_percepts: Tuple[Hashable, ...] = ()
    source: Optional[Path] = None

    def __post_init__(self):
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))


def _read_yaml(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _freeze(value: Any) -> Any:
    # YAML 中的列表/映射不可哈希，转换为元组后才能作为感知
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        # 键类型可能混杂（如 1 与 "b"），按 repr 排序保证可比较
        return tuple(sorted(((k, _freeze(v)) for k, v in value.items()), key=lambda kv: repr(kv[0])))
    return value


def load_config(path: str | Path) -> Dict[str, Any]:
    """从 YAML 文件加载配置为字典。"""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    cfg = _read_yaml(p)
    if not isinstance(cfg, dict):
        raise TableConfigError(f"Config root must be a mapping: {p}")

    log.info("config.loaded", path=str(p), version=str(cfg.get("version", "unknown")))
    return cfg


def _parse_rules(raw: Any, where: str) -> Dict[Hashable, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TableConfigError(f"generate.rules must be a mapping: {where}")
    return {_freeze(k): v for k, v in raw.items()}


def table_from_config(cfg: Dict[str, Any], source: Optional[Path] = None) -> TableSpec:
    """把已加载的配置字典转换为 TableSpec。"""
    where = str(source) if source else "<config>"

    alphabet_raw = cfg.get("alphabet")
    alphabet: Optional[Tuple[Hashable, ...]] = None
    if alphabet_raw is not None:
        if not isinstance(alphabet_raw, list) or not alphabet_raw:
            raise TableConfigError(f"alphabet must be a non-empty list: {where}")
        try:
            alphabet = tuple(dict.fromkeys(_freeze(a) for a in alphabet_raw))
        except TypeError as e:
            raise TableConfigError(f"alphabet entries must be hashable percepts: {e} ({where})") from e

    gen = cfg.get("generate") or {}
    if not isinstance(gen, dict):
        raise TableConfigError(f"generate must be a mapping: {where}")
    rules = _parse_rules(gen.get("rules"), where)

    entries = cfg.get("table")
    if entries is None and not gen:
        raise TableConfigError(f"Config defines neither 'table' nor 'generate': {where}")
    if entries is not None and not isinstance(entries, list):
        raise TableConfigError(f"table must be a list of entries: {where}")

    table: LookupTable = {}
    try:
        if gen:
            if not rules:
                raise TableConfigError(f"generate.rules must not be empty: {where}")
            if alphabet is None:
                alphabet = tuple(rules)
            missing = [a for a in alphabet if a not in rules]
            unknown = [r for r in rules if r not in alphabet]
            if missing or unknown:
                raise TableConfigError(
                    f"generate.rules must cover exactly the alphabet "
                    f"(missing={missing!r}, unknown={unknown!r}): {where}"
                )
            horizon = gen.get("horizon")
            max_entries = gen.get("max_entries", DEFAULT_MAX_ENTRIES)
            table.update(build_table(alphabet, horizon, lambda seq: rules[seq[-1]], max_entries=max_entries))

        pairs = []
        for i, entry in enumerate(entries or []):
            if not isinstance(entry, dict) or "percepts" not in entry or "action" not in entry:
                raise TableConfigError(f"table[{i}] needs 'percepts' and 'action': {where}")
            pairs.append((_freeze(entry["percepts"]), entry["action"]))
        explicit = TableValidator(alphabet).normalize(pairs)
    except TableConfigError:
        raise
    except (InvalidTableError, UnhashablePerceptError, TableTooLargeError, TypeError, ValueError) as e:
        raise TableConfigError(f"{e} ({where})") from e

    # 显式条目覆盖生成的条目
    table.update(explicit)

    demo = cfg.get("demo") or {}
    if not isinstance(demo, dict):
        raise TableConfigError(f"demo must be a mapping: {where}")
    demo_raw = demo.get("percepts") or []
    if not isinstance(demo_raw, list):
        raise TableConfigError(f"demo.percepts must be a list: {where}")
    try:
        demo_percepts = tuple(ensure_percept(_freeze(x)) for x in demo_raw)
    except UnhashablePerceptError as e:
        raise TableConfigError(f"demo.percepts: {e} ({where})") from e

    return TableSpec(
        name=str(cfg.get("name", "table")),
        table=table,
        alphabet=alphabet,
        rules=rules,
        demo_percepts=demo_percepts,
        source=source,
    )


def load_table(path: str | Path) -> TableSpec:
    """从 YAML 文件加载查找表。"""
    p = Path(path)
    spec = table_from_config(load_config(p), source=p)
    log.info("config.table.loaded", path=str(p), name=spec.name, entries=len(spec.table))
    return spec
