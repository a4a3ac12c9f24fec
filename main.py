"""独立演示脚本：用 YAML 查找表驱动两种智能体程序。

要点：
- 从配置文件加载查找表与规则，不在代码中硬编码
- 本脚本充当"驱动方"：按顺序逐个提供感知，并消费返回的动作
- 查表程序在历史超出表覆盖范围时失败；由驱动方决定停止喂给它，反射程序继续
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from agent_programs.agents.reflex_agent import SimpleReflexAgent
from agent_programs.agents.table_agent import PerceptSequenceNotFound, TableDrivenAgent
from agent_programs.utils.config_loader import load_table
from agent_programs.utils.logger import get_logger


log = get_logger(__name__)


def find_config() -> Path:
    """查找配置文件：优先 config/config.yaml，其后 config/weather_table.yaml。"""
    project_root = Path(__file__).parent
    for rel in ("config/config.yaml", "config/weather_table.yaml"):
        p = project_root / rel
        if p.exists():
            return p
    return project_root / "config/weather_table.yaml"


def main(config_path: Optional[str | Path] = None) -> List[Dict[str, Any]]:
    # 1) 加载配置
    cfg_path = Path(config_path) if config_path else find_config()
    spec = load_table(cfg_path)

    # 2) 构造智能体程序；没有规则时只运行查表程序
    table_agent = TableDrivenAgent(spec.table, alphabet=spec.alphabet, name=spec.name)
    reflex_agent = None
    if spec.rules:
        rules = dict(spec.rules)
        # 规则表之外的感知映射为 None，作为"无操作"动作
        reflex_agent = SimpleReflexAgent.from_rule(rules.get, name=f"{spec.name}-reflex")

    # 3) 驱动循环：每个时间步一个感知
    records: List[Dict[str, Any]] = []
    table_alive = True
    for step, percept in enumerate(spec.demo_percepts):
        record: Dict[str, Any] = {"step": step, "percept": percept, "table": None, "reflex": None}

        if table_alive:
            try:
                record["table"] = table_agent.run(percept)
            except PerceptSequenceNotFound as e:
                table_alive = False
                log.warning("demo.table.miss", step=step, history_len=len(e.history))

        if reflex_agent is not None:
            record["reflex"] = reflex_agent.run(percept)

        log.info("demo.step", **record)
        records.append(record)

    log.info("demo.done", steps=len(records), table_completed=table_alive)
    return records


if __name__ == "__main__":
    main()
