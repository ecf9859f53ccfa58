"""
报告归一化
职责：把 Playwright JSON 的嵌套 suite 树展开为扁平的用例列表 + 汇总
纯函数，无 I/O；所有可选字段缺失时都有确定的默认值，不抛异常
"""
import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from .models import STATUSES, NormalizedReport, Summary, TestRecord

logger = logging.getLogger(__name__)


def normalize_report(document: Any) -> NormalizedReport:
    """
    从已解析的顶层 JSON 文档生成归一化报告

    没有 suites 字段时视为合法的空报告：记录 warning，返回零值汇总。
    """
    if not isinstance(document, Mapping) or document.get("suites") is None:
        logger.warning("No suites found in Playwright JSON.")
        return NormalizedReport()
    return normalize(document["suites"])


def normalize(root_suites: Iterable[Any]) -> NormalizedReport:
    """
    展开 suite 森林

    Args:
        root_suites: 顶层 SuiteNode 列表

    顺序：深度优先先序遍历，同一 suite 内先输出自身 specs，再进入子 suites，
    兄弟节点保持原列表顺序。
    """
    tests = tuple(
        _to_record(spec, suite)
        for suite in _walk(root_suites)
        for spec in _as_list(suite.get("specs"))
        if isinstance(spec, Mapping)
    )
    return NormalizedReport(summary=summarize(tests), tests=tests)


def summarize(tests: Iterable[TestRecord]) -> Summary:
    counts = {"passed": 0, "failed": 0, "skipped": 0}
    total = duration = 0
    for t in tests:
        total += 1
        duration += t.duration
        if t.status in counts:
            counts[t.status] += 1
    return Summary(
        total=total,
        duration=duration,
        pass_rate=pass_rate(counts["passed"], total),
        **counts,
    )


def pass_rate(passed: int, total: int) -> str:
    """通过率百分比字符串，四舍五入（.5 向上）；total 为 0 时为 "0%" """
    if not total:
        return "0%"
    return f"{(200 * passed + total) // (2 * total)}%"


# ── 内部实现 ─────────────────────────────────────────────

def _walk(root_suites: Iterable[Any]) -> Iterator[Mapping]:
    """显式栈的先序遍历，跳过 None 与非对象节点"""
    stack = list(reversed(_as_list(root_suites)))
    while stack:
        suite = stack.pop()
        if not isinstance(suite, Mapping):
            if suite is not None:
                logger.debug(f"Skipping malformed suite entry: {type(suite).__name__}")
            continue
        yield suite
        stack.extend(reversed(_as_list(suite.get("suites"))))


def _to_record(spec: Mapping, suite: Mapping) -> TestRecord:
    results = _as_list(spec.get("results"))
    first = results[0] if results and isinstance(results[0], Mapping) else {}

    title = _text(spec.get("title"))
    suite_title = _text(suite.get("title"))
    return TestRecord(
        title=title,
        full_title=f"{suite_title} > {title}",
        status=_status(first.get("status"), spec.get("ok")),
        duration=_duration(first.get("duration")),
        file=_text(suite.get("file")) or suite_title or "unknown",
        error=_error_message(first.get("error")),
    )


def _status(raw: Any, ok: Any) -> str:
    if not raw:
        return "passed" if ok else "failed"
    return raw if raw in STATUSES else "unknown"


def _duration(raw: Any) -> int:
    # bool 是 int 子类，不能当作耗时
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return 0
    # 超大整数不能转 float，只对 float 判断 inf/nan
    if isinstance(raw, float) and not math.isfinite(raw):
        return 0
    return int(raw) if raw > 0 else 0


def _error_message(error: Any) -> Optional[str]:
    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
