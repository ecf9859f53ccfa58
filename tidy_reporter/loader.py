"""
输入加载
职责：读取并解析 Playwright 的 results.json，文件缺失或 JSON 非法时抛出 ReportInputError
"""
import json
from pathlib import Path
from typing import Any, Union


class ReportInputError(Exception):
    """输入文件不存在或无法解析"""


def load_report(path: Union[str, Path]) -> Any:
    input_path = Path(path).resolve()
    if not input_path.is_file():
        raise ReportInputError(f"File not found: {input_path}")
    try:
        return json.loads(input_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ReportInputError(f"Failed to parse Playwright JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ReportInputError(f"Failed to read {input_path}: {e}") from e
