"""
运行配置
全部来自环境变量，未设置时使用默认值
"""
import os
from pathlib import Path

PACKAGE_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_DIR = Path(os.environ.get("TIDY_REPORTER_TEMPLATE_DIR", PACKAGE_TEMPLATE_DIR))
OUTPUT_DIR   = os.environ.get("TIDY_REPORTER_OUTPUT_DIR", "html-report")
DEFAULT_INPUT = os.environ.get("TIDY_REPORTER_INPUT", "results.json")
REPORT_TITLE = os.environ.get("TIDY_REPORTER_TITLE", "Playwright Test Report")
