"""
命令行入口

用法：
  tidy-reporter generate                        # 读取 ./results.json，输出到 ./html-report
  tidy-reporter generate ./results.json
  tidy-reporter generate report.json -o out     # 指定输出目录
  tidy-reporter summary ./results.json          # 打印汇总，存在失败时退出码为 1
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from . import config
from .loader import ReportInputError, load_report
from .normalizer import normalize_report
from .renderer import Renderer, TemplateError

# 其余状态（failed / timedOut / interrupted / unknown）都视为失败
PASSING_STATUSES = ("passed", "skipped")


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def print_json(data):
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_generate(args) -> int:
    input_path = Path(args.input).resolve()
    print(f"▶ 读取 Playwright JSON 报告：{input_path}")
    try:
        report = normalize_report(load_report(input_path))
    except ReportInputError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    output_dir = Path(args.output).resolve()
    renderer = Renderer(template_dir=args.template_dir, title=args.title)
    try:
        html_path = renderer.render(report, output_dir)
    except TemplateError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    s = report.summary
    print(f"\n✓ 报告已生成：{html_path}")
    print(f"  通过: {s.passed}  失败: {s.failed}  "
          f"跳过: {s.skipped}  共: {s.total}")
    print(f"  通过率: {s.pass_rate}  耗时: {s.duration}ms")
    return 0


def cmd_summary(args) -> int:
    try:
        report = normalize_report(load_report(args.input))
    except ReportInputError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print_json(report.to_dict()["summary"])
    failures = [t for t in report.tests if t.status not in PASSING_STATUSES]
    if not failures:
        return 0

    print("\n失败用例：")
    for t in failures:
        print(f"  ✗ {t.full_title}  [{t.status}]  ({t.file})")
        if t.error:
            print(f"    {t.error.splitlines()[0]}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tidy-reporter",
        description="Playwright JSON 报告 → 静态 HTML 报告",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="输出调试日志")
    sub = parser.add_subparsers(dest="cmd")

    # generate
    p_gen = sub.add_parser("generate", help="生成 HTML 报告")
    p_gen.add_argument("input", nargs="?", default=config.DEFAULT_INPUT, help="results.json 路径")
    p_gen.add_argument("--output", "-o", default=config.OUTPUT_DIR, help="输出目录")
    p_gen.add_argument("--template-dir", default=None, help="模板目录")
    p_gen.add_argument("--title", default=config.REPORT_TITLE, help="报告标题")

    # summary
    p_sum = sub.add_parser("summary", help="打印汇总与失败用例")
    p_sum.add_argument("input", nargs="?", default=config.DEFAULT_INPUT, help="results.json 路径")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cmd:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    dispatch = {
        "generate": cmd_generate,
        "summary": cmd_summary,
    }
    sys.exit(dispatch[args.cmd](args))


if __name__ == "__main__":
    main()
