"""共享 fixtures"""
import json
import shutil

import pytest

from tidy_reporter.config import PACKAGE_TEMPLATE_DIR


def spec(title, status=None, duration=None, error=None, ok=None):
    """构造 SpecNode；status 为 None 时不带 results"""
    node = {"title": title}
    if ok is not None:
        node["ok"] = ok
    if status is not None:
        result = {"status": status}
        if duration is not None:
            result["duration"] = duration
        if error is not None:
            result["error"] = {"message": error}
        node["results"] = [result]
    return node


@pytest.fixture
def nested_report():
    """两层嵌套的 suite 树，覆盖 file 的各级回退"""
    return {
        "suites": [
            {
                "title": "root",
                "file": "root.spec.ts",
                "specs": [spec("r1", "passed", 10)],
                "suites": [
                    {
                        "title": "child",
                        "specs": [spec("c1", "failed", 20, error="expected 1 to be 2")],
                        "suites": [
                            {"title": "grand", "file": "grand.spec.ts", "specs": [spec("g1", "skipped")]},
                        ],
                    },
                    {"specs": [spec("c2", ok=True)]},
                ],
            },
            {"title": "second", "specs": [spec("s1", "timedOut", 30)]},
        ]
    }


@pytest.fixture
def template_dir(tmp_path):
    """包内模板的可修改副本"""
    target = tmp_path / "templates"
    shutil.copytree(PACKAGE_TEMPLATE_DIR, target)
    return target


@pytest.fixture
def results_file(tmp_path, nested_report):
    p = tmp_path / "results.json"
    p.write_text(json.dumps(nested_report), encoding="utf-8")
    return p
