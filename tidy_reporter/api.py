"""
REST API 层
CI/CD、脚本直接提交 Playwright JSON，获取归一化数据或生成 HTML 报告
启动：uvicorn tidy_reporter.api:app --port 8080
"""
from pathlib import Path
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import FileResponse

from . import config
from .normalizer import normalize_report
from .renderer import HTML_TEMPLATE, STATIC_FILES, Renderer, TemplateError

app = FastAPI(
    title="tidy-reporter API",
    description="Playwright JSON 归一化与静态 HTML 报告生成",
    version="1.0.0",
)


def output_dir() -> Path:
    return Path(config.OUTPUT_DIR)


@app.post("/normalize", summary="归一化 Playwright JSON")
def normalize(document: Any = Body(...)):
    return normalize_report(document).to_dict()


@app.post("/generate", status_code=201, summary="生成 HTML 报告")
def generate(document: Any = Body(...)):
    report = normalize_report(document)
    try:
        html_path = Renderer().render(report, output_dir())
    except TemplateError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"output": str(html_path), "summary": report.to_dict()["summary"]}


@app.get("/report/html", summary="查看 HTML 报告", response_class=FileResponse)
def html_report():
    p = output_dir() / HTML_TEMPLATE
    if not p.exists():
        raise HTTPException(status_code=404, detail="HTML 报告不存在，请先生成报告")
    return FileResponse(p, media_type="text/html")


@app.get("/report/{asset}", summary="报告静态资源")
def report_asset(asset: str):
    p = output_dir() / asset
    if asset not in STATIC_FILES or not p.exists():
        raise HTTPException(status_code=404, detail=f"资源不存在：{asset}")
    return FileResponse(p)


@app.get("/health", summary="健康检查")
def health():
    return {"status": "ok"}
