"""
HTML 报告渲染器
职责：把归一化数据嵌入 Jinja2 模板，输出静态报告目录
  output_dir/
    index.html   模板 + <script id="report-data"> 内嵌 JSON
    style.css    原样拷贝
    app.js       原样拷贝

JSON 通过字符串替换插入到第一个 </body> 之前。模板是内部受控资源，
所以不引入 HTML 解析器；若模板改为用户可自定义，应改用结构化方式注入。
"""
import json
import logging
import shutil
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from jinja2 import TemplateError as JinjaTemplateError

from . import config
from .models import NormalizedReport

logger = logging.getLogger(__name__)

HTML_TEMPLATE = "index.html"
STATIC_FILES = ("style.css", "app.js")
DATA_ELEMENT_ID = "report-data"
BODY_CLOSE = "</body>"


class TemplateError(Exception):
    """模板内容不可用"""


class TemplateMissingError(TemplateError):
    """模板或静态资源文件不存在"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Missing template file: {path}")


class Renderer:
    def __init__(self, template_dir: Union[str, Path, None] = None, title: str = config.REPORT_TITLE):
        self.template_dir = Path(template_dir or config.TEMPLATE_DIR)
        self.title = title
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )

    def render(self, report: NormalizedReport, output_dir: Union[str, Path]) -> Path:
        """
        生成报告，返回 index.html 路径

        模板缺失时在写任何文件之前抛出 TemplateMissingError；
        文件系统错误（OSError）原样向上抛出，不重试。
        """
        logger.info("Generating HTML report...")
        self._check_templates()
        html = self._inject(self._load_template(), self.render_json(report))

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        for name in STATIC_FILES:
            shutil.copyfile(self.template_dir / name, output_dir / name)

        out = output_dir / HTML_TEMPLATE
        out.write_text(html, encoding="utf-8")
        logger.info(f"HTML report successfully created at: {out.resolve()}")
        return out

    def render_json(self, report: NormalizedReport) -> str:
        """内嵌数据块的 JSON 文本；所有 "<" 写成 \\u003c，错误信息里的标签不会被 HTML 解析器识别"""
        text = json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
        return text.replace("<", "\\u003c")

    # ── 内部实现 ─────────────────────────────────────────

    def _check_templates(self):
        for name in (HTML_TEMPLATE, *STATIC_FILES):
            path = self.template_dir / name
            if not path.is_file():
                raise TemplateMissingError(path)

    def _load_template(self) -> str:
        try:
            template = self.env.get_template(HTML_TEMPLATE)
        except TemplateNotFound as e:
            raise TemplateMissingError(self.template_dir / HTML_TEMPLATE) from e
        except JinjaTemplateError as e:
            raise TemplateError(f"{self.template_dir / HTML_TEMPLATE}: {e}") from e
        try:
            return template.render(title=self.title)
        except JinjaTemplateError as e:
            raise TemplateError(f"{self.template_dir / HTML_TEMPLATE}: {e}") from e

    def _inject(self, html: str, json_data: str) -> str:
        if BODY_CLOSE not in html:
            raise TemplateError(f"{self.template_dir / HTML_TEMPLATE}: no {BODY_CLOSE} marker")
        block = (
            f'  <script id="{DATA_ELEMENT_ID}" type="application/json">{json_data}</script>\n'
            f"{BODY_CLOSE}"
        )
        return html.replace(BODY_CLOSE, block, 1)


def render(report: NormalizedReport, output_dir: Union[str, Path],
           template_dir: Optional[Union[str, Path]] = None) -> Path:
    """便捷入口：使用默认标题渲染"""
    return Renderer(template_dir).render(report, output_dir)
