"""
归一化数据模型
职责：定义 Normalizer 的输出结构（TestRecord / Summary / NormalizedReport）
序列化字段名使用 camelCase，是前端 app.js 与下游工具依赖的契约
"""
from typing import ClassVar, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

Status = Literal["passed", "failed", "skipped", "timedOut", "interrupted", "unknown"]

STATUSES: tuple[str, ...] = get_args(Status)


class TestRecord(BaseModel):
    """单个用例的扁平化结果"""
    __test__: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    full_title: str = Field("", alias="fullTitle")
    status: Status = "unknown"
    duration: int = Field(0, ge=0)
    file: str = "unknown"
    error: Optional[str] = None


class Summary(BaseModel):
    """汇总统计，每次运行完整重算"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration: int = 0
    pass_rate: str = Field("0%", alias="passRate")


class NormalizedReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: Summary = Field(default_factory=Summary)
    tests: tuple[TestRecord, ...] = ()

    def to_dict(self) -> dict:
        """按契约字段名导出：{summary, tests}"""
        return self.model_dump(by_alias=True, mode="json")
