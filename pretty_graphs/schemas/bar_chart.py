from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Callable, Dict, Optional, Union

DEFAULT_FONT_FAMILY = "system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif"
DEFAULT_TEXT_COLOR = "#111827"


class Padding(BaseModel):
    """外周の余白（px）。一部だけ指定した場合は残りがデフォルト"""

    left: float = Field(default=120)
    right: float = Field(default=48)
    top: float = Field(default=32)
    bottom: float = Field(default=24)

    model_config = ConfigDict(extra="forbid")


class GradientSpec(BaseModel):
    from_: str = Field(default="#4f46e5", alias="from", description="開始色")
    to: str = Field(default="#a78bfa", description="終了色")
    # 未知の方向は描画時に right 扱い
    direction: str = Field(default="right", description="right / down / down_right / down_left / up_right / up_left")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("direction", mode="before")
    @classmethod
    def _direction_to_str(cls, v):
        return "right" if v is None else str(v)


class BarRecord(BaseModel):
    """正規化済みのデータ点 1 件"""

    label: str
    value: Union[int, float]
    attrs: Dict[str, Any] = Field(default_factory=dict)
    css_class: Optional[str] = None


class BarChartSchema(BaseModel):
    """
    横棒グラフのオプション。
    色・寸法は検証せずそのまま出力に流す（妥当性は呼び出し側の責任）。
    svg_attrs / bar_attrs / *_class は描画時に attrs.py で解釈する。
    """

    title: Optional[str] = None

    # ---- 寸法 ----
    width: float = Field(default=640, gt=0)
    bar_height: float = Field(default=28, gt=0)
    bar_gap: float = Field(default=2, ge=0)
    padding: Padding = Field(default_factory=Padding)
    bar_radius: float = Field(default=6, ge=0)

    # ---- 配色 ----
    bar_color: str = Field(default="#4f46e5")
    label_color: str = Field(default=DEFAULT_TEXT_COLOR)
    value_color: str = Field(default=DEFAULT_TEXT_COLOR)
    title_color: str = Field(default=DEFAULT_TEXT_COLOR)
    background: Optional[str] = None
    gradient: Optional[GradientSpec] = None

    # ---- テキスト ----
    show_values: bool = Field(default=True)
    value_formatter: Optional[Callable[[Any], str]] = None
    font_family: str = Field(default=DEFAULT_FONT_FAMILY)
    font_size: float = Field(default=12, gt=0)

    # ---- 追加属性 / クラス ----
    svg_attrs: Any = None
    svg_class: Any = None
    bar_attrs: Any = None
    bar_class: Any = None

    responsive: bool = Field(default=False)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", mode="before")
    @classmethod
    def _title_to_str(cls, v):
        # ラベルと同じく数値などのスカラーも文字列として扱う
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("padding", mode="before")
    @classmethod
    def _padding_defaults(cls, v):
        if v is None:
            return Padding()
        # [("left", 10), ...] 形式も受け付ける
        if isinstance(v, (list, tuple)):
            return dict(v)
        return v

    @field_validator("gradient", mode="before")
    @classmethod
    def _gradient_toggle(cls, v):
        if v is None or v is False:
            return None
        if v is True:
            return GradientSpec()
        if isinstance(v, (list, tuple)):
            return dict(v)
        return v


# Export as Schema for consistent naming
Schema = BarChartSchema
