"""
@description 文本解析结果模型
@responsibility 定义名称处理、回次推断、原曲匹配等结果的数据结构（不可变）
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


InitialScript = Literal[
    "latin", "hiragana", "katakana", "kanji", "digit", "symbol", "other"
]
MatchType = Literal["exact", "partial", "none"]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DiscInfo(FrozenModel):
    name: str = Field(..., description="去除碟片标记后的专辑名")
    disc_number: int = Field(1, description="碟片编号（从 1 开始）")


class EventEditionInfo(FrozenModel):
    base_name: str = Field(..., description="去除回次后的活动名")
    edition: Optional[int] = Field(None, description="回次，无法识别时为 None")


class EventSeries(FrozenModel):
    id: str = Field(..., description="活动系列 ID")
    name: str = Field(..., description="活动系列名称")


class SuggestResult(FrozenModel):
    series_id: Optional[str] = Field(None, description="推断出的系列 ID")
    edition: Optional[int] = Field(None, description="推断出的回次")


class NameInfo(FrozenModel):
    name: str = Field(..., description="标准化后的名称")
    name_ja: Optional[str] = Field(None, description="日文名（纯英文时为 None）")
    name_en: Optional[str] = Field(None, description="英文名（仅纯英文时设置）")


class InitialInfo(FrozenModel):
    initial_script: InitialScript = Field(..., description="首字符文字种类")
    name_initial: Optional[str] = Field(
        None, description="首字母（仅 latin/hiragana/katakana 设置）"
    )


class NameProfile(FrozenModel):
    """社团、艺术家入库时需要的全部名称字段"""

    name: str = Field(..., description="标准化后的名称")
    name_ja: Optional[str] = Field(None, description="日文名")
    name_en: Optional[str] = Field(None, description="英文名")
    sort_name: Optional[str] = Field(None, description="排序用名称")
    initial_script: InitialScript = Field(..., description="首字符文字种类")
    name_initial: Optional[str] = Field(None, description="首字母")


class OfficialSong(FrozenModel):
    id: str = Field(..., description="官方曲目 ID")
    name: str = Field(..., description="曲名")
    name_ja: str = Field(..., description="日文曲名")
    is_original: bool = Field(False, description="是否为「オリジナル」记录")
    official_work_name: Optional[str] = Field(None, description="所属官方作品名")


class SongCandidate(FrozenModel):
    id: str = Field(..., description="官方曲目 ID")
    name: str = Field(..., description="曲名")
    name_ja: str = Field(..., description="日文曲名")
    official_work_name: Optional[str] = Field(None, description="所属官方作品名")
    match_type: MatchType = Field(..., description="匹配方式")


class SongMatchResult(FrozenModel):
    original_name: str = Field(..., description="原曲名（去除首尾空白）")
    match_type: MatchType = Field(..., description="匹配方式")
    is_original: bool = Field(False, description="是否为原创曲")
    candidates: tuple[SongCandidate, ...] = Field(
        default_factory=tuple, description="候选曲目"
    )
    auto_matched: bool = Field(False, description="是否自动确定")
    selected_id: Optional[str] = Field(None, description="自动选中的曲目 ID")
    custom_song_name: Optional[str] = Field(
        None, description="未匹配时保存的原曲名，关联到「その他」"
    )
