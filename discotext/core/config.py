"""
@description 配置管理模块
@responsibility 加载和验证 config.yaml，支持环境变量覆盖
"""

import os
import sys
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field

from discotext.schemas.text import EventSeries
from discotext.services.song_matcher import OTHER_SONG_ID


class PlatformConfig(BaseModel):
    """链接平台配置"""

    code: str = Field(..., description="平台代码")
    name: str = Field(..., description="平台名称")
    url_pattern: Optional[str] = Field(
        None, description="URL 校验正则，为空时不校验"
    )


class SongMatcherConfig(BaseModel):
    """原曲匹配配置"""

    candidate_limit: int = Field(10, gt=0, description="部分匹配候选的最大数量")
    other_song_id: str = Field(OTHER_SONG_ID, description="「その他」曲目 ID")


class Config(BaseModel):
    """全局配置"""

    event_series: list[EventSeries] = Field(
        default_factory=list, description="已知活动系列列表"
    )
    platforms: list[PlatformConfig] = Field(
        default_factory=list, description="链接平台列表"
    )
    song_matcher: SongMatcherConfig = Field(
        default_factory=SongMatcherConfig, description="原曲匹配配置"
    )

    def get_platform(self, code: str) -> Optional[PlatformConfig]:
        for platform in self.platforms:
            if platform.code == code:
                return platform
        return None


def get_config_path() -> Path:
    """获取配置文件路径"""
    # 优先使用 CONFIG_PATH 环境变量，否则使用项目根目录的 config.yaml
    if config_path_str := os.environ.get("CONFIG_PATH"):
        return Path(config_path_str)
    return Path(__file__).parent.parent.parent / "config.yaml"


def load_config() -> Config:
    """加载配置文件并应用环境变量覆盖"""
    config_path = get_config_path()

    # 配置文件不存在时生成模板并退出
    if not config_path.exists():
        _generate_config_template(config_path)
        print(f"错误: 配置文件不存在: {config_path}")
        print(f"已生成配置模板: {config_path.parent / 'config.example.yaml'}")
        sys.exit(1)

    with open(config_path, encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    # 解析为 Pydantic 模型（验证数据结构）
    config = Config(**config_data)

    if limit := os.environ.get("SONG_CANDIDATE_LIMIT"):
        config.song_matcher = SongMatcherConfig(
            candidate_limit=limit,
            other_song_id=config.song_matcher.other_song_id,
        )

    logger.info(
        f"配置加载完成: {len(config.event_series)} 个活动系列, "
        f"{len(config.platforms)} 个平台"
    )
    return config


def _generate_config_template(config_path: Path) -> None:
    """生成配置模板文件"""
    template_path = config_path.parent / "config.example.yaml"

    if template_path.exists():
        return

    template_content = """# 已知的活动系列，用于从活动名推断系列和回次
# 名称按长度降序匹配，"東方紅楼夢" 优先于 "紅楼夢"
event_series:
  - id: "comiket"
    name: "コミックマーケット"
  - id: "reitaisai"
    name: "博麗神社例大祭"
  - id: "kouroumu"
    name: "紅楼夢"
  - id: "touhou-kouroumu"
    name: "東方紅楼夢"

# 链接平台，url_pattern 为空表示不校验
platforms:
  - code: "spotify"
    name: "Spotify"
    url_pattern: "^https?://open\\\\.spotify\\\\.com/"
  - code: "web_site"
    name: "Web サイト"
    url_pattern: "^https?://"

# 原曲匹配
song_matcher:
  # 部分匹配时返回的最大候选数
  candidate_limit: 10
  # 未匹配原曲关联到的「その他」曲目 ID
  other_song_id: "07999999"
"""

    with open(template_path, "w", encoding="utf-8") as f:
        f.write(template_content)
